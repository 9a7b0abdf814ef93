"""
Iterable API Package

HTTP request wrapper, response codes and per-resource endpoints.
"""

from .client import Request, ResponseParser
from .response_codes import ResponseCode
from .endpoints import RESOURCES, BaseEndpoint

__all__ = [
    'Request',
    'ResponseParser',
    'ResponseCode',
    'RESOURCES',
    'BaseEndpoint',
]
