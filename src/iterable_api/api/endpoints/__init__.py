"""
API Endpoints Package for the Iterable API client

Contains one endpoint class per resource group. Each class is the resource
factory: calling it with a ``Request`` wrapper returns the bound client.
"""

from .base_endpoint import BaseEndpoint
from .campaigns import CampaignsEndpoints
from .catalogs import CatalogsEndpoints
from .channels import ChannelsEndpoints
from .commerce import CommerceEndpoints
from .email import EmailEndpoints
from .events import EventsEndpoints
from .experiments import ExperimentsEndpoints
from .export import ExportEndpoints
from .in_app import InAppEndpoints
from .lists import ListsEndpoints
from .message_types import MessageTypesEndpoints
from .metadata import MetadataEndpoints
from .push import PushEndpoints
from .sms import SmsEndpoints
from .templates import TemplatesEndpoints
from .users import UsersEndpoints
from .web_push import WebPushEndpoints
from .workflows import WorkflowsEndpoints

# Attribute name on IterableClient -> resource factory
RESOURCES = {
    'campaigns': CampaignsEndpoints,
    'catalogs': CatalogsEndpoints,
    'channels': ChannelsEndpoints,
    'commerce': CommerceEndpoints,
    'email': EmailEndpoints,
    'events': EventsEndpoints,
    'experiments': ExperimentsEndpoints,
    'export': ExportEndpoints,
    'in_app': InAppEndpoints,
    'lists': ListsEndpoints,
    'message_types': MessageTypesEndpoints,
    'metadata': MetadataEndpoints,
    'push': PushEndpoints,
    'sms': SmsEndpoints,
    'templates': TemplatesEndpoints,
    'users': UsersEndpoints,
    'web_push': WebPushEndpoints,
    'workflows': WorkflowsEndpoints,
}

__all__ = [
    'BaseEndpoint',
    'RESOURCES',
    'CampaignsEndpoints',
    'CatalogsEndpoints',
    'ChannelsEndpoints',
    'CommerceEndpoints',
    'EmailEndpoints',
    'EventsEndpoints',
    'ExperimentsEndpoints',
    'ExportEndpoints',
    'InAppEndpoints',
    'ListsEndpoints',
    'MessageTypesEndpoints',
    'MetadataEndpoints',
    'PushEndpoints',
    'SmsEndpoints',
    'TemplatesEndpoints',
    'UsersEndpoints',
    'WebPushEndpoints',
    'WorkflowsEndpoints',
]
