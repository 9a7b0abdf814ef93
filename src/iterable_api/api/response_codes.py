"""Values of the ``code`` field in Iterable response envelopes."""

from enum import Enum


class ResponseCode(str, Enum):
    """Envelope codes. Members compare equal to the raw strings."""
    SUCCESS = "Success"
    BAD_API_KEY = "BadApiKey"
    BAD_AUTHORIZATION_HEADER = "BadAuthorizationHeader"
    BAD_JSON_BODY = "BadJsonBody"
    BAD_PARAMS = "BadParams"
    BATCH_TOO_LARGE = "BatchTooLarge"
    DATABASE_ERROR = "DatabaseError"
    EMAIL_ALREADY_EXISTS = "EmailAlreadyExists"
    EXTERNAL_KEY_CONFLICT = "ExternalKeyConflict"
    FORBIDDEN = "Forbidden"
    FORBIDDEN_PARAMS_ERROR = "ForbiddenParamsError"
    FORGOTTEN_USER_ERROR = "ForgottenUserError"
    GENERIC_ERROR = "GenericError"
    INVALID_EMAIL_ADDRESS_ERROR = "InvalidEmailAddressError"
    INVALID_JWT_PAYLOAD = "InvalidJwtPayload"
    INVALID_USER_ID_ERROR = "InvalidUserIdError"
    JWT_USER_IDENTIFIERS_MISMATCHED = "JwtUserIdentifiersMismatched"
    NOT_FOUND = "NotFound"
    QUEUE_EMPTY_ERROR = "QueueEmptyError"
    RATE_LIMIT_EXCEEDED = "RateLimitExceeded"
    REQUEST_FIELDS_TYPES_MISMATCHED = "RequestFieldsTypesMismatched"
    UNAUTHORIZED = "Unauthorized"
    UNIQUE_FIELDS_LIMIT_EXCEEDED = "UniqueFieldsLimitExceeded"
    UNKNOWN_EMAIL_ERROR = "UnknownEmailError"
    UNKNOWN_USER_ID_ERROR = "UnknownUserIdError"
    USER_ID_ALREADY_EXISTS = "UserIdAlreadyExists"

    @classmethod
    def is_success(cls, envelope) -> bool:
        """True when a response envelope reports success"""
        return isinstance(envelope, dict) and envelope.get('code') == cls.SUCCESS
