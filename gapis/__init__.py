"""Client bindings and command line tools for Google REST APIs."""

__version__ = "0.1.0"

from .auth import (Authenticator, CredentialsAuthenticator, StaticTokenAuthenticator,
                   authorized_user_authenticator, default_authenticator)
from .client import CallBuilder, Hub, PagedCall, Param
from .delegate import DefaultDelegate, Delegate, MethodInfo, Retry, RetryDelegate
from .errors import (ApiError, BadRequest, Failure, FieldClash, GapisError, HttpError,
                     JsonDecodeError, MissingAPIKey, MissingToken, TokenError)
from .schema import Empty, Schema

__all__ = [
    "Authenticator", "CredentialsAuthenticator", "StaticTokenAuthenticator",
    "authorized_user_authenticator", "default_authenticator",
    "CallBuilder", "Hub", "PagedCall", "Param",
    "DefaultDelegate", "Delegate", "MethodInfo", "Retry", "RetryDelegate",
    "ApiError", "BadRequest", "Failure", "FieldClash", "GapisError", "HttpError",
    "JsonDecodeError", "MissingAPIKey", "MissingToken", "TokenError",
    "Empty", "Schema",
]

__author__ = "gapis contributors"
