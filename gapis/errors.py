from __future__ import annotations
from typing import Any, List, Optional, Sequence

import httpx


class GapisError(Exception):
    """Base SDK error."""


# -------------------- API call errors --------------------

class ApiError(GapisError):
    """An API call could not be completed."""


class HttpError(ApiError):
    """Transport level failure (connection, timeout, protocol)."""

    def __init__(self, cause: httpx.HTTPError):
        super().__init__(f"HTTP transport error: {cause}")
        self.cause = cause


class MissingAPIKey(ApiError):
    def __init__(self):
        super().__init__("The application's API key was not found in the configuration. "
                         "It is used as there are no Scopes defined for this method.")


class MissingToken(ApiError):
    def __init__(self, cause: Exception):
        super().__init__(f"Token retrieval failed: {cause}")
        self.cause = cause


class FieldClash(ApiError):
    def __init__(self, field: str):
        super().__init__(f"The custom parameter '{field}' is already provided natively by the CallBuilder.")
        self.field = field


class MissingParameter(ApiError):
    def __init__(self, name: str):
        super().__init__(f"The required parameter '{name}' was not set.")
        self.name = name


class MissingRequest(ApiError):
    def __init__(self, method_id: str):
        super().__init__(f"The method '{method_id}' requires a request body, but none was given.")
        self.method_id = method_id


class BadRequest(ApiError):
    """Server answered with a non-success status and a JSON error body."""

    def __init__(self, error: Any, response: Optional[httpx.Response] = None):
        message = ""
        if isinstance(error, dict) and isinstance(error.get("error"), dict):
            message = error["error"].get("message") or ""
        status = response.status_code if response is not None else None
        super().__init__(f"Bad Request (HTTP {status}): {message or error}")
        self.error = error
        self.response = response
        self.status = status


class Failure(ApiError):
    """Server answered with a non-success status and a body that is not JSON."""

    def __init__(self, response: httpx.Response):
        super().__init__(f"Http status indicates failure: HTTP {response.status_code}")
        self.response = response
        self.status = response.status_code


class JsonDecodeError(ApiError):
    def __init__(self, body: str, cause: Exception):
        super().__init__(f"JSON Decoding failed with error: {cause}\n\nThe document was: {body}")
        self.body = body
        self.cause = cause


class TokenError(GapisError):
    """An authenticator could not produce a token."""


# -------------------- CLI errors --------------------

class CLIError(GapisError):
    """One issue found while interpreting command line options."""


class ConfigurationError(CLIError):
    pass


class ParseError(CLIError):
    def __init__(self, arg_name: str, type_name: str, value: str, reason: str):
        super().__init__(f"Failed to parse argument '{arg_name}' with value '{value}' as {type_name} "
                         f"with error: {reason}.")
        self.arg_name = arg_name
        self.type_name = type_name
        self.value = value


class UnknownParameter(CLIError):
    def __init__(self, name: str, suggestion: Optional[str] = None):
        suffix = f" Did you mean '{suggestion}' ?" if suggestion else ""
        super().__init__(f"Parameter '{name}' is unknown.{suffix}")
        self.name = name
        self.suggestion = suggestion


class InvalidKeyValueSyntax(CLIError):
    def __init__(self, kv: str, is_hashmap: bool = False):
        hashmap_info = "hashmap " if is_hashmap else ""
        super().__init__(f"'{kv}' does not match {hashmap_info}pattern <key>=<value>.")
        self.kv = kv


class FieldError(CLIError):
    """A request field could not be addressed or set."""


class InvalidOptionsError(GapisError):
    """Aggregates every CLIError found so all of them can be reported at once."""

    def __init__(self, issues: Sequence[CLIError] = (), exit_code: int = 1):
        self.issues: List[CLIError] = list(issues)
        self.exit_code = exit_code
        super().__init__(str(self))

    @classmethod
    def single(cls, issue: CLIError, exit_code: int) -> "InvalidOptionsError":
        return cls([issue], exit_code)

    def __str__(self) -> str:
        return "\n".join(f"{e}" for e in self.issues)
