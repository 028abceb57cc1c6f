# gapis/client.py
from __future__ import annotations
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Set, Tuple, Type
from urllib.parse import quote

import httpx

from . import __version__
from .auth import Authenticator
from .delegate import DefaultDelegate, Delegate, MethodInfo
from .errors import (BadRequest, Failure, FieldClash, HttpError, JsonDecodeError,
                     MissingAPIKey, MissingParameter, MissingRequest, MissingToken, TokenError)
from .schema import Schema

_LOGGER = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"gapis/{__version__}"


class Param(NamedTuple):
    """A parameter declared by an API method."""
    name: str
    kind: type = str
    repeated: bool = False
    location: str = "query"


@dataclass(init=False)
class Hub:
    """Entry point of one API: holds the HTTP client, authenticator and URLs.

    Subclasses set DEFAULT_BASE_URL, DEFAULT_ROOT_URL and ENV_PREFIX; the base
    URL is taken from the argument, then ``<ENV_PREFIX>_BASE_URL``, then the
    default.
    """
    DEFAULT_BASE_URL = ""
    DEFAULT_ROOT_URL = ""
    ENV_PREFIX = ""

    auth: Optional[Authenticator] = None
    base_url: str = ""
    root_url: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    auto_refresh: bool = True

    _client: httpx.Client = field(init=False, repr=False)

    def __init__(
        self,
        auth: Optional[Authenticator] = None,
        *,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        root_url: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        auto_refresh: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.auth = auth
        env_base = os.getenv(f"{self.ENV_PREFIX}_BASE_URL") if self.ENV_PREFIX else None
        self.base_url = _with_slash(base_url or env_base or self.DEFAULT_BASE_URL)
        self.root_url = _with_slash(root_url or self.DEFAULT_ROOT_URL)
        self.user_agent = user_agent
        self.timeout = timeout
        self.auto_refresh = auto_refresh
        if client is None:
            client = httpx.Client(timeout=timeout, transport=transport)
        self._client = client

    @property
    def http(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _with_slash(url: str) -> str:
    return url if not url or url.endswith("/") else url + "/"


def _to_wire(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class CallBuilder:
    """Accumulates the parameters of one API method and executes it.

    Subclasses declare the method: ``_info``, ``_path`` (relative to the
    hub's base URL, ``{name}`` or reserved ``{+name}`` placeholders),
    ``_params`` (required path params first), ``_response`` and optionally
    ``_request`` and ``_default_scope``.
    """
    _info: MethodInfo
    _path: str
    _params: Tuple[Param, ...] = ()
    _request: Optional[Type[Schema]] = None
    _response: Type[Schema]
    _default_scope: Optional[str] = None

    def __init__(self, hub: Hub, request: Optional[Schema] = None, **required: Any) -> None:
        self._hub = hub
        self._body = request
        self._values: Dict[str, Any] = {}
        self._additional_params: Dict[str, str] = {}
        self._scopes: Set[str] = set()
        self._no_auth = False
        self._delegate: Optional[Delegate] = None
        for name, value in required.items():
            self._set(name, value)

    # -------------------- declarative helpers --------------------

    @classmethod
    def declared_param(cls, name: str) -> Param:
        for p in cls._params:
            if p.name == name:
                return p
        raise KeyError(name)

    @classmethod
    def query_params(cls) -> List[Param]:
        """Declared parameters that travel in the query string."""
        return [p for p in cls._params if p.location == "query"]

    def _set(self, name: str, value: Any) -> "CallBuilder":
        self.declared_param(name)
        self._values[name] = value
        return self

    def _add(self, name: str, value: Any) -> "CallBuilder":
        self.declared_param(name)
        self._values.setdefault(name, []).append(value)
        return self

    # -------------------- common setters --------------------

    def request(self, new_value: Schema) -> "CallBuilder":
        self._body = new_value
        return self

    def delegate(self, new_value: Delegate) -> "CallBuilder":
        self._delegate = new_value
        return self

    def param(self, name: str, value: Any) -> "CallBuilder":
        """Set an additional query parameter not covered by a dedicated setter,
        e.g. ``fields``, ``quotaUser``, ``prettyPrint``, ``key`` or ``$.xgafv``.

        Must not name a parameter the method declares, or execute() fails
        with FieldClash.
        """
        self._additional_params[name] = _to_wire(value)
        return self

    def add_scope(self, scope: Optional[str]) -> "CallBuilder":
        """Add an OAuth2 scope to authorize the call with.

        Passing None drops all scopes and disables token use; an API key
        must then be given via ``param("key", ...)``.
        """
        if scope is None:
            self._scopes.clear()
            self._no_auth = True
        else:
            self._scopes.add(str(scope))
            self._no_auth = False
        return self

    # -------------------- execution --------------------

    def _build_params(self, values: Dict[str, Any]) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        for p in self._params:
            value = values.get(p.name)
            if value is None:
                continue
            if p.repeated:
                params.extend((p.name, _to_wire(v)) for v in value)
            else:
                params.append((p.name, _to_wire(value)))
        reserved = {"alt"} | {p.name for p in self._params}
        for name in self._additional_params:
            if name in reserved:
                raise FieldClash(name)
        params.extend(self._additional_params.items())
        params.append(("alt", "json"))
        return params

    def _build_url(self, params: List[Tuple[str, str]]) -> Tuple[str, List[Tuple[str, str]]]:
        url = self._hub.base_url + self._path
        used = set()
        for p in self._params:
            if p.location != "path":
                continue
            value = dict(params).get(p.name)
            if value is None:
                raise MissingParameter(p.name)
            if "{+%s}" % p.name in url:
                url = url.replace("{+%s}" % p.name, quote(value, safe="/"))
            else:
                url = url.replace("{%s}" % p.name, quote(value, safe=""))
            used.add(p.name)
        return url, [(k, v) for k, v in params if k not in used]

    def _scopes_to_use(self) -> List[str]:
        if self._no_auth:
            return []
        if not self._scopes and self._default_scope:
            self._scopes.add(self._default_scope)
        return sorted(self._scopes)

    def _token(self, dlg: Delegate, scopes: List[str]) -> Optional[str]:
        if not scopes or self._hub.auth is None:
            if "key" not in self._additional_params:
                dlg.finished(False)
                raise MissingAPIKey()
            return None
        try:
            return self._hub.auth.token(scopes)
        except TokenError as err:
            token = dlg.token(err)
            if token is None:
                dlg.finished(False)
                raise MissingToken(err) from err
            return token

    def execute(self) -> Tuple[httpx.Response, Any]:
        """Perform the operation built so far; returns the raw response and the decoded result."""
        return self._execute(self._values)

    def _execute(self, values: Dict[str, Any]) -> Tuple[httpx.Response, Any]:
        dlg = self._delegate or DefaultDelegate()
        dlg.begin(self._info)
        try:
            if self._request is not None and self._body is None:
                raise MissingRequest(self._info.id)
            url, query = self._build_url(self._build_params(values))
        except (FieldClash, MissingParameter, MissingRequest):
            dlg.finished(False)
            raise
        scopes = self._scopes_to_use()
        content = None
        if self._body is not None:
            content = self._body.to_dict()

        refreshed = False
        while True:
            token = self._token(dlg, scopes)
            headers = {"User-Agent": self._hub.user_agent}
            if token:
                headers["Authorization"] = f"Bearer {token}"
            dlg.pre_request()
            _LOGGER.debug("%s %s", self._info.http_method, url)
            try:
                response = self._hub.http.request(
                    self._info.http_method, url, params=query, headers=headers,
                    json=content)
            except httpx.HTTPError as err:
                retry = dlg.http_error(err)
                if retry.should_retry:
                    time.sleep(retry.delay)
                    continue
                dlg.finished(False)
                raise HttpError(err) from err

            if not response.is_success:
                if (response.status_code == 401 and self._hub.auto_refresh and not refreshed
                        and token and self._hub.auth is not None):
                    _LOGGER.warning("Token expired, refreshing...")
                    self._hub.auth.invalidate()
                    refreshed = True
                    continue
                try:
                    error_json = response.json()
                except ValueError:
                    error_json = None
                retry = dlg.http_failure(response, error_json)
                if retry.should_retry:
                    time.sleep(retry.delay)
                    continue
                dlg.finished(False)
                if error_json is not None:
                    raise BadRequest(error_json, response)
                raise Failure(response)

            try:
                result = self._response.from_dict(response.json())
            except (ValueError, TypeError, AttributeError) as err:
                dlg.response_json_decode_error(response.text, err)
                dlg.finished(False)
                raise JsonDecodeError(response.text, err) from err
            dlg.finished(True)
            return response, result


class PagedCall(CallBuilder):
    """A list method following ``nextPageToken``; ``_items`` names the list field."""
    _items: str

    def page_token(self, new_value: str) -> "PagedCall":
        return self._set("pageToken", new_value)

    def page_size(self, new_value: int) -> "PagedCall":
        return self._set("pageSize", new_value)

    def pages(self) -> Iterator[Any]:
        """Yield every page, starting from the page token set on the builder (if any).

        The builder itself is left untouched, so it can be iterated again.
        """
        values = dict(self._values)
        while True:
            _, result = self._execute(values)
            yield result
            token = getattr(result, "next_page_token", None)
            if not token:
                return
            values = dict(values, pageToken=token)

    def iter_items(self) -> Iterator[Any]:
        for page in self.pages():
            yield from (getattr(page, self._items, None) or [])


