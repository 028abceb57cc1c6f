from __future__ import annotations
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Sequence, Tuple

import requests
import google.auth
import google.auth.exceptions
from google.auth import credentials as ga_credentials
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials as UserCredentials

from .errors import TokenError

_LOGGER = logging.getLogger(__name__)

ACCESS_TOKEN_ENV = "GAPIS_ACCESS_TOKEN"


class Authenticator:
    """Produces bearer tokens for a set of OAuth2 scopes."""

    def token(self, scopes: Sequence[str]) -> str:
        raise NotImplementedError

    def invalidate(self) -> None:
        """Forget cached tokens so the next ``token`` call fetches a fresh one."""


class StaticTokenAuthenticator(Authenticator):
    def __init__(self, token: str):
        self._token = token

    def token(self, scopes: Sequence[str]) -> str:
        if not self._token:
            raise TokenError("No access token configured")
        return self._token

    def invalidate(self) -> None:
        # nothing to refresh a fixed token with
        pass


class CredentialsAuthenticator(Authenticator):
    """Adapts google-auth credentials.

    Scoped copies are cached per scope set. When ``persist_to`` is given and
    the credentials are authorized-user credentials, refreshed tokens are
    written back to that file.
    """

    def __init__(self, credentials: ga_credentials.Credentials, *,
                 session: Optional[requests.Session] = None,
                 persist_to: Optional[str] = None):
        self.credentials = credentials
        self.persist_to = persist_to
        self._session = session
        self._scoped: Dict[Tuple[str, ...], ga_credentials.Credentials] = {}
        self._lock = threading.Lock()

    def _request(self) -> Request:
        return Request(session=self._session) if self._session is not None else Request()

    def _for_scopes(self, scopes: Sequence[str]) -> ga_credentials.Credentials:
        key = tuple(sorted(set(scopes)))
        creds = self._scoped.get(key)
        if creds is None:
            creds = ga_credentials.with_scopes_if_required(self.credentials, list(key))
            self._scoped[key] = creds
        return creds

    def token(self, scopes: Sequence[str]) -> str:
        with self._lock:
            creds = self._for_scopes(scopes)
            if not creds.valid:
                _LOGGER.debug("Refreshing credentials for scopes %s", list(scopes))
                try:
                    creds.refresh(self._request())
                except google.auth.exceptions.GoogleAuthError as e:
                    raise TokenError(str(e)) from e
                self._persist(creds)
            if not creds.token:
                raise TokenError("Credentials did not yield an access token")
            return creds.token

    def invalidate(self) -> None:
        with self._lock:
            for creds in self._scoped.values():
                # google-auth treats a missing token as invalid
                creds.token = None

    def _persist(self, creds: Any) -> None:
        if not self.persist_to or not isinstance(creds, UserCredentials):
            return
        os.makedirs(os.path.dirname(os.path.abspath(self.persist_to)), exist_ok=True)
        with open(self.persist_to, "w", encoding="utf-8") as fp:
            fp.write(creds.to_json())
        _LOGGER.debug("Stored refreshed token in %s", self.persist_to)


def default_authenticator(*, session: Optional[requests.Session] = None) -> CredentialsAuthenticator:
    """Application Default Credentials (gcloud ADC file, service account, metadata server)."""
    try:
        credentials, _ = google.auth.default()
    except google.auth.exceptions.DefaultCredentialsError as e:
        raise TokenError(str(e)) from e
    return CredentialsAuthenticator(credentials, session=session)


def authorized_user_authenticator(path: str, client_id: Optional[str] = None,
                                  client_secret: Optional[str] = None, *,
                                  session: Optional[requests.Session] = None) -> CredentialsAuthenticator:
    """Authorized-user token file, refreshed tokens are written back to it.

    ``client_id``/``client_secret`` fill in values the file lacks, e.g. when
    it only stores the refresh token.
    """
    with open(path, encoding="utf-8") as fp:
        info = json.load(fp)
    if client_id and not info.get("client_id"):
        info["client_id"] = client_id
    if client_secret and not info.get("client_secret"):
        info["client_secret"] = client_secret
    try:
        credentials = UserCredentials.from_authorized_user_info(info)
    except ValueError as e:
        raise TokenError(f"Invalid token file {path}: {e}") from e
    return CredentialsAuthenticator(credentials, session=session, persist_to=path)


def env_authenticator() -> Optional[StaticTokenAuthenticator]:
    token = os.getenv(ACCESS_TOKEN_ENV)
    return StaticTokenAuthenticator(token) if token else None
