# tests/test_auth.py
from __future__ import annotations

import json
import os
import tempfile
import unittest
from unittest.mock import patch

import google.auth.exceptions
from google.oauth2.credentials import Credentials as UserCredentials

from gapis.auth import (ACCESS_TOKEN_ENV, CredentialsAuthenticator, StaticTokenAuthenticator,
                        authorized_user_authenticator, default_authenticator, env_authenticator)
from gapis.errors import TokenError

SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]


class FakeCredentials:
    """Unscoped credentials whose refresh hands out numbered tokens."""

    def __init__(self, token=None, fail=False):
        self.token = token
        self.fail = fail
        self.refreshes = 0

    @property
    def valid(self):
        return bool(self.token)

    def refresh(self, request):
        self.refreshes += 1
        if self.fail:
            raise google.auth.exceptions.RefreshError("invalid_grant")
        self.token = f"fresh-{self.refreshes}"


class TestStaticToken(unittest.TestCase):
    def test_token(self):
        self.assertEqual(StaticTokenAuthenticator("abc").token(SCOPES), "abc")

    def test_empty_token(self):
        with self.assertRaises(TokenError):
            StaticTokenAuthenticator("").token(SCOPES)

    def test_env_authenticator(self):
        with patch.dict(os.environ, {ACCESS_TOKEN_ENV: "from-env"}):
            self.assertEqual(env_authenticator().token(SCOPES), "from-env")
        with patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(env_authenticator())


class TestCredentialsAuthenticator(unittest.TestCase):
    def test_refreshes_when_invalid_and_caches(self):
        creds = FakeCredentials()
        auth = CredentialsAuthenticator(creds)
        self.assertEqual(auth.token(SCOPES), "fresh-1")
        self.assertEqual(auth.token(SCOPES), "fresh-1")
        self.assertEqual(creds.refreshes, 1)

    def test_valid_credentials_not_refreshed(self):
        creds = FakeCredentials(token="still-good")
        self.assertEqual(CredentialsAuthenticator(creds).token(SCOPES), "still-good")
        self.assertEqual(creds.refreshes, 0)

    def test_invalidate_forces_refresh(self):
        creds = FakeCredentials()
        auth = CredentialsAuthenticator(creds)
        auth.token(SCOPES)
        auth.invalidate()
        self.assertEqual(auth.token(SCOPES), "fresh-2")

    def test_refresh_error_becomes_token_error(self):
        auth = CredentialsAuthenticator(FakeCredentials(fail=True))
        with self.assertRaises(TokenError) as ctx:
            auth.token(SCOPES)
        self.assertIsInstance(ctx.exception.__cause__, google.auth.exceptions.RefreshError)

    def test_default_authenticator(self):
        creds = FakeCredentials(token="adc")
        with patch("google.auth.default", return_value=(creds, "project")):
            auth = default_authenticator()
        self.assertIs(auth.credentials, creds)
        self.assertEqual(auth.token(SCOPES), "adc")

    def test_default_authenticator_without_credentials(self):
        err = google.auth.exceptions.DefaultCredentialsError("no ADC")
        with patch("google.auth.default", side_effect=err):
            with self.assertRaises(TokenError):
                default_authenticator()


class TestAuthorizedUserFile(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.path = os.path.join(tmp.name, "api-token.json")

    def write(self, info):
        with open(self.path, "w", encoding="utf-8") as fp:
            json.dump(info, fp)

    def test_client_values_fill_in_missing_fields(self):
        self.write({"refresh_token": "r", "type": "authorized_user"})
        auth = authorized_user_authenticator(self.path, "cid", "csecret")
        self.assertEqual(auth.credentials.client_id, "cid")
        self.assertEqual(auth.credentials.client_secret, "csecret")
        self.assertEqual(auth.persist_to, self.path)

    def test_incomplete_file(self):
        self.write({"refresh_token": "r"})
        with self.assertRaises(TokenError):
            authorized_user_authenticator(self.path)

    def test_refreshed_token_persisted(self):
        creds = UserCredentials(token="t", refresh_token="r", client_id="cid", client_secret="cs",
                                token_uri="https://oauth2.googleapis.com/token")
        auth = CredentialsAuthenticator(creds, persist_to=self.path)
        auth._persist(creds)
        with open(self.path, encoding="utf-8") as fp:
            stored = json.load(fp)
        self.assertEqual(stored["refresh_token"], "r")
        self.assertEqual(stored["client_id"], "cid")

    def test_other_credentials_not_persisted(self):
        auth = CredentialsAuthenticator(FakeCredentials(), persist_to=self.path)
        auth.token(SCOPES)
        self.assertFalse(os.path.exists(self.path))


if __name__ == "__main__":
    unittest.main()
