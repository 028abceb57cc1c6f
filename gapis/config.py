"""Files the command line tools keep in their configuration directory."""
from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict

from .errors import ConfigurationError

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "~/.google-service-cli"

# Template written when no application secret exists yet. Fill in client_id
# and client_secret of your own OAuth client to refresh stored user tokens.
DEFAULT_APPLICATION_SECRET = {
    "installed": {
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
        "client_id": "",
        "client_secret": "",
        "client_email": "",
        "client_x509_cert_url": "",
        "redirect_uris": ["urn:ietf:wg:oauth:2.0:oob", "oob"],
    }
}


def assure_config_dir_exists(path: str) -> str:
    """Expand ``~`` and create the directory if needed; returns the expanded path."""
    expanded = os.path.expanduser(path)
    if expanded.startswith("~"):
        raise ConfigurationError("Home directory is unavailable, cannot expand '%s'" % path)
    try:
        os.makedirs(expanded, exist_ok=True)
    except OSError as e:
        raise ConfigurationError(f"Directory '{expanded}' could not be created with error: {e}") from e
    return expanded


def application_secret_from_directory(config_dir: str, filename: str,
                                      default_json: str) -> Dict[str, Any]:
    """Load ``<config_dir>/<filename>``, writing ``default_json`` there first if it is missing.

    Returns the ``installed`` (or ``web``) section of the secret.
    """
    path = os.path.join(config_dir, filename)
    if not os.path.exists(path):
        _LOGGER.debug("Writing default application secret to %s", path)
        try:
            with open(path, "w", encoding="utf-8") as fp:
                fp.write(default_json)
        except OSError as e:
            raise ConfigurationError(f"Failed to write application secret to '{path}': {e}") from e

    try:
        with open(path, encoding="utf-8") as fp:
            data = json.load(fp)
    except OSError as e:
        raise ConfigurationError(f"Failed to read application secret at '{path}': {e}") from e
    except ValueError as e:
        raise ConfigurationError(f"Application secret at '{path}' is not formatted correctly: {e}") from e

    secret = data.get("installed") or data.get("web") if isinstance(data, dict) else None
    if not isinstance(secret, dict):
        raise ConfigurationError(
            f"Application secret at '{path}' is not formatted correctly: "
            "expected an 'installed' or 'web' section")
    return secret


def default_secret_json() -> str:
    return json.dumps(DEFAULT_APPLICATION_SECRET, indent=2)


def token_path(config_dir: str, api_name: str) -> str:
    return os.path.join(config_dir, f"{api_name}-token.json")
