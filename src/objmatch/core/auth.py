"""Authentication helpers for Databricks.

Candidate objects for the `uc` command are read from Unity Catalog. This
module creates the Databricks WorkspaceClient used for that, resolving the
connection through Databricks unified authentication (~/.databrickscfg or
environment variables).
"""

import re

from databricks.sdk import WorkspaceClient
from databricks.sdk.core import Config

_LOGIN_HINT = re.compile(r"databricks auth login (\S+)")


class AuthError(RuntimeError):
    """Raised when the Databricks client cannot be configured."""


def _auth_error_message(message: str, profile: str | None) -> str:
    """Turn an SDK config error into a message with a re-login hint."""
    if not _LOGIN_HINT.search(message):
        return f"Databricks authentication failed: {message}"
    cmd = "databricks auth login"
    if profile:
        cmd = f"{cmd} --profile {profile}"
    return (
        "Databricks authentication failed. Your refresh token is invalid.\n"
        f"Re-authenticate with:\n  $ {cmd}"
    )


def sanitize_host(host: str | None) -> str | None:
    """Drop query strings (e.g. '?o=123') and trailing slashes from a host URL."""
    if not host:
        return host
    return host.split("?", 1)[0].rstrip("/")


def get_client(profile: str | None = None) -> WorkspaceClient:
    """
    Create a WorkspaceClient for the given profile (or the default config).

    Raises:
        AuthError: If the Databricks configuration cannot be resolved.
    """
    try:
        cfg = Config(profile=profile) if profile else Config()
    except ValueError as exc:
        raise AuthError(_auth_error_message(str(exc), profile)) from exc
    cfg.host = sanitize_host(cfg.host)
    return WorkspaceClient(config=cfg)
