"""Shared helpers for CLI commands."""

from pathlib import Path

import click

from core.client import TelldusClient
from core.config import AUTH_FILE, load_credentials


def get_auth_file() -> Path:
    """Return the credentials file chosen on the command line (or the default)."""
    ctx = click.get_current_context(silent=True)
    obj = ctx.find_root().obj if ctx else None
    if isinstance(obj, dict) and obj.get('auth_file'):
        return Path(obj['auth_file'])
    return AUTH_FILE


def get_client() -> TelldusClient:
    """Load credentials and build an API client.

    Raises:
        ConfigError: If the credentials file is missing or incomplete
    """
    return TelldusClient.from_credentials(load_credentials(get_auth_file()))
