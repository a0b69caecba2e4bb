"""Configuration and credentials file handling.

This module handles:
- The default location of the credentials file (auth.yml beside the CLI script)
- Loading the four OAuth secrets from YAML
- Saving freshly authorised secrets back to YAML
"""

import os
from pathlib import Path

import yaml

from core.errors import ConfigError
from models.types import Credentials, ServiceOptions

# Credentials file lives next to the entry script
AUTH_FILE = Path(__file__).parent.parent / 'auth.yml'

CREDENTIAL_KEYS = ('consumer_key', 'consumer_secret', 'token', 'token_secret')

SERVICE_OPTIONS = ServiceOptions()


def load_credentials(path: Path = AUTH_FILE) -> Credentials:
    """Load OAuth credentials from a YAML file.

    Args:
        path: Credentials file to read

    Returns:
        Credentials with all four secrets

    Raises:
        ConfigError: If the file is missing, not valid YAML, or lacks a key
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Credentials file not found: {path}. Run 'authorize' first.")
    except OSError as e:
        raise ConfigError(f"Failed to read credentials file {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse credentials file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Credentials file {path} must contain a mapping")

    missing = [key for key in CREDENTIAL_KEYS if data.get(key) in (None, '')]
    if missing:
        raise ConfigError(f"Credentials file {path} is missing: {', '.join(missing)}")

    not_strings = [key for key in CREDENTIAL_KEYS if not isinstance(data[key], str)]
    if not_strings:
        raise ConfigError(f"Credentials file {path} has non-string values for: "
                          f"{', '.join(not_strings)} (quote them in the YAML)")

    return Credentials(**{key: data[key] for key in CREDENTIAL_KEYS})


def save_credentials(credentials: Credentials, path: Path = AUTH_FILE) -> Path:
    """Save OAuth credentials to a YAML file readable only by the user.

    Args:
        credentials: Secrets to write
        path: Destination file

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {key: getattr(credentials, key) for key in CREDENTIAL_KEYS}
    # User read/write only, from creation on
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, 'w') as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    # The O_CREAT mode only applies to new files
    os.chmod(path, 0o600)
    return path
