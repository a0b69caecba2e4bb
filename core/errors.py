"""Exception types for the Telldus Live client.

Every error derives from TelldusError, which is a click.ClickException so that
an uncaught error ends the command with "Error: <message>" and a non-zero exit.
"""

import click


class TelldusError(click.ClickException):
    """Base class for all Telldus Live errors."""


class ConfigError(TelldusError):
    """Credentials file missing, unreadable or incomplete."""


class TransportError(TelldusError):
    """The server answered with a non-success HTTP status, or could not be reached."""

    def __init__(self, status_code: int | None, reason: str):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Could not reach server: {reason}"
        else:
            message = f"Received {status_code} {reason} from server"
        super().__init__(message)


class ProtocolError(TelldusError):
    """The response body is not valid JSON."""


class ApiError(TelldusError):
    """The server returned a JSON body with an 'error' key."""

    def __init__(self, error):
        self.error = error
        super().__init__(f"Received error message from server: {error}")


class ConstructionError(TelldusError):
    """A Device or Sensor was built from a value of the wrong kind."""


class ArgumentError(TelldusError, click.UsageError):
    """Bad command line arguments."""
