"""TelldusClient class for Telldus Live API interactions.

This module contains the request layer that talks to the JSON API through a
signed client, plus the factory methods that hand out Device and Sensor
objects bound to it.
"""

import logging

from core.auth import SignedClient
from core.config import SERVICE_OPTIONS
from core.errors import ApiError, ProtocolError, TransportError
from models.device import Device
from models.sensor import Sensor
from models.types import Credentials, ServiceOptions

_LOGGER = logging.getLogger(__name__)


def build_path(function: str, params: dict | None = None) -> str:
    """Build the API path for a function call.

    Values are interpolated as-is, without percent-encoding.

    Args:
        function: API function such as '/devices/list'
        params: Query parameters

    Returns:
        Path such as '/json/device/info?id=42'
    """
    path = f"/json{function}"
    query = "&".join(f"{key}={value}" for key, value in (params or {}).items())
    if query:
        path += f"?{query}"
    return path


class TelldusClient:
    """Manages requests to the Telldus Live JSON API."""

    def __init__(self, signed_client: SignedClient):
        self.signed_client = signed_client

    @classmethod
    def from_credentials(cls, credentials: Credentials,
                         options: ServiceOptions = SERVICE_OPTIONS) -> 'TelldusClient':
        """Create a client that signs requests with the given credentials."""
        return cls(SignedClient(credentials, options))

    def request(self, function: str, **params):
        """Call an API function and return its parsed JSON response.

        Args:
            function: API function such as '/devices/list'
            **params: Query parameters

        Raises:
            TransportError: If the HTTP status is not 2xx (checked before parsing)
            ProtocolError: If the body is not valid JSON
            ApiError: If the response carries an 'error' key
        """
        response = self.signed_client.get(build_path(function, params))

        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code, response.reason)

        try:
            result = response.json()
        except ValueError as e:
            raise ProtocolError(f"Could not parse response from {function}: {e}")

        if isinstance(result, dict) and 'error' in result:
            raise ApiError(result['error'])

        _LOGGER.debug("%s -> %s", function, result)
        return result

    def device(self, device_id: int) -> Device:
        """Get a device by id; its info is fetched on first access."""
        return Device.from_id(self, device_id)

    def devices(self) -> list[Device]:
        """Get all devices on the account."""
        return [Device.from_payload(self, info) for info in self._list("/devices/list", 'device')]

    def sensor(self, sensor_id: int) -> Sensor:
        """Get a sensor by id; its info is fetched on first access."""
        return Sensor.from_id(self, sensor_id)

    def sensors(self) -> list[Sensor]:
        """Get all sensors on the account."""
        return [Sensor.from_payload(self, info) for info in self._list("/sensors/list", 'sensor')]

    def _list(self, function: str, key: str) -> list[dict]:
        result = self.request(function)
        if not isinstance(result, dict) or not isinstance(result.get(key), list):
            raise ProtocolError(f"Response from {function} has no '{key}' list")
        return result[key]
