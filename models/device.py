"""Dimmable device on a Telldus Live account."""

from typing import TYPE_CHECKING

import click

from core.errors import ConstructionError
from models.types import DeviceInfo
from models.utils import level_to_statevalue, statevalue_to_level, to_int

if TYPE_CHECKING:
    from core.client import TelldusClient


class Device:
    """A Telldus device whose info is fetched once and then cached.

    Build with Device.from_payload() when a listing already returned the
    device's info, or Device.from_id() to fetch it on first access.
    """

    def __init__(self, client: 'TelldusClient', device_id: int, info: DeviceInfo | None = None):
        self.client = client
        self.id = device_id
        self._info = info
        self._level = None

    @classmethod
    def from_id(cls, client: 'TelldusClient', device_id: int) -> 'Device':
        """Create a device from a bare id; info is fetched lazily."""
        if isinstance(device_id, bool) or not isinstance(device_id, int):
            raise ConstructionError(
                f"Device.from_id expects an integer id, got: {type(device_id).__name__}")
        return cls(client, device_id)

    @classmethod
    def from_payload(cls, client: 'TelldusClient', info: DeviceInfo) -> 'Device':
        """Create a device from an info object already returned by the API."""
        if not isinstance(info, dict) or 'id' not in info:
            raise ConstructionError(
                f"Device.from_payload expects a mapping with an 'id', got: {type(info).__name__}")
        return cls(client, to_int(info['id']), info)

    @property
    def info(self) -> DeviceInfo:
        if self._info is None:
            self._info = self.client.request("/device/info", id=self.id)
        return self._info

    @property
    def name(self) -> str | None:
        return self.info.get('name')

    @property
    def level(self) -> int:
        """Dim level 0-100, derived from the device's statevalue."""
        if self._level is None:
            self._level = statevalue_to_level(self.info.get('statevalue'))
        return self._level

    @level.setter
    def level(self, value: int):
        """Dim the device to a 0-100 level.

        On success the cached level becomes the requested value. Any other
        status leaves it unchanged and prints a warning.
        """
        response = self.client.request(
            "/device/dim",
            id=self.id,
            level=level_to_statevalue(value),
        )

        if isinstance(response, dict) and response.get('status') == "success":
            self._level = value
        else:
            click.secho(f'Level change on "{self.id}" did not succeed', fg='yellow')

    def __str__(self) -> str:
        return f"{self.id} {self.name}"

    def __repr__(self) -> str:
        return f"<Device id={self.id}>"
