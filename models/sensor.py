"""Sensor on a Telldus Live account."""

from datetime import datetime
from typing import TYPE_CHECKING

from core.errors import ConstructionError
from models.types import Reading, SensorDatum, SensorInfo
from models.utils import to_int

if TYPE_CHECKING:
    from core.client import TelldusClient


class Sensor:
    """A Telldus sensor with cached info and readings.

    Listing payloads from /sensors/list carry no 'data', so reading the data
    of a listed sensor costs one /sensor/info request.
    """

    def __init__(self, client: 'TelldusClient', sensor_id: int, info: SensorInfo | None = None):
        self.client = client
        self.id = sensor_id
        self._info = info

    @classmethod
    def from_id(cls, client: 'TelldusClient', sensor_id: int) -> 'Sensor':
        """Create a sensor from a bare id; info is fetched lazily."""
        if isinstance(sensor_id, bool) or not isinstance(sensor_id, int):
            raise ConstructionError(
                f"Sensor.from_id expects an integer id, got: {type(sensor_id).__name__}")
        return cls(client, sensor_id)

    @classmethod
    def from_payload(cls, client: 'TelldusClient', info: SensorInfo) -> 'Sensor':
        """Create a sensor from an info object already returned by the API."""
        if not isinstance(info, dict) or 'id' not in info:
            raise ConstructionError(
                f"Sensor.from_payload expects a mapping with an 'id', got: {type(info).__name__}")
        return cls(client, to_int(info['id']), info)

    @property
    def info(self) -> SensorInfo:
        if self._info is None:
            self._info = self._retrieve_info()
        return self._info

    @property
    def name(self) -> str | None:
        return self.info.get('name')

    @property
    def last_update(self) -> datetime:
        """Time of the last reading, in local time."""
        return datetime.fromtimestamp(to_int(self.info.get('lastUpdated')))

    @property
    def data(self) -> list[SensorDatum]:
        """Raw readings in API order."""
        info = self.info
        if info.get('data') is None:
            # Info without data (e.g. from a listing) needs a fresh fetch
            info['data'] = self._retrieve_info().get('data', [])
        return info['data']

    @property
    def readings(self) -> list[Reading]:
        return [Reading(datum.get('name'), datum.get('value')) for datum in self.data]

    def _retrieve_info(self) -> SensorInfo:
        return self.client.request("/sensor/info", id=self.id)

    def __str__(self) -> str:
        text = f"{self.id} {self.name}\n"
        for datum in self.data:
            text += f"  {datum.get('name')}: {datum.get('value')}\n"
        return text

    def __repr__(self) -> str:
        return f"<Sensor id={self.id}>"
