"""Type definitions for the Telldus Live CLI.

TypedDicts describe the JSON payloads returned by the Telldus Live API; the
frozen dataclasses are the value types the client is configured with.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, TypedDict


@dataclass(frozen=True)
class Credentials:
    """OAuth 1.0a consumer and access token secrets."""
    consumer_key: str
    consumer_secret: str = field(repr=False)
    token: str
    token_secret: str = field(repr=False)


@dataclass(frozen=True)
class ServiceOptions:
    """Location of the Telldus Live API and its OAuth endpoints."""
    site: str = "http://api.telldus.com"
    request_token_path: str = "/oauth/requestToken"
    authorize_path: str = "/oauth/authorize"
    access_token_path: str = "/oauth/accessToken"
    timeout: float = 10

    @property
    def request_token_url(self) -> str:
        return f"{self.site}{self.request_token_path}"

    @property
    def authorize_url(self) -> str:
        return f"{self.site}{self.authorize_path}"

    @property
    def access_token_url(self) -> str:
        return f"{self.site}{self.access_token_path}"


class DeviceInfo(TypedDict, total=False):
    """Device entry from /devices/list or /device/info."""
    id: int | str
    name: str
    statevalue: int | str | None


class SensorDatum(TypedDict):
    """One entry of a sensor's data array."""
    name: str
    value: str


class SensorInfo(TypedDict, total=False):
    """Sensor entry from /sensors/list or /sensor/info."""
    id: int | str
    name: str
    lastUpdated: int
    data: list[SensorDatum]


class Reading(NamedTuple):
    """A single named sensor measurement."""
    name: str
    value: str
