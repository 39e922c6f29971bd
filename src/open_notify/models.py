"""Data models for the open-notify API.

This module defines dataclasses representing the three response shapes
served by api.open-notify.org: people in space, the current ISS position
and predicted ISS passes over a location.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

SUCCESS = "success"


@dataclass(frozen=True, slots=True)
class Person:
    """A person in space and the craft they are aboard."""

    name: str
    craft: str


@dataclass(frozen=True, slots=True)
class AstronautManifest:
    """People currently in space, from the /astros.json endpoint.

    Attributes:
        status: Upstream ``message`` field, ``"success"`` when well-formed.
        declared_count: Upstream ``number`` field. Redundant with
            ``len(people)`` and not guaranteed to agree with it.
        people: People in the order upstream listed them.
    """

    status: str
    declared_count: int
    people: tuple[Person, ...] = ()

    def crafts(self) -> list[str]:
        """Return distinct craft names in order of first appearance."""
        seen: dict[str, None] = {}
        for person in self.people:
            seen.setdefault(person.craft, None)
        return list(seen)

    def people_on(self, craft: str) -> list[Person]:
        """Return the people aboard the given craft."""
        return [p for p in self.people if p.craft == craft]


@dataclass(frozen=True, slots=True)
class IssLocation:
    """ISS position, from the /iss-now.json endpoint.

    Latitude and longitude are kept as the decimal strings upstream sent,
    so no precision is lost between transport and display.

    Attributes:
        status: Upstream ``message`` field.
        timestamp: Unix time (seconds) the position was captured.
        latitude: Latitude in degrees, as received.
        longitude: Longitude in degrees, as received.
    """

    status: str
    timestamp: int
    latitude: str
    longitude: str

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


@dataclass(frozen=True, slots=True)
class PassPrediction:
    """A single predicted overhead pass."""

    rise_time: int
    duration_seconds: int

    @property
    def rise_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.rise_time, tz=timezone.utc)


@dataclass(frozen=True, slots=True)
class PassRequest:
    """Request parameters echoed back by the /iss-pass.json endpoint."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    passes: Optional[int] = None
    timestamp: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PassPredictionSet:
    """Predicted ISS passes, from the /iss-pass.json endpoint.

    Attributes:
        status: Upstream ``message`` field.
        failure_reason: Upstream ``reason`` field, empty when absent.
        passes: Predicted passes in upstream order.
        request: Echo of the request parameters, if upstream sent one.
    """

    status: str
    failure_reason: str = ""
    passes: tuple[PassPrediction, ...] = ()
    request: Optional[PassRequest] = None
