"""Client for the open-notify.org spaceflight API.

Supported requests:

* people currently in space (``fetch_astronauts``)
* current position of the ISS (``fetch_iss_position``)
* predicted ISS passes over a location (``fetch_pass_predictions``)

Example:
    >>> import open_notify
    >>> manifest = open_notify.fetch_astronauts()
    >>> for person in manifest.people:
    ...     print(person.name, person.craft)

Each call opens its own HTTP session, performs one request and closes
the session again. Failures raise a subclass of ``OpenNotifyError``.
"""

from typing import Optional

from open_notify.container import create_container
from open_notify.errors import (
    DataError,
    ErrorKind,
    NetworkError,
    OpenNotifyError,
    ParsingError,
)
from open_notify.models import (
    AstronautManifest,
    IssLocation,
    PassPrediction,
    PassPredictionSet,
    PassRequest,
    Person,
)

__all__ = [
    "AstronautManifest",
    "DataError",
    "ErrorKind",
    "IssLocation",
    "NetworkError",
    "OpenNotifyError",
    "ParsingError",
    "PassPrediction",
    "PassPredictionSet",
    "PassRequest",
    "Person",
    "fetch_astronauts",
    "fetch_iss_position",
    "fetch_pass_predictions",
]


def fetch_astronauts(
    base_url: Optional[str] = None,
    timeout: Optional[tuple[float, float]] = None,
) -> AstronautManifest:
    """Fetch the people currently in space.

    Raises:
        OpenNotifyError: NetworkError, ParsingError or DataError.
    """
    with create_container(base_url=base_url, timeout=timeout) as container:
        return container.resolve("open_notify_service").fetch_astronauts()


def fetch_iss_position(
    base_url: Optional[str] = None,
    timeout: Optional[tuple[float, float]] = None,
) -> IssLocation:
    """Fetch the current position of the ISS.

    Raises:
        OpenNotifyError: NetworkError, ParsingError or DataError.
    """
    with create_container(base_url=base_url, timeout=timeout) as container:
        return container.resolve("open_notify_service").fetch_iss_position()


def fetch_pass_predictions(
    latitude: float,
    longitude: float,
    altitude: float,
    count: int,
    base_url: Optional[str] = None,
    timeout: Optional[tuple[float, float]] = None,
) -> PassPredictionSet:
    """Fetch predicted ISS passes over a location.

    Args:
        latitude: Degrees, upstream accepts -80..80.
        longitude: Degrees, upstream accepts -180..180.
        altitude: Meters, upstream accepts 0..10000.
        count: Number of passes, upstream accepts 1..100.

    Raises:
        OpenNotifyError: NetworkError, ParsingError or DataError. Out of
            range arguments surface as a DataError carrying upstream's reason.
    """
    with create_container(base_url=base_url, timeout=timeout) as container:
        return container.resolve("open_notify_service").fetch_pass_predictions(
            latitude, longitude, altitude, count
        )
