"""open-notify fetch orchestrator.

This module composes the fetch pipeline for each endpoint:
build URL -> GET -> parse -> validate.
"""

import logging
from typing import TYPE_CHECKING

from open_notify.api_client import format_count, format_decimal
from open_notify.models import AstronautManifest, IssLocation, PassPredictionSet
from open_notify.validation import (
    validate_location,
    validate_manifest,
    validate_pass_predictions,
)

if TYPE_CHECKING:
    from open_notify.api_client import APIClient
    from open_notify.processor import ResponseProcessor

logger = logging.getLogger(__name__)

ASTROS_ENDPOINT = "/astros.json"
ISS_NOW_ENDPOINT = "/iss-now.json"
ISS_PASS_ENDPOINT = "/iss-pass.json"


class OpenNotifyService:
    """Runs the fetch pipeline for each open-notify endpoint.

    Each method performs one GET and either returns a validated model or
    raises the first error met: NetworkError, then ParsingError, then
    DataError. Nothing is kept between calls.

    Attributes:
        api_client: HTTP client for the open-notify API.
        processor: JSON codec for response bodies.
    """

    def __init__(
        self,
        api_client: "APIClient",
        processor: "ResponseProcessor",
    ) -> None:
        """Initialize service.

        Args:
            api_client: HTTP client for API calls.
            processor: Response body codec.
        """
        self.api_client = api_client
        self.processor = processor

    def fetch_astronauts(self) -> AstronautManifest:
        """Fetch the people currently in space.

        Returns:
            Validated AstronautManifest.

        Raises:
            NetworkError: If the request fails.
            ParsingError: If the body is not a well-formed manifest.
            DataError: If the count or status is inconsistent.
        """
        text = self.api_client.get_text(ASTROS_ENDPOINT)
        manifest = validate_manifest(self.processor.parse_astronauts(text))
        logger.info("Fetched %d people in space", len(manifest.people))
        return manifest

    def fetch_iss_position(self) -> IssLocation:
        """Fetch the current position of the ISS.

        Returns:
            Validated IssLocation.

        Raises:
            NetworkError: If the request fails.
            ParsingError: If the body is not a well-formed position.
            DataError: If the status is not success.
        """
        text = self.api_client.get_text(ISS_NOW_ENDPOINT)
        location = validate_location(self.processor.parse_iss_position(text))
        logger.info(
            "ISS at lat=%s, lon=%s (timestamp=%d)",
            location.latitude,
            location.longitude,
            location.timestamp,
        )
        return location

    def fetch_pass_predictions(
        self,
        latitude: float,
        longitude: float,
        altitude: float,
        count: int,
    ) -> PassPredictionSet:
        """Fetch predicted ISS passes over a location.

        Values are forwarded without range checks; upstream documents
        latitude -80..80, longitude -180..180, altitude 0..10000 m and
        count 1..100, and reports violations as a failure ``reason``.

        Args:
            latitude: Latitude in degrees.
            longitude: Longitude in degrees.
            altitude: Altitude in meters.
            count: Number of passes to return.

        Returns:
            Validated PassPredictionSet.

        Raises:
            NetworkError: If the request fails.
            ParsingError: If the body is not a well-formed prediction set.
            DataError: If upstream reports failure; detail is its reason.
            ValueError: If a coordinate is not finite or count is not
                a whole number.
        """
        params = {
            "lat": format_decimal(latitude),
            "lon": format_decimal(longitude),
            "alt": format_decimal(altitude),
            "n": format_count(count),
        }
        text = self.api_client.get_text(ISS_PASS_ENDPOINT, params=params)
        pass_set = validate_pass_predictions(
            self.processor.parse_pass_predictions(text)
        )
        logger.info(
            "Fetched %d passes for lat=%s, lon=%s",
            len(pass_set.passes),
            params["lat"],
            params["lon"],
        )
        return pass_set
