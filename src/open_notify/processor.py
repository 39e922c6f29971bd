"""Codec between open-notify JSON payloads and domain models.

This module turns response bodies into model instances, checking that
every required field is present and of the expected type, and renders
models back into the wire format.
"""

import json
import logging
from typing import Any, Optional, Union

from open_notify.errors import ParsingError
from open_notify.models import (
    AstronautManifest,
    IssLocation,
    PassPrediction,
    PassPredictionSet,
    PassRequest,
    Person,
)

logger = logging.getLogger(__name__)

Payload = Union[AstronautManifest, IssLocation, PassPredictionSet]


def _field(raw: Any, key: str, expected: type, where: str) -> Any:
    if not isinstance(raw, dict):
        raise ParsingError(f"{where}: expected object, got {type(raw).__name__}")
    if key not in raw:
        raise ParsingError(f"{where}: missing field '{key}'")
    value = raw[key]
    # bool is a subclass of int but never a valid count or timestamp
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ParsingError(
            f"{where}: field '{key}' expected {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _optional_number(raw: dict[str, Any], key: str, cast: type) -> Optional[Any]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParsingError(
            f"request: field '{key}' expected number, got {type(value).__name__}"
        )
    return cast(value)


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise ParsingError(f"Invalid JSON: {e}") from e


class ResponseProcessor:
    """Parses response bodies into models and serializes models back.

    Parsing is purely structural. Semantic checks such as the people
    count or the status marker belong to ``open_notify.validation``.
    """

    def to_person_model(self, raw: Any, index: int = 0) -> Person:
        """Convert one element of the ``people`` array to a Person."""
        where = f"people[{index}]"
        return Person(
            name=_field(raw, "name", str, where),
            craft=_field(raw, "craft", str, where),
        )

    def to_manifest_model(self, raw: Any) -> AstronautManifest:
        """Convert a raw /astros.json object to an AstronautManifest.

        Args:
            raw: Decoded JSON object.

        Returns:
            AstronautManifest instance.

        Raises:
            ParsingError: If a field is missing or has the wrong type.
        """
        people_raw = _field(raw, "people", list, "astros")
        return AstronautManifest(
            status=_field(raw, "message", str, "astros"),
            declared_count=_field(raw, "number", int, "astros"),
            people=tuple(
                self.to_person_model(p, i) for i, p in enumerate(people_raw)
            ),
        )

    def to_location_model(self, raw: Any) -> IssLocation:
        """Convert a raw /iss-now.json object to an IssLocation.

        Raises:
            ParsingError: If a field is missing or has the wrong type.
        """
        position = _field(raw, "iss_position", dict, "iss-now")
        return IssLocation(
            status=_field(raw, "message", str, "iss-now"),
            timestamp=_field(raw, "timestamp", int, "iss-now"),
            latitude=_field(position, "latitude", str, "iss_position"),
            longitude=_field(position, "longitude", str, "iss_position"),
        )

    def to_pass_model(self, raw: Any, index: int = 0) -> PassPrediction:
        """Convert one element of the ``response`` array to a PassPrediction."""
        where = f"response[{index}]"
        return PassPrediction(
            rise_time=_field(raw, "risetime", int, where),
            duration_seconds=_field(raw, "duration", int, where),
        )

    def to_request_model(self, raw: Any) -> PassRequest:
        """Convert the echoed ``request`` object to a PassRequest."""
        if not isinstance(raw, dict):
            raise ParsingError(
                f"iss-pass: field 'request' expected dict, got {type(raw).__name__}"
            )
        return PassRequest(
            latitude=_optional_number(raw, "latitude", float),
            longitude=_optional_number(raw, "longitude", float),
            altitude=_optional_number(raw, "altitude", float),
            passes=_optional_number(raw, "passes", int),
            timestamp=_optional_number(raw, "datetime", int),
        )

    def to_pass_set_model(self, raw: Any) -> PassPredictionSet:
        """Convert a raw /iss-pass.json object to a PassPredictionSet.

        Upstream omits ``response`` on failure, and ``reason`` and
        ``request`` on success, so all three are optional here.

        Raises:
            ParsingError: If a field is missing or has the wrong type.
        """
        status = _field(raw, "message", str, "iss-pass")
        reason = ""
        if raw.get("reason") is not None:
            reason = _field(raw, "reason", str, "iss-pass")
        passes_raw = []
        if raw.get("response") is not None:
            passes_raw = _field(raw, "response", list, "iss-pass")
        request = None
        if raw.get("request") is not None:
            request = self.to_request_model(raw["request"])

        return PassPredictionSet(
            status=status,
            failure_reason=reason,
            passes=tuple(self.to_pass_model(p, i) for i, p in enumerate(passes_raw)),
            request=request,
        )

    def parse_astronauts(self, text: str) -> AstronautManifest:
        """Parse an /astros.json response body."""
        manifest = self.to_manifest_model(_load(text))
        logger.debug("Parsed manifest with %d people", len(manifest.people))
        return manifest

    def parse_iss_position(self, text: str) -> IssLocation:
        """Parse an /iss-now.json response body."""
        return self.to_location_model(_load(text))

    def parse_pass_predictions(self, text: str) -> PassPredictionSet:
        """Parse an /iss-pass.json response body."""
        pass_set = self.to_pass_set_model(_load(text))
        logger.debug("Parsed %d pass predictions", len(pass_set.passes))
        return pass_set

    def to_dict(self, value: Payload) -> dict[str, Any]:
        """Render a model in its wire representation.

        Args:
            value: AstronautManifest, IssLocation or PassPredictionSet.

        Returns:
            Dictionary using upstream field names.

        Raises:
            TypeError: If value is not one of the supported models.
        """
        if isinstance(value, AstronautManifest):
            return {
                "message": value.status,
                "number": value.declared_count,
                "people": [{"name": p.name, "craft": p.craft} for p in value.people],
            }
        if isinstance(value, IssLocation):
            return {
                "message": value.status,
                "timestamp": value.timestamp,
                "iss_position": {
                    "latitude": value.latitude,
                    "longitude": value.longitude,
                },
            }
        if isinstance(value, PassPredictionSet):
            data: dict[str, Any] = {"message": value.status}
            if value.failure_reason:
                data["reason"] = value.failure_reason
            if value.request is not None:
                echoed = {
                    "latitude": value.request.latitude,
                    "longitude": value.request.longitude,
                    "altitude": value.request.altitude,
                    "passes": value.request.passes,
                    "datetime": value.request.timestamp,
                }
                data["request"] = {k: v for k, v in echoed.items() if v is not None}
            data["response"] = [
                {"risetime": p.rise_time, "duration": p.duration_seconds}
                for p in value.passes
            ]
            return data
        raise TypeError(f"Cannot serialize {type(value).__name__}")

    def to_json(self, value: Payload, indent: Optional[int] = None) -> str:
        """Serialize a model to a JSON document in the wire format."""
        return json.dumps(self.to_dict(value), indent=indent)
