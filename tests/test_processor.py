"""Tests for the open-notify JSON codec."""
import json

import pytest

from conftest import ISS_PASS, PEOPLE, astros_json
from open_notify.errors import ErrorKind, ParsingError
from open_notify.models import (
    AstronautManifest,
    IssLocation,
    PassPrediction,
    PassPredictionSet,
    PassRequest,
    Person,
)
from open_notify.processor import ResponseProcessor


@pytest.fixture
def processor():
    return ResponseProcessor()


# ── Astronauts ────────────────────────────────────────────────────

class TestParseAstronauts:

    def test_well_formed_manifest(self, processor):
        manifest = processor.parse_astronauts(astros_json())
        assert manifest.status == "success"
        assert manifest.declared_count == 6
        assert len(manifest.people) == 6
        assert Person("Oleg Artemyev", "Soyuz MS-08") in manifest.people

    def test_people_keep_upstream_order(self, processor):
        manifest = processor.parse_astronauts(astros_json())
        assert [p.name for p in manifest.people] == [p["name"] for p in PEOPLE]

    def test_missing_craft_is_parsing_error(self, processor):
        people = [dict(p) for p in PEOPLE]
        del people[3]["craft"]
        with pytest.raises(ParsingError) as exc_info:
            processor.parse_astronauts(astros_json(people=people))
        assert exc_info.value.kind is ErrorKind.PARSING
        assert "people[3]" in exc_info.value.detail
        assert "craft" in exc_info.value.detail

    def test_number_must_be_integer(self, processor):
        with pytest.raises(ParsingError):
            processor.parse_astronauts(astros_json(number="6"))

    def test_boolean_is_not_a_count(self, processor):
        with pytest.raises(ParsingError):
            processor.parse_astronauts(astros_json(number=True))

    def test_people_must_be_list(self, processor):
        text = json.dumps({"message": "success", "number": 0, "people": {}})
        with pytest.raises(ParsingError):
            processor.parse_astronauts(text)

    def test_invalid_json(self, processor):
        with pytest.raises(ParsingError) as exc_info:
            processor.parse_astronauts("<html>Service Unavailable</html>")
        assert "Invalid JSON" in exc_info.value.detail

    def test_top_level_array_rejected(self, processor):
        with pytest.raises(ParsingError):
            processor.parse_astronauts("[]")

    def test_count_mismatch_is_not_a_parsing_concern(self, processor):
        """Structural parse accepts inconsistent counts; validation rejects them."""
        manifest = processor.parse_astronauts(astros_json(number=5))
        assert manifest.declared_count == 5
        assert len(manifest.people) == 6


class TestManifestHelpers:

    def test_crafts_in_first_seen_order(self, processor):
        manifest = processor.parse_astronauts(astros_json())
        assert manifest.crafts() == ["ISS", "Soyuz MS-08"]

    def test_people_on_craft(self, processor):
        manifest = processor.parse_astronauts(astros_json())
        assert [p.name for p in manifest.people_on("ISS")] == [
            "Anton Shkaplerov",
            "Scott Tingle",
            "Norishige Kanai",
        ]
        assert manifest.people_on("Tiangong") == []


# ── ISS position ──────────────────────────────────────────────────

class TestParseIssPosition:

    def test_coordinates_kept_as_text(self, processor, iss_now_json):
        location = processor.parse_iss_position(iss_now_json)
        assert location.status == "success"
        assert location.timestamp == 1521971230
        assert location.latitude == "-34.6445"
        assert location.longitude == "73.5964"

    def test_trailing_zeros_preserved(self, processor):
        text = json.dumps(
            {
                "message": "success",
                "timestamp": 1,
                "iss_position": {"latitude": "10.1000", "longitude": "-0.0000"},
            }
        )
        location = processor.parse_iss_position(text)
        assert location.latitude == "10.1000"
        assert location.longitude == "-0.0000"

    def test_numeric_latitude_rejected(self, processor):
        text = json.dumps(
            {
                "message": "success",
                "timestamp": 1,
                "iss_position": {"latitude": -34.6445, "longitude": "73.5964"},
            }
        )
        with pytest.raises(ParsingError):
            processor.parse_iss_position(text)

    def test_missing_position(self, processor):
        text = json.dumps({"message": "success", "timestamp": 1})
        with pytest.raises(ParsingError) as exc_info:
            processor.parse_iss_position(text)
        assert "iss_position" in exc_info.value.detail

    def test_observed_at_is_utc(self, processor, iss_now_json):
        location = processor.parse_iss_position(iss_now_json)
        assert location.observed_at.isoformat() == "2018-03-25T09:47:10+00:00"


# ── Pass predictions ──────────────────────────────────────────────

class TestParsePassPredictions:

    def test_successful_payload(self, processor, iss_pass_json):
        pass_set = processor.parse_pass_predictions(iss_pass_json)
        assert pass_set.status == "success"
        assert pass_set.failure_reason == ""
        assert pass_set.passes[0] == PassPrediction(1521993478, 620)
        assert len(pass_set.passes) == 3

    def test_request_echo(self, processor, iss_pass_json):
        pass_set = processor.parse_pass_predictions(iss_pass_json)
        assert pass_set.request == PassRequest(
            latitude=51.0,
            longitude=13.5,
            altitude=440.0,
            passes=3,
            timestamp=1521971230,
        )

    def test_failure_without_response(self, processor):
        text = json.dumps({"message": "failure", "reason": "bad altitude"})
        pass_set = processor.parse_pass_predictions(text)
        assert pass_set.status == "failure"
        assert pass_set.failure_reason == "bad altitude"
        assert pass_set.passes == ()
        assert pass_set.request is None

    def test_malformed_pass(self, processor):
        payload = dict(ISS_PASS, response=[{"risetime": 1}])
        with pytest.raises(ParsingError) as exc_info:
            processor.parse_pass_predictions(json.dumps(payload))
        assert "response[0]" in exc_info.value.detail

    def test_reason_must_be_text(self, processor):
        text = json.dumps({"message": "failure", "reason": 42})
        with pytest.raises(ParsingError):
            processor.parse_pass_predictions(text)

    def test_rise_datetime(self):
        assert PassPrediction(0, 10).rise_datetime.year == 1970


# ── Serialization ─────────────────────────────────────────────────

class TestSerialization:

    def test_manifest_round_trip(self, processor):
        manifest = AstronautManifest(
            status="success",
            declared_count=2,
            people=(Person("Sunita Williams", "ISS"), Person("Wang Yaping", "Tiangong")),
        )
        assert processor.parse_astronauts(processor.to_json(manifest)) == manifest

    def test_location_round_trip(self, processor):
        location = IssLocation("success", 1521971230, "-34.6445", "73.5964")
        assert processor.parse_iss_position(processor.to_json(location)) == location

    def test_pass_set_round_trip(self, processor):
        pass_set = PassPredictionSet(
            status="success",
            passes=(PassPrediction(1521993478, 620), PassPrediction(1521999254, 645)),
            request=PassRequest(latitude=51.0, longitude=13.5, passes=2),
        )
        text = processor.to_json(pass_set)
        assert processor.parse_pass_predictions(text) == pass_set

    def test_failed_pass_set_round_trip(self, processor):
        pass_set = PassPredictionSet(status="failure", failure_reason="bad altitude")
        assert processor.parse_pass_predictions(processor.to_json(pass_set)) == pass_set

    def test_wire_field_names(self, processor):
        location = IssLocation("success", 7, "1.5", "2.5")
        assert processor.to_dict(location) == {
            "message": "success",
            "timestamp": 7,
            "iss_position": {"latitude": "1.5", "longitude": "2.5"},
        }

    def test_unsupported_type(self, processor):
        with pytest.raises(TypeError):
            processor.to_json(Person("a", "b"))
