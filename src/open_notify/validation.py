"""Semantic checks applied to parsed open-notify payloads."""

from open_notify.errors import DataError
from open_notify.models import (
    SUCCESS,
    AstronautManifest,
    IssLocation,
    PassPredictionSet,
)


def validate_manifest(manifest: AstronautManifest) -> AstronautManifest:
    """Accept a manifest whose count and status are consistent.

    The count check runs before the status check, so a payload that is
    both inconsistent and unsuccessful reports the count mismatch.

    Raises:
        DataError: If ``number`` disagrees with the people listed, or the
            status is not ``"success"`` (detail is the status verbatim).
    """
    if manifest.declared_count != len(manifest.people):
        raise DataError(
            f"Declared {manifest.declared_count} people in space "
            f"but {len(manifest.people)} were listed"
        )
    if manifest.status != SUCCESS:
        raise DataError(manifest.status)
    return manifest


def validate_location(location: IssLocation) -> IssLocation:
    """Accept a location reported as successful.

    Raises:
        DataError: If the status is not ``"success"``.
    """
    if location.status != SUCCESS:
        raise DataError(location.status)
    return location


def validate_pass_predictions(pass_set: PassPredictionSet) -> PassPredictionSet:
    """Accept a pass prediction set reported as successful.

    Raises:
        DataError: If the status is not ``"success"``. The detail is the
            upstream ``reason``, which may be empty.
    """
    if pass_set.status != SUCCESS:
        raise DataError(pass_set.failure_reason)
    return pass_set
