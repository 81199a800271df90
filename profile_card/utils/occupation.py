"""Occupation descriptor derivation for the preview card."""

from typing import Optional

from profile_card.models.config import DisplayStrings
from profile_card.models.profile import (
    EducationLevel,
    OccupationType,
    Profile,
    StudentOccupation,
)


def occupation_label(
    occupation_type: OccupationType, strings: Optional[DisplayStrings] = None
) -> str:
    """Return the picker label for an occupation type."""
    strings = strings or DisplayStrings()
    if occupation_type == OccupationType.STUDENT:
        return strings.student_label
    return strings.worker_label


def education_label(
    level: EducationLevel, strings: Optional[DisplayStrings] = None
) -> str:
    """Return the picker label for an education level."""
    strings = strings or DisplayStrings()
    labels = {
        EducationLevel.UNDERGRADUATE: strings.undergraduate_label,
        EducationLevel.MASTER: strings.master_label,
        EducationLevel.PHD: strings.phd_label,
    }
    return labels[level]


def describe_occupation(
    profile: Profile, strings: Optional[DisplayStrings] = None
) -> str:
    """Build the occupation line shown under the name on the card.

    Students get "<education level><year><suffix>" (e.g. "大學3年級").
    Workers get their position, or the fallback label when it is empty.
    Only the active variant's payload is read.

    Args:
        profile: Profile to describe
        strings: Display strings (defaults to DisplayStrings())

    Returns:
        Occupation descriptor string
    """
    strings = strings or DisplayStrings()
    occupation = profile.occupation

    if isinstance(occupation, StudentOccupation):
        details = occupation.details
        return (
            f"{education_label(details.education_level, strings)}"
            f"{details.year}{strings.year_suffix}"
        )

    return occupation.details.position or strings.worker_fallback
