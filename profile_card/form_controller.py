"""
Form Controller Module

Bridges input events from the form widgets to the Profile model. Owns the
transient UI state of one editing session: whether the preview is visible
and the most recent avatar selection handle.
"""

import asyncio
from enum import Enum
from typing import Any, Iterable, Optional

from profile_card.models.config import AppSettings
from profile_card.models.profile import (
    MAX_YEAR,
    MIN_YEAR,
    EducationLevel,
    OccupationType,
    Profile,
    SocialLink,
)
from profile_card.preview import PreviewCard, PreviewRenderer
from profile_card.utils.image_loader import ImageDecoder, decode_image
from profile_card.utils.logger import configure_logging, get_logger
from profile_card.utils.social_links import SocialLinkIndexError, SocialLinkManager


class WidthClass(str, Enum):
    """Coarse horizontal size signal from the host environment."""

    REGULAR = "regular"
    COMPACT = "compact"


class PresentationMode(str, Enum):
    """How the preview is composed next to the form."""

    MODAL = "modal"
    SIDE_BY_SIDE = "side_by_side"


def presentation_mode(width_class: Optional[WidthClass]) -> PresentationMode:
    """Pick the preview presentation for a width signal.

    Only a regular width shows the preview beside the form; compact, unknown
    and missing signals all fall back to a modal preview.

    Args:
        width_class: Width signal, or None when the host has not reported one

    Returns:
        PresentationMode for the current layout
    """
    if width_class == WidthClass.REGULAR:
        return PresentationMode.SIDE_BY_SIDE
    return PresentationMode.MODAL


def shows_preview_button(width_class: Optional[WidthClass]) -> bool:
    """The explicit preview button only exists in modal mode."""
    return presentation_mode(width_class) == PresentationMode.MODAL


class FormController:
    """
    Form controller for a single profile editing session.

    All mutation is synchronous on the owned Profile except avatar
    selection, which awaits the injected decoder.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        image_decoder: Optional[ImageDecoder] = None,
        profile: Optional[Profile] = None,
    ):
        """
        Initialize a form session.

        Args:
            settings: Application settings (defaults to AppSettings())
            image_decoder: Async callable decoding a selection handle into an
                image (defaults to the Pillow decoder)
            profile: Existing profile to edit (a fresh default profile if None)
        """
        self.settings = settings if settings is not None else AppSettings()
        self.image_decoder = image_decoder or decode_image
        self.profile = profile if profile is not None else Profile()
        self.preview_visible = False
        self.pending_selection: Any = None

        configure_logging(self.settings)
        self.logger = get_logger("form_controller", session_id=self.profile.id)
        self.logger.info("Form session started")

    @property
    def social_links(self) -> SocialLinkManager:
        """Manager over the profile's current social link list."""
        return SocialLinkManager(self.profile.social_links)

    # Text fields

    def set_name(self, name: str) -> None:
        self.profile.name = name
        self.logger.debug("Field updated", field="name")

    def set_email(self, email: str) -> None:
        self.profile.email = email
        self.logger.debug("Field updated", field="email")

    def set_bio(self, bio: str) -> None:
        self.profile.bio = bio
        self.logger.debug("Field updated", field="bio")

    # Occupation

    def set_occupation_type(self, occupation_type: OccupationType) -> None:
        """Switch the active occupation variant.

        The inactive variant keeps its data, so switching back restores
        whatever the user entered earlier.
        """
        self.profile.occupation_type = OccupationType(occupation_type)
        self.logger.debug(
            "Occupation type changed", occupation_type=self.profile.occupation_type
        )

    def set_education_level(self, level: EducationLevel) -> None:
        self.profile.student_details.education_level = EducationLevel(level)
        self.logger.debug("Field updated", field="education_level")

    def set_year(self, year: int) -> int:
        """Set the year of study, clamped to the stepper range.

        Args:
            year: Requested year

        Returns:
            The year actually stored
        """
        self.profile.student_details.year = year
        stored = self.profile.student_details.year
        if stored != year:
            self.logger.debug("Year clamped", requested=year, stored=stored)
        return stored

    def increment_year(self) -> int:
        """Stepper "+" action; stays at MAX_YEAR once reached."""
        return self.set_year(min(self.profile.student_details.year + 1, MAX_YEAR))

    def decrement_year(self) -> int:
        """Stepper "-" action; stays at MIN_YEAR once reached."""
        return self.set_year(max(self.profile.student_details.year - 1, MIN_YEAR))

    def set_position(self, position: str) -> None:
        self.profile.job_details.position = position
        self.logger.debug("Field updated", field="position")

    # Social links

    def add_social_link(self) -> SocialLink:
        link = self.social_links.append()
        self.logger.info("Social link added", link_count=len(self.social_links))
        return link

    def update_social_link(
        self,
        position: int,
        platform: Optional[str] = None,
        username: Optional[str] = None,
    ) -> SocialLink:
        return self.social_links.update(position, platform=platform, username=username)

    def remove_social_links(self, positions: Iterable[int]) -> list[SocialLink]:
        """Remove social links selected by a delete gesture.

        Raises:
            SocialLinkIndexError: If any position is out of range
        """
        positions = set(positions)
        try:
            removed = self.social_links.remove_at(positions)
        except SocialLinkIndexError:
            self.logger.warning(
                "Rejected social link removal",
                positions=sorted(positions),
                link_count=len(self.social_links),
            )
            raise

        self.logger.info(
            "Social links removed",
            removed_count=len(removed),
            link_count=len(self.social_links),
        )
        return removed

    # Avatar

    async def select_avatar(self, selection: Any) -> bool:
        """Resolve a picker selection into the avatar image.

        Failures and empty results leave the current avatar untouched and are
        not surfaced to the user. When several selections are in flight, the
        last one to finish wins.

        Args:
            selection: Opaque handle from the image picker (None clears nothing)

        Returns:
            True if the avatar was updated
        """
        self.pending_selection = selection
        if selection is None:
            return False

        try:
            image = await self.image_decoder(selection)
        except asyncio.CancelledError:
            self.logger.debug("Avatar decoding cancelled")
            raise
        except Exception as e:
            self.logger.warning(
                "Avatar decoding failed", error=str(e), error_type=type(e).__name__
            )
            return False

        if image is None:
            self.logger.debug("Avatar selection resolved to nothing")
            return False

        self.profile.avatar_image = image
        self.logger.info("Avatar updated")
        return True

    def clear_avatar(self) -> None:
        self.profile.avatar_image = None
        self.pending_selection = None

    # Preview

    def show_preview(self) -> None:
        self.preview_visible = True

    def dismiss_preview(self) -> None:
        self.preview_visible = False

    def toggle_preview(self) -> bool:
        self.preview_visible = not self.preview_visible
        return self.preview_visible

    def render_preview(self) -> PreviewCard:
        """Compose the preview card for the current profile."""
        return PreviewRenderer(self.settings).render(self.profile)
