"""
Preview Renderer

Composes a read-only description of the profile card: avatar header with
name and occupation, biography block, and contact rows. Rendering of the
description (widgets, terminal output) is left to the caller.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from profile_card.models.config import AppSettings, DisplayStrings
from profile_card.models.profile import Profile
from profile_card.utils.link_validator import (
    AlertDialog,
    LinkResolution,
    build_mail_url,
    build_social_url,
    invalid_link_alert,
    resolve_link,
)
from profile_card.utils.occupation import describe_occupation


class AvatarBlock(BaseModel):
    """Avatar header; a placeholder block when no image is set."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    image: Optional[Any] = None
    height: int = 300

    @property
    def is_placeholder(self) -> bool:
        return self.image is None


class HeaderBlock(BaseModel):
    """Name and occupation overlaid on the avatar."""

    name: str
    occupation: str


class SectionBlock(BaseModel):
    """Titled text block (biography)."""

    title: str
    text: str = ""


class ContactRow(BaseModel):
    """One contact entry.

    Attributes:
        title: Row label (email title or platform name)
        value: Displayed text (email or username)
        link: Resolution of the row's address
        alert: Dialog to show when an invalid row is activated
    """

    title: str
    value: str
    link: LinkResolution
    alert: AlertDialog

    @property
    def is_link(self) -> bool:
        return self.link.is_valid

    @property
    def url(self) -> Optional[str]:
        return self.link.url

    def activate(self) -> Optional[AlertDialog]:
        """Handle a tap on the row.

        Returns:
            None for valid rows (the host opens url), otherwise the
            invalid-URL dialog
        """
        if self.is_link:
            return None
        return self.alert


class ContactsBlock(BaseModel):
    """Email row followed by social links in sequence order."""

    title: str
    rows: list[ContactRow] = Field(default_factory=list)


class PreviewCard(BaseModel):
    """Complete preview card description."""

    title: str
    avatar: AvatarBlock
    header: HeaderBlock
    bio: SectionBlock
    contacts: ContactsBlock


class PreviewRenderer:
    """Builds PreviewCard snapshots from a profile."""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings if settings is not None else AppSettings()

    @property
    def strings(self) -> DisplayStrings:
        return self.settings.display_strings

    def render(self, profile: Profile) -> PreviewCard:
        """Compose the card for the current state of a profile.

        Args:
            profile: Profile to render (not modified)

        Returns:
            PreviewCard snapshot
        """
        strings = self.strings
        return PreviewCard(
            title=strings.preview_title,
            avatar=AvatarBlock(
                image=profile.avatar_image, height=self.settings.avatar_height
            ),
            header=HeaderBlock(
                name=profile.name,
                occupation=describe_occupation(profile, strings),
            ),
            bio=SectionBlock(title=strings.about_title, text=profile.bio),
            contacts=ContactsBlock(
                title=strings.contacts_title, rows=self.contact_rows(profile)
            ),
        )

    def contact_rows(self, profile: Profile) -> list[ContactRow]:
        """Resolve the email row and every social link independently."""
        alert = invalid_link_alert(self.strings)
        rows = [
            ContactRow(
                title=self.strings.email_row_title,
                value=profile.email,
                link=resolve_link(build_mail_url(profile.email)),
                alert=alert,
            )
        ]
        for link in profile.social_links:
            rows.append(
                ContactRow(
                    title=link.platform,
                    value=link.username,
                    link=resolve_link(build_social_url(link.platform, link.username)),
                    alert=alert,
                )
            )
        return rows
