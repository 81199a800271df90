"""Ordered social link list operations (append, edit, multi-position removal)."""

from typing import Iterable, Iterator, Optional

from profile_card.models.profile import SocialLink


class SocialLinkIndexError(IndexError):
    """Raised when a caller passes positions outside the current list."""

    pass


class SocialLinkManager:
    """Manages a profile's social link list in place.

    The wrapped list is the profile's own list, so every change is visible
    to anything reading the profile.
    """

    def __init__(self, links: list[SocialLink]):
        """
        Initialize manager over an existing list.

        Args:
            links: The social link list to operate on (mutated in place)
        """
        self.links = links

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[SocialLink]:
        return iter(self.links)

    def __getitem__(self, position: int) -> SocialLink:
        self._check_positions([position])
        return self.links[position]

    def append(self) -> SocialLink:
        """Append an empty entry with a fresh id.

        Returns:
            The new SocialLink
        """
        link = SocialLink()
        self.links.append(link)
        return link

    def update(
        self,
        position: int,
        platform: Optional[str] = None,
        username: Optional[str] = None,
    ) -> SocialLink:
        """Edit one entry in place.

        Args:
            position: Zero-based position of the entry
            platform: New platform text (unchanged if None)
            username: New username text (unchanged if None)

        Returns:
            The edited SocialLink

        Raises:
            SocialLinkIndexError: If position is outside the list
        """
        self._check_positions([position])
        link = self.links[position]
        if platform is not None:
            link.platform = platform
        if username is not None:
            link.username = username
        return link

    def remove_at(self, positions: Iterable[int]) -> list[SocialLink]:
        """Remove entries at the given positions.

        Positions refer to the list as it was before the call, so removing
        {0, 2} from [A, B, C] leaves [B]. Duplicates are collapsed.

        Args:
            positions: Zero-based positions to remove

        Returns:
            Removed entries in their original order

        Raises:
            SocialLinkIndexError: If any position is outside the list; nothing
                is removed in that case
        """
        targets = set(positions)
        self._check_positions(targets)

        removed = [link for i, link in enumerate(self.links) if i in targets]
        self.links[:] = [link for i, link in enumerate(self.links) if i not in targets]
        return removed

    def _check_positions(self, positions: Iterable[int]) -> None:
        invalid = sorted(p for p in positions if not 0 <= p < len(self.links))
        if invalid:
            raise SocialLinkIndexError(
                f"Social link positions out of range: {invalid} "
                f"(list has {len(self.links)} entries)"
            )
