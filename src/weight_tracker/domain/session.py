"""Single-slot session context for the current profile."""

from dataclasses import dataclass

from weight_tracker.domain.errors import ProfileNotFoundError


@dataclass
class SessionContext:
    """Holds the identifier of the profile the client is working with.

    The slot is either absent or bound; it is cleared on reset or when the
    store no longer knows the profile.
    """

    profile_id: int | None = None

    @property
    def is_bound(self) -> bool:
        """Return True when a profile is selected."""
        return self.profile_id is not None

    def bind(self, profile_id: int) -> None:
        """Select a profile."""
        self.profile_id = profile_id

    def clear(self) -> None:
        """Forget the selected profile."""
        self.profile_id = None

    def require(self) -> int:
        """Return the bound profile id or raise when absent."""
        if self.profile_id is None:
            raise ProfileNotFoundError(None)
        return self.profile_id
