"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from uuid import UUID

MAX_GOALS = 5
USERNAME_MAX_LENGTH = 50
SKIN_TYPE_MAX_LENGTH = 50
GOAL_MAX_LENGTH = 100


class PrivacyMode(IntEnum):
    """Profile visibility. Values are the wire-level selectors."""

    PUBLIC = 1
    PRIVATE = 2

    @classmethod
    def decode(cls, value: int) -> "PrivacyMode | None":
        """Return the mode for a wire value, or None if it is not a known mode."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class Profile:
    """Domain entity for a user's skincare profile, keyed by its owner."""

    owner_id: UUID
    username: str
    skin_type: str
    goals: list[str] = field(default_factory=list)
    privacy_mode: PrivacyMode = PrivacyMode.PRIVATE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def is_owned_by(self, identity: UUID | None) -> bool:
        return identity is not None and identity == self.owner_id


@dataclass(frozen=True, slots=True)
class ProfilePatch:
    """Fields to replace on update. None leaves the current value in place."""

    username: str | None = None
    skin_type: str | None = None
    goals: list[str] | None = None
