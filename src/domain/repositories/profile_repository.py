"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class ProfileRowMissingError(LookupError):
    """The stored profile disappeared between read and write."""


class IProfileRepository(Protocol):
    """Repository interface for Profile entities, keyed by owner."""

    async def get(self, owner_id: UUID) -> Profile | None:
        """Get the profile owned by an identity."""
        ...

    async def exists(self, owner_id: UUID) -> bool:
        """Check whether an identity has a profile."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Overwrite an existing profile's fields.

        Raises ProfileRowMissingError when no row is stored for the owner.
        """
        ...

    async def delete(self, owner_id: UUID) -> bool:
        """Delete a profile and return success status."""
        ...
