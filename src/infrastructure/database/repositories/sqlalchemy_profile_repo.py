"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import PrivacyMode, Profile
from domain.repositories.profile_repository import ProfileRowMissingError
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, owner_id: UUID) -> Profile | None:
        """Get the profile owned by an identity."""
        model = await self._get_model(owner_id)
        return self._to_entity(model) if model else None

    async def exists(self, owner_id: UUID) -> bool:
        """Check whether an identity has a profile."""
        stmt = (
            select(func.count())
            .select_from(ProfileModel)
            .where(ProfileModel.owner_id == owner_id)
        )
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Overwrite an existing profile's mutable fields."""
        model = await self._get_model(profile.owner_id)

        if not model:
            raise ProfileRowMissingError(f"Profile {profile.owner_id} not found")

        model.username = profile.username
        model.skin_type = profile.skin_type
        model.goals = list(profile.goals)
        model.privacy_mode = int(profile.privacy_mode)
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, owner_id: UUID) -> bool:
        """Delete a profile."""
        model = await self._get_model(owner_id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, owner_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            owner_id=model.owner_id,
            username=model.username,
            skin_type=model.skin_type,
            goals=list(model.goals or []),
            privacy_mode=PrivacyMode(model.privacy_mode),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            owner_id=entity.owner_id,
            username=entity.username,
            skin_type=entity.skin_type,
            goals=list(entity.goals),
            privacy_mode=int(entity.privacy_mode),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
