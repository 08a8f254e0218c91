"""Profile service layer with business logic."""

from collections.abc import Callable
from typing import Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    exception_for,
)
from domain.entities.profile import Profile, ProfilePatch
from domain.entities.result import Err
from domain.repositories.profile_repository import ProfileRowMissingError
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services import profile_rules
from domain.services.profile_rules import (
    Decision,
    InsertProfile,
    RemoveProfile,
    ReplaceProfile,
)

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic.

    Runs each profile rule inside one unit of work and raises the matching
    AppException when the rule rejects the call.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(
        self,
        caller: UUID,
        username: str,
        skin_type: str,
        goals: list[str],
    ) -> bool:
        """Create the caller's profile in PRIVATE mode."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(caller)
            decision = profile_rules.decide_create(
                existing, caller, username, skin_type, goals
            )
            await self._apply(uow, caller, decision)
            logger.info("profile_created", owner_id=str(caller))
            return True

    async def update(
        self,
        caller: UUID,
        username: Optional[str] = None,
        skin_type: Optional[str] = None,
        goals: Optional[list[str]] = None,
    ) -> bool:
        """Replace the provided fields of the caller's profile."""
        patch = ProfilePatch(username=username, skin_type=skin_type, goals=goals)
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(caller)
            decision = profile_rules.decide_update(existing, caller, patch)
            await self._apply(uow, caller, decision)
            logger.info(
                "profile_updated",
                owner_id=str(caller),
                fields=[
                    name
                    for name in ("username", "skin_type", "goals")
                    if getattr(patch, name) is not None
                ],
            )
            return True

    async def set_privacy_mode(self, caller: UUID, mode: int) -> bool:
        """Set the caller's profile visibility from a wire-level selector."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(caller)
            decision = profile_rules.decide_set_privacy_mode(existing, caller, mode)
            await self._apply(uow, caller, decision)
            logger.info("profile_privacy_changed", owner_id=str(caller), mode=mode)
            return True

    async def delete(self, caller: UUID) -> bool:
        """Delete the caller's profile."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(caller)
            decision = profile_rules.decide_delete(existing, caller)
            await self._apply(uow, caller, decision)
            logger.info("profile_deleted", owner_id=str(caller))
            return True

    async def profile_exists(self, target: UUID) -> bool:
        """Check whether an identity has a profile. Open to anyone."""
        async with self._uow_factory() as uow:
            return await uow.profiles.exists(target)  # type: ignore[no-any-return]

    async def get_profile_info(self, target: UUID, requester: UUID | None) -> Profile:
        """Get a profile, honouring its privacy mode."""
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get(target)
            result = profile_rules.check_read(existing, requester)
            if isinstance(result, Err):
                raise exception_for(result.code, str(target))
            return result.value

    async def _apply(self, uow: IUnitOfWork, caller: UUID, decision: Decision) -> None:
        """Write an accepted decision through the repository and commit."""
        if isinstance(decision.result, Err):
            logger.info(
                "profile_operation_rejected",
                owner_id=str(caller),
                code=int(decision.result.code),
            )
            raise exception_for(decision.result.code, str(caller))

        mutation = decision.mutation
        try:
            if isinstance(mutation, InsertProfile):
                await uow.profiles.create(mutation.profile)
            elif isinstance(mutation, ReplaceProfile):
                await uow.profiles.update(mutation.profile)
            elif isinstance(mutation, RemoveProfile):
                if not await uow.profiles.delete(mutation.owner_id):
                    raise ProfileRowMissingError(str(mutation.owner_id))
            await uow.commit()
        except IntegrityError as exc:
            await uow.rollback()
            # Only a unique violation means a concurrent create won the race.
            orig = str(exc.orig).lower() if exc.orig else ""
            if "unique" in orig or "duplicate" in orig:
                logger.info("profile_create_conflict", owner_id=str(caller))
                raise ProfileAlreadyExistsError(str(caller)) from exc
            raise
        except ProfileRowMissingError as exc:
            await uow.rollback()
            logger.info("profile_vanished_before_write", owner_id=str(caller))
            raise ProfileNotFoundError(str(caller)) from exc
