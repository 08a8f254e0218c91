"""Profile state machine: validation and access rules.

Every function here is pure. It takes the record currently keyed by the
relevant identity (or None when that identity has no profile), the caller
and the decoded inputs, and returns a Decision: the result to report and the
mutation to apply. Failed decisions never carry a mutation, so a rejected
call leaves the store exactly as it was.

Per identity the store moves between two states:

    ABSENT  --create-->            PRESENT(PRIVATE)
    PRESENT --update-->            PRESENT (mode unchanged)
    PRESENT --set_privacy_mode-->  PRESENT (mode replaced)
    PRESENT --delete-->            ABSENT

Only the owning identity may drive a transition out of PRESENT. Nothing is
kept after delete, so an identity can create again from scratch.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Sequence, Union
from uuid import UUID

from core.exceptions import ProfileErrorCode
from domain.entities.profile import (
    GOAL_MAX_LENGTH,
    MAX_GOALS,
    SKIN_TYPE_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    PrivacyMode,
    Profile,
    ProfilePatch,
)
from domain.entities.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class InsertProfile:
    profile: Profile


@dataclass(frozen=True, slots=True)
class ReplaceProfile:
    profile: Profile


@dataclass(frozen=True, slots=True)
class RemoveProfile:
    owner_id: UUID


Mutation = Union[InsertProfile, ReplaceProfile, RemoveProfile]


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of a state-machine step."""

    result: Result[bool]
    mutation: Mutation | None = None

    @classmethod
    def reject(cls, code: ProfileErrorCode) -> "Decision":
        return cls(result=Err(code))

    @classmethod
    def accept(cls, mutation: Mutation) -> "Decision":
        return cls(result=Ok(True), mutation=mutation)


def valid_username(username: str) -> bool:
    return 0 < len(username) <= USERNAME_MAX_LENGTH


def valid_skin_type(skin_type: str) -> bool:
    return 0 < len(skin_type) <= SKIN_TYPE_MAX_LENGTH


def valid_goals(goals: Sequence[str]) -> bool:
    if len(goals) > MAX_GOALS:
        return False
    return all(len(goal) <= GOAL_MAX_LENGTH for goal in goals)


def valid_patch(patch: ProfilePatch) -> bool:
    """Check every provided field of a patch; unset fields always pass."""
    if patch.username is not None and not valid_username(patch.username):
        return False
    if patch.skin_type is not None and not valid_skin_type(patch.skin_type):
        return False
    if patch.goals is not None and not valid_goals(patch.goals):
        return False
    return True


def _owned(existing: Profile | None, caller: UUID) -> Profile | None:
    """Return the record only if the caller is its owner."""
    if existing is None or not existing.is_owned_by(caller):
        return None
    return existing


def decide_create(
    existing: Profile | None,
    caller: UUID,
    username: str,
    skin_type: str,
    goals: Sequence[str],
    now: datetime | None = None,
) -> Decision:
    """Create a PRIVATE profile for the caller.

    Input is validated before existence so that a bad request from an
    identity that already has a profile still reports INVALID_INPUT.
    """
    if not (valid_username(username) and valid_skin_type(skin_type) and valid_goals(goals)):
        return Decision.reject(ProfileErrorCode.INVALID_INPUT)
    if existing is not None:
        return Decision.reject(ProfileErrorCode.ALREADY_EXISTS)

    timestamp = now or datetime.utcnow()
    profile = Profile(
        owner_id=caller,
        username=username,
        skin_type=skin_type,
        goals=list(goals),
        privacy_mode=PrivacyMode.PRIVATE,
        created_at=timestamp,
        updated_at=timestamp,
    )
    return Decision.accept(InsertProfile(profile))


def decide_update(
    existing: Profile | None,
    caller: UUID,
    patch: ProfilePatch,
    now: datetime | None = None,
) -> Decision:
    """Replace the provided fields of the caller's profile, all or nothing."""
    current = _owned(existing, caller)
    if current is None:
        return Decision.reject(ProfileErrorCode.NOT_FOUND)
    if not valid_patch(patch):
        return Decision.reject(ProfileErrorCode.INVALID_INPUT)

    updated = replace(
        current,
        username=current.username if patch.username is None else patch.username,
        skin_type=current.skin_type if patch.skin_type is None else patch.skin_type,
        goals=list(current.goals if patch.goals is None else patch.goals),
        updated_at=now or datetime.utcnow(),
    )
    return Decision.accept(ReplaceProfile(updated))


def decide_set_privacy_mode(
    existing: Profile | None,
    caller: UUID,
    mode: int,
    now: datetime | None = None,
) -> Decision:
    """Switch the caller's profile between PUBLIC and PRIVATE.

    ``mode`` is the raw wire selector; anything other than 1 or 2 is
    rejected before the profile is looked at.
    """
    decoded = PrivacyMode.decode(mode)
    if decoded is None:
        return Decision.reject(ProfileErrorCode.INVALID_INPUT)

    current = _owned(existing, caller)
    if current is None:
        return Decision.reject(ProfileErrorCode.NOT_FOUND)

    updated = replace(
        current,
        goals=list(current.goals),
        privacy_mode=decoded,
        updated_at=now or datetime.utcnow(),
    )
    return Decision.accept(ReplaceProfile(updated))


def decide_delete(existing: Profile | None, caller: UUID) -> Decision:
    """Remove the caller's profile. Missing and not-owned look the same."""
    current = _owned(existing, caller)
    if current is None:
        return Decision.reject(ProfileErrorCode.NOT_FOUND)
    return Decision.accept(RemoveProfile(current.owner_id))


def check_read(existing: Profile | None, requester: UUID | None) -> Result[Profile]:
    """Decide whether ``requester`` may see ``existing``.

    The owner always may; anyone else (including an anonymous requester)
    only when the profile is PUBLIC. Absence is reported as NOT_FOUND and
    never folded into UNAUTHORIZED.
    """
    if existing is None:
        return Err(ProfileErrorCode.NOT_FOUND)
    if existing.is_owned_by(requester) or existing.privacy_mode == PrivacyMode.PUBLIC:
        return Ok(replace(existing, goals=list(existing.goals)))
    return Err(ProfileErrorCode.UNAUTHORIZED)
