"""In-process profile store."""

import threading
from collections.abc import Sequence
from uuid import UUID

from domain.entities.profile import Profile, ProfilePatch
from domain.entities.result import Result
from domain.services import profile_rules
from domain.services.profile_rules import (
    Decision,
    InsertProfile,
    RemoveProfile,
    ReplaceProfile,
)


class ProfileStore:
    """Keyed profile collection driven by the profile state machine.

    Each call validates, authorizes and applies its change under a single
    lock, so other callers never observe a half-applied operation.
    """

    def __init__(self) -> None:
        self._profiles: dict[UUID, Profile] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._profiles)

    def create(
        self,
        caller: UUID,
        username: str,
        skin_type: str,
        goals: Sequence[str],
    ) -> Result[bool]:
        with self._lock:
            decision = profile_rules.decide_create(
                self._profiles.get(caller), caller, username, skin_type, goals
            )
            return self._apply(decision)

    def update(
        self,
        caller: UUID,
        username: str | None = None,
        skin_type: str | None = None,
        goals: Sequence[str] | None = None,
    ) -> Result[bool]:
        patch = ProfilePatch(
            username=username,
            skin_type=skin_type,
            goals=None if goals is None else list(goals),
        )
        with self._lock:
            decision = profile_rules.decide_update(self._profiles.get(caller), caller, patch)
            return self._apply(decision)

    def set_privacy_mode(self, caller: UUID, mode: int) -> Result[bool]:
        with self._lock:
            decision = profile_rules.decide_set_privacy_mode(
                self._profiles.get(caller), caller, mode
            )
            return self._apply(decision)

    def delete(self, caller: UUID) -> Result[bool]:
        with self._lock:
            decision = profile_rules.decide_delete(self._profiles.get(caller), caller)
            return self._apply(decision)

    def profile_exists(self, target: UUID) -> bool:
        with self._lock:
            return target in self._profiles

    def get_profile_info(self, target: UUID, requester: UUID | None) -> Result[Profile]:
        with self._lock:
            return profile_rules.check_read(self._profiles.get(target), requester)

    def _apply(self, decision: Decision) -> Result[bool]:
        mutation = decision.mutation
        if isinstance(mutation, (InsertProfile, ReplaceProfile)):
            self._profiles[mutation.profile.owner_id] = mutation.profile
        elif isinstance(mutation, RemoveProfile):
            del self._profiles[mutation.owner_id]
        return decision.result
