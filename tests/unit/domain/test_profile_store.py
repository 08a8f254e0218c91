"""Unit tests for the in-process ProfileStore."""

import threading
from uuid import UUID, uuid4

import pytest

from core.exceptions import ProfileErrorCode
from domain.entities.profile import PrivacyMode
from domain.entities.result import Err, Ok
from domain.services.profile_store import ProfileStore


@pytest.fixture
def store() -> ProfileStore:
    return ProfileStore()


@pytest.fixture
def u1() -> UUID:
    return uuid4()


@pytest.fixture
def u2() -> UUID:
    return uuid4()


def _read(store: ProfileStore, target: UUID, requester: UUID | None = None):
    result = store.get_profile_info(target, target if requester is None else requester)
    assert isinstance(result, Ok)
    return result.value


class TestCreateScenario:
    def test_create_then_duplicate(self, store: ProfileStore, u1: UUID):
        assert store.create(u1, "testuser", "oily", ["reduce acne", "moisturize"]) == Ok(True)
        assert store.profile_exists(u1) is True

        second = store.create(u1, "testuser2", "dry", ["hydration", "glow"])

        assert second == Err(ProfileErrorCode.ALREADY_EXISTS)
        kept = _read(store, u1)
        assert kept.username == "testuser"
        assert kept.skin_type == "oily"
        assert kept.goals == ["reduce acne", "moisturize"]

    def test_invalid_creates_leave_store_empty(self, store: ProfileStore, u1: UUID):
        assert store.create(u1, "", "oily", ["reduce acne"]) == Err(
            ProfileErrorCode.INVALID_INPUT
        )
        six = ["goal1", "goal2", "goal3", "goal4", "goal5", "goal6"]
        assert store.create(u1, "testuser", "oily", six) == Err(ProfileErrorCode.INVALID_INPUT)

        assert store.profile_exists(u1) is False
        assert len(store) == 0

    def test_new_profiles_are_private(self, store: ProfileStore, u1: UUID):
        store.create(u1, "testuser", "oily", [])

        assert _read(store, u1).privacy_mode is PrivacyMode.PRIVATE


class TestUpdate:
    def test_partial_update(self, store: ProfileStore, u1: UUID):
        store.create(u1, "alice", "oily", ["reduce acne"])

        assert store.update(u1, skin_type="dry") == Ok(True)

        profile = _read(store, u1)
        assert profile.username == "alice"
        assert profile.goals == ["reduce acne"]
        assert profile.skin_type == "dry"

    def test_invalid_update_is_atomic(self, store: ProfileStore, u1: UUID):
        store.create(u1, "alice", "oily", ["reduce acne"])

        result = store.update(u1, username="bob", goals=["a", "b", "c", "d", "e", "f"])

        assert result == Err(ProfileErrorCode.INVALID_INPUT)
        profile = _read(store, u1)
        assert profile.username == "alice"
        assert profile.goals == ["reduce acne"]

    def test_update_without_profile(self, store: ProfileStore, u1: UUID):
        assert store.update(u1, username="x") == Err(ProfileErrorCode.NOT_FOUND)

    def test_update_keeps_privacy_mode(self, store: ProfileStore, u1: UUID):
        store.create(u1, "alice", "oily", [])
        store.set_privacy_mode(u1, 1)

        store.update(u1, username="alice2")

        assert _read(store, u1).privacy_mode is PrivacyMode.PUBLIC


class TestSelfService:
    def test_other_caller_cannot_touch_profile(self, store: ProfileStore, u1: UUID, u2: UUID):
        store.create(u1, "testuser", "oily", ["reduce acne"])

        assert store.update(u2, username="hacked-username") == Err(ProfileErrorCode.NOT_FOUND)
        assert store.set_privacy_mode(u2, 1) == Err(ProfileErrorCode.NOT_FOUND)
        assert store.delete(u2) == Err(ProfileErrorCode.NOT_FOUND)

        profile = _read(store, u1)
        assert profile.username == "testuser"
        assert profile.privacy_mode is PrivacyMode.PRIVATE
        assert store.profile_exists(u1) is True

    def test_other_callers_own_profile_is_separate(
        self, store: ProfileStore, u1: UUID, u2: UUID
    ):
        store.create(u1, "one", "oily", [])
        store.create(u2, "two", "dry", [])

        store.update(u2, username="two-renamed")
        store.delete(u2)

        assert _read(store, u1).username == "one"
        assert store.profile_exists(u2) is False


class TestPrivacyGate:
    def test_toggle_controls_visibility(self, store: ProfileStore, u1: UUID, u2: UUID):
        store.create(u1, "testuser", "oily", ["reduce acne", "moisturize"])

        assert store.get_profile_info(u1, u2) == Err(ProfileErrorCode.UNAUTHORIZED)

        assert store.set_privacy_mode(u1, 1) == Ok(True)
        public = store.get_profile_info(u1, u2)
        assert isinstance(public, Ok)
        assert public.value.username == "testuser"

        assert store.set_privacy_mode(u1, 2) == Ok(True)
        assert store.get_profile_info(u1, u2) == Err(ProfileErrorCode.UNAUTHORIZED)

    def test_owner_always_reads(self, store: ProfileStore, u1: UUID):
        store.create(u1, "testuser", "oily", [])

        assert isinstance(store.get_profile_info(u1, u1), Ok)

    def test_anonymous_reads_public_only(self, store: ProfileStore, u1: UUID):
        store.create(u1, "testuser", "oily", [])
        assert store.get_profile_info(u1, None) == Err(ProfileErrorCode.UNAUTHORIZED)

        store.set_privacy_mode(u1, 1)
        assert isinstance(store.get_profile_info(u1, None), Ok)

    def test_absent_is_not_forbidden(self, store: ProfileStore, u1: UUID, u2: UUID):
        assert store.get_profile_info(u1, u2) == Err(ProfileErrorCode.NOT_FOUND)

    def test_invalid_mode_leaves_profile_unchanged(self, store: ProfileStore, u1: UUID):
        store.create(u1, "testuser", "oily", [])

        assert store.set_privacy_mode(u1, 7) == Err(ProfileErrorCode.INVALID_INPUT)
        assert _read(store, u1).privacy_mode is PrivacyMode.PRIVATE

    def test_read_result_does_not_alias_store(self, store: ProfileStore, u1: UUID):
        store.create(u1, "testuser", "oily", ["reduce acne"])

        _read(store, u1).goals.append("glow")

        assert _read(store, u1).goals == ["reduce acne"]


class TestExistenceRoundTrip:
    def test_create_delete_recreate(self, store: ProfileStore, u1: UUID):
        assert store.profile_exists(u1) is False

        store.create(u1, "testuser", "oily", ["reduce acne"])
        store.set_privacy_mode(u1, 1)
        assert store.profile_exists(u1) is True

        assert store.delete(u1) == Ok(True)
        assert store.profile_exists(u1) is False
        assert store.get_profile_info(u1, u1) == Err(ProfileErrorCode.NOT_FOUND)
        assert store.delete(u1) == Err(ProfileErrorCode.NOT_FOUND)

        assert store.create(u1, "fresh", "dry", []) == Ok(True)
        recreated = _read(store, u1)
        assert recreated.username == "fresh"
        assert recreated.goals == []
        assert recreated.privacy_mode is PrivacyMode.PRIVATE


def test_concurrent_creates_admit_exactly_one(store: ProfileStore, u1: UUID):
    results = []
    barrier = threading.Barrier(8)

    def attempt(n: int) -> None:
        barrier.wait()
        results.append(store.create(u1, f"user{n}", "oily", []))

    threads = [threading.Thread(target=attempt, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(Ok(True)) == 1
    assert results.count(Err(ProfileErrorCode.ALREADY_EXISTS)) == 7
