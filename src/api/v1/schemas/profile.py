"""Pydantic schemas for Profile API.

Bodies only decode types. Length and count rules belong to the profile
rules so that every violation is reported as INVALID_INPUT (400).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from domain.entities.profile import PrivacyMode, Profile


class ProfileCreate(BaseModel):
    """Schema for creating a Profile."""

    username: str
    skin_type: str
    goals: list[str] = Field(default_factory=list)


class ProfileUpdate(BaseModel):
    """Schema for updating a Profile. Omitted or null fields are left unchanged."""

    username: str | None = None
    skin_type: str | None = None
    goals: list[str] | None = None


class PrivacyModeUpdate(BaseModel):
    """Schema for switching profile visibility (1 = public, 2 = private)."""

    mode: StrictInt


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "owner_id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "testuser",
                "skin_type": "oily",
                "goals": ["reduce acne", "moisturize"],
                "privacy_mode": 2,
                "privacy": "private",
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    owner_id: UUID
    username: str
    skin_type: str
    goals: list[str]
    privacy_mode: int
    privacy: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        mode = PrivacyMode(profile.privacy_mode)
        return cls(
            owner_id=profile.owner_id,
            username=profile.username,
            skin_type=profile.skin_type,
            goals=list(profile.goals),
            privacy_mode=mode.value,
            privacy=mode.name.lower(),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
