"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, CheckConstraint, DateTime, SmallInteger, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.entities.profile import (
    SKIN_TYPE_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    PrivacyMode,
)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Skincare profile model, one row per owning identity."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(
            f"privacy_mode IN ({PrivacyMode.PUBLIC.value}, {PrivacyMode.PRIVATE.value})",
            name="ck_profiles_privacy_mode",
        ),
        CheckConstraint("length(username) > 0", name="ck_profiles_username_not_empty"),
        CheckConstraint("length(skin_type) > 0", name="ck_profiles_skin_type_not_empty"),
    )

    owner_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    username: Mapped[str] = mapped_column(String(USERNAME_MAX_LENGTH), nullable=False)
    skin_type: Mapped[str] = mapped_column(String(SKIN_TYPE_MAX_LENGTH), nullable=False)
    goals: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    privacy_mode: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=PrivacyMode.PRIVATE.value,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
