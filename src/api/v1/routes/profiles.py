"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser, OptionalUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse, SuccessResponse
from api.v1.schemas.profile import (
    PrivacyModeUpdate,
    ProfileCreate,
    ProfileDetailResponse,
    ProfileResponse,
    ProfileUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create your profile",
    responses={
        201: {"description": "Profile created in private mode"},
        400: {
            "model": ErrorResponse,
            "description": "Empty username or skin type, or more than 5 goals",
        },
        409: {"model": ErrorResponse, "description": "You already have a profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Create the caller's profile. New profiles start private."""
    created = await service.create(
        caller=user.id,
        username=body.username,
        skin_type=body.skin_type,
        goals=body.goals,
    )
    return SuccessResponse(data=created)


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get your profile",
    responses={404: {"model": ErrorResponse, "description": "You have no profile"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the caller's own profile regardless of privacy mode."""
    profile = await service.get_profile_info(user.id, user.id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.patch(
    "/me",
    response_model=SuccessResponse,
    summary="Update your profile",
    responses={
        200: {"description": "Profile updated"},
        400: {
            "model": ErrorResponse,
            "description": "A provided field is invalid; nothing was changed",
        },
        404: {"model": ErrorResponse, "description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_my_profile(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Replace any provided fields. Fields left out keep their current value."""
    updated = await service.update(
        caller=user.id,
        username=body.username,
        skin_type=body.skin_type,
        goals=body.goals,
    )
    return SuccessResponse(data=updated)


@router.put(
    "/me/privacy",
    response_model=SuccessResponse,
    summary="Set your profile visibility",
    responses={
        200: {"description": "Privacy mode updated"},
        400: {"model": ErrorResponse, "description": "Unknown privacy mode"},
        404: {"model": ErrorResponse, "description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def set_privacy_mode(
    request: Request,
    body: PrivacyModeUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Set privacy mode: 1 makes the profile public, 2 makes it private."""
    changed = await service.set_privacy_mode(user.id, body.mode)
    return SuccessResponse(data=changed)


@router.delete(
    "/me",
    response_model=SuccessResponse,
    summary="Delete your profile",
    responses={
        200: {"description": "Profile deleted"},
        404: {"model": ErrorResponse, "description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Delete the caller's profile. A new one can be created afterwards."""
    deleted = await service.delete(user.id)
    return SuccessResponse(data=deleted)


@router.get(
    "/{owner_id}/exists",
    response_model=SuccessResponse,
    summary="Check whether a user has a profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def profile_exists(
    request: Request,
    owner_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Report whether a profile exists. Needs no authentication."""
    exists = await service.profile_exists(owner_id)
    return SuccessResponse(data=exists)


@router.get(
    "/{owner_id}",
    response_model=ProfileDetailResponse,
    summary="Get a user's profile",
    responses={
        403: {"model": ErrorResponse, "description": "The profile is private"},
        404: {"model": ErrorResponse, "description": "No profile for this user"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    owner_id: UUID,
    user: OptionalUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a profile. Private profiles are visible to their owner only."""
    requester = user.id if user else None
    profile = await service.get_profile_info(owner_id, requester)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))
