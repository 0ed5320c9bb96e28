"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies import get_profile_service
from api.schemas.common import ErrorResponse, MessageResponse
from api.schemas.profile import ProfileResponse, ProfileSavedResponse, ProfileWrite
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["profiles"])


@router.post(
    "/api/save-profile",
    response_model=ProfileSavedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile saved successfully"},
        400: {"model": ErrorResponse, "description": "Invalid profile or username taken"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def save_profile(
    request: Request,
    body: ProfileWrite,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileSavedResponse:
    """Create a new profile. Usernames are trimmed and must be unique."""
    created = await service.create(body.to_data())
    return ProfileSavedResponse(
        message="Profile saved successfully",
        profile_key=created.profile_key,
    )


@router.get(
    "/",
    response_model=list[ProfileResponse],
    summary="List all profiles",
    responses={500: {"model": ErrorResponse}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Get every stored profile in creation order."""
    profiles = await service.list_all()
    return [ProfileResponse.model_validate(profile) for profile in profiles]


@router.get(
    "/{profile_key}",
    response_model=ProfileResponse,
    summary="Get a profile by username",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_key: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the profile whose username matches the path exactly."""
    profile = await service.get(profile_key)
    return ProfileResponse.model_validate(profile)


@router.put(
    "/api/update-profile/{profile_key}",
    response_model=ProfileResponse,
    summary="Replace a profile",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_key: str,
    body: ProfileWrite,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Overwrite all fields of a profile. Username matching ignores case."""
    profile = await service.update(profile_key, body.to_data())
    return ProfileResponse.model_validate(profile)


@router.delete(
    "/api/profiles/{profile_key}",
    response_model=MessageResponse,
    summary="Delete a profile",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_key: str,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete a profile by its key."""
    await service.delete(profile_key)
    return MessageResponse(message="Profile deleted successfully")
