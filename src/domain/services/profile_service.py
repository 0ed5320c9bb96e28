"""Profile service layer with business logic."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.exceptions import (
    ONLY_COMPANIES_VERIFIED_MESSAGE,
    USERNAME_TOO_SHORT_MESSAGE,
    ConflictError,
    ErrorCode,
    InternalError,
    NotFoundError,
    UnverifiableProfileError,
    UsernameTooShortError,
)
from domain.entities.profile import Profile, SocialLinks, delete_lookup_key
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


@dataclass
class ProfileData:
    """Writable profile fields as submitted by a client.

    Used for both create and update; on update every field is written,
    so anything left at its default clears the stored value.
    """

    username: Optional[str] = None
    name: Optional[str] = None
    job_title: Optional[str] = None
    profile_image: Optional[str] = None
    header_image: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_verified: bool = False
    is_company: bool = False
    social_links: Optional[SocialLinks] = None


@dataclass(frozen=True, slots=True)
class CreatedProfile:
    """Read-only value object: a newly stored profile and its derived key."""

    profile: Profile
    profile_key: str


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else str(exc).lower()
    return "unique" in orig or "duplicate" in orig


def _is_verification_violation(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else str(exc).lower()
    return "ck_profiles_verified_company" in orig or "check constraint" in orig


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, data: ProfileData) -> CreatedProfile:
        """Store a new profile and return it with its derived profile key."""
        profile = Profile(
            username=data.username or "",
            name=data.name,
            job_title=data.job_title,
            profile_image=data.profile_image,
            header_image=data.header_image,
            phone=data.phone,
            email=data.email,
            is_company=data.is_company,
            is_verified=data.is_verified,
            social_links=data.social_links or SocialLinks(),
        )
        if not profile.has_valid_username:
            raise UsernameTooShortError()
        if not profile.has_valid_verification:
            raise UnverifiableProfileError()

        try:
            async with self._uow_factory() as uow:
                existing = await uow.profiles.get_by_username(profile.username)
                if existing:
                    raise ConflictError()

                try:
                    created = await uow.profiles.create(profile)
                    await uow.commit()
                except IntegrityError as exc:
                    await uow.rollback()
                    if _is_unique_violation(exc):
                        # Lost the race between the existence check and the insert.
                        logger.info("profile_create_conflict", username=profile.username)
                        raise ConflictError(
                            "Profile key or username already exists.",
                            ErrorCode.DUPLICATE_KEY,
                        ) from exc
                    if _is_verification_violation(exc):
                        raise UnverifiableProfileError() from exc
                    raise
        except SQLAlchemyError as exc:
            logger.error("profile_create_failed", error=str(exc))
            raise InternalError("Server error", error=str(exc)) from exc

        # Key comes from the stored, trimmed username.
        logger.info("profile_created", username=created.username, profile_key=created.profile_key)
        return CreatedProfile(profile=created, profile_key=created.profile_key)

    async def list_all(self) -> List[Profile]:
        """Get every stored profile, unfiltered and unpaginated."""
        try:
            async with self._uow_factory() as uow:
                return await uow.profiles.get_all()  # type: ignore[no-any-return]
        except SQLAlchemyError as exc:
            logger.error("profile_list_failed", error=str(exc))
            raise InternalError(str(exc)) from exc

    async def get(self, profile_key: str) -> Profile:
        """Get a profile whose username is exactly ``profile_key``."""
        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get_by_username(profile_key)
        except SQLAlchemyError as exc:
            logger.error("profile_fetch_failed", profile_key=profile_key, error=str(exc))
            raise InternalError("Error fetching profile", error=str(exc)) from exc

        if not profile:
            raise NotFoundError(profile_key)
        return profile  # type: ignore[no-any-return]

    async def update(self, profile_key: str, data: ProfileData) -> Profile:
        """Replace every field of the profile matching ``profile_key`` ignoring case.

        Omitted fields are cleared. An omitted username keeps the stored one.
        """
        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.find_by_username_ci(profile_key)
                if not profile:
                    raise NotFoundError(profile_key)

                replacement = Profile(
                    id=profile.id,
                    username=data.username if data.username is not None else profile.username,
                    name=data.name,
                    job_title=data.job_title,
                    profile_image=data.profile_image,
                    header_image=data.header_image,
                    phone=data.phone,
                    email=data.email,
                    is_company=data.is_company,
                    is_verified=data.is_verified,
                    social_links=data.social_links or SocialLinks(),
                    created_at=profile.created_at,
                    updated_at=datetime.utcnow(),
                )
                if not replacement.has_valid_username:
                    raise InternalError("Error updating profile", error=USERNAME_TOO_SHORT_MESSAGE)
                if not replacement.has_valid_verification:
                    raise InternalError(
                        "Error updating profile", error=ONLY_COMPANIES_VERIFIED_MESSAGE
                    )

                updated = await uow.profiles.replace(replacement)
                await uow.commit()
        except SQLAlchemyError as exc:
            logger.error("profile_update_failed", profile_key=profile_key, error=str(exc))
            raise InternalError("Error updating profile", error=str(exc)) from exc

        logger.info("profile_updated", profile_key=profile_key, username=updated.username)
        return updated  # type: ignore[no-any-return]

    async def delete(self, profile_key: str) -> None:
        """Delete the profile addressed by ``profile_key``.

        Only the first hyphen of the key is read as a space before a
        case-insensitive match, so usernames that contain hyphens (or more
        than one space) cannot be deleted through their key.
        """
        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.find_by_username_ci(delete_lookup_key(profile_key))
                if not profile:
                    raise NotFoundError(profile_key)

                deleted = await uow.profiles.delete(profile)
                if not deleted:
                    raise NotFoundError(profile_key)
                await uow.commit()
        except SQLAlchemyError as exc:
            logger.error("profile_delete_failed", profile_key=profile_key, error=str(exc))
            raise InternalError(str(exc)) from exc

        logger.info("profile_deleted", profile_key=profile_key, username=profile.username)
