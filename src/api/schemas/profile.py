"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from domain.entities.profile import SocialLinks
from domain.services.profile_service import ProfileData


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON while accepting snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SocialLinksSchema(CamelModel):
    """Social links attached to a profile."""

    website: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    telegram: str | None = None
    tiktok: str | None = None
    youtube: str | None = None
    whatsapp: str | None = None
    maps: str | None = None
    snapchat: str | None = None


class ProfileWrite(CamelModel):
    """Schema for creating or fully replacing a Profile.

    Username length is checked by the service so the caller gets the
    profile-specific error message.
    """

    username: str | None = None
    name: str | None = None
    job_title: str | None = None
    profile_image: str | None = None
    header_image: str | None = None
    phone: str | None = None
    email: str | None = None
    is_verified: bool = False
    is_company: bool = False
    social_links: SocialLinksSchema | None = None

    def to_data(self) -> ProfileData:
        """Convert to the service-layer input."""
        return ProfileData(
            username=self.username,
            name=self.name,
            job_title=self.job_title,
            profile_image=self.profile_image,
            header_image=self.header_image,
            phone=self.phone,
            email=self.email,
            is_verified=self.is_verified,
            is_company=self.is_company,
            social_links=(
                SocialLinks(**self.social_links.model_dump()) if self.social_links else None
            ),
        )


class ProfileResponse(CamelModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "Acme Studio",
                "name": "Acme",
                "jobTitle": "Design agency",
                "profileImage": "https://cdn.example.com/acme.png",
                "headerImage": None,
                "phone": "+1 555 0100",
                "email": "hello@acme.example",
                "isCompany": True,
                "isVerified": True,
                "socialLinks": {"website": "https://acme.example", "instagram": "acme"},
                "createdAt": "2026-01-28T10:00:00",
                "updatedAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    username: str
    name: str | None = None
    job_title: str | None = None
    profile_image: str | None = None
    header_image: str | None = None
    phone: str | None = None
    email: str | None = None
    is_company: bool = False
    is_verified: bool = False
    social_links: SocialLinksSchema
    created_at: datetime
    updated_at: datetime


class ProfileSavedResponse(CamelModel):
    """Schema returned after a profile is created."""

    message: str
    profile_key: str
