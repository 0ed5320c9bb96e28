"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile, SocialLinks
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_all(self) -> list[Profile]:
        """Get every profile in creation order."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_by_username(self, username: str) -> Profile | None:
        """Get a profile by exact, case-sensitive username."""
        stmt = select(ProfileModel).where(ProfileModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_username_ci(self, username: str) -> Profile | None:
        """Get the oldest profile whose username equals ``username`` ignoring case."""
        model = await self._find_model_ci(username)
        return self._to_entity(model) if model else None

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def replace(self, profile: Profile) -> Profile:
        """Overwrite every field of an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.username = profile.username
        model.name = profile.name
        model.job_title = profile.job_title
        model.profile_image = profile.profile_image
        model.header_image = profile.header_image
        model.phone = profile.phone
        model.email = profile.email
        model.is_company = profile.is_company
        model.is_verified = profile.is_verified
        model.social_links = profile.social_links.to_dict()
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, profile: Profile) -> bool:
        """Delete a profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _find_model_ci(self, username: str) -> ProfileModel | None:
        # Anchored equality on lower(); the key is never treated as a pattern.
        stmt = (
            select(ProfileModel)
            .where(func.lower(ProfileModel.username) == username.lower())
            .order_by(ProfileModel.created_at)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            username=model.username,
            name=model.name,
            job_title=model.job_title,
            profile_image=model.profile_image,
            header_image=model.header_image,
            phone=model.phone,
            email=model.email,
            is_company=model.is_company,
            is_verified=model.is_verified,
            social_links=SocialLinks.from_dict(model.social_links),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            username=entity.username,
            name=entity.name,
            job_title=entity.job_title,
            profile_image=entity.profile_image,
            header_image=entity.header_image,
            phone=entity.phone,
            email=entity.email,
            is_company=entity.is_company,
            is_verified=entity.is_verified,
            social_links=entity.social_links.to_dict(),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
