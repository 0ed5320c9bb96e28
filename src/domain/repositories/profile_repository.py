"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_all(self) -> list[Profile]:
        """Get every profile in creation order."""
        ...

    async def get_by_username(self, username: str) -> Profile | None:
        """Get a profile by exact, case-sensitive username."""
        ...

    async def find_by_username_ci(self, username: str) -> Profile | None:
        """Get the first profile whose username equals ``username`` ignoring case."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        ...

    async def replace(self, profile: Profile) -> Profile:
        """Overwrite every field of an existing profile."""
        ...

    async def delete(self, profile: Profile) -> bool:
        """Delete a profile and return success status."""
        ...
