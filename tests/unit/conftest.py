"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from domain.entities.profile import Profile, SocialLinks


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def sample_profile() -> Profile:
    """A stored company profile."""
    return Profile(
        id=uuid4(),
        username="Acme Studio",
        name="Acme",
        job_title="Design agency",
        phone="+1 555 0100",
        email="hello@acme.example",
        is_company=True,
        is_verified=True,
        social_links=SocialLinks(website="https://acme.example"),
        created_at=datetime(2026, 1, 28, 10, 0, 0),
        updated_at=datetime(2026, 1, 28, 10, 0, 0),
    )
