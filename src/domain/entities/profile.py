"""Profile domain entity."""

import re
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

MIN_USERNAME_LENGTH = 3

_WHITESPACE_RUN = re.compile(r"\s+")


def derive_profile_key(username: str) -> str:
    """Lowercase the username and collapse each whitespace run into a hyphen."""
    return _WHITESPACE_RUN.sub("-", username.lower())


def delete_lookup_key(profile_key: str) -> str:
    """Turn a profile key back into a username for deletion.

    Only the first hyphen becomes a space, so ``"john-doe"`` finds
    ``"John Doe"`` but ``"mary-jane-doe"`` looks for ``"mary jane-doe"``.
    """
    return profile_key.replace("-", " ", 1)


@dataclass
class SocialLinks:
    """Optional social/contact links shown on a profile."""

    website: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    telegram: Optional[str] = None
    tiktok: Optional[str] = None
    youtube: Optional[str] = None
    whatsapp: Optional[str] = None
    maps: Optional[str] = None
    snapchat: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SocialLinks":
        """Build links from a stored document, ignoring unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, str]:
        """Document form: only links that are set."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class Profile:
    """Domain entity for a public person or company profile."""

    username: str
    name: Optional[str] = None
    job_title: Optional[str] = None
    profile_image: Optional[str] = None
    header_image: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_company: bool = False
    is_verified: bool = False
    social_links: SocialLinks = field(default_factory=SocialLinks)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Trim the username the way it is stored."""
        self.username = self.username.strip()

    @property
    def profile_key(self) -> str:
        # Derived from the trimmed username: "  ann  " gives "ann", never "-ann-".
        return derive_profile_key(self.username)

    @property
    def has_valid_username(self) -> bool:
        return len(self.username) >= MIN_USERNAME_LENGTH

    @property
    def has_valid_verification(self) -> bool:
        """Only companies may carry the verified badge."""
        return not self.is_verified or self.is_company
