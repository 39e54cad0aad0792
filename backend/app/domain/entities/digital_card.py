"""Domain entities for digital business cards."""

from dataclasses import dataclass, field
from enum import Enum


class CardTheme(str, Enum):
    """Visual theme of a card."""

    CLASSIC = "classic"
    MODERN = "modern"
    SLEEK = "sleek"
    FLAT = "flat"


class SocialFieldType(str, Enum):
    """Kinds of contact methods a card can list."""

    EMAIL = "email"
    PHONE = "phone"
    WEBSITE = "website"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    GITHUB = "github"
    YOUTUBE = "youtube"
    CUSTOM = "custom"


@dataclass
class SocialField:
    """One contact method on a card. ``value`` is not format-checked."""

    id: str
    type: SocialFieldType
    value: str
    label: str | None = None


@dataclass
class DigitalCard:
    """A shareable profile with a theme, contact fields and engagement counters.

    ``fields`` keeps display order and may contain duplicates.
    """

    id: str
    user_id: str
    title: str
    first_name: str
    last_name: str
    job_title: str = ""
    company: str = ""
    theme: CardTheme = CardTheme.CLASSIC
    color: str = "#3b82f6"
    prefix: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    preferred_name: str | None = None
    maiden_name: str | None = None
    pronouns: str | None = None
    department: str | None = None
    headline: str | None = None
    fields: list[SocialField] = field(default_factory=list)
    avatar_url: str | None = None
    cover_image_url: str | None = None
    views: int = 0
    unique_views: int = 0
    saves: int = 0

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def record_view(self) -> None:
        """Count one resolution of the card's public page."""
        self.views += 1
        self.unique_views += 1

    def record_save(self) -> None:
        self.saves += 1
