"""
Domain Entities: normalized Contentful content.

Six content types are exposed. Each record is an immutable snapshot built
by the normalizer from one raw entry; a new fetch produces new records.

Architecture Decision:
    Plain frozen dataclasses rather than Pydantic models. Records never
    validate input: a raw entry missing a field yields a record with that
    field set to ``None``.

Field names are snake_case in Python; ``to_dict()`` emits the camelCase
names used by the Contentful content model so tool output matches what
editors see in the web app.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ContentType(str, Enum):
    """Contentful content type ids queried by the resolvers."""

    BLOG_POST = "blogPost"
    MEETING = "meeting"
    UPCOMING_MEETING = "upcomingMeeting"
    EBOARD_MEMBER = "eboardMember"
    HACKATHON = "hackathon"
    LANDING_PAGE_GRAPHICS = "landingPageGraphics"
    PARALLAX_BANNER = "parallaxBanner"


class HackathonStatus(str, Enum):
    """Lifecycle partition of a hackathon."""

    ONGOING = "ongoing"
    UPCOMING = "upcoming"
    PAST = "past"


class MemberType(str, Enum):
    """Tenure partition of an eboard member."""

    CURRENT = "current"
    PAST = "past"


@dataclass(frozen=True)
class Asset:
    """A linked media file (image, slide deck, ...)."""

    id: str | None = None
    title: str | None = None
    url: str | None = None
    file_name: str | None = None
    content_type: str | None = None
    width: int | None = None
    height: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "fileName": self.file_name,
            "contentType": self.content_type,
            "width": self.width,
            "height": self.height,
        }


def _asset_url(asset: Asset | None) -> str | None:
    return asset.url if asset else None


@dataclass(frozen=True)
class BlogPost:
    id: str | None
    content_type_id: str
    title: str | None = None
    slug: str | None = None
    content: dict[str, Any] | None = None
    excerpt: str | None = None
    author: str | None = None
    publish_date: str | None = None
    cover_image: Asset | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def cover_image_url(self) -> str | None:
        return _asset_url(self.cover_image)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "title": self.title,
            "slug": self.slug,
            "excerpt": self.excerpt,
            "author": self.author,
            "publishDate": self.publish_date,
            "coverImageUrl": self.cover_image_url,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class Meeting:
    """A club meeting; ``content_type_id`` tells general from upcoming."""

    id: str | None
    content_type_id: str
    title: str | None = None
    date: str | None = None
    description: str | None = None
    image: Asset | None = None
    meeting_location: str | None = None
    slides: Asset | None = None
    slides_url: str | None = None
    recording: str | None = None
    resources_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def image_url(self) -> str | None:
        return _asset_url(self.image)

    @property
    def is_upcoming(self) -> bool:
        return self.content_type_id == ContentType.UPCOMING_MEETING.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "title": self.title,
            "date": self.date,
            "description": self.description,
            "meetingLocation": self.meeting_location,
            "slidesUrl": self.slides_url,
            "slidesFileUrl": _asset_url(self.slides),
            "recording": self.recording,
            "resourcesUrl": self.resources_url,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class EboardMember:
    id: str | None
    content_type_id: str
    name: str | None = None
    position: str | None = None
    description: str | None = None
    linkedin: str | None = None
    member_type: str | None = None
    github: str | None = None
    year: str | None = None
    image: Asset | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def image_url(self) -> str | None:
        return _asset_url(self.image)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "name": self.name,
            "position": self.position,
            "description": self.description,
            "linkedin": self.linkedin,
            "github": self.github,
            "year": self.year,
            "memberType": self.member_type,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class Hackathon:
    """
    A hackathon event.

    ``status`` is the raw stored value and stays ``None`` for older entries
    that predate the field. Partitioning by status is done by the resolver
    through ``classify_hackathon_status``.
    """

    id: str | None
    content_type_id: str
    title: str | None = None
    description: str | None = None
    slug: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    status: str | None = None
    registration_link: str | None = None
    details: dict[str, Any] | None = None
    image: Asset | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def image_url(self) -> str | None:
        return _asset_url(self.image)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "status": self.status,
            "registrationLink": self.registration_link,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class LandingPageGraphic:
    """
    A landing page graphic.

    Some entries store their file under ``graphic`` instead of ``image``.
    The normalizer backfills ``image`` from ``graphic`` and resolves a
    single ``image_url`` with ``image`` taking priority.
    """

    id: str | None
    content_type_id: str
    title: str | None = None
    description: str | None = None
    image: Asset | None = None
    graphic: Asset | None = None
    image_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
        }


@dataclass(frozen=True)
class ParallaxBanner:
    id: str | None
    content_type_id: str
    title: str | None = None
    image: Asset | None = None
    link: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def image_url(self) -> str | None:
        return _asset_url(self.image)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contentTypeId": self.content_type_id,
            "title": self.title,
            "link": self.link,
            "imageUrl": self.image_url,
        }


ContentEntity = BlogPost | Meeting | EboardMember | Hackathon | LandingPageGraphic | ParallaxBanner
