"""
Entity Normalizer - raw Contentful entries → typed records.

Each content type has one ``normalize_*`` function. The mapping is a
straight pass-through of matching fields plus:

- ``content_type_id`` is stamped from the type the resolver queried for,
  never read from the raw entry
- linked assets become ``Asset`` records
- landing page graphics get a single ``image_url`` and a backfilled ``image``

Normalization is pure and never raises: a malformed entry yields a record
whose missing fields are ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from contentful_mcp.domain.entities import (
    Asset,
    BlogPost,
    ContentEntity,
    ContentType,
    EboardMember,
    Hackathon,
    LandingPageGraphic,
    Meeting,
    ParallaxBanner,
)

from .classification import resolve_image_field


def _parts(raw: Any) -> tuple[Mapping[str, Any], Mapping[str, Any]]:
    """Split a raw entry into ``(sys, fields)``, tolerating junk."""
    if not isinstance(raw, Mapping):
        return {}, {}
    sys = raw.get("sys")
    fields = raw.get("fields")
    return (
        sys if isinstance(sys, Mapping) else {},
        fields if isinstance(fields, Mapping) else {},
    )


def _sys_values(sys: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "id": sys.get("id"),
        "created_at": sys.get("createdAt"),
        "updated_at": sys.get("updatedAt"),
    }


def _rich_text(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def parse_asset(raw: Any) -> Asset | None:
    """
    Build an ``Asset`` from an embedded asset object.

    Returns ``None`` for missing values and for links that were never
    resolved (a bare ``{"sys": {"type": "Link"}}`` has no ``fields``).
    """
    sys, fields = _parts(raw)
    if not fields:
        return None

    file = fields.get("file")
    file = file if isinstance(file, Mapping) else {}
    details = file.get("details")
    image = details.get("image") if isinstance(details, Mapping) else None
    image = image if isinstance(image, Mapping) else {}

    return Asset(
        id=sys.get("id"),
        title=fields.get("title"),
        url=file.get("url"),
        file_name=file.get("fileName"),
        content_type=file.get("contentType"),
        width=image.get("width"),
        height=image.get("height"),
    )


def normalize_blog_post(raw: Any, content_type_id: str = ContentType.BLOG_POST.value) -> BlogPost:
    sys, fields = _parts(raw)
    return BlogPost(
        content_type_id=content_type_id,
        title=fields.get("title"),
        slug=fields.get("slug"),
        content=_rich_text(fields.get("content")),
        excerpt=fields.get("excerpt"),
        author=fields.get("author"),
        publish_date=fields.get("publishDate"),
        cover_image=parse_asset(fields.get("coverImage")),
        **_sys_values(sys),
    )


def normalize_meeting(raw: Any, content_type_id: str = ContentType.MEETING.value) -> Meeting:
    """Used for both ``meeting`` and ``upcomingMeeting`` entries."""
    sys, fields = _parts(raw)
    return Meeting(
        content_type_id=content_type_id,
        title=fields.get("title"),
        date=fields.get("date"),
        description=fields.get("description"),
        image=parse_asset(fields.get("image")),
        meeting_location=fields.get("meetingLocation"),
        slides=parse_asset(fields.get("slides")),
        slides_url=fields.get("slidesUrl"),
        recording=fields.get("recording"),
        resources_url=fields.get("resourcesUrl"),
        **_sys_values(sys),
    )


def normalize_eboard_member(raw: Any, content_type_id: str = ContentType.EBOARD_MEMBER.value) -> EboardMember:
    sys, fields = _parts(raw)
    return EboardMember(
        content_type_id=content_type_id,
        name=fields.get("name"),
        position=fields.get("position"),
        description=fields.get("description"),
        linkedin=fields.get("linkedin"),
        member_type=fields.get("memberType"),
        github=fields.get("github"),
        year=fields.get("year"),
        image=parse_asset(fields.get("image")),
        **_sys_values(sys),
    )


def normalize_hackathon(raw: Any, content_type_id: str = ContentType.HACKATHON.value) -> Hackathon:
    """``status`` is copied as stored; an absent value stays ``None``."""
    sys, fields = _parts(raw)
    return Hackathon(
        content_type_id=content_type_id,
        title=fields.get("title"),
        description=fields.get("description"),
        slug=fields.get("slug"),
        start_date=fields.get("startDate"),
        end_date=fields.get("endDate"),
        status=fields.get("status"),
        registration_link=fields.get("registrationLink"),
        details=_rich_text(fields.get("details")),
        image=parse_asset(fields.get("image")),
        **_sys_values(sys),
    )


def normalize_landing_page_graphic(
    raw: Any,
    content_type_id: str = ContentType.LANDING_PAGE_GRAPHICS.value,
) -> LandingPageGraphic:
    sys, fields = _parts(raw)
    graphic = parse_asset(fields.get("graphic"))
    image, image_url = resolve_image_field(parse_asset(fields.get("image")), graphic)
    return LandingPageGraphic(
        content_type_id=content_type_id,
        title=fields.get("title"),
        description=fields.get("description"),
        image=image,
        graphic=graphic,
        image_url=image_url,
        **_sys_values(sys),
    )


def normalize_parallax_banner(raw: Any, content_type_id: str = ContentType.PARALLAX_BANNER.value) -> ParallaxBanner:
    sys, fields = _parts(raw)
    return ParallaxBanner(
        content_type_id=content_type_id,
        title=fields.get("title"),
        image=parse_asset(fields.get("image")),
        link=fields.get("link"),
        **_sys_values(sys),
    )


NORMALIZERS: dict[ContentType, Callable[[Any, str], ContentEntity]] = {
    ContentType.BLOG_POST: normalize_blog_post,
    ContentType.MEETING: normalize_meeting,
    ContentType.UPCOMING_MEETING: normalize_meeting,
    ContentType.EBOARD_MEMBER: normalize_eboard_member,
    ContentType.HACKATHON: normalize_hackathon,
    ContentType.LANDING_PAGE_GRAPHICS: normalize_landing_page_graphic,
    ContentType.PARALLAX_BANNER: normalize_parallax_banner,
}


def normalize(raw: Any, content_type: ContentType) -> ContentEntity:
    """Normalize ``raw`` as ``content_type`` and stamp that type on the record."""
    return NORMALIZERS[content_type](raw, content_type.value)
