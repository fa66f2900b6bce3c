"""
Field-variant resolution and fallback classification.

Small pure functions shared by the normalizer and the resolvers:

- ``resolve_image_field``: pick one image out of ``image`` / ``graphic``
  (priority: ``image`` first)
- ``classify_hackathon_status``: definite status for a possibly missing
  or unknown stored value (fallback: ``upcoming``)
- ``parse_timestamp``: tolerant ISO-8601 parsing used for client-side sorts
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from contentful_mcp.domain.entities import Asset, HackathonStatus

# Status assumed for entries that predate the status field or carry an unknown value
DEFAULT_HACKATHON_STATUS = HackathonStatus.UPCOMING


def resolve_image_field(image: Asset | None, graphic: Asset | None) -> tuple[Asset | None, str | None]:
    """
    Resolve the canonical image of a record that may use either field.

    Priority order:
        1. ``image`` when present (even if its file URL is missing)
        2. ``graphic``

    The URL follows the same order but only counts an asset with a file
    URL: if ``image`` has none and ``graphic`` has one, the URL comes from
    ``graphic``. When neither resolves the URL is ``None``.

    Returns:
        ``(asset, url)`` where ``asset`` is the value to expose as ``image``.
    """
    asset = image if image is not None else graphic

    url = None
    if image is not None and image.url:
        url = image.url
    elif graphic is not None and graphic.url:
        url = graphic.url
    return asset, url


def classify_hackathon_status(raw_status: Any) -> HackathonStatus:
    """
    Map a stored status value onto exactly one partition.

    >>> classify_hackathon_status("past")
    <HackathonStatus.PAST: 'past'>
    >>> classify_hackathon_status(" Ongoing ")
    <HackathonStatus.ONGOING: 'ongoing'>
    >>> classify_hackathon_status(None)
    <HackathonStatus.UPCOMING: 'upcoming'>
    >>> classify_hackathon_status("cancelled")
    <HackathonStatus.UPCOMING: 'upcoming'>
    """
    if isinstance(raw_status, HackathonStatus):
        return raw_status
    if not isinstance(raw_status, str):
        return DEFAULT_HACKATHON_STATUS
    try:
        return HackathonStatus(raw_status.strip().lower())
    except ValueError:
        return DEFAULT_HACKATHON_STATUS


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 date or datetime; ``None`` when unparseable."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
