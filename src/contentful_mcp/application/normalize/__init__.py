"""Raw entry normalization and fallback classification."""

from .classification import (
    DEFAULT_HACKATHON_STATUS,
    classify_hackathon_status,
    parse_timestamp,
    resolve_image_field,
)
from .normalizer import (
    NORMALIZERS,
    normalize,
    normalize_blog_post,
    normalize_eboard_member,
    normalize_hackathon,
    normalize_landing_page_graphic,
    normalize_meeting,
    normalize_parallax_banner,
    parse_asset,
)

__all__ = [
    "DEFAULT_HACKATHON_STATUS",
    "NORMALIZERS",
    "classify_hackathon_status",
    "normalize",
    "normalize_blog_post",
    "normalize_eboard_member",
    "normalize_hackathon",
    "normalize_landing_page_graphic",
    "normalize_meeting",
    "normalize_parallax_banner",
    "parse_asset",
    "parse_timestamp",
    "resolve_image_field",
]
