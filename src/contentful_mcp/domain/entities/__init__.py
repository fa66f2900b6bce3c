"""Domain entities for normalized Contentful content."""

from .content import (
    Asset,
    BlogPost,
    ContentEntity,
    ContentType,
    EboardMember,
    Hackathon,
    HackathonStatus,
    LandingPageGraphic,
    Meeting,
    MemberType,
    ParallaxBanner,
)

__all__ = [
    "Asset",
    "BlogPost",
    "ContentEntity",
    "ContentType",
    "EboardMember",
    "Hackathon",
    "HackathonStatus",
    "LandingPageGraphic",
    "Meeting",
    "MemberType",
    "ParallaxBanner",
]
