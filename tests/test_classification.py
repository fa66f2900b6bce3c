"""Tests for image field resolution, status classification and timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from contentful_mcp.application.normalize import (
    classify_hackathon_status,
    parse_timestamp,
    resolve_image_field,
)
from contentful_mcp.domain.entities import Asset, HackathonStatus


class TestClassifyHackathonStatus:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("ongoing", HackathonStatus.ONGOING),
            ("upcoming", HackathonStatus.UPCOMING),
            ("past", HackathonStatus.PAST),
            ("  PAST ", HackathonStatus.PAST),
            ("Ongoing", HackathonStatus.ONGOING),
        ],
    )
    def test_valid_values(self, raw, expected):
        assert classify_hackathon_status(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "cancelled", 3, ["past"]])
    def test_absent_or_invalid_is_upcoming(self, raw):
        assert classify_hackathon_status(raw) is HackathonStatus.UPCOMING

    def test_enum_passthrough(self):
        assert classify_hackathon_status(HackathonStatus.PAST) is HackathonStatus.PAST


class TestResolveImageField:
    def test_image_wins(self):
        image = Asset(id="i", url="//image.png")
        graphic = Asset(id="g", url="//graphic.png")
        assert resolve_image_field(image, graphic) == (image, "//image.png")

    def test_graphic_backfills(self):
        graphic = Asset(id="g", url="//graphic.png")
        assert resolve_image_field(None, graphic) == (graphic, "//graphic.png")

    def test_image_without_file_uses_graphic_url(self):
        image = Asset(id="i")
        graphic = Asset(id="g", url="//graphic.png")
        asset, url = resolve_image_field(image, graphic)
        assert asset is image
        assert url == "//graphic.png"

    def test_neither(self):
        assert resolve_image_field(None, None) == (None, None)


class TestParseTimestamp:
    def test_zulu(self):
        assert parse_timestamp("2024-03-01T10:00:00Z") == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)

    def test_date_only_assumed_utc(self):
        assert parse_timestamp("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "next tuesday", 20240301])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None
