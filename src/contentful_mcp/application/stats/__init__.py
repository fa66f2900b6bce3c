"""Count overview across content types."""

from .overview import COUNTED_LISTINGS, OVERVIEW_TITLE, ContentStatistics, StatsOverview

__all__ = ["COUNTED_LISTINGS", "OVERVIEW_TITLE", "ContentStatistics", "StatsOverview"]
