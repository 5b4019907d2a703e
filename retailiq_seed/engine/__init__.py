from retailiq_seed.engine.festivals import (
    ANNUAL_FESTIVALS,
    AnnualFestival,
    FestivalCalendar,
    FestivalPeriod,
)
from retailiq_seed.engine.platform_pricing import PlatformListing, PlatformPriceSynthesizer
from retailiq_seed.engine.platform_rules import PlatformAssignment, PlatformRules
from retailiq_seed.engine.trajectory import (
    PriceHistoryRecord,
    PriceTrajectoryGenerator,
    SeriesParams,
)

__all__ = [
    "ANNUAL_FESTIVALS",
    "AnnualFestival",
    "FestivalCalendar",
    "FestivalPeriod",
    "PlatformAssignment",
    "PlatformListing",
    "PlatformPriceSynthesizer",
    "PlatformRules",
    "PriceHistoryRecord",
    "PriceTrajectoryGenerator",
    "SeriesParams",
]
