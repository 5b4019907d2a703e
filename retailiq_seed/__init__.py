"""RetailIQ Seed — synthetic catalog, platform price and price history seeding."""

__version__ = "0.1.0"
