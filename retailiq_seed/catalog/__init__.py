from retailiq_seed.catalog.loader import (
    CatalogProduct,
    PricingCatalog,
    load_catalog,
    load_pricing_catalog,
)

__all__ = [
    "CatalogProduct",
    "PricingCatalog",
    "load_catalog",
    "load_pricing_catalog",
]
