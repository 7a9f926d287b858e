"""
catalog/ - System catalog files and lookup.
"""

from .schema import BOMItemRecord, SubsystemRecord, OrbitalSystemRecord, CatalogFile
from .loaders import Catalog, parse_catalog, load_catalog, load_default_catalog

__all__ = [
    "BOMItemRecord",
    "SubsystemRecord",
    "OrbitalSystemRecord",
    "CatalogFile",
    "Catalog",
    "parse_catalog",
    "load_catalog",
    "load_default_catalog",
]
