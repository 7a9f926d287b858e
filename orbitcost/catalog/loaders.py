"""
catalog/loaders.py - Catalog loading and lookup.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union
import logging

from pydantic import ValidationError

from ..bom.items import OrbitalSystem
from ..core.enums import SystemCategory
from ..cost.rates import read_structured_file
from ..errors import InvalidInput
from ..lookup.classification import CategorySummary, category_summaries, parse_category
from .schema import CatalogFile

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_FILE = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


class Catalog:
    """
    Ordered, slug-indexed collection of orbital systems.

    Raises InvalidInput on duplicate slugs.
    """

    def __init__(self, systems: List[OrbitalSystem], version: str = "1"):
        self.version = version
        self._systems: Dict[str, OrbitalSystem] = {}
        for system in systems:
            if system.slug in self._systems:
                raise InvalidInput(f"Duplicate system slug '{system.slug}'", value=system.slug)
            self._systems[system.slug] = system

    def __len__(self) -> int:
        return len(self._systems)

    def __iter__(self) -> Iterator[OrbitalSystem]:
        return iter(self._systems.values())

    def __contains__(self, slug: str) -> bool:
        return slug in self._systems

    @property
    def slugs(self) -> List[str]:
        return list(self._systems)

    def get(self, slug: str) -> OrbitalSystem:
        """
        Look up a system by slug.

        Raises:
            InvalidInput: no system with that slug
        """
        try:
            return self._systems[slug]
        except KeyError:
            raise InvalidInput(
                f"Unknown system '{slug}'; catalog has: {', '.join(self._systems)}",
                value=slug,
            ) from None

    def by_category(self, category: Union[str, SystemCategory]) -> List[OrbitalSystem]:
        category = parse_category(category)
        return [s for s in self._systems.values() if s.category == category]

    def categories(self) -> List[CategorySummary]:
        """Category rows with labels and counts (zero counts included)."""
        return category_summaries(self._systems.values())


def parse_catalog(data: Dict[str, Any]) -> Catalog:
    """
    Build a Catalog from a dictionary in the catalog file layout.

    Raises:
        InvalidInput: data does not match the catalog schema
    """
    try:
        model = CatalogFile.model_validate(data)
    except ValidationError as e:
        raise InvalidInput(f"Invalid catalog: {e}") from e
    return Catalog([record.to_system() for record in model.systems], version=model.version)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog from a JSON or YAML file."""
    catalog = parse_catalog(read_structured_file(path))
    logger.info(f"Loaded catalog from {path} ({len(catalog)} systems)")
    return catalog


def load_default_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Catalog shipped with the package, or the one at ``path``."""
    return load_catalog(path or DEFAULT_CATALOG_FILE)
