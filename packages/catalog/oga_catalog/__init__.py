__all__ = [
    "CHARACTERS",
    "DEFAULT_BRAND",
    "BrandConfig",
    "Character",
    "CharacterCatalog",
    "catalog_hash",
    "default_catalog",
    "load_catalog_file",
    "parse_catalog",
]

from oga_catalog.catalog import (
    CHARACTERS,
    DEFAULT_BRAND,
    BrandConfig,
    Character,
    CharacterCatalog,
    default_catalog,
)
from oga_catalog.pack_loader import catalog_hash, load_catalog_file, parse_catalog
