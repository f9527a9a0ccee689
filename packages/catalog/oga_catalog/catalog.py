from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


_STORAGE_BASE = "https://jmbzrbteizvuqwukojzu.supabase.co/storage/v1/object/public"


@dataclass(frozen=True)
class Character:
    id: str
    name: str
    title: str
    description: str
    ip: str
    rarity: str
    image: str  # absolute, or a path joined to BrandConfig.base_url


@dataclass(frozen=True)
class BrandConfig:
    site_name: str
    default_title: str
    default_description: str
    default_image: str
    theme_color: str
    base_url: str
    short_name: str = "OGA"


class CharacterCatalog:
    """Read-only character table keyed by lowercase id."""

    def __init__(self, characters: Iterable[Character] = ()) -> None:
        entries: dict[str, Character] = {}
        for character in characters:
            key = str(character.id or "").strip().lower()
            if not key:
                raise ValueError("character id must be non-empty")
            if key in entries:
                raise ValueError(f"duplicate character id: {key!r}")
            entries[key] = character
        self._entries: Mapping[str, Character] = MappingProxyType(entries)

    def get(self, character_id: str | None) -> Character | None:
        key = str(character_id or "").strip().lower()
        if not key:
            return None
        return self._entries.get(key)

    def __contains__(self, character_id: object) -> bool:
        return isinstance(character_id, str) and self.get(character_id) is not None

    def __iter__(self) -> Iterator[Character]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def ids(self) -> list[str]:
        return list(self._entries.keys())


CHARACTERS: dict[str, Character] = {
    "ryu": Character(
        id="ryu",
        name="Ryu",
        title="THE ETERNAL WARRIOR",
        description=(
            "A disciplined martial artist seeking true strength. Master of "
            "Ansatsuken with powerful strikes and precise technique."
        ),
        ip="Street Fighter",
        rarity="Legendary",
        image=f"{_STORAGE_BASE}/characters/heroes/ryu.png",
    ),
    "vegeta": Character(
        id="vegeta",
        name="Vegeta",
        title="THE SAIYAN PRINCE",
        description=(
            "The Prince of all Saiyans. Royal pride with devastating power, "
            "constantly pushing beyond his limits."
        ),
        ip="Dragon Ball Z",
        rarity="Legendary",
        image=f"{_STORAGE_BASE}/characters/heroes/vegeta.png",
    ),
    "guggimon": Character(
        id="guggimon",
        name="Guggimon",
        title="THE FASHION HORROR",
        description=(
            "A fashion-obsessed horror bunny from the metaverse. Iconic, "
            "unpredictable, and always dripping in style."
        ),
        ip="Superplastic",
        rarity="Epic",
        image=f"{_STORAGE_BASE}/characters/heroes/guggimon.png",
    ),
}


DEFAULT_BRAND = BrandConfig(
    site_name="OGA — Ownable Game Assets",
    default_title="Join OGA — One Character. Infinite Worlds.",
    default_description=(
        "Collect, trade, and play with unique heroes across multiple games. "
        "Your characters persist forever."
    ),
    default_image=f"{_STORAGE_BASE}/oga-filles/og-link.png",
    theme_color="#39FF14",
    base_url="https://oga.oneearthrising.com",
    short_name="OGA",
)


def default_catalog() -> CharacterCatalog:
    return CharacterCatalog(CHARACTERS.values())
