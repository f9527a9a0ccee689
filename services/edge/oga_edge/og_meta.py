from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from urllib.parse import unquote

from oga_catalog.catalog import BrandConfig, Character, CharacterCatalog

from oga_edge.invite_path import DEFAULT_INVITE_ROUTE


ResolutionKind = Literal["character", "library"]


@dataclass(frozen=True)
class OgMetadata:
    title: str
    description: str
    image: str
    url: str
    kind: ResolutionKind
    character_name: str | None = None


def invite_target_url(
    *,
    brand: BrandConfig,
    invite_code: str,
    character_id: str | None = None,
    route: str = DEFAULT_INVITE_ROUTE,
) -> str:
    # The SPA routes on the hash fragment.
    url = f"{brand.base_url.rstrip('/')}/#/{route}/{invite_code}"
    if character_id:
        url += f"/{character_id}"
    return url


def character_title(character: Character, brand: BrandConfig) -> str:
    return f"{character.name} — {character.title} | {brand.short_name}"


def character_description(character: Character, brand: BrandConfig) -> str:
    return (
        f"{character.description} View {character.name} in the "
        f"{brand.short_name} Multigameverse and see them across "
        f"{character.ip} and more."
    )


def resolve_og_metadata(
    invite_code: str,
    character_id: str | None,
    *,
    catalog: CharacterCatalog,
    brand: BrandConfig,
    route: str = DEFAULT_INVITE_ROUTE,
) -> OgMetadata:
    """
    Resolve preview metadata for an invite link.

    Never raises for unknown input: a missing or unrecognised character id
    yields the library-level preview. The target url keeps whatever character
    segment the caller supplied, in its original casing and percent-encoding;
    only the catalog lookup uses the decoded id.
    """
    url = invite_target_url(
        brand=brand, invite_code=invite_code, character_id=character_id, route=route
    )
    character = catalog.get(unquote(character_id)) if character_id else None
    if character is not None:
        return OgMetadata(
            title=character_title(character, brand),
            description=character_description(character, brand),
            image=character.image,
            url=url,
            kind="character",
            character_name=character.name,
        )
    return OgMetadata(
        title=brand.default_title,
        description=brand.default_description,
        image=brand.default_image,
        url=url,
        kind="library",
        character_name=None,
    )
