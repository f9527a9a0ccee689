from __future__ import annotations

from dataclasses import replace

from oga_catalog import CharacterCatalog
from oga_edge.og_meta import resolve_og_metadata


def test_character_preview(catalog, brand) -> None:
    meta = resolve_og_metadata("OGA-9999", "vegeta", catalog=catalog, brand=brand)
    assert meta.kind == "character"
    assert meta.title == "Vegeta — THE SAIYAN PRINCE | OGA"
    assert meta.description.startswith("The Prince of all Saiyans.")
    assert meta.description.endswith(
        "View Vegeta in the OGA Multigameverse and see them across Dragon Ball Z and more."
    )
    assert meta.image.endswith("/characters/heroes/vegeta.png")
    assert meta.url == "https://oga.oneearthrising.com/#/invite/OGA-9999/vegeta"
    assert meta.character_name == "Vegeta"


def test_lookup_is_case_insensitive_but_url_keeps_caller_casing(catalog, brand) -> None:
    upper = resolve_og_metadata("OGA-1", "RYU", catalog=catalog, brand=brand)
    lower = resolve_og_metadata("OGA-1", "ryu", catalog=catalog, brand=brand)
    assert upper.kind == lower.kind == "character"
    assert upper.title == lower.title
    assert upper.image == lower.image
    assert upper.url.endswith("/#/invite/OGA-1/RYU")
    assert lower.url.endswith("/#/invite/OGA-1/ryu")


def test_library_preview_without_character(catalog, brand) -> None:
    meta = resolve_og_metadata("OGA-1234", None, catalog=catalog, brand=brand)
    assert meta.kind == "library"
    assert meta.title == brand.default_title
    assert meta.description == brand.default_description
    assert meta.image == brand.default_image
    assert meta.url == "https://oga.oneearthrising.com/#/invite/OGA-1234"
    assert meta.character_name is None


def test_unknown_character_degrades_to_library_preview(catalog, brand) -> None:
    plain = resolve_og_metadata("OGA-1234", None, catalog=catalog, brand=brand)
    unknown = resolve_og_metadata("OGA-1234", "unknown-hero", catalog=catalog, brand=brand)
    assert unknown.kind == "library"
    assert unknown.character_name is None
    assert (unknown.title, unknown.description, unknown.image) == (
        plain.title,
        plain.description,
        plain.image,
    )
    assert unknown.url == plain.url + "/unknown-hero"


def test_empty_catalog_still_resolves(brand) -> None:
    meta = resolve_og_metadata("X", "ryu", catalog=CharacterCatalog(), brand=brand)
    assert meta.kind == "library"
    assert meta.url.endswith("/#/invite/X/ryu")


def test_short_name_and_route_flow_into_metadata(catalog, brand) -> None:
    custom = replace(brand, short_name="OGA Beta", base_url="https://beta.example.com/")
    meta = resolve_og_metadata("C1", "guggimon", catalog=catalog, brand=custom, route="i")
    assert meta.title == "Guggimon — THE FASHION HORROR | OGA Beta"
    assert "in the OGA Beta Multigameverse" in meta.description
    assert meta.url == "https://beta.example.com/#/i/C1/guggimon"


def test_percent_encoded_id_is_decoded_for_lookup_only(catalog, brand) -> None:
    meta = resolve_og_metadata("OGA-1", "%52yu", catalog=catalog, brand=brand)
    assert meta.kind == "character"
    assert meta.character_name == "Ryu"
    assert meta.url.endswith("/#/invite/OGA-1/%52yu")
