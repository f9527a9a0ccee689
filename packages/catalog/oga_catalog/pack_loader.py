from __future__ import annotations

import hashlib
import os
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

import orjson

from oga_catalog.catalog import Character, CharacterCatalog


_REQUIRED_FIELDS = tuple(f.name for f in fields(Character))


def _canonical_catalog_bytes(catalog: CharacterCatalog) -> bytes:
    rows = [asdict(c) for c in sorted(catalog, key=lambda c: c.id.lower())]
    return orjson.dumps(rows, option=orjson.OPT_SORT_KEYS)


def catalog_hash(catalog: CharacterCatalog) -> str:
    return hashlib.sha256(_canonical_catalog_bytes(catalog)).hexdigest()


def _character_from_obj(obj: Any, *, index: int) -> Character:
    if not isinstance(obj, dict):
        raise ValueError(f"characters[{index}] must be a JSON object")
    missing = [name for name in _REQUIRED_FIELDS if not str(obj.get(name) or "").strip()]
    if missing:
        raise ValueError(f"characters[{index}] is missing fields: {', '.join(missing)}")
    return Character(
        id=str(obj["id"]).strip().lower(),
        name=str(obj["name"]),
        title=str(obj["title"]),
        description=str(obj["description"]),
        ip=str(obj["ip"]),
        rarity=str(obj["rarity"]),
        image=str(obj["image"]).strip(),
    )


def parse_catalog(obj: Any) -> CharacterCatalog:
    """
    Build a catalog from a decoded pack.

    Accepts either ``{"characters": [...]}`` or a bare list of character
    objects. Each object needs every ``Character`` field.
    """
    if isinstance(obj, dict):
        obj = obj.get("characters")
    if not isinstance(obj, list):
        raise ValueError("character pack must be a list or an object with a 'characters' list")
    return CharacterCatalog(
        _character_from_obj(item, index=i) for i, item in enumerate(obj)
    )


def load_catalog_file(path: str | os.PathLike[str]) -> CharacterCatalog:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise ValueError(f"cannot read character pack {p}: {exc}") from exc
    try:
        obj = orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"character pack {p} is not valid JSON: {exc}") from exc
    return parse_catalog(obj)
