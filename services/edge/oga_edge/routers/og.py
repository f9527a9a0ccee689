from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from oga_edge.invite_preview import PreviewConfig
from oga_edge.og_html import absolute_url
from oga_edge.og_meta import resolve_og_metadata


router = APIRouter(prefix="/api/og", tags=["og"])


class OgMetadataOut(BaseModel):
    kind: Literal["character", "library"]
    title: str
    description: str
    image: str
    url: str
    character_name: str | None = None


class CharacterOut(BaseModel):
    id: str
    name: str
    title: str
    description: str
    ip: str
    rarity: str
    image: str


def _preview_config(request: Request) -> PreviewConfig:
    return request.app.state.preview_config


def _metadata_out(
    request: Request, invite_code: str, character_id: str | None
) -> OgMetadataOut:
    cfg = _preview_config(request)
    meta = resolve_og_metadata(
        invite_code,
        character_id,
        catalog=cfg.catalog,
        brand=cfg.brand,
        route=cfg.route,
    )
    return OgMetadataOut(
        kind=meta.kind,
        title=meta.title,
        description=meta.description,
        image=absolute_url(meta.image, base_url=cfg.brand.base_url),
        url=meta.url,
        character_name=meta.character_name,
    )


@router.get("/invite/{invite_code}", response_model=OgMetadataOut)
def invite_metadata(invite_code: str, request: Request, response: Response) -> OgMetadataOut:
    response.headers["Cache-Control"] = "no-store"
    return _metadata_out(request, invite_code, None)


@router.get("/invite/{invite_code}/{character_id}", response_model=OgMetadataOut)
def invite_character_metadata(
    invite_code: str, character_id: str, request: Request, response: Response
) -> OgMetadataOut:
    response.headers["Cache-Control"] = "no-store"
    return _metadata_out(request, invite_code, character_id)


@router.get("/characters", response_model=list[CharacterOut])
def list_characters(request: Request) -> list[CharacterOut]:
    cfg = _preview_config(request)
    return [
        CharacterOut(
            id=c.id,
            name=c.name,
            title=c.title,
            description=c.description,
            ip=c.ip,
            rarity=c.rarity,
            image=absolute_url(c.image, base_url=cfg.brand.base_url),
        )
        for c in cfg.catalog
    ]
