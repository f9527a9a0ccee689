from __future__ import annotations

from dataclasses import dataclass

from fastapi.responses import HTMLResponse

from oga_catalog.catalog import BrandConfig, CharacterCatalog

from oga_edge.crawlers import CRAWLER_PATTERNS, is_crawler
from oga_edge.invite_path import DEFAULT_INVITE_ROUTE, parse_invite_path
from oga_edge.og_html import render_og_html
from oga_edge.og_meta import OgMetadata, resolve_og_metadata


HTML_CONTENT_TYPE = "text/html;charset=utf-8"


@dataclass(frozen=True)
class PreviewConfig:
    """Process-wide, read-only inputs for invite previews (built once at startup)."""

    catalog: CharacterCatalog
    brand: BrandConfig
    patterns: tuple[str, ...] = CRAWLER_PATTERNS
    route: str = DEFAULT_INVITE_ROUTE
    cache_max_age: int = 3600


@dataclass(frozen=True)
class InvitePreview:
    metadata: OgMetadata
    invite_code: str
    character_id: str | None
    response: HTMLResponse


def build_invite_preview(
    *, user_agent: str | None, path: str, config: PreviewConfig
) -> InvitePreview | None:
    """
    Decide between passing the request through and serving a crawler preview.

    Returns ``None`` for pass-through: the user agent is not a known
    link-preview fetcher, or the path is not shaped like an invite link.
    """
    if not is_crawler(user_agent, config.patterns):
        return None

    parsed = parse_invite_path(path, route=config.route)
    if not parsed.matched or parsed.invite_code is None:
        return None

    metadata = resolve_og_metadata(
        parsed.invite_code,
        parsed.character_id,
        catalog=config.catalog,
        brand=config.brand,
        route=config.route,
    )
    response = HTMLResponse(
        content=render_og_html(metadata, config.brand),
        status_code=200,
        headers={
            "Content-Type": HTML_CONTENT_TYPE,
            "Cache-Control": f"public, max-age={int(config.cache_max_age)}",
        },
    )
    return InvitePreview(
        metadata=metadata,
        invite_code=parsed.invite_code,
        character_id=parsed.character_id,
        response=response,
    )
