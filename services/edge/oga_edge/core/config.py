from __future__ import annotations

import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oga_catalog.catalog import DEFAULT_BRAND, BrandConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OGA_", extra="ignore")

    # Brand defaults for library-level previews.
    base_url: str = DEFAULT_BRAND.base_url
    site_name: str = DEFAULT_BRAND.site_name
    short_name: str = DEFAULT_BRAND.short_name
    default_title: str = DEFAULT_BRAND.default_title
    default_description: str = DEFAULT_BRAND.default_description
    default_image: str = DEFAULT_BRAND.default_image
    theme_color: str = DEFAULT_BRAND.theme_color

    invite_route: str = "invite"
    cache_max_age: int = 3600

    # Comma-separated user agent fragments appended to the built-in crawler list.
    extra_crawler_patterns: str = ""

    # Optional JSON character pack replacing the built-in catalog.
    characters_path: str | None = None

    # Optional static SPA root; requests that are not previews fall through to it.
    spa_dir: str | None = None

    trust_proxy_headers: bool = False
    allowed_hosts: str = "*"
    log_json: bool = False

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, v: str) -> str:
        raw = str(v or "").strip().rstrip("/")
        if not re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*://", raw):
            raise ValueError(
                f"OGA_BASE_URL must be an absolute URL with a scheme (got {v!r})"
            )
        return raw

    @field_validator("invite_route")
    @classmethod
    def _strip_invite_route(cls, v: str) -> str:
        route = str(v or "").strip().strip("/")
        if not route or "/" in route:
            raise ValueError("OGA_INVITE_ROUTE must be a single path segment")
        return route


def parse_csv(value: str | None) -> list[str]:
    raw = str(value or "").strip()
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def brand_from_settings(settings: Settings) -> BrandConfig:
    return BrandConfig(
        site_name=settings.site_name,
        default_title=settings.default_title,
        default_description=settings.default_description,
        default_image=settings.default_image,
        theme_color=settings.theme_color,
        base_url=settings.base_url,
        short_name=settings.short_name,
    )
