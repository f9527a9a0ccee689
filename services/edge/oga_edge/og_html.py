from __future__ import annotations

import html
from urllib.parse import urljoin, urlsplit

from oga_catalog.catalog import BrandConfig

from oga_edge.og_meta import OgMetadata


OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


def absolute_url(value: str, *, base_url: str) -> str:
    raw = str(value or "").strip()
    if urlsplit(raw).scheme:
        return raw
    return urljoin(base_url.rstrip("/") + "/", raw)


def render_og_html(metadata: OgMetadata, brand: BrandConfig) -> str:
    title = html.escape(metadata.title)
    description = html.escape(metadata.description)
    og_image = html.escape(absolute_url(metadata.image, base_url=brand.base_url))
    og_url = html.escape(metadata.url)
    site_name = html.escape(brand.site_name)
    theme_color = html.escape(brand.theme_color)
    short_name = html.escape(brand.short_name)

    if metadata.character_name:
        heading = f"Check out {html.escape(metadata.character_name)}"
    else:
        heading = html.escape(f"You've been invited to {brand.short_name}")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>

  <meta property="og:type" content="website">
  <meta property="og:site_name" content="{site_name}">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:image" content="{og_image}">
  <meta property="og:image:width" content="{OG_IMAGE_WIDTH}">
  <meta property="og:image:height" content="{OG_IMAGE_HEIGHT}">
  <meta property="og:url" content="{og_url}">

  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="{title}">
  <meta name="twitter:description" content="{description}">
  <meta name="twitter:image" content="{og_image}">

  <meta name="theme-color" content="{theme_color}">

  <meta http-equiv="refresh" content="0;url={og_url}">
</head>
<body style="background:#000;color:#fff;font-family:Helvetica,Arial,sans-serif;text-align:center;padding:40px;">
  <h1 style="color:{theme_color};">{heading}</h1>
  <p>{description}</p>
  <p><a href="{og_url}" style="color:{theme_color};">Open in {short_name} →</a></p>
</body>
</html>
"""
