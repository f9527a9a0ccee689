from __future__ import annotations

from collections.abc import Iterable


# Link-preview fetchers (social, messaging, search, embed services).
CRAWLER_PATTERNS: tuple[str, ...] = (
    "facebookexternalhit",
    "Facebot",
    "Twitterbot",
    "WhatsApp",
    "Slackbot",
    "Discordbot",
    "LinkedInBot",
    "Googlebot",
    "TelegramBot",
    "Applebot",  # iMessage link previews
    "iMessageBot",
    "Pinterestbot",
    "redditbot",
    "Embedly",
    "Quora Link Preview",
    "Showyoubot",
    "outbrain",
    "vkShare",
)


def crawler_patterns(extra: Iterable[str] = ()) -> tuple[str, ...]:
    out = list(CRAWLER_PATTERNS)
    seen = {p.lower() for p in out}
    for item in extra:
        pattern = str(item or "").strip()
        if pattern and pattern.lower() not in seen:
            seen.add(pattern.lower())
            out.append(pattern)
    return tuple(out)


def is_crawler(
    user_agent: str | None, patterns: Iterable[str] = CRAWLER_PATTERNS
) -> bool:
    if not user_agent:
        return False
    ua = str(user_agent).lower()
    return any(p.lower() in ua for p in patterns)
