from __future__ import annotations

import pytest

from oga_edge.crawlers import CRAWLER_PATTERNS, crawler_patterns, is_crawler


@pytest.mark.parametrize("pattern", CRAWLER_PATTERNS)
def test_every_signature_matches_regardless_of_case(pattern: str) -> None:
    assert is_crawler(pattern)
    assert is_crawler(pattern.upper() + "/2.0")
    assert is_crawler(f"Mozilla/5.0 (compatible; {pattern.lower()}/1.1; +http://example.com)")


@pytest.mark.parametrize("ua", [None, ""])
def test_missing_user_agent_is_not_a_crawler(ua) -> None:
    assert is_crawler(ua) is False


def test_desktop_browser_is_not_a_crawler() -> None:
    assert not is_crawler("Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 Chrome/120")
    assert not is_crawler("Mozilla/5.0")


def test_substring_false_positive_is_accepted() -> None:
    assert is_crawler("SomeScraper Googlebot-Image/1.0 pretending")


def test_extra_patterns_are_appended_without_duplicates() -> None:
    patterns = crawler_patterns(["KakaoTalk-Scrap", "twitterbot", "  ", "KakaoTalk-Scrap"])
    assert patterns[: len(CRAWLER_PATTERNS)] == CRAWLER_PATTERNS
    assert patterns[-1] == "KakaoTalk-Scrap"
    assert len(patterns) == len(CRAWLER_PATTERNS) + 1
    assert is_crawler("kakaotalk-scrap/1.0 (+https://devtalk.kakao.com)", patterns)
    assert not is_crawler("kakaotalk-scrap/1.0 (+https://devtalk.kakao.com)")
