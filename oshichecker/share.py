from __future__ import annotations

"""
Share text for the result screen and the X (Twitter) compose intent.

Each locale has a fixed template: a header, the podium lines
("👑 name（group）"), a call-to-action footer and the locale's landing URL.
"""

import threading
import time
from typing import Callable, Dict, List, Mapping, Sequence, Tuple
from urllib.parse import quote

from loguru import logger

from .config import (
    DEFAULT_SHARE_DEBOUNCE_SECONDS,
    RANK_EMOJIS,
    RESULT_COUNT,
    SHARE_INTENT_URL,
    Group,
    Member,
    ShareResponse,
    SiteConfig,
)
from .i18n import get_localized_name

# (lines before the podium, lines after it); the locale URL is appended last
SHARE_TEMPLATES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "ja": (
        ("【韓国地下アイドル推し診断】", "", "私の結果はこれ👇"),
        ("", "あなたの1位は誰だった？", "結果リプで教えてほしい👀", "#推しチェッカー #韓国地下アイドル"),
    ),
    "ko": (
        ("【지하아이돌 오시 진단】", "", "제 결과는 이거예요👇"),
        ("", "여러분의 1위는 누구였어요?", "댓글로 알려주세요👀", "#오시체커 #지하아이돌"),
    ),
    "en": (
        ("【Korean Underground Idol Bias Test】", "", "Here is my result👇"),
        ("", "Who was your #1?", "Let me know your result in the replies 👀"),
    ),
}

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_ranked_lines(
    top_members: Sequence[Member],
    groups: Mapping[str, Group],
    locale: str,
) -> List[str]:
    lines: List[str] = []
    for emoji, member in zip(RANK_EMOJIS, top_members[:RESULT_COUNT]):
        name = get_localized_name(member, locale)
        group = groups.get(member.group_id)
        group_name = get_localized_name(group, locale) if group is not None else ""
        suffix = f"（{group_name}）" if group_name else ""
        lines.append(f"{emoji} {name}{suffix}")
    return lines


def build_share_text(
    top_members: Sequence[Member],
    groups: Mapping[str, Group],
    locale: str,
    site: SiteConfig,
) -> str:
    """Share text for the podium; locales without a template use English."""
    if locale not in SHARE_TEMPLATES:
        locale = "en"
    header, footer = SHARE_TEMPLATES[locale]
    lines = [
        *header,
        *build_ranked_lines(top_members, groups, locale),
        *footer,
        site.share_url(locale),
    ]
    return "\n".join(lines)


def build_share_intent_url(text: str) -> str:
    return f"{SHARE_INTENT_URL}?text={quote(text, safe=_URI_COMPONENT_SAFE)}"


def build_share(
    top_members: Sequence[Member],
    groups: Mapping[str, Group],
    locale: str,
    site: SiteConfig,
) -> ShareResponse:
    text = build_share_text(top_members, groups, locale, site)
    return ShareResponse(text=text, intent_url=build_share_intent_url(text))


class ShareDebouncer:
    """
    Drops repeated share requests from the same client until the re-arm
    delay has passed, so a double tap does not open two compose windows.
    """

    _PRUNE_AT = 1024

    def __init__(
        self,
        rearm_seconds: float = DEFAULT_SHARE_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if rearm_seconds < 0:
            raise ValueError(f"rearm_seconds must be >= 0, got {rearm_seconds}")
        self.rearm_seconds = rearm_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._last_fired: Dict[str, float] = {}

    def try_acquire(self, client_key: str) -> bool:
        """True if the share may proceed; False while still debounced."""
        now = self._clock()
        with self._lock:
            last = self._last_fired.get(client_key)
            if last is not None and now - last < self.rearm_seconds:
                logger.warning("Share from {} debounced ({:.2f}s since last)", client_key, now - last)
                return False
            self._last_fired[client_key] = now
            if len(self._last_fired) > self._PRUNE_AT:
                self._prune(now)
            return True

    def _prune(self, now: float) -> None:
        stale = [k for k, t in self._last_fired.items() if now - t >= self.rearm_seconds]
        for k in stale:
            del self._last_fired[k]

    def reset(self) -> None:
        with self._lock:
            self._last_fired.clear()
