from __future__ import annotations

"""
Locale dictionaries for the result screen.

Strings live here as plain dicts keyed by locale, one section per page
area (common / result). An unsupported locale falls back to the
configured default (``SiteConfig.default_locale``), which is Japanese
unless overridden.
"""

from typing import Dict

from .config import DEFAULT_LOCALE, LOCALES

DICTIONARIES: Dict[str, Dict[str, Dict[str, str]]] = {
    "ja": {
        "common": {
            "app_name": "推しチェッカー",
        },
        "result": {
            "title": "診断結果",
            "subtitle": "あなたにぴったりの推しはこの3人！",
            "your_oshi": "あなたの推し",
            "restart": "もう一度診断する",
            "share": "結果をシェア",
            "final_candidates": "最終候補",
            "no_result": "結果がありません。診断を完了してください。",
            "share_x": "Xで結果をシェア",
            "watermark": "📸 結果をスクショしてXでシェアしよう！",
        },
    },
    "ko": {
        "common": {
            "app_name": "오시체커",
        },
        "result": {
            "title": "진단 결과",
            "subtitle": "당신에게 딱 맞는 최애는 이 3명!",
            "your_oshi": "당신의 최애",
            "restart": "다시 진단하기",
            "share": "결과 공유",
            "final_candidates": "최종 후보",
            "no_result": "결과가 없습니다. 진단을 먼저 완료해주세요.",
            "share_x": "X에서 결과 공유",
            "watermark": "📸 결과를 캡처해서 X에 공유하세요!",
        },
    },
    "en": {
        "common": {
            "app_name": "Oshi Checker",
        },
        "result": {
            "title": "Your Results",
            "subtitle": "These 3 members are your perfect match!",
            "your_oshi": "Your bias",
            "restart": "Take the test again",
            "share": "Share your results",
            "final_candidates": "Final candidates",
            "no_result": "No results found. Please complete the diagnosis first.",
            "share_x": "Share on X",
            "watermark": "📸 Screenshot your results and share on X!",
        },
    },
}


def resolve_locale(locale: str, default: str = DEFAULT_LOCALE) -> str:
    """Return ``locale`` if supported, else ``default``."""
    if locale in LOCALES:
        return locale
    return default if default in LOCALES else DEFAULT_LOCALE


def get_dictionary(locale: str, default: str = DEFAULT_LOCALE) -> Dict[str, Dict[str, str]]:
    return DICTIONARIES[resolve_locale(locale, default)]


def get_app_name(locale: str) -> str:
    return get_dictionary(locale)["common"]["app_name"]


def get_localized_name(entity, locale: str) -> str:
    """
    Display name of a Group or Member for ``locale``.

    Japanese uses ``name``; other locales use ``name_<locale>`` when it is
    filled in and fall back to ``name`` otherwise.
    """
    if locale != "ja":
        localized = getattr(entity, f"name_{locale}", "") or ""
        if localized.strip():
            return localized
    return entity.name
