from __future__ import annotations

"""
OGP / Twitter card metadata for the home and result pages.
"""

from typing import Dict, List

from .config import (
    LOCALES,
    OG_LOCALE_BY_LOCALE,
    OGP_IMAGE_BY_LOCALE,
    OgImage,
    OpenGraph,
    PageMetadata,
    SiteConfig,
    TwitterCard,
)
from .i18n import get_app_name, resolve_locale

HOME_TITLES: Dict[str, str] = {
    "ja": "推しチェッカー | 韓国地下アイドル診断",
    "ko": "오시체커 | 한국 지하 아이돌 진단",
    "en": "Oshi Checker | Korean Underground Idol Test",
}

HOME_DESCRIPTIONS: Dict[str, str] = {
    "ja": "あなたにぴったりの韓国地下アイドルメンバーを診断します。アンケートと二択バトルで、運命の推しを見つけよう！",
    "ko": "당신에게 딱 맞는 한국 지하 아이돌 멤버를 진단합니다. 설문과 밸런스 게임으로 운명의 최애를 찾아보세요!",
    "en": "Find your perfect Korean underground idol member. Take the survey and battles to discover your fate bias!",
}

RESULT_TITLES: Dict[str, str] = {
    "ja": "診断結果 | 推しチェッカー",
    "ko": "진단 결과 | 오시체커",
    "en": "Results | Oshi Checker",
}

RESULT_DESCRIPTIONS: Dict[str, str] = {
    "ja": "あなたの推しメンバー TOP3 が決定しました！結果をシェアしよう！",
    "ko": "당신의 최애 멤버 TOP3가 결정되었습니다! 결과를 공유해보세요!",
    "en": "Your Top 3 bias members have been determined! Share your results!",
}


def _build(
    locale: str,
    url: str,
    title: str,
    description: str,
    image_type: str | None,
) -> PageMetadata:
    image_url = OGP_IMAGE_BY_LOCALE[locale]
    return PageMetadata(
        title=title,
        description=description,
        open_graph=OpenGraph(
            locale=OG_LOCALE_BY_LOCALE[locale],
            url=url,
            site_name=get_app_name(locale),
            title=title,
            description=description,
            images=[OgImage(url=image_url, alt=title, type=image_type)],
        ),
        twitter=TwitterCard(title=title, description=description, images=[image_url]),
    )


def build_home_metadata(locale: str, site: SiteConfig) -> PageMetadata:
    locale = resolve_locale(locale, site.default_locale)
    return _build(
        locale,
        url=site.locale_url(locale),
        title=HOME_TITLES[locale],
        description=HOME_DESCRIPTIONS[locale],
        image_type="image/png",
    )


def build_result_metadata(locale: str, site: SiteConfig) -> PageMetadata:
    locale = resolve_locale(locale, site.default_locale)
    return _build(
        locale,
        url=site.locale_url(locale, "/result"),
        title=RESULT_TITLES[locale],
        description=RESULT_DESCRIPTIONS[locale],
        image_type=None,
    )


def generate_static_params() -> List[Dict[str, str]]:
    """One route param set per supported locale."""
    return [{"locale": locale} for locale in LOCALES]
