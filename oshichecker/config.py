from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = Path(os.getenv("OSHICHECKER_DATA_DIR", str(PROJECT_ROOT / "data")))
GROUPS_PATH = DATA_DIR / "groups.json"
MEMBERS_PATH = DATA_DIR / "members.json"


# ---------------------------
# Match percentage curve
# ---------------------------

SCORE_LOWER = 60
SCORE_UPPER = 99
SCORE_GAMMA = 0.65        # 0 < gamma < 1 keeps the bottom ranks from sinking


# ---------------------------
# Result layout
# ---------------------------

RESULT_COUNT = 3          # podium size
RANK_EMOJIS = ("👑", "🥈", "🥉")


# ---------------------------
# Locales
# ---------------------------

Locale = Literal["ja", "ko", "en"]

LOCALES: Tuple[str, ...] = ("ja", "ko", "en")
DEFAULT_LOCALE = "ja"

OG_LOCALE_BY_LOCALE: Dict[str, str] = {
    "ja": "ja_JP",
    "ko": "ko_KR",
    "en": "en_US",
}

OGP_IMAGE_BY_LOCALE: Dict[str, str] = {
    "ja": "https://assets.st-note.com/img/1770787818-nq9wT6rolLp0CkSmhIFZzi58.png",
    "ko": "https://assets.st-note.com/img/1770787818-BHEhOT3azXFtRyP8JAbjMovC.png",
    "en": "https://assets.st-note.com/img/1770787818-WnJw2KTdijZ9erc1sYtkbGEL.png",
}
OGP_IMAGE_WIDTH = 1200
OGP_IMAGE_HEIGHT = 630


# ---------------------------
# Site / share settings & env toggles
# ---------------------------

DEFAULT_SITE_URL = "https://oshichecker.example.com"
DEFAULT_SHARE_URL_BASE = "https://oshichecker2.vercel.app"

SHARE_INTENT_URL = "https://twitter.com/intent/tweet"
SHARE_WINDOW_FEATURES = "noopener,noreferrer,width=550,height=420"

DEFAULT_SHARE_DEBOUNCE_SECONDS = 0.8  # re-arm delay after a share intent opens


def resolve_site_url(env: Optional[Dict[str, str]] = None) -> str:
    """
    Explicit OSHICHECKER_SITE_URL wins, then the Vercel deployment host,
    then the placeholder domain.
    """
    env = os.environ if env is None else env
    explicit = env.get("OSHICHECKER_SITE_URL")
    if explicit:
        return explicit.rstrip("/")
    vercel = env.get("VERCEL_URL")  # e.g. "oshichecker2.vercel.app"
    if vercel:
        return f"https://{vercel}"
    return DEFAULT_SITE_URL


class SiteConfig(BaseModel):
    """
    Process-wide settings handed to the presentation layer at startup.
    """

    site_url: str = DEFAULT_SITE_URL
    share_url_base: str = DEFAULT_SHARE_URL_BASE
    share_debounce_seconds: float = Field(default=DEFAULT_SHARE_DEBOUNCE_SECONDS, ge=0)
    default_locale: Locale = DEFAULT_LOCALE

    def locale_url(self, locale: str, path: str = "") -> str:
        return f"{self.site_url}/{locale}{path}"

    def share_url(self, locale: str) -> str:
        return f"{self.share_url_base.rstrip('/')}/{locale}"


def load_site_config(env: Optional[Dict[str, str]] = None) -> SiteConfig:
    env = os.environ if env is None else env
    return SiteConfig(
        site_url=resolve_site_url(env),
        share_url_base=env.get("OSHICHECKER_SHARE_URL_BASE") or DEFAULT_SHARE_URL_BASE,
        share_debounce_seconds=float(
            env.get("SHARE_DEBOUNCE_SECONDS", str(DEFAULT_SHARE_DEBOUNCE_SECONDS))
        ),
        default_locale=env.get("OSHICHECKER_DEFAULT_LOCALE") or DEFAULT_LOCALE,
    )


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class Group(BaseModel):
    id: str
    name: str
    name_ko: str = ""
    name_en: str = ""
    blog_url: str = ""


class Member(BaseModel):
    id: str
    group_id: str
    name: str
    name_ko: str = ""
    name_en: str = ""
    image_url: str = ""


class ResultEntry(BaseModel):
    """
    One member card on the result screen.
    """

    rank: int = Field(ge=1)
    member_id: str
    name: str
    group_name: str = ""
    group_blog_url: str = ""
    image_url: str = ""
    match_percent: Optional[int] = Field(default=None, ge=SCORE_LOWER, le=SCORE_UPPER)
    size: Literal["large", "small", "mini"]
    hide_overlay_name: bool = False


class ShareResponse(BaseModel):
    text: str
    intent_url: str
    window_features: str = SHARE_WINDOW_FEATURES


class ResultLabels(BaseModel):
    your_oshi: str
    restart: str
    share: str
    share_x: str
    final_candidates: str


class ResultResponse(BaseModel):
    """
    Response body for POST /{locale}/result.
    """

    locale: Locale
    title: str
    subtitle: str
    labels: ResultLabels
    podium: List[ResultEntry] = Field(default_factory=list)
    also_ranked: List[ResultEntry] = Field(default_factory=list)
    watermark: str = ""
    share: Optional[ShareResponse] = None
    no_result: Optional[str] = None
    redirect_to: Optional[str] = None


class RankingRequest(BaseModel):
    ranking: List[str] = Field(default_factory=list)


class ShareRequest(RankingRequest):
    client_id: str = Field(..., min_length=1)


class ScoresResponse(BaseModel):
    scores: Dict[str, int]


class OgImage(BaseModel):
    url: str
    width: int = OGP_IMAGE_WIDTH
    height: int = OGP_IMAGE_HEIGHT
    alt: str
    type: Optional[str] = None


class OpenGraph(BaseModel):
    type: str = "website"
    locale: str
    url: str
    site_name: str
    title: str
    description: str
    images: List[OgImage]


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: List[str]


class PageMetadata(BaseModel):
    title: str
    description: str
    open_graph: OpenGraph
    twitter: TwitterCard


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
