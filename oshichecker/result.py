from __future__ import annotations
"""
Result screen assembly.

Turns the ordered member ids coming out of the diagnosis into the
ResultResponse schema: podium cards (1st large, 2nd/3rd small), the
also-ranked list, localized labels and the share payload. Match
percentages are computed once on the full ranking and looked up per card.
"""

from typing import Dict, Hashable, List, Sequence

from loguru import logger

from .catalog import Catalog
from .config import (
    Member,
    ResultEntry,
    ResultLabels,
    ResultResponse,
    SiteConfig,
)
from .i18n import get_dictionary, get_localized_name, resolve_locale
from .partition import partition_ranking
from .scoring import map_scores
from .share import build_share

PODIUM_SIZES = ("large", "small", "small")


def _build_entry(
    member: Member,
    rank: int,
    catalog: Catalog,
    locale: str,
    scores: Dict[Hashable, int],
    size: str,
    hide_overlay_name: bool = False,
) -> ResultEntry:
    return ResultEntry(
        rank=rank,
        member_id=member.id,
        name=get_localized_name(member, locale),
        group_name=catalog.group_name(member.group_id, locale),
        group_blog_url=catalog.group_blog_url(member.group_id),
        image_url=member.image_url,
        # a member outside the scored ranking just shows no percentage
        match_percent=scores.get(member.id),
        size=size,
        hide_overlay_name=hide_overlay_name,
    )


def _labels(result_dict: Dict[str, str]) -> ResultLabels:
    return ResultLabels(
        your_oshi=result_dict["your_oshi"],
        restart=result_dict["restart"],
        share=result_dict["share"],
        share_x=result_dict["share_x"],
        final_candidates=result_dict["final_candidates"],
    )


def build_result_view(
    member_ids: Sequence[str],
    catalog: Catalog,
    locale: str,
    site: SiteConfig,
) -> ResultResponse:
    """
    Build the result payload for ``member_ids`` (best first).

    Raises RankingValidationError for duplicate ids and UnknownCandidateError
    for ids outside the catalog. An empty ranking is not an error: the
    response carries the no-result message and a redirect to the locale home.
    """
    locale = resolve_locale(locale, site.default_locale)
    result_dict = get_dictionary(locale)["result"]
    base = dict(
        locale=locale,
        title=result_dict["title"],
        subtitle=result_dict["subtitle"],
        labels=_labels(result_dict),
    )

    scores = map_scores(member_ids)
    ranking = catalog.resolve_ranking(member_ids)

    if not ranking:
        logger.info("Empty ranking for locale {}; returning no-result view", locale)
        return ResultResponse(
            **base,
            no_result=result_dict["no_result"],
            redirect_to=f"/{locale}",
        )

    podium_members, rest_members = partition_ranking(ranking)

    podium: List[ResultEntry] = [
        _build_entry(member, idx + 1, catalog, locale, scores, size)
        for idx, (member, size) in enumerate(zip(podium_members, PODIUM_SIZES))
    ]
    offset = len(podium_members) + 1
    also_ranked: List[ResultEntry] = [
        _build_entry(member, idx + offset, catalog, locale, scores, "mini", hide_overlay_name=True)
        for idx, member in enumerate(rest_members)
    ]

    logger.info(
        "Built result view: {} podium + {} also-ranked ({})",
        len(podium), len(also_ranked), locale,
    )
    return ResultResponse(
        **base,
        podium=podium,
        also_ranked=also_ranked,
        watermark=result_dict["watermark"],
        share=build_share(podium_members, catalog.groups, locale, site),
    )
