import pytest

from oshichecker.catalog import UnknownCandidateError
from oshichecker.result import build_result_view
from oshichecker.scoring import RankingValidationError, map_scores


def test_result_view_podium_and_also_ranked(catalog, site):
    ids = ["m1", "m2", "m3", "m4", "m5"]
    view = build_result_view(ids, catalog, "ja", site)
    scores = map_scores(ids)

    assert [e.member_id for e in view.podium] == ["m1", "m2", "m3"]
    assert [e.rank for e in view.podium] == [1, 2, 3]
    assert [e.size for e in view.podium] == ["large", "small", "small"]

    assert [e.member_id for e in view.also_ranked] == ["m4", "m5"]
    assert [e.rank for e in view.also_ranked] == [4, 5]
    assert all(e.size == "mini" and e.hide_overlay_name for e in view.also_ranked)

    # scores come from the full ranking, not from each segment
    for entry in view.podium + view.also_ranked:
        assert entry.match_percent == scores[entry.member_id]
    assert view.podium[0].match_percent == 99
    assert view.also_ranked[-1].match_percent == 60


def test_result_view_localizes_names_and_groups(catalog, site):
    view = build_result_view(["m1", "m5"], catalog, "en", site)
    first, second = view.podium
    assert first.name == "Hana"
    assert first.group_name == "LUMINA"
    assert first.group_blog_url == "https://blog.example.com/g1"
    # member of a group outside the catalog
    assert second.group_name == ""
    assert second.group_blog_url == ""


def test_result_view_labels_and_share(catalog, site):
    view = build_result_view(["m1", "m2", "m3", "m4"], catalog, "ko", site)
    assert view.locale == "ko"
    assert view.labels.share_x == "X에서 결과 공유"
    assert view.watermark == "📸 결과를 캡처해서 X에 공유하세요!"
    assert view.share is not None
    assert view.share.text.endswith("https://oshichecker2.vercel.app/ko")
    assert "리나" not in view.share.text
    assert view.share.intent_url.startswith("https://twitter.com/intent/tweet?text=")
    assert view.no_result is None and view.redirect_to is None


def test_empty_ranking_returns_no_result_view(catalog, site):
    view = build_result_view([], catalog, "en", site)
    assert view.podium == [] and view.also_ranked == []
    assert view.no_result == "No results found. Please complete the diagnosis first."
    assert view.redirect_to == "/en"
    assert view.share is None


def test_duplicate_ids_fail_fast(catalog, site):
    with pytest.raises(RankingValidationError):
        build_result_view(["m1", "m2", "m1"], catalog, "ja", site)


def test_unknown_ids_fail_fast(catalog, site):
    with pytest.raises(UnknownCandidateError):
        build_result_view(["m1", "zz"], catalog, "ja", site)


def test_unknown_locale_falls_back_to_site_default(catalog, site):
    ko_site = site.model_copy(update={"default_locale": "ko"})
    view = build_result_view(["m1", "m2"], catalog, "fr", ko_site)
    assert view.locale == "ko"
    assert view.title == "진단 결과"
    assert view.podium[0].name == "하나"
    assert view.share.text.endswith("https://oshichecker2.vercel.app/ko")
