from oshichecker.metadata import (
    build_home_metadata,
    build_result_metadata,
    generate_static_params,
)


def test_home_metadata_ja(site):
    meta = build_home_metadata("ja", site)
    assert meta.title == "推しチェッカー | 韓国地下アイドル診断"
    assert meta.open_graph.locale == "ja_JP"
    assert meta.open_graph.url == "https://oshi.test/ja"
    assert meta.open_graph.site_name == "推しチェッカー"
    image = meta.open_graph.images[0]
    assert (image.width, image.height) == (1200, 630)
    assert image.type == "image/png"
    assert image.alt == meta.title
    assert meta.twitter.card == "summary_large_image"
    assert meta.twitter.images == [image.url]


def test_result_metadata_ko(site):
    meta = build_result_metadata("ko", site)
    assert meta.title == "진단 결과 | 오시체커"
    assert meta.open_graph.locale == "ko_KR"
    assert meta.open_graph.url == "https://oshi.test/ko/result"
    assert meta.open_graph.images[0].type is None
    assert meta.description.startswith("당신의 최애 멤버 TOP3")


def test_metadata_images_differ_per_locale(site):
    urls = {build_home_metadata(loc, site).open_graph.images[0].url for loc in ("ja", "ko", "en")}
    assert len(urls) == 3


def test_unknown_locale_falls_back_to_japanese_copy(site):
    meta = build_result_metadata("fr", site)
    assert meta.title == build_result_metadata("ja", site).title
    assert meta.open_graph.locale == "ja_JP"


def test_static_params_list_every_locale():
    assert generate_static_params() == [{"locale": "ja"}, {"locale": "ko"}, {"locale": "en"}]


def test_unknown_locale_uses_configured_default(site):
    en_site = site.model_copy(update={"default_locale": "en"})
    meta = build_home_metadata("fr", en_site)
    assert meta.title == "Oshi Checker | Korean Underground Idol Test"
    assert meta.open_graph.locale == "en_US"
    assert meta.open_graph.url == "https://oshi.test/en"
    assert build_result_metadata("fr", en_site).title == "Results | Oshi Checker"


def test_site_name_follows_locale(site):
    assert build_home_metadata("ko", site).open_graph.site_name == "오시체커"
    assert build_result_metadata("en", site).open_graph.site_name == "Oshi Checker"
