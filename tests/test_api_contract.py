import pytest
from fastapi.testclient import TestClient

from oshichecker.api import app
from oshichecker.share import ShareDebouncer


client = TestClient(app)


class FrozenClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture(autouse=True)
def patched_singletons(monkeypatch, catalog, site, clock):
    # Keep tests off the bundled data files and process-wide caches
    debouncer = ShareDebouncer(rearm_seconds=0.8, clock=clock)
    monkeypatch.setattr("oshichecker.api.get_catalog", lambda: catalog)
    monkeypatch.setattr("oshichecker.api.get_site_config", lambda: site)
    monkeypatch.setattr("oshichecker.api.get_share_debouncer", lambda: debouncer)


def test_health_endpoint():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_locales_endpoint():
    resp = client.get("/locales")
    assert resp.json() == [{"locale": "ja"}, {"locale": "ko"}, {"locale": "en"}]


def test_scores_endpoint():
    resp = client.post("/scores", json={"ranking": ["A", "B", "C"]})
    assert resp.status_code == 200
    assert resp.json() == {"scores": {"A": 99, "B": 85, "C": 60}}


def test_scores_rejects_duplicates():
    resp = client.post("/scores", json={"ranking": ["A", "A"]})
    assert resp.status_code == 422
    assert "duplicate" in resp.json()["detail"]


def test_result_endpoint_shape():
    resp = client.post("/ja/result", json={"ranking": ["m1", "m2", "m3", "m4"]})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["podium"]) == 3
    assert data["podium"][0]["match_percent"] == 99
    assert data["also_ranked"][0]["rank"] == 4
    assert data["also_ranked"][0]["match_percent"] == 60
    assert data["share"]["intent_url"].startswith("https://twitter.com/intent/tweet")


def test_result_endpoint_empty_ranking_redirects():
    resp = client.post("/en/result", json={"ranking": []})
    assert resp.status_code == 200
    assert resp.json()["redirect_to"] == "/en"


def test_result_endpoint_rejects_unknown_member():
    resp = client.post("/ja/result", json={"ranking": ["m1", "ghost"]})
    assert resp.status_code == 422


def test_unsupported_locale_is_rejected():
    assert client.post("/fr/result", json={"ranking": ["m1"]}).status_code == 422
    assert client.get("/fr/metadata").status_code == 422


def test_metadata_endpoints():
    home = client.get("/en/metadata").json()
    assert home["open_graph"]["url"] == "https://oshi.test/en"
    result = client.get("/en/result/metadata").json()
    assert result["title"] == "Results | Oshi Checker"


def test_share_is_debounced_per_client(clock):
    body = {"ranking": ["m1", "m2", "m3"], "client_id": "tab-1"}

    first = client.post("/ja/share", json=body)
    assert first.status_code == 200
    assert first.json()["text"].startswith("【韓国地下アイドル推し診断】")

    assert client.post("/ja/share", json=body).status_code == 429

    clock.now += 1.0
    assert client.post("/ja/share", json=body).status_code == 200


def test_share_requires_ranking_and_client_id():
    assert client.post("/ja/share", json={"ranking": [], "client_id": "x"}).status_code == 422
    assert client.post("/ja/share", json={"ranking": ["m1"]}).status_code == 422
