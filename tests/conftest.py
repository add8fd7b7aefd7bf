"""
Pytest configuration and shared fixtures.
"""

import pandas as pd
import pytest

from oshichecker.catalog import Catalog, build_catalog
from oshichecker.config import SiteConfig


@pytest.fixture
def groups_raw() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": "g1", "name": "ルミナ", "nameKo": "루미나", "nameEn": "LUMINA", "blogUrl": "https://blog.example.com/g1"},
            {"id": "g2", "name": "スタードロップ", "nameKo": "스타드롭", "nameEn": "", "blogUrl": ""},
        ]
    )


@pytest.fixture
def members_raw() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": "m1", "groupId": "g1", "name": "ハナ", "nameKo": "하나", "nameEn": "Hana"},
            {"id": "m2", "groupId": "g2", "name": "ジウ", "nameKo": "지우", "nameEn": "Jiwoo"},
            {"id": "m3", "groupId": "g1", "name": "ユリ", "nameKo": "", "nameEn": "Yuri"},
            {"id": "m4", "groupId": "g2", "name": "リナ", "nameKo": "리나", "nameEn": "Rina"},
            {"id": "m5", "groupId": "gx", "name": "ソラ", "nameKo": "소라", "nameEn": "Sora"},
        ]
    )


@pytest.fixture
def catalog(groups_raw, members_raw) -> Catalog:
    return build_catalog(groups_raw, members_raw)


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        site_url="https://oshi.test",
        share_url_base="https://oshichecker2.vercel.app",
    )
