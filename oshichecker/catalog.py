from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd
from loguru import logger

from .config import GROUPS_PATH, MEMBERS_PATH, Group, Member
from .i18n import get_localized_name


class UnknownCandidateError(ValueError):
    """A ranking refers to a member id that is not in the catalog."""


# ---------------------------
# Column detection / standardization
# ---------------------------

# Catalog JSON is hand-edited, so accept both camelCase and snake_case keys.
GROUP_COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "id": ["id", "group_id", "groupId"],
    "name": ["name", "name_ja", "nameJa"],
    "name_ko": ["name_ko", "nameKo"],
    "name_en": ["name_en", "nameEn"],
    "blog_url": ["blog_url", "blogUrl", "blog"],
}

MEMBER_COLUMN_CANDIDATES: Dict[str, List[str]] = {
    "id": ["id", "member_id", "memberId"],
    "group_id": ["group_id", "groupId", "group"],
    "name": ["name", "name_ja", "nameJa"],
    "name_ko": ["name_ko", "nameKo"],
    "name_en": ["name_en", "nameEn"],
    "image_url": ["image_url", "imageUrl", "image"],
}

GROUP_COLUMNS = list(GROUP_COLUMN_CANDIDATES)
MEMBER_COLUMNS = list(MEMBER_COLUMN_CANDIDATES)


def _standardize_columns(df: pd.DataFrame, candidates: Dict[str, List[str]]) -> pd.DataFrame:
    """
    Rename raw catalog columns to the canonical names in ``candidates``.
    First match wins; exact names are tried before case-insensitive ones.
    """
    col_map: Dict[str, str] = {}
    lower_to_original = {str(c).lower(): c for c in df.columns}

    for canon, names in candidates.items():
        for candidate in names:
            if candidate in df.columns:
                col_map[candidate] = canon
                break
            if candidate.lower() in lower_to_original:
                col_map[lower_to_original[candidate.lower()]] = canon
                break

    return df.rename(columns=col_map)


def _normalize_frame(df_raw: pd.DataFrame, candidates: Dict[str, List[str]], kind: str) -> pd.DataFrame:
    """
    Canonical frame with every column from ``candidates`` as a stripped
    string, rows without an id dropped and duplicate ids collapsed to the
    first occurrence. Indexed by id.
    """
    columns = list(candidates)
    df = _standardize_columns(df_raw.copy(), candidates)

    for col in columns:
        if col not in df.columns:
            df[col] = ""
        df[col] = df[col].fillna("").astype(str).str.strip()

    before = len(df)
    df = df[df["id"] != ""]
    df = df.drop_duplicates(subset=["id"], keep="first")
    dropped = before - len(df)
    if dropped:
        logger.warning("Dropped {} {} rows with empty or duplicate ids", dropped, kind)

    return df[columns].set_index("id", drop=False)


def normalize_groups_df(df_raw: pd.DataFrame) -> pd.DataFrame:
    return _normalize_frame(df_raw, GROUP_COLUMN_CANDIDATES, "group")


def normalize_members_df(df_raw: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_frame(df_raw, MEMBER_COLUMN_CANDIDATES, "member")
    missing_name = df["name"] == ""
    if missing_name.any():
        logger.warning("Members without a display name: {}", df.index[missing_name].tolist())
    return df


# ---------------------------
# Catalog container
# ---------------------------

@dataclass
class Catalog:
    """
    Read-only lookups over the group / member frames.
    """

    groups_df: pd.DataFrame
    members_df: pd.DataFrame
    _groups: Dict[str, Group] = field(init=False, repr=False)
    _members: Dict[str, Member] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._groups = {
            gid: Group(**row) for gid, row in self.groups_df[GROUP_COLUMNS].to_dict("index").items()
        }
        self._members = {
            mid: Member(**row) for mid, row in self.members_df[MEMBER_COLUMNS].to_dict("index").items()
        }

    @property
    def groups(self) -> Dict[str, Group]:
        return self._groups

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members

    def group(self, group_id: str) -> Optional[Group]:
        return self._groups.get(group_id)

    def member(self, member_id: str) -> Member:
        try:
            return self._members[member_id]
        except KeyError:
            raise UnknownCandidateError(f"unknown member id: {member_id!r}") from None

    def group_name(self, group_id: str, locale: str) -> str:
        group = self.group(group_id)
        return get_localized_name(group, locale) if group is not None else ""

    def group_blog_url(self, group_id: str) -> str:
        group = self.group(group_id)
        return group.blog_url if group is not None else ""

    def resolve_ranking(self, member_ids: Iterable[str]) -> List[Member]:
        """Members in ranking order; any id outside the catalog is an error."""
        ids = list(member_ids)
        unknown = [mid for mid in ids if mid not in self._members]
        if unknown:
            raise UnknownCandidateError(f"unknown member ids in ranking: {unknown}")
        return [self._members[mid] for mid in ids]


# ---------------------------
# IO helpers
# ---------------------------

def _read_json_records(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    return pd.read_json(path, orient="records", dtype=False)


def build_catalog(groups_raw: pd.DataFrame, members_raw: pd.DataFrame) -> Catalog:
    groups_df = normalize_groups_df(groups_raw)
    members_df = normalize_members_df(members_raw)

    orphans = members_df.loc[~members_df["group_id"].isin(groups_df.index), "id"].tolist()
    if orphans:
        logger.warning("Members whose group is not in the catalog: {}", orphans)

    return Catalog(groups_df=groups_df, members_df=members_df)


def load_catalog(
    groups_path: Path = GROUPS_PATH,
    members_path: Path = MEMBERS_PATH,
) -> Catalog:
    """
    Load groups.json + members.json into a Catalog.
    """
    logger.info("Loading catalog from {} and {}", groups_path, members_path)
    catalog = build_catalog(_read_json_records(groups_path), _read_json_records(members_path))
    logger.info("Loaded catalog with {} groups and {} members", len(catalog.groups), len(catalog))
    return catalog
