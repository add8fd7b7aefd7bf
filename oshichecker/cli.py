# oshichecker/cli.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .catalog import UnknownCandidateError, load_catalog
from .config import GROUPS_PATH, LOCALES, MEMBERS_PATH, load_site_config
from .partition import partition_ranking
from .scoring import RankingValidationError, map_scores, validate_ranking
from .share import build_share_text

# ---------- commands ----------

def cmd_scores(args: argparse.Namespace) -> None:
    scores = map_scores(args.ids)
    for rank, member_id in enumerate(args.ids, start=1):
        print(f"{rank:>3}  {member_id}  {scores[member_id]}%")


def cmd_share(args: argparse.Namespace) -> None:
    catalog = load_catalog(args.groups, args.members)
    validate_ranking(args.ids)
    podium, _ = partition_ranking(catalog.resolve_ranking(args.ids))
    print(build_share_text(podium, catalog.groups, args.locale, load_site_config()))

# ---------- CLI ----------

def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="oshichecker")
    sub = ap.add_subparsers(dest="command", required=True)

    p_scores = sub.add_parser("scores", help="Print match percentages for a ranking")
    p_scores.add_argument("ids", nargs="*", help="Member ids, best first")
    p_scores.set_defaults(func=cmd_scores)

    p_share = sub.add_parser("share", help="Print the share text for a ranking")
    p_share.add_argument("ids", nargs="+", help="Member ids, best first")
    p_share.add_argument("--locale", choices=LOCALES, default="ja")
    p_share.add_argument("--groups", type=Path, default=GROUPS_PATH)
    p_share.add_argument("--members", type=Path, default=MEMBERS_PATH)
    p_share.set_defaults(func=cmd_share)

    args = ap.parse_args(argv)
    try:
        args.func(args)
    except (RankingValidationError, UnknownCandidateError) as e:
        ap.error(str(e))

if __name__ == "__main__":
    main()
