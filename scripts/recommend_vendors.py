#!/usr/bin/env python3
# scripts/recommend_vendors.py
"""
Print vendor recommendations as a user would see them.

Read-only. Useful for checking how scoring changes affect real data.

Usage:
  # Flat top 10 for an anonymous visitor
  python -m scripts.recommend_vendors

  # Top 5 photographers for a signed-in user, with per-term breakdown
  python -m scripts.recommend_vendors --user-id <uuid> --category photographer --limit 5 --explain

  # Dashboard block (3 per key category) for a hypothetical $20k budget
  python -m scripts.recommend_vendors --budget 20000 --by-category
"""
from __future__ import annotations

import argparse
import logging
from typing import Any, Optional

from farah.config import get_settings
from farah.db.supabase_client import get_supabase_client
from farah.errors import FetchError
from farah.models import KEY_CATEGORIES, UserProfile, VendorCategory
from farah.recommend.feeds import CategoryRecommendations, VendorRecommendations
from farah.recommend.ranking import DEFAULT_CATEGORY_LIMIT, DEFAULT_LIMIT, ScoredVendor
from farah.recommend.scoring import category_score_breakdown, score_breakdown
from farah.session import SessionContext, load_session


def _budget_usd(value: str) -> float:
    try:
        budget = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if budget < 0:
        raise argparse.ArgumentTypeError("budget must be non-negative")
    return budget


def _build_session(supabase: Any, user_id: str | None, budget: float | None) -> SessionContext:
    session = load_session(supabase, user_id)
    if budget is None:
        return session

    base = session.profile or UserProfile(user_id=user_id)
    profile = UserProfile.model_validate({**base.model_dump(), "estimated_budget_usd": budget})
    return SessionContext(user_id=session.user_id, profile=profile)


def _format_line(rank: int, s: ScoredVendor, breakdown: dict[str, int] | None) -> str:
    v = s.vendor
    line = (
        f"  {rank:>2}. score={s.score:<4}"
        f" {v.business_name or v.id}"
        f" | {v.category.label if v.category else '-'}"
        f" | {v.region.label if v.region else '-'}"
    )
    if breakdown is not None:
        terms = " ".join(f"{k}={n}" for k, n in breakdown.items() if n)
        line += f" | {terms or 'no points'}"
    return line


def run(
    supabase: Any,
    session: SessionContext,
    *,
    category: str | None,
    limit: int | None,
    exclude: list[str],
    by_category: list[str] | None,
    explain: bool,
) -> int:
    profile = session.profile

    if by_category is not None:
        categories = by_category or [c.value for c in KEY_CATEGORIES]
        feed = CategoryRecommendations(
            supabase, session, categories,
            limit=limit if limit is not None else DEFAULT_CATEGORY_LIMIT,
        )
        state = feed.refresh()
        if state.error is not None:
            print(f"[recommend] FETCH_FAILED {type(state.error).__name__}: {state.error}")
            return 1

        total = 0
        for cat, items in state.vendors_by_category.items():
            print(f"\n{cat.label} ({len(items)})")
            for i, s in enumerate(items, 1):
                bd = category_score_breakdown(s.vendor, profile) if explain else None
                print(_format_line(i, s, bd))
            total += len(items)

        print(f"\n[recommend][summary] mode=by_category categories={len(state.vendors_by_category)} returned={total}")
        return 0

    flat = VendorRecommendations(
        supabase,
        session,
        category=category,
        exclude_ids=exclude,
        limit=limit if limit is not None else DEFAULT_LIMIT,
    )
    state = flat.refresh()
    if state.error is not None:
        print(f"[recommend] FETCH_FAILED {type(state.error).__name__}: {state.error}")
        return 1

    for i, s in enumerate(state.vendors, 1):
        bd = score_breakdown(s.vendor, profile) if explain else None
        print(_format_line(i, s, bd))

    print(
        f"\n[recommend][summary] mode=flat"
        f" category={category or 'all'}"
        f" excluded={len(exclude)}"
        f" returned={len(state.vendors)}"
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show vendor recommendations (read-only).")
    parser.add_argument("--user-id", default=None, help="Load this user's profile (optional).")
    parser.add_argument("--budget", type=_budget_usd, default=None, help="Override estimated wedding budget (USD).")
    parser.add_argument(
        "--category",
        default=None,
        choices=[c.value for c in VendorCategory],
        help="Limit the flat list to one category.",
    )
    parser.add_argument("--limit", type=int, default=None, help="Max vendors (per category with --by-category).")
    parser.add_argument("--exclude", action="append", default=[], help="Vendor id to leave out (repeatable).")
    parser.add_argument(
        "--by-category",
        nargs="*",
        default=None,
        choices=[c.value for c in VendorCategory],
        help="Per-category mode. No values = the dashboard key categories.",
    )
    parser.add_argument("--explain", action="store_true", help="Print per-term score breakdown.")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    supabase = get_supabase_client(settings)

    try:
        session = _build_session(supabase, args.user_id, args.budget)
    except FetchError as e:
        print(f"[recommend] FETCH_FAILED {type(e).__name__}: {e}")
        return 1

    return run(
        supabase,
        session,
        category=args.category,
        limit=args.limit,
        exclude=args.exclude,
        by_category=args.by_category,
        explain=args.explain,
    )


if __name__ == "__main__":
    raise SystemExit(main())
