"""Aggregate progress counts for the dashboard."""
import math

from schemas.dashboard import DashboardStats
from services.catalog import Catalog
from services.progress import ProgressStore


def mastery_percent(mastered: int, total: int) -> int:
    if total == 0:
        return 0
    # Round half up, so 2/8 -> 25 and 1/8 -> 13.
    return math.floor(mastered / total * 100 + 0.5)


def build_dashboard(catalog: Catalog, store: ProgressStore) -> DashboardStats:
    counts = store.counts(catalog.words)
    total = len(catalog)
    return DashboardStats(
        total=total,
        learning=counts["learning"],
        mastered=counts["mastered"],
        percent=mastery_percent(counts["mastered"], total),
    )
