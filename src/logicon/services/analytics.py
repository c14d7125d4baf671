"""Revenue rollups over historical shipments."""

import calendar
import logging
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from logicon.db.store import LogisticsStore
from logicon.models import Period, RevenueBucket, RevenueQuery
from logicon.services.validation import parse_query, resolve_now

logger = logging.getLogger(__name__)


def _months_back(now: datetime, months: int) -> datetime:
    year, month = divmod(now.year * 12 + now.month - 1 - months, 12)
    month += 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def window_start(period: Period, now: datetime) -> datetime:
    """Start of the trailing one-period window ending at ``now``.

    Calendar periods keep the day of month, clamped to the target month's
    length (31 March minus a month is the last day of February).
    """
    if period is Period.DAY:
        return now - timedelta(days=1)
    if period is Period.WEEK:
        return now - timedelta(weeks=1)
    if period is Period.MONTH:
        return _months_back(now, 1)
    return _months_back(now, 12)


def bucket_label(period: Period, timestamp: datetime) -> str:
    ts = timestamp.astimezone(timezone.utc)
    if period is Period.DAY:
        return ts.strftime("%Y-%m-%d")
    if period is Period.WEEK:
        iso_year, iso_week, _ = ts.isocalendar()
        return f"{iso_year:04d}-W{iso_week:02d}"
    if period is Period.MONTH:
        return ts.strftime("%Y-%m")
    return f"{ts.year:04d}"


def revenue_by_period(
    store: LogisticsStore,
    period: Period | str | None = None,
    now: datetime | None = None,
) -> list[RevenueBucket]:
    """Revenue and shipment counts per period bucket over the trailing period."""
    query = parse_query(RevenueQuery, period=period)
    now = resolve_now(now)
    since = window_start(query.period, now)

    totals: dict[str, Decimal] = defaultdict(Decimal)
    counts: dict[str, int] = defaultdict(int)
    for shipment in store.fetch_shipments(since):
        if shipment.timestamp <= since:
            continue
        label = bucket_label(query.period, shipment.timestamp)
        totals[label] += shipment.revenue
        counts[label] += 1

    logger.debug("%d shipments since %s in %d buckets", sum(counts.values()), since.isoformat(), len(counts))
    return [
        RevenueBucket(timeframe=label, total=totals[label], shipments=counts[label])
        for label in sorted(totals)
    ]
