"""
Royalty report ingestion.

A platform report arrives as one (tenant, platform, period) header plus a
list of per-work lines. Either the report row and every earnings row are
committed together, or nothing is written.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.catalog.models import PLATFORMS, Work
from apps.common.exceptions import (
    DuplicateReport,
    InvalidEarnings,
    InvalidPeriod,
    InvalidPlatform,
    TenantNotFound,
    WorkNotOwnedByTenant,
)
from apps.common.transactions import conflict_guard
from apps.tenants.models import Tenant
from .models import RoyaltyReport, WorkEarnings

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
PERIOD_TYPES = tuple(value for value, _ in RoyaltyReport.PERIOD_CHOICES)


@dataclass(frozen=True)
class EarningLine:
    work_id: int
    streams: int
    revenue: Decimal


def _as_date(value, field):
    if isinstance(value, date):
        return value
    parsed = parse_date(value) if isinstance(value, str) else None
    if parsed is None:
        raise InvalidPeriod(reason=f"{field} is not a valid date: {value!r}")
    return parsed


def _as_line(entry):
    if isinstance(entry, EarningLine):
        return entry

    work_id = entry.get('work_id')
    streams = entry.get('streams', 0)
    if isinstance(streams, bool) or not isinstance(streams, int) or streams < 0:
        raise InvalidEarnings(work_id=work_id, reason='streams must be a non-negative integer')

    try:
        revenue = Decimal(str(entry.get('revenue', '0')))
    except (InvalidOperation, ValueError):
        raise InvalidEarnings(work_id=work_id, reason='revenue must be a decimal amount')
    if not revenue.is_finite() or revenue < 0:
        raise InvalidEarnings(work_id=work_id, reason='revenue must be a non-negative amount')
    if revenue != revenue.quantize(CENT):
        raise InvalidEarnings(work_id=work_id, reason='revenue has more than two fraction digits')

    return EarningLine(work_id=work_id, streams=streams, revenue=revenue)


def summarize(lines):
    """Report totals for a batch of earnings lines."""
    total_streams = sum(line.streams for line in lines)
    total_revenue = sum((line.revenue for line in lines), Decimal('0'))
    return total_streams, total_revenue.quantize(CENT)


@conflict_guard('ingest_report')
def ingest_report(tenant_id, platform, period_type, period_start, period_end, work_earnings):
    if platform not in PLATFORMS:
        raise InvalidPlatform([platform])
    if period_type not in PERIOD_TYPES:
        raise InvalidPeriod(reason=f"unknown period type {period_type!r}")

    period_start = _as_date(period_start, 'period_start')
    period_end = _as_date(period_end, 'period_end')
    if period_start > period_end:
        raise InvalidPeriod(reason=f"period_start {period_start} is after period_end {period_end}")

    lines = [_as_line(entry) for entry in work_earnings]
    total_streams, total_revenue = summarize(lines)
    period = {
        'tenant_id': tenant_id,
        'platform': platform,
        'period_start': period_start,
        'period_end': period_end,
    }

    try:
        with transaction.atomic():
            if not Tenant.objects.filter(pk=tenant_id).exists():
                raise TenantNotFound(tenant_id=tenant_id)

            owned = set(
                Work.objects.filter(
                    id__in={line.work_id for line in lines},
                    tenant_id=tenant_id
                ).values_list('id', flat=True)
            )
            for line in lines:
                if line.work_id not in owned:
                    raise WorkNotOwnedByTenant(work_id=line.work_id, tenant_id=tenant_id)

            if RoyaltyReport.objects.filter(**period).exists():
                raise DuplicateReport(**period)

            report = RoyaltyReport.objects.create(
                period_type=period_type,
                total_streams=total_streams,
                total_revenue=total_revenue,
                processed_at=timezone.now(),
                **period
            )
            WorkEarnings.objects.bulk_create([
                WorkEarnings(
                    work_id=line.work_id,
                    royalty_report=report,
                    platform=platform,
                    streams=line.streams,
                    revenue=line.revenue,
                )
                for line in lines
            ])
    except IntegrityError as exc:
        # Lost the race against a concurrent ingestion of the same period
        logger.warning(f"Integrity error ingesting {platform} report for tenant {tenant_id}: {exc}")
        raise DuplicateReport(**period) from exc

    logger.info(
        f"Ingested {platform} report {report.id} for tenant {tenant_id}: "
        f"{len(lines)} works, {total_streams} streams, {total_revenue} revenue"
    )
    return report
