from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db.models import Sum
from django.db.models.functions import TruncMonth
from django.utils import timezone

from apps.catalog.models import Artist, Work
from apps.common.exceptions import ArtistNotFound, TenantNotFound
from apps.royalties.models import WorkEarnings
from apps.tenants.models import Tenant
from .performance import monitor_query_performance

CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def _money(value):
    return (value or ZERO).quantize(CENT)


def month_bounds(today):
    """First day of the previous, current and next calendar month."""
    current_start = today.replace(day=1)
    previous_start = (current_start - timedelta(days=1)).replace(day=1)
    next_start = (current_start + timedelta(days=32)).replace(day=1)
    return previous_start, current_start, next_start


def growth_percentage(current, previous):
    if not previous:
        return ZERO
    return ((current - previous) / previous * 100).quantize(CENT)


class AnalyticsRepository:
    """Read-only rollups over the earnings ledger, computed fresh on every call."""

    @staticmethod
    def _revenue_between(earnings, start, end):
        return _money(
            earnings.filter(
                royalty_report__period_start__gte=start,
                royalty_report__period_start__lt=end,
            ).aggregate(revenue=Sum('revenue'))['revenue']
        )

    @staticmethod
    @monitor_query_performance
    def tenant_analytics(tenant_id, today=None):
        if not Tenant.objects.filter(pk=tenant_id).exists():
            raise TenantNotFound(tenant_id=tenant_id)

        earnings = WorkEarnings.objects.filter(work__tenant_id=tenant_id)
        totals = earnings.aggregate(streams=Sum('streams'), revenue=Sum('revenue'))

        previous_start, current_start, next_start = month_bounds(today or timezone.localdate())
        current_revenue = AnalyticsRepository._revenue_between(earnings, current_start, next_start)
        previous_revenue = AnalyticsRepository._revenue_between(earnings, previous_start, current_start)

        top_works = (
            earnings.values('work_id', 'work__title', 'work__artist__stage_name')
            .annotate(streams=Sum('streams'), revenue=Sum('revenue'))
            .order_by('-streams', 'work_id')[:settings.ANALYTICS_TOP_WORKS_LIMIT]
        )

        return {
            'tenant_id': tenant_id,
            'total_artists': Artist.objects.filter(tenant_id=tenant_id).count(),
            'total_works': Work.objects.filter(tenant_id=tenant_id).count(),
            'total_streams': totals['streams'] or 0,
            'total_revenue': _money(totals['revenue']),
            'monthly_growth': growth_percentage(current_revenue, previous_revenue),
            'top_performing_works': [{
                'work_id': row['work_id'],
                'title': row['work__title'],
                'artist_name': row['work__artist__stage_name'],
                'streams': row['streams'] or 0,
                'revenue': _money(row['revenue']),
            } for row in top_works],
        }

    @staticmethod
    @monitor_query_performance
    def artist_analytics(artist_id):
        if not Artist.objects.filter(pk=artist_id).exists():
            raise ArtistNotFound(artist_id=artist_id)

        earnings = WorkEarnings.objects.filter(work__artist_id=artist_id)
        totals = earnings.aggregate(streams=Sum('streams'), revenue=Sum('revenue'))

        monthly = (
            earnings.annotate(month=TruncMonth('royalty_report__period_start'))
            .values('month')
            .annotate(streams=Sum('streams'), revenue=Sum('revenue'))
            .order_by('month')
        )
        platforms = (
            earnings.values('platform')
            .annotate(streams=Sum('streams'), revenue=Sum('revenue'))
            .order_by('platform')
        )

        return {
            'artist_id': artist_id,
            'total_works': Work.objects.filter(artist_id=artist_id).count(),
            'total_streams': totals['streams'] or 0,
            'total_revenue': _money(totals['revenue']),
            'monthly_streams': [{
                'month': row['month'].strftime('%Y-%m'),
                'streams': row['streams'] or 0,
                'revenue': _money(row['revenue']),
            } for row in monthly if row['streams'] or row['revenue']],
            'platform_breakdown': [{
                'platform': row['platform'],
                'streams': row['streams'] or 0,
                'revenue': _money(row['revenue']),
            } for row in platforms],
        }
