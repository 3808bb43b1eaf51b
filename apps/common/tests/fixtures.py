"""Small builders shared by the app test suites."""
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from decimal import Decimal
import random
import threading
import time

from django.db import connection
from django.utils import timezone

from apps.catalog.models import Artist, Work
from apps.common.exceptions import EngineError, TransactionConflict
from apps.royalties.models import RoyaltyReport, WorkEarnings
from apps.tenants.models import Tenant


def make_tenant(slug='acme', **overrides):
    values = {
        'name': slug.replace('-', ' ').title(),
        'slug': slug,
        'contact_email': f'royalties@{slug}.example.com',
    }
    values.update(overrides)
    return Tenant.objects.create(**values)


def make_artist(tenant, stage_name='Nova', **overrides):
    return Artist.objects.create(tenant=tenant, stage_name=stage_name, **overrides)


def make_work(tenant, artist, title='First Light', deliverable=True, **overrides):
    values = {
        'tenant': tenant,
        'artist': artist,
        'title': title,
        'genre': 'pop',
        'duration_seconds': 210,
    }
    if deliverable:
        values['audio_url'] = f'https://cdn.example.com/audio/{title.lower().replace(" ", "-")}.wav'
        values['artwork_url'] = f'https://cdn.example.com/art/{title.lower().replace(" ", "-")}.jpg'
    values.update(overrides)
    return Work.objects.create(**values)


def make_report(tenant, platform, period_start, lines, period_end=None, period_type='monthly'):
    """Write a report and its earnings rows directly, bypassing ingestion checks.

    ``lines`` is a list of ``(work, streams, revenue)`` tuples.
    """
    report = RoyaltyReport.objects.create(
        tenant=tenant,
        platform=platform,
        period_type=period_type,
        period_start=period_start,
        period_end=period_end or _month_end(period_start),
        total_streams=sum(streams for _, streams, _ in lines),
        total_revenue=sum((Decimal(revenue) for _, _, revenue in lines), Decimal('0')),
        processed_at=timezone.now(),
    )
    for work, streams, revenue in lines:
        WorkEarnings.objects.create(
            work=work,
            royalty_report=report,
            platform=platform,
            streams=streams,
            revenue=Decimal(revenue),
        )
    return report


def _month_end(day):
    if day.month == 12:
        return date(day.year, 12, 31)
    return date.fromordinal(date(day.year, day.month + 1, 1).toordinal() - 1)


def run_concurrently(call, args, attempts=50):
    """Run ``call(arg)`` for every arg on its own thread, all released at once.

    A ``TransactionConflict`` is retried after a short random pause until the
    call settles, so each outcome is either ``'ok'`` or the name of the engine
    error it raised. Returns ``(outcomes, conflicts)``.
    """
    barrier = threading.Barrier(len(args))
    conflicts = []

    def worker(arg):
        barrier.wait()
        try:
            for _ in range(attempts):
                try:
                    call(arg)
                    return 'ok'
                except TransactionConflict:
                    conflicts.append(arg)
                    time.sleep(random.uniform(0.001, 0.01))
                except EngineError as exc:
                    return type(exc).__name__
            return 'conflict'
        finally:
            connection.close()

    with ThreadPoolExecutor(max_workers=len(args)) as pool:
        outcomes = list(pool.map(worker, args))
    return outcomes, len(conflicts)
