from celery import shared_task
from decimal import Decimal
from django.db.models import Sum
import logging

from apps.catalog.models import Work
from apps.royalties.models import RoyaltyReport

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')
MAX_SPLIT_TOTAL = Decimal('100.00')


@shared_task
def audit_report_totals(tenant_id=None):
    """Nightly check that every report header equals the sum of its earnings rows"""
    reports = RoyaltyReport.objects.annotate(
        earned_streams=Sum('work_earnings__streams', default=0),
        earned_revenue=Sum('work_earnings__revenue', default=Decimal('0')),
    ).order_by('id')
    if tenant_id is not None:
        reports = reports.filter(tenant_id=tenant_id)

    checked = 0
    mismatched = []
    for report in reports:
        checked += 1
        revenue = Decimal(report.earned_revenue).quantize(CENT)
        if report.earned_streams != report.total_streams or revenue != report.total_revenue:
            logger.error(
                f"Report {report.id} (tenant {report.tenant_id}) totals {report.total_streams} streams / "
                f"{report.total_revenue} revenue, earnings sum {report.earned_streams} / {revenue}"
            )
            mismatched.append(report.id)

    logger.info(f"Audited {checked} royalty reports: {len(mismatched)} mismatched")
    return {'reports_checked': checked, 'mismatched_reports': mismatched}


@shared_task
def audit_split_totals(tenant_id=None):
    """Nightly check that no work's royalty splits add up to more than 100%"""
    works = Work.objects.annotate(split_total=Sum('royalty_splits__percentage')).filter(
        split_total__gt=MAX_SPLIT_TOTAL
    ).order_by('id')
    if tenant_id is not None:
        works = works.filter(tenant_id=tenant_id)

    overflowing = []
    for work in works:
        logger.error(f"Work {work.id} (tenant {work.tenant_id}) splits total {work.split_total}%")
        overflowing.append(work.id)

    logger.info(f"Split audit finished: {len(overflowing)} works over 100%")
    return {'overflowing_works': overflowing}
