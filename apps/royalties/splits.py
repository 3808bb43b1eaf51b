"""
Royalty split ledger.

A work's splits are append-only percentage claims whose sum must never pass
100. The sum check and the insert run in one transaction holding a row lock
on the work, so concurrent ``add_split`` calls for the same work are
serialized and each one sees the committed total of the others.
"""
from decimal import Decimal, InvalidOperation
import logging

from django.db import transaction
from django.db.models import Sum

from apps.catalog.models import Artist, Work
from apps.common.exceptions import (
    InvalidPercentage,
    InvalidRecipientType,
    SplitOverflow,
    WorkNotFound,
)
from apps.common.transactions import conflict_guard
from .models import RoyaltySplit

logger = logging.getLogger(__name__)

MAX_TOTAL = Decimal('100.00')
CENT = Decimal('0.01')
RECIPIENT_TYPES = tuple(value for value, _ in RoyaltySplit.RECIPIENT_CHOICES)


def _as_percentage(value):
    try:
        percentage = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidPercentage(percentage=value)

    if not percentage.is_finite() or percentage <= 0 or percentage > MAX_TOTAL:
        raise InvalidPercentage(percentage=value)
    if percentage != percentage.quantize(CENT):
        # Stored with two fraction digits; anything finer would be rounded silently
        raise InvalidPercentage(percentage=value)
    return percentage.quantize(CENT)


def split_total(work_id):
    total = RoyaltySplit.objects.filter(work_id=work_id).aggregate(total=Sum('percentage'))['total']
    return (total or Decimal('0')).quantize(CENT)


@conflict_guard('add_split')
def add_split(work_id, recipient_type, recipient_id, percentage, role_description=None):
    if recipient_type not in RECIPIENT_TYPES:
        raise InvalidRecipientType(recipient_type=recipient_type)
    percentage = _as_percentage(percentage)

    with transaction.atomic():
        try:
            work = Work.objects.select_for_update().get(pk=work_id)
        except Work.DoesNotExist:
            raise WorkNotFound(work_id=work_id)

        current = split_total(work.id)
        if current + percentage > MAX_TOTAL:
            logger.info(
                f"Split rejected for work {work_id}: current {current}%, attempted {percentage}%"
            )
            raise SplitOverflow(work_id=work_id, current=current, attempted=percentage)

        split = RoyaltySplit.objects.create(
            work=work,
            recipient_type=recipient_type,
            recipient_id=recipient_id,
            percentage=percentage,
            role_description=role_description,
        )

    logger.info(f"Split {split.id} added to work {work_id}: {recipient_type} {percentage}%")
    return split


def list_splits(work_id):
    if not Work.objects.filter(pk=work_id).exists():
        raise WorkNotFound(work_id=work_id)
    return list(RoyaltySplit.objects.filter(work_id=work_id).order_by('id'))


def recipient_names(splits):
    """Display names for artist recipients, keyed by split id."""
    artist_ids = {s.recipient_id for s in splits if s.recipient_type == 'artist'}
    if not artist_ids:
        return {}

    names = dict(Artist.objects.filter(id__in=artist_ids).values_list('id', 'stage_name'))
    return {
        s.id: names.get(s.recipient_id)
        for s in splits
        if s.recipient_type == 'artist'
    }
