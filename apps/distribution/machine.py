"""
Distribution lifecycle of a work.

    pending -> processing -> live | failed
    live -> removed

``request_distribution`` performs the pending -> processing step after checking
the work is deliverable; the actual delivery runs in the platform dispatcher,
which reports back through ``resolve_distribution``. There is no way back
from failed or removed.
"""
import logging

from django.db import transaction
from django.utils import timezone

from apps.catalog.models import PLATFORMS, Work
from apps.common.exceptions import (
    ArtistInactive,
    EmptyPlatformList,
    InvalidPlatform,
    InvalidTransition,
    MissingArtwork,
    MissingAudio,
    WorkNotFound,
)
from apps.common.transactions import conflict_guard

logger = logging.getLogger(__name__)


def _locked_work(work_id):
    try:
        return Work.objects.select_for_update().get(pk=work_id)
    except Work.DoesNotExist:
        raise WorkNotFound(work_id=work_id)


def validate_platforms(platforms):
    """Return the requested platforms de-duplicated in request order."""
    requested = list(dict.fromkeys(platforms or []))
    if not requested:
        raise EmptyPlatformList()

    invalid = [p for p in requested if p not in PLATFORMS]
    if invalid:
        raise InvalidPlatform(invalid)
    return requested


def validate_deliverable(work):
    if not work.has_audio:
        raise MissingAudio(work_id=work.id)
    if not work.has_artwork:
        raise MissingArtwork(work_id=work.id)
    if not work.artist.is_active:
        raise ArtistInactive(artist_id=work.artist_id)


def _move(work, target, **fields):
    """Conditional single-row update; False when another writer moved the row first."""
    updated = Work.objects.filter(
        pk=work.pk,
        distribution_status=work.distribution_status
    ).update(distribution_status=target, updated_at=timezone.now(), **fields)
    return updated == 1


@conflict_guard('request_distribution')
def request_distribution(work_id, platforms):
    from .tasks import dispatch_distribution

    with transaction.atomic():
        work = _locked_work(work_id)
        validate_deliverable(work)
        requested = validate_platforms(platforms)

        if work.distribution_status == Work.PROCESSING:
            logger.info(f"Work {work_id} is already processing, distribution not re-triggered")
            return work
        if not work.can_transition_to(Work.PROCESSING):
            raise InvalidTransition(
                work_id=work_id, current=work.distribution_status, target=Work.PROCESSING
            )

        if not _move(work, Work.PROCESSING, distribution_platforms=requested):
            work.refresh_from_db()
            if work.distribution_status == Work.PROCESSING:
                return work
            raise InvalidTransition(
                work_id=work_id, current=work.distribution_status, target=Work.PROCESSING
            )

        transaction.on_commit(lambda: dispatch_distribution.delay(work.id, requested))

    work.refresh_from_db()
    logger.info(f"Work {work_id} queued for distribution to {', '.join(requested)}")
    return work


RESOLVABLE = (Work.LIVE, Work.FAILED, Work.REMOVED)


@conflict_guard('resolve_distribution')
def resolve_distribution(work_id, status):
    """Apply the dispatcher's outcome: processing -> live/failed, live -> removed.

    Entering processing only happens through request_distribution.
    """
    with transaction.atomic():
        work = _locked_work(work_id)
        if status not in RESOLVABLE or not work.can_transition_to(status) or not _move(work, status):
            raise InvalidTransition(work_id=work_id, current=work.distribution_status, target=status)

    work.refresh_from_db()
    logger.info(f"Work {work_id} distribution resolved to {status}")
    return work
