from celery import shared_task
import logging

from apps.catalog.models import Work
from .machine import resolve_distribution
from .pubsub import DistributionPublisher

logger = logging.getLogger(__name__)


@shared_task
def dispatch_distribution(work_id, platforms):
    """Publish one delivery request per platform for a work in ``processing``."""
    work = Work.objects.get(pk=work_id)
    if work.distribution_status != Work.PROCESSING:
        logger.info(f"Skipping dispatch for work {work_id}: status is {work.distribution_status}")
        return {'work_id': work_id, 'dispatched': [], 'status': work.distribution_status}

    publisher = DistributionPublisher()
    message_ids = {}
    try:
        for platform in platforms:
            message_ids[platform] = publisher.publish_delivery_request(work, platform)
    except Exception as e:
        logger.error(f"Delivery hand-off failed for work {work_id}: {e}")
        resolve_distribution(work_id, Work.FAILED)
        raise

    logger.info(f"Dispatched work {work_id} to {len(message_ids)} platforms")
    return {'work_id': work_id, 'dispatched': message_ids, 'status': work.distribution_status}
