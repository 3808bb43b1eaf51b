# apps/distribution/pubsub.py
from google.cloud import pubsub_v1
from django.conf import settings
from django.utils import timezone
from tenacity import retry, stop_after_attempt, wait_exponential
import json


class DistributionPublisher:
    """Hands delivery requests to the platform dispatcher, one message per platform."""

    def __init__(self, client=None):
        self.publisher = client or pubsub_v1.PublisherClient()
        self.project_id = settings.GCP_PROJECT_ID

    def topic_for(self, tenant_id):
        return self.publisher.topic_path(
            self.project_id,
            f"{settings.DISTRIBUTION_TOPIC_PREFIX}-{tenant_id}"
        )

    @retry(stop=stop_after_attempt(3), wait=wait_exponential(multiplier=1, min=1, max=10), reraise=True)
    def publish_delivery_request(self, work, platform):
        message = {
            'work_id': work.id,
            'tenant_id': work.tenant_id,
            'artist_id': work.artist_id,
            'platform': platform,
            'title': work.title,
            'isrc': work.isrc,
            'upc': work.upc,
            'audio_url': work.audio_url,
            'artwork_url': work.artwork_url,
            'requested_at': timezone.now().isoformat(),
        }

        message_data = json.dumps(message).encode("utf-8")
        future = self.publisher.publish(self.topic_for(work.tenant_id), message_data, platform=platform)
        return future.result(timeout=30)
