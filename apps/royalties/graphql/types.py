import strawberry_django
from strawberry import auto
from apps.catalog.graphql.types import WorkType
from apps.royalties.models import RoyaltySplit


@strawberry_django.type(RoyaltySplit)
class RoyaltySplitType:
    id: auto
    work: WorkType
    recipient_type: auto
    recipient_id: auto
    percentage: auto
    role_description: auto
    created_at: auto
