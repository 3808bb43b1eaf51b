import strawberry_django
from strawberry import auto
from apps.catalog.models import Artist, Work


@strawberry_django.type(Artist)
class ArtistType:
    id: auto
    stage_name: auto
    legal_name: auto
    is_active: auto


@strawberry_django.type(Work)
class WorkType:
    id: auto
    artist: ArtistType
    title: auto
    genre: auto
    duration_seconds: auto
    distribution_status: auto
    distribution_platforms: auto
