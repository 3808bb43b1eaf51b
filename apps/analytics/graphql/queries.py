import strawberry
from apps.analytics.repository import AnalyticsRepository
from .types import ArtistAnalyticsType, TenantAnalyticsType


@strawberry.type
class AnalyticsQueries:

    @strawberry.field
    def tenant_analytics(self, tenant_id: int) -> TenantAnalyticsType:
        return TenantAnalyticsType.from_dict(AnalyticsRepository.tenant_analytics(tenant_id))

    @strawberry.field
    def artist_analytics(self, artist_id: int) -> ArtistAnalyticsType:
        return ArtistAnalyticsType.from_dict(AnalyticsRepository.artist_analytics(artist_id))
