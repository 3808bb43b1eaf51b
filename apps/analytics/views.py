from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .repository import AnalyticsRepository
from .serializers import ArtistAnalyticsSerializer, TenantAnalyticsSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def tenant_analytics(request, tenant_id):
    """Catalog size, lifetime earnings, month-over-month growth and top works"""
    data = AnalyticsRepository.tenant_analytics(tenant_id)
    return Response(TenantAnalyticsSerializer(data).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def artist_analytics(request, artist_id):
    """Lifetime earnings of one artist by month and by platform"""
    data = AnalyticsRepository.artist_analytics(artist_id)
    return Response(ArtistAnalyticsSerializer(data).data)
