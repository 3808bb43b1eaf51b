from rest_framework import mixins, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.exceptions import TenantNotFound
from .models import Tenant
from .quota import check_quota
from .serializers import QuotaDecisionSerializer, TenantSerializer


class TenantViewSet(mixins.CreateModelMixin,
                    mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    viewsets.GenericViewSet):
    permission_classes = [IsAuthenticated]
    serializer_class = TenantSerializer
    queryset = Tenant.objects.all()
    lookup_value_regex = r'\d+'

    def get_object(self):
        try:
            return Tenant.objects.get(pk=self.kwargs['pk'])
        except Tenant.DoesNotExist:
            raise TenantNotFound(tenant_id=int(self.kwargs['pk']))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def tenant_quota(request, tenant_id, resource):
    """Would one more artist/work be accepted for this tenant right now?"""
    decision = check_quota(tenant_id, resource)
    return Response(QuotaDecisionSerializer(decision.as_dict()).data)
