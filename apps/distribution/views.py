from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.catalog.serializers import WorkSerializer
from .machine import request_distribution, resolve_distribution
from .serializers import DistributeRequestSerializer, DistributionStatusSerializer


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def distribute_work(request, work_id):
    """Move a deliverable work to ``processing`` and queue the platform hand-off."""
    payload = DistributeRequestSerializer(data=request.data)
    payload.is_valid(raise_exception=True)

    work = request_distribution(work_id, payload.validated_data['platforms'])
    return Response(WorkSerializer(work).data, status=status.HTTP_202_ACCEPTED)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def distribution_status(request, work_id):
    """Delivery callback: processing -> live/failed, live -> removed."""
    payload = DistributionStatusSerializer(data=request.data)
    payload.is_valid(raise_exception=True)

    work = resolve_distribution(work_id, payload.validated_data['status'])
    return Response(WorkSerializer(work).data)
