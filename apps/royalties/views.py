from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.exceptions import ReportNotFound
from .ingestion import ingest_report
from .models import RoyaltyReport
from .serializers import (
    ReportRequestSerializer,
    RoyaltyReportSerializer,
    RoyaltySplitSerializer,
    SplitRequestSerializer,
)
from .splits import add_split, list_splits, recipient_names


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def work_splits(request, work_id):
    """List a work's royalty splits or append one."""
    if request.method == 'POST':
        payload = SplitRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        split = add_split(work_id, **payload.validated_data)
        serializer = RoyaltySplitSerializer(
            split, context={'recipient_names': recipient_names([split])}
        )
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    splits = list_splits(work_id)
    serializer = RoyaltySplitSerializer(
        splits, many=True, context={'recipient_names': recipient_names(splits)}
    )
    return Response({
        'work_id': work_id,
        'splits': serializer.data,
    })


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def royalty_reports(request):
    """Ingest a platform report, or list a tenant's reports (``?tenant_id=``)."""
    if request.method == 'POST':
        payload = ReportRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        report = ingest_report(**payload.validated_data)
        return Response(RoyaltyReportSerializer(report).data, status=status.HTTP_201_CREATED)

    tenant_id = request.query_params.get('tenant_id')
    if not tenant_id or not tenant_id.isdigit():
        raise ValidationError({'tenant_id': 'This query parameter is required.'})
    reports = RoyaltyReport.objects.filter(tenant_id=int(tenant_id)).order_by('-period_start', 'id')
    return Response(RoyaltyReportSerializer(reports, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def royalty_report_detail(request, report_id):
    try:
        report = RoyaltyReport.objects.get(pk=report_id)
    except RoyaltyReport.DoesNotExist:
        raise ReportNotFound(report_id=report_id)
    return Response(RoyaltyReportSerializer(report).data)
