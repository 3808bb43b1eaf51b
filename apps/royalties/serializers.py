from rest_framework import serializers
from .models import RoyaltySplit, RoyaltyReport


class RoyaltySplitSerializer(serializers.ModelSerializer):
    work_id = serializers.IntegerField(read_only=True)
    recipient_name = serializers.SerializerMethodField()

    class Meta:
        model = RoyaltySplit
        fields = [
            'id', 'work_id', 'recipient_type', 'recipient_id', 'recipient_name',
            'percentage', 'role_description', 'created_at',
        ]

    def get_recipient_name(self, obj):
        return self.context.get('recipient_names', {}).get(obj.id)


class SplitRequestSerializer(serializers.Serializer):
    # Enum membership and percentage range are checked by the split ledger
    recipient_type = serializers.CharField()
    recipient_id = serializers.IntegerField()
    percentage = serializers.DecimalField(max_digits=None, decimal_places=None)
    role_description = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class EarningLineSerializer(serializers.Serializer):
    work_id = serializers.IntegerField()
    streams = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=None, decimal_places=None)


class ReportRequestSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    platform = serializers.CharField()
    period_type = serializers.CharField()
    period_start = serializers.DateField()
    period_end = serializers.DateField()
    work_earnings = EarningLineSerializer(many=True, allow_empty=True)


class RoyaltyReportSerializer(serializers.ModelSerializer):
    tenant_id = serializers.IntegerField(read_only=True)
    earnings_count = serializers.SerializerMethodField()

    class Meta:
        model = RoyaltyReport
        fields = [
            'id', 'tenant_id', 'platform', 'period_type', 'period_start', 'period_end',
            'total_streams', 'total_revenue', 'processed_at', 'created_at', 'earnings_count',
        ]

    def get_earnings_count(self, obj):
        return obj.work_earnings.count()
