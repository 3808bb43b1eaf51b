from rest_framework import serializers


class TopWorkSerializer(serializers.Serializer):
    work_id = serializers.IntegerField()
    title = serializers.CharField()
    artist_name = serializers.CharField()
    streams = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=None, decimal_places=2)


class TenantAnalyticsSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    total_artists = serializers.IntegerField()
    total_works = serializers.IntegerField()
    total_streams = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=None, decimal_places=2)
    monthly_growth = serializers.DecimalField(max_digits=None, decimal_places=2)
    top_performing_works = TopWorkSerializer(many=True)


class MonthlyStreamsSerializer(serializers.Serializer):
    month = serializers.CharField()
    streams = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=None, decimal_places=2)


class PlatformBreakdownSerializer(serializers.Serializer):
    platform = serializers.CharField()
    streams = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=None, decimal_places=2)


class ArtistAnalyticsSerializer(serializers.Serializer):
    artist_id = serializers.IntegerField()
    total_works = serializers.IntegerField()
    total_streams = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=None, decimal_places=2)
    monthly_streams = MonthlyStreamsSerializer(many=True)
    platform_breakdown = PlatformBreakdownSerializer(many=True)
