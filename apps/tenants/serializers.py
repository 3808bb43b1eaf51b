from rest_framework import serializers
from .models import Tenant
from .services import create_tenant


class TenantSerializer(serializers.ModelSerializer):
    max_artists = serializers.IntegerField(min_value=1, required=False)
    max_works = serializers.IntegerField(min_value=1, required=False)

    class Meta:
        model = Tenant
        fields = [
            'id', 'name', 'slug', 'contact_email', 'website', 'description',
            'subscription_plan', 'max_artists', 'max_works', 'is_active',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['is_active', 'created_at', 'updated_at']

    def create(self, validated_data):
        # Ceilings left out fall back to the plan defaults
        return create_tenant(**validated_data)


class QuotaDecisionSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    resource = serializers.CharField()
    allowed = serializers.BooleanField()
    reason = serializers.CharField(allow_null=True)
    current = serializers.IntegerField(allow_null=True)
    limit = serializers.IntegerField(allow_null=True)
