from rest_framework import serializers
from apps.catalog.models import Work


class DistributeRequestSerializer(serializers.Serializer):
    # Membership is checked by the state machine so unknown names are reported together
    platforms = serializers.ListField(child=serializers.CharField(), allow_empty=True)


class DistributionStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[Work.LIVE, Work.FAILED, Work.REMOVED])
