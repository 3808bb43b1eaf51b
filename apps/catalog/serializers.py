from rest_framework import serializers
from .models import Artist, Work
from . import services


class ArtistSerializer(serializers.ModelSerializer):
    tenant_id = serializers.IntegerField()

    class Meta:
        model = Artist
        fields = [
            'id', 'tenant_id', 'user_id', 'stage_name', 'legal_name', 'bio',
            'avatar_url', 'genres', 'is_active', 'created_at', 'updated_at',
        ]
        read_only_fields = ['is_active', 'created_at', 'updated_at']

    def create(self, validated_data):
        return services.create_artist(**validated_data)


class WorkSerializer(serializers.ModelSerializer):
    tenant_id = serializers.IntegerField()
    artist_id = serializers.IntegerField()
    # Range checked by the service so a bad value reports InvalidDuration
    duration_seconds = serializers.IntegerField()

    class Meta:
        model = Work
        fields = [
            'id', 'tenant_id', 'artist_id', 'title', 'album', 'genre',
            'duration_seconds', 'release_date', 'isrc', 'upc', 'audio_url',
            'artwork_url', 'lyrics', 'is_explicit', 'distribution_status',
            'distribution_platforms', 'created_at', 'updated_at',
        ]
        read_only_fields = [
            'distribution_status', 'distribution_platforms', 'created_at', 'updated_at',
        ]

    def create(self, validated_data):
        return services.create_work(**validated_data)
