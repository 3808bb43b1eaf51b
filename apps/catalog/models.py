from django.db import models
from django.core.exceptions import ValidationError

PLATFORM_CHOICES = [
    ('spotify', 'Spotify'),
    ('apple_music', 'Apple Music'),
    ('youtube_music', 'YouTube Music'),
    ('amazon_music', 'Amazon Music'),
    ('deezer', 'Deezer'),
]
PLATFORMS = tuple(value for value, _ in PLATFORM_CHOICES)


class Artist(models.Model):
    class Meta:
        app_label = 'catalog'
        db_table = 'artists'
        ordering = ['id']
        indexes = [
            models.Index(fields=['tenant', 'is_active'], name='artists_tenant_active_idx'),
        ]

    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.CASCADE, related_name='artists')
    # Account ids live in the identity service, not in this database
    user_id = models.BigIntegerField(null=True, blank=True)
    stage_name = models.CharField(max_length=200)
    legal_name = models.CharField(max_length=200, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    avatar_url = models.URLField(blank=True, null=True)
    genres = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.stage_name


class Work(models.Model):
    class Meta:
        app_label = 'catalog'
        db_table = 'works'
        ordering = ['id']
        indexes = [
            models.Index(fields=['tenant', 'distribution_status'], name='works_tenant_status_idx'),
            models.Index(fields=['artist'], name='works_artist_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(duration_seconds__gt=0),
                name='work_duration_positive'
            )
        ]

    # Distribution lifecycle
    PENDING = 'pending'
    PROCESSING = 'processing'
    LIVE = 'live'
    FAILED = 'failed'
    REMOVED = 'removed'
    STATUS_CHOICES = [
        (PENDING, 'Pending'),
        (PROCESSING, 'Processing'),
        (LIVE, 'Live'),
        (FAILED, 'Failed'),
        (REMOVED, 'Removed'),
    ]
    VALID_TRANSITIONS = {
        PENDING: [PROCESSING],
        PROCESSING: [LIVE, FAILED],
        LIVE: [REMOVED],
        FAILED: [],  # Terminal state
        REMOVED: [],  # Terminal state
    }

    tenant = models.ForeignKey('tenants.Tenant', on_delete=models.CASCADE, related_name='works')
    artist = models.ForeignKey(Artist, on_delete=models.PROTECT, related_name='works')
    title = models.CharField(max_length=255)
    album = models.CharField(max_length=255, blank=True, null=True)
    genre = models.CharField(max_length=100)
    duration_seconds = models.PositiveIntegerField()
    release_date = models.DateField(blank=True, null=True)
    isrc = models.CharField(max_length=15, blank=True, null=True)
    upc = models.CharField(max_length=14, blank=True, null=True)
    audio_url = models.URLField(max_length=500, blank=True, null=True)
    artwork_url = models.URLField(max_length=500, blank=True, null=True)
    lyrics = models.TextField(blank=True, null=True)
    is_explicit = models.BooleanField(default=False)
    distribution_status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=PENDING)
    distribution_platforms = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.title

    def clean(self):
        if self.duration_seconds is not None and self.duration_seconds <= 0:
            raise ValidationError("duration_seconds must be a positive integer")
        if self.artist_id and self.tenant_id and self.artist.tenant_id != self.tenant_id:
            raise ValidationError("artist must belong to the same tenant as the work")

    def can_transition_to(self, new_status):
        """Validate distribution status transitions"""
        return new_status in self.VALID_TRANSITIONS.get(self.distribution_status, [])

    @property
    def has_audio(self):
        return bool(self.audio_url)

    @property
    def has_artwork(self):
        return bool(self.artwork_url)
