"""Artist and work provisioning, gated by the tenant quota guard."""
import logging

from django.db import transaction

from apps.common.exceptions import (
    ArtistNotFound,
    ArtistTenantMismatch,
    InvalidDuration,
    TenantNotFound,
)
from apps.common.transactions import conflict_guard
from apps.tenants.models import Tenant
from apps.tenants.quota import ARTISTS, WORKS, enforce_quota
from .models import Artist, Work

logger = logging.getLogger(__name__)


@conflict_guard('create_artist')
def create_artist(tenant_id, stage_name, user_id=None, legal_name=None, bio=None,
                  avatar_url=None, genres=None):
    with transaction.atomic():
        tenant = enforce_quota(tenant_id, ARTISTS)
        artist = Artist.objects.create(
            tenant=tenant,
            user_id=user_id,
            stage_name=stage_name,
            legal_name=legal_name,
            bio=bio,
            avatar_url=avatar_url,
            genres=genres or [],
        )

    logger.info(f"Artist {artist.id} created for tenant {tenant_id}")
    return artist


@conflict_guard('create_work')
def create_work(tenant_id, artist_id, title, genre, duration_seconds, **attributes):
    """Create a work in ``pending`` status.

    ``attributes`` carries the optional catalog metadata (album, release_date,
    isrc, upc, audio_url, artwork_url, lyrics, is_explicit).
    """
    if not isinstance(duration_seconds, int) or duration_seconds <= 0:
        raise InvalidDuration(duration_seconds=duration_seconds)

    with transaction.atomic():
        tenant = enforce_quota(tenant_id, WORKS)

        try:
            artist = Artist.objects.get(pk=artist_id)
        except Artist.DoesNotExist:
            raise ArtistNotFound(artist_id=artist_id)
        if artist.tenant_id != tenant.id:
            raise ArtistTenantMismatch(artist_id=artist_id, tenant_id=tenant_id)

        work = Work.objects.create(
            tenant=tenant,
            artist=artist,
            title=title,
            genre=genre,
            duration_seconds=duration_seconds,
            **attributes
        )

    logger.info(f"Work {work.id} created for tenant {tenant_id} (artist {artist_id})")
    return work


def _require_tenant(tenant_id):
    if not Tenant.objects.filter(pk=tenant_id).exists():
        raise TenantNotFound(tenant_id=tenant_id)


def artists_for_tenant(tenant_id):
    _require_tenant(tenant_id)
    return Artist.objects.filter(tenant_id=tenant_id).order_by('id')


def works_for_tenant(tenant_id):
    _require_tenant(tenant_id)
    return Work.objects.filter(tenant_id=tenant_id).select_related('artist').order_by('id')


def works_for_artist(artist_id):
    if not Artist.objects.filter(pk=artist_id).exists():
        raise ArtistNotFound(artist_id=artist_id)
    return Work.objects.filter(artist_id=artist_id).order_by('id')
