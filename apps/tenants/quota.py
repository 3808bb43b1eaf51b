"""
Quota guard for tenant-scoped resource ceilings.

``check_quota`` answers "may this tenant create one more artist/work?" without
side effects. ``enforce_quota`` is the write-path variant: it must run inside
the same ``transaction.atomic()`` block as the insert it protects, because it
locks the tenant row so two concurrent creations cannot both take the last slot.
"""
from dataclasses import dataclass, asdict
from typing import Optional
import logging

from django.db import transaction

from apps.catalog.models import Artist, Work
from apps.common.exceptions import (
    InvalidResource,
    QuotaLimitReached,
    TenantInactive,
    TenantNotFound,
)
from .models import Tenant

logger = logging.getLogger(__name__)

ARTISTS = 'artists'
WORKS = 'works'
RESOURCES = (ARTISTS, WORKS)

TENANT_NOT_FOUND = 'tenant_not_found'
TENANT_INACTIVE = 'tenant_inactive'
LIMIT_REACHED = 'limit_reached'


@dataclass(frozen=True)
class QuotaDecision:
    tenant_id: int
    resource: str
    allowed: bool
    reason: Optional[str] = None
    current: Optional[int] = None
    limit: Optional[int] = None

    def as_dict(self):
        return asdict(self)

    def raise_for_denial(self):
        if self.allowed:
            return
        if self.reason == TENANT_NOT_FOUND:
            raise TenantNotFound(tenant_id=self.tenant_id)
        if self.reason == TENANT_INACTIVE:
            raise TenantInactive(tenant_id=self.tenant_id)
        raise QuotaLimitReached(
            tenant_id=self.tenant_id,
            resource=self.resource,
            current=self.current,
            limit=self.limit,
        )


def _current_count(tenant, resource):
    model = Artist if resource == ARTISTS else Work
    return model.objects.filter(tenant=tenant).count()


def evaluate(tenant, resource):
    """Decide against an already loaded tenant row."""
    if not tenant.is_active:
        return QuotaDecision(tenant.id, resource, False, TENANT_INACTIVE)

    current = _current_count(tenant, resource)
    limit = tenant.ceiling_for(resource)
    if current >= limit:
        return QuotaDecision(tenant.id, resource, False, LIMIT_REACHED, current, limit)
    return QuotaDecision(tenant.id, resource, True, None, current, limit)


def _decide(tenant_id, resource, lock):
    if resource not in RESOURCES:
        raise InvalidResource(resource=resource)

    queryset = Tenant.objects.select_for_update() if lock else Tenant.objects
    try:
        tenant = queryset.get(pk=tenant_id)
    except Tenant.DoesNotExist:
        return None, QuotaDecision(tenant_id, resource, False, TENANT_NOT_FOUND)

    decision = evaluate(tenant, resource)
    if not decision.allowed:
        logger.info(f"Quota denied for tenant {tenant_id} ({resource}): {decision.reason}")
    return tenant, decision


def check_quota(tenant_id, resource):
    return _decide(tenant_id, resource, lock=False)[1]


def enforce_quota(tenant_id, resource):
    """Lock the tenant row, raise on denial and return the tenant for the insert."""
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError("enforce_quota must be called inside transaction.atomic()")

    tenant, decision = _decide(tenant_id, resource, lock=True)
    decision.raise_for_denial()
    return tenant
