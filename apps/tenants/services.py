import logging

from django.conf import settings

from .models import Tenant

logger = logging.getLogger(__name__)


def create_tenant(name, slug, contact_email, subscription_plan='free', max_artists=None,
                  max_works=None, **attributes):
    """Provision a tenant, falling back to the plan's default ceilings."""
    limits = settings.PLAN_LIMITS.get(subscription_plan, settings.PLAN_LIMITS['free'])
    tenant = Tenant(
        name=name,
        slug=slug,
        contact_email=contact_email,
        subscription_plan=subscription_plan,
        max_artists=max_artists or limits['max_artists'],
        max_works=max_works or limits['max_works'],
        **attributes
    )
    tenant.full_clean()
    tenant.save()

    logger.info(f"Tenant {tenant.id} ({tenant.slug}) created on plan {subscription_plan}")
    return tenant
