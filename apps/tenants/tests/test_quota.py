from io import StringIO
from unittest.mock import Mock, patch

from django.core.management import call_command
from django.test import TestCase, TransactionTestCase

from apps.catalog.models import Artist, Work
from apps.catalog.services import create_artist, create_work
from apps.common.exceptions import (
    ArtistTenantMismatch,
    InvalidDuration,
    InvalidResource,
    QuotaLimitReached,
    TenantInactive,
    TenantNotFound,
)
from apps.common.tests.fixtures import make_artist, make_tenant, run_concurrently
from apps.tenants.models import Tenant
from apps.tenants.quota import (
    LIMIT_REACHED,
    TENANT_INACTIVE,
    TENANT_NOT_FOUND,
    check_quota,
    enforce_quota,
)
from apps.tenants.services import create_tenant


class CheckQuotaTest(TestCase):

    def setUp(self):
        self.tenant = make_tenant(max_artists=2, max_works=1)

    def test_allowed_below_ceiling(self):
        decision = check_quota(self.tenant.id, 'artists')
        self.assertTrue(decision.allowed)
        self.assertIsNone(decision.reason)
        self.assertEqual((decision.current, decision.limit), (0, 2))

    def test_denied_at_ceiling(self):
        make_artist(self.tenant, 'One')
        make_artist(self.tenant, 'Two')

        decision = check_quota(self.tenant.id, 'artists')
        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, LIMIT_REACHED)
        self.assertEqual((decision.current, decision.limit), (2, 2))

    def test_unknown_tenant(self):
        decision = check_quota(999999, 'works')
        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, TENANT_NOT_FOUND)

    def test_inactive_tenant(self):
        Tenant.objects.filter(pk=self.tenant.pk).update(is_active=False)
        decision = check_quota(self.tenant.id, 'artists')
        self.assertFalse(decision.allowed)
        self.assertEqual(decision.reason, TENANT_INACTIVE)

    def test_unknown_resource(self):
        with self.assertRaises(InvalidResource):
            check_quota(self.tenant.id, 'playlists')

    def test_check_has_no_side_effects(self):
        check_quota(self.tenant.id, 'artists')
        check_quota(self.tenant.id, 'works')
        self.assertEqual(Artist.objects.count(), 0)
        self.assertEqual(Work.objects.count(), 0)

    def test_check_never_locks_the_tenant_row(self):
        with patch.object(Tenant.objects, 'select_for_update') as select_for_update:
            decision = check_quota(self.tenant.id, 'artists')

        self.assertTrue(decision.allowed)
        select_for_update.assert_not_called()

    def test_enforce_requires_transaction(self):
        connection = Mock(in_atomic_block=False)
        with patch('apps.tenants.quota.transaction.get_connection', return_value=connection):
            with self.assertRaises(RuntimeError):
                enforce_quota(self.tenant.id, 'artists')


class QuotaGatedCreationTest(TestCase):

    def setUp(self):
        self.tenant = make_tenant(max_artists=2, max_works=1)

    def test_third_artist_is_denied_and_not_created(self):
        create_artist(self.tenant.id, 'One')
        create_artist(self.tenant.id, 'Two')

        with self.assertRaises(QuotaLimitReached) as ctx:
            create_artist(self.tenant.id, 'Three')

        self.assertEqual(ctx.exception.detail['current'], 2)
        self.assertEqual(ctx.exception.detail['limit'], 2)
        self.assertEqual(Artist.objects.filter(tenant=self.tenant).count(), 2)

    def test_work_quota(self):
        artist = create_artist(self.tenant.id, 'One')
        create_work(self.tenant.id, artist.id, 'Song A', 'pop', 180)

        with self.assertRaises(QuotaLimitReached):
            create_work(self.tenant.id, artist.id, 'Song B', 'pop', 180)
        self.assertEqual(Work.objects.filter(tenant=self.tenant).count(), 1)

    def test_inactive_tenant_accepts_nothing(self):
        Tenant.objects.filter(pk=self.tenant.pk).update(is_active=False)
        with self.assertRaises(TenantInactive):
            create_artist(self.tenant.id, 'One')
        self.assertFalse(Artist.objects.exists())

    def test_missing_tenant(self):
        with self.assertRaises(TenantNotFound):
            create_artist(424242, 'Ghost')

    def test_work_artist_must_share_tenant(self):
        other = make_tenant('other-label')
        stranger = make_artist(other, 'Stranger')

        with self.assertRaises(ArtistTenantMismatch):
            create_work(self.tenant.id, stranger.id, 'Song', 'pop', 180)
        self.assertFalse(Work.objects.exists())

    def test_duration_must_be_positive(self):
        artist = create_artist(self.tenant.id, 'One')
        with self.assertRaises(InvalidDuration):
            create_work(self.tenant.id, artist.id, 'Silence', 'ambient', 0)


class TenantProvisioningTest(TestCase):

    def test_plan_defaults(self):
        tenant = create_tenant('Acme Records', 'acme', 'ops@acme.example.com')
        self.assertEqual((tenant.max_artists, tenant.max_works), (5, 50))

        pro = create_tenant('Big Label', 'big-label', 'ops@big.example.com', subscription_plan='pro')
        self.assertEqual((pro.max_artists, pro.max_works), (250, 5000))

    def test_explicit_ceilings_win(self):
        tenant = create_tenant('Tiny', 'tiny', 'ops@tiny.example.com', max_artists=1, max_works=3)
        self.assertEqual((tenant.max_artists, tenant.max_works), (1, 3))

    def test_create_tenant_command(self):
        out = StringIO()
        call_command(
            'create_tenant', '--name', 'Indie Co', '--slug', 'indie-co',
            '--email', 'hello@indie.example.com', '--plan', 'standard', stdout=out,
        )
        tenant = Tenant.objects.get(slug='indie-co')
        self.assertEqual((tenant.max_artists, tenant.max_works), (25, 500))
        self.assertIn('Successfully created tenant indie-co', out.getvalue())


class ConcurrentQuotaTest(TransactionTestCase):

    def test_parallel_creates_respect_the_artist_ceiling(self):
        tenant = make_tenant(max_artists=1)

        outcomes, _ = run_concurrently(
            lambda name: create_artist(tenant.id, name),
            ['One', 'Two', 'Three', 'Four'],
        )

        self.assertEqual(outcomes.count('ok'), 1)
        self.assertEqual(outcomes.count('QuotaLimitReached'), 3)
        self.assertEqual(Artist.objects.filter(tenant=tenant).count(), 1)
