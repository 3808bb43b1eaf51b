from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.test import APITestCase

from apps.analytics.repository import growth_percentage
from apps.analytics.serializers import TenantAnalyticsSerializer
from apps.common.tests.fixtures import make_artist, make_report, make_tenant, make_work
from apps.royalties.splits import add_split


class AnalyticsApiTest(APITestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='analyst', password='pw')
        self.client.force_authenticate(self.user)
        self.tenant = make_tenant()
        self.artist = make_artist(self.tenant, 'Nova')
        self.work = make_work(self.tenant, self.artist)
        make_report(self.tenant, 'spotify', date(2024, 1, 1), [(self.work, 1200, '4.80')])

    def test_tenant_analytics(self):
        response = self.client.get(f'/api/v1/analytics/tenants/{self.tenant.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['total_streams'], 1200)
        self.assertEqual(response.data['total_revenue'], '4.80')
        self.assertEqual(response.data['top_performing_works'][0]['artist_name'], 'Nova')

    def test_artist_analytics(self):
        response = self.client.get(f'/api/v1/analytics/artists/{self.artist.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['monthly_streams'][0]['month'], '2024-01')
        self.assertEqual(response.data['platform_breakdown'][0]['platform'], 'spotify')

    def test_missing_tenant(self):
        response = self.client.get('/api/v1/analytics/tenants/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['code'], 'tenant_not_found')


class GraphQLTest(APITestCase):

    def setUp(self):
        self.tenant = make_tenant()
        self.artist = make_artist(self.tenant, 'Nova')
        self.work = make_work(self.tenant, self.artist)
        make_report(self.tenant, 'deezer', date(2024, 1, 1), [(self.work, 10, '0.05')])

    def execute(self, query, variables=None):
        response = self.client.post('/graphql/', {'query': query, 'variables': variables or {}}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response.json()

    def test_tenant_analytics_query(self):
        body = self.execute(
            'query($id: Int!) { tenantAnalytics(tenantId: $id) { totalStreams totalRevenue '
            'topPerformingWorks { title streams } } }',
            {'id': self.tenant.id},
        )
        data = body['data']['tenantAnalytics']
        self.assertEqual(data['totalStreams'], 10)
        self.assertEqual(Decimal(data['totalRevenue']), Decimal('0.05'))
        self.assertEqual(data['topPerformingWorks'], [{'title': 'First Light', 'streams': 10}])

    def test_add_split_and_read_back(self):
        body = self.execute(
            'mutation($input: RoyaltySplitInput!) { addRoyaltySplit(input: $input) { id percentage } }',
            {'input': {'workId': self.work.id, 'recipientType': 'artist',
                       'recipientId': self.artist.id, 'percentage': '55.50'}},
        )
        self.assertEqual(Decimal(body['data']['addRoyaltySplit']['percentage']), Decimal('55.50'))

        body = self.execute(
            'query($id: Int!) { royaltySplits(workId: $id) { recipientType percentage } }',
            {'id': self.work.id},
        )
        self.assertEqual(len(body['data']['royaltySplits']), 1)

    def test_overflow_surfaces_as_graphql_error(self):
        add_split(self.work.id, 'label', self.tenant.id, Decimal('90'))
        body = self.execute(
            'mutation($input: RoyaltySplitInput!) { addRoyaltySplit(input: $input) { id } }',
            {'input': {'workId': self.work.id, 'recipientType': 'writer',
                       'recipientId': 4, 'percentage': '20'}},
        )
        self.assertIsNone(body['data'])
        self.assertEqual(body['errors'][0]['message'], 'split overflow: current 90.00%, attempted 20.00%')


class AnalyticsSerializerTest(SimpleTestCase):

    def test_large_growth_renders_without_digit_limit(self):
        growth = growth_percentage(Decimal('99999999999.99'), Decimal('0.01'))
        data = TenantAnalyticsSerializer({
            'tenant_id': 1,
            'total_artists': 1,
            'total_works': 1,
            'total_streams': 10,
            'total_revenue': Decimal('100000000000.00'),
            'monthly_growth': growth,
            'top_performing_works': [],
        }).data

        self.assertEqual(data['monthly_growth'], '999999999999800.00')
        self.assertEqual(data['total_revenue'], '100000000000.00')
