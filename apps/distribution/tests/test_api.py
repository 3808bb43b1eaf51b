from unittest.mock import patch

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Work
from apps.common.tests.fixtures import make_artist, make_tenant, make_work


class DistributionApiTest(APITestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user(username='ops', password='pw')
        self.client.force_authenticate(self.user)
        tenant = make_tenant()
        self.work = make_work(tenant, make_artist(tenant))

    def test_distribute_then_resolve(self):
        with patch('apps.distribution.tasks.dispatch_distribution.delay') as delay:
            with self.captureOnCommitCallbacks(execute=True):
                response = self.client.post(
                    f'/api/v1/works/{self.work.id}/distribute/',
                    {'platforms': ['spotify', 'deezer']},
                    format='json',
                )

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['distribution_status'], 'processing')
        delay.assert_called_once_with(self.work.id, ['spotify', 'deezer'])

        live = self.client.post(
            f'/api/v1/works/{self.work.id}/distribution-status/', {'status': 'live'}, format='json'
        )
        self.assertEqual(live.status_code, status.HTTP_200_OK)
        self.assertEqual(live.data['distribution_status'], 'live')

    def test_invalid_platforms_are_listed(self):
        response = self.client.post(
            f'/api/v1/works/{self.work.id}/distribute/',
            {'platforms': ['spotify', 'napster']},
            format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error']['message'], 'invalid platforms: napster')
        self.work.refresh_from_db()
        self.assertEqual(self.work.distribution_status, Work.PENDING)

    def test_missing_artwork(self):
        Work.objects.filter(pk=self.work.pk).update(artwork_url='')
        response = self.client.post(
            f'/api/v1/works/{self.work.id}/distribute/', {'platforms': ['spotify']}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(response.data['error']['code'], 'missing_artwork')

    def test_illegal_callback_is_a_conflict(self):
        response = self.client.post(
            f'/api/v1/works/{self.work.id}/distribution-status/', {'status': 'live'}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error']['code'], 'invalid_transition')
