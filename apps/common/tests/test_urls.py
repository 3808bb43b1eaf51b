from django.test import SimpleTestCase
from django.urls import resolve


class UrlConfTest(SimpleTestCase):

    def test_routes_load(self):
        self.assertEqual(resolve('/api/v1/tenants/').url_name, 'tenant-list')
        self.assertIsNotNone(resolve('/graphql/').func)

    def test_graphql_ide_is_served(self):
        response = self.client.get('/graphql/', HTTP_ACCEPT='text/html')

        self.assertEqual(response.status_code, 200)
        self.assertIn(b'graphiql', response.content.lower())
