import importlib
import os
import sys
from unittest.mock import patch

from django.test import SimpleTestCase

DEPLOY_ENV = {
    'SECRET_KEY': 'not-a-real-key',
    'DB_NAME': 'labelhub',
    'DB_USER': 'labelhub',
    'DB_PASSWORD': 'secret',
    'DB_HOST': '10.0.0.5',
    'REDIS_HOST': '10.0.0.6',
    'GCP_PROJECT_ID': 'labelhub-test',
}


def load_settings(name):
    module_name = f'labelhub.settings.{name}'
    sys.modules.pop(module_name, None)
    with patch.dict(os.environ, DEPLOY_ENV):
        module = importlib.import_module(module_name)
    sys.modules.pop(module_name, None)
    return module


class DeployedSettingsTest(SimpleTestCase):

    def test_deployed_modules_use_repeatable_read_and_redis(self):
        for name in ('local', 'dev', 'staging', 'prod'):
            with self.subTest(settings=name):
                module = load_settings(name)
                options = module.DATABASES['default']['OPTIONS']
                self.assertEqual(options['isolation_level'], 'repeatable read')
                self.assertTrue(module.CELERY_BROKER_URL.startswith('redis://'))
                self.assertFalse(module.CELERY_TASK_ALWAYS_EAGER)

    def test_unused_keys_are_absent(self):
        for name in ('local', 'dev', 'staging', 'prod'):
            with self.subTest(settings=name):
                module = load_settings(name)
                self.assertFalse(hasattr(module, 'CELERY_BROKER_TRANSPORT'))
                self.assertFalse(hasattr(module, 'GOOGLE_APPLICATION_CREDENTIALS'))

    def test_prod_project_id_comes_from_environment(self):
        self.assertEqual(load_settings('prod').GCP_PROJECT_ID, 'labelhub-test')
