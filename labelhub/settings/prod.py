from .base import *
from decouple import config, Csv

DEBUG = False
ALLOWED_HOSTS = config("DJANGO_ALLOWED_HOSTS", cast=Csv(), default="api.labelhub.io,*.run.app")

# CORS - Restrictivo
CORS_ALLOWED_ORIGINS = config(
    "CORS_ALLOWED_ORIGINS",
    cast=Csv(),
    default="https://app.labelhub.io,https://dashboard.labelhub.io"
)
CORS_ALLOW_CREDENTIALS = True

# DB (Cloud SQL MySQL - Production HA)
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.mysql",
        "NAME": config("DB_NAME"),
        "USER": config("DB_USER"),
        "PASSWORD": config("DB_PASSWORD"),
        "HOST": config("DB_HOST"),  # Cloud SQL HA instance
        "PORT": config("DB_PORT", default="3306"),
        "OPTIONS": {
            "charset": "utf8mb4",
            "init_command": "SET sql_mode='STRICT_TRANS_TABLES'",
            "isolation_level": "repeatable read",
        },
        "CONN_MAX_AGE": 600,  # Connection pooling
    }
}

# Redis (Memorystore - Production HA)
REDIS_HOST = config("REDIS_HOST")
BROKER_DB = config("CELERY_BROKER_DB", cast=int, default=0)
RESULT_DB = config("CELERY_RESULT_DB", cast=int, default=1)
CACHE_DB = config("DJANGO_CACHE_DB", cast=int, default=2)

CELERY_BROKER_URL = f"redis://{REDIS_HOST}:6379/{BROKER_DB}"
CELERY_RESULT_BACKEND = f"redis://{REDIS_HOST}:6379/{RESULT_DB}"
CELERY_TASK_ALWAYS_EAGER = False

# Cache - Production optimized
CACHES = {
    "default": {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": f"redis://{REDIS_HOST}:6379/{CACHE_DB}",
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
            "CONNECTION_POOL_KWARGS": {"max_connections": 50}
        },
        "TIMEOUT": config("DJANGO_CACHE_TIMEOUT", cast=int, default=3600),
    }
}

# Security - Production hardened
SECRET_KEY = config("SECRET_KEY")
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = 31536000
SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
CSRF_TRUSTED_ORIGINS = [
    'https://*.run.app',
    'https://*.labelhub.io'
]

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'stackdriver': {
            'class': 'google.cloud.logging.handlers.CloudLoggingHandler',
            'level': 'INFO',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['stackdriver'],
            'level': 'ERROR',
            'propagate': False,
        },
        'apps': {
            'handlers': ['stackdriver'],
            'level': 'INFO',
            'propagate': False,
        },
        'tasks': {
            'handlers': ['stackdriver'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

GCP_PROJECT_ID = config("GCP_PROJECT_ID", default="labelhub-project")
