"""Labelhub project package.

Ensure the Celery app is loaded when Django starts so that
@shared_task binds to the configured app instead of the
default one.
"""

from .celery import app as celery_app  # noqa: F401

__all__ = ("celery_app",)
