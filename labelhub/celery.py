import os
from celery import Celery
from celery.schedules import crontab

settings_module = os.environ.get('DJANGO_SETTINGS_MODULE', 'labelhub.settings.local')
os.environ.setdefault('DJANGO_SETTINGS_MODULE', settings_module)

app = Celery('labelhub')
app.config_from_object('django.conf:settings', namespace='CELERY')

app.autodiscover_tasks()
app.autodiscover_tasks(['tasks'], related_name='ledger')

app.conf.beat_schedule = {
    'audit-report-totals': {
        'task': 'tasks.ledger.audit_report_totals',
        'schedule': crontab(hour=2, minute=0),  # Nightly at 2 AM
    },
    'audit-split-totals': {
        'task': 'tasks.ledger.audit_split_totals',
        'schedule': crontab(hour=2, minute=30),
    },
}
