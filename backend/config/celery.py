"""
Celery configuration for the library lending project.
"""
import os

from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

app = Celery('library_lending')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django apps.
app.autodiscover_tasks()

# Overdue status is also refreshed lazily on every overdue read;
# the beat entry keeps stored statuses current for plain list queries.
app.conf.beat_schedule = {
    'sweep-overdue-lendings': {
        'task': 'apps.lendings.tasks.sweep_overdue_lendings',
        'schedule': crontab(minute='*/15'),
    },
}
