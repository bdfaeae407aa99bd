"""
Test settings for the library lending project.
"""
from .base import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

# Run tasks in-process; failures stay in the task result
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

LENDING_DEFAULT_LOAN_DAYS = 14
LENDING_MAX_LOAN_DAYS = 365
LENDING_LOAN_PERIOD_POLICY = 'reject'
