import os
from celery import Celery
from core.settings.base import DEBUG

if DEBUG:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.development')
else:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.production')

app = Celery('core')

# Pull configuration from Django settings via CELERY_... keys
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.broker_pool_limit = 1               # only one connection in the pool
app.conf.broker_connection_retry_on_startup = True
app.conf.worker_send_task_events = False
app.conf.task_send_sent_event = False

# Auto-discover tasks.py in each application registered in INSTALLED_APPS
app.autodiscover_tasks()
