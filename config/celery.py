"""
Celery configuration for the membership billing project.

This module initializes the Celery application and configures it to work with Django.
"""
import os
from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('config')

# All celery-related configuration keys use a `CELERY_` prefix in settings.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Picks up memberships/tasks.py
app.autodiscover_tasks()
