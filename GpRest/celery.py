import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'GpRest.settings')

app = Celery('GpRest')

# Paramètres CELERY_* lus depuis GpRest/settings.py (broker, planification beat)
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks(['translations'])

# Les tâches de maintenance des imports tournent sur leur propre file
app.conf.update(
    task_default_queue='gp-rest',
    task_routes={
        'translations.tasks.cleanup_import_files': {'queue': 'gp-rest-imports'},
    },
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],
    enable_utc=True,
    timezone='UTC',
)

# Lancement (worker + planificateur) :
# celery -A GpRest worker --beat -Q gp-rest,gp-rest-imports --loglevel=info
