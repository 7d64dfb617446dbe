"""Настройки Django для сервиса назначения ревьюверов.

Значения берутся из ``ReviewAssigner.config``, список переменных окружения там же.
"""

from ReviewAssigner.config import load_config
from ReviewAssigner.logging import setup_logging

CONFIG = load_config()

SECRET_KEY = CONFIG.service.secret_key
DEBUG = CONFIG.service.debug
ALLOWED_HOSTS = CONFIG.service.allowed_hosts

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'reviews.apps.ReviewsConfig',
]

MIDDLEWARE = [
    'ReviewAssigner.middleware.RequestLoggingMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'ReviewAssigner.urls'
WSGI_APPLICATION = 'ReviewAssigner.wsgi.application'

DATABASES = {
    'default': CONFIG.database.django_settings(),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

# Только JSON, аутентификация вне сервиса
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

LOGGING_CONFIG = None
setup_logging(CONFIG.logging)
