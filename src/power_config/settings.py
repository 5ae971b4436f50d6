"""Django settings for the power configuration service."""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ('true', 'yes', '1', 't', 'y')


SECRET_KEY = os.environ.get("POWER_CONFIG_SECRET_KEY", "power-config-insecure-development-key")
DEBUG = env_bool("POWER_CONFIG_DEBUG", False)
ALLOWED_HOSTS = [h.strip() for h in os.environ.get("POWER_CONFIG_ALLOWED_HOSTS", "*").split(",") if h.strip()]

INSTALLED_APPS = [
    'rest_framework',
    'power_config.apps.power',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'power_config.urls'

DATABASES = {}

USE_I18N = True
LANGUAGE_CODE = 'en-us'
LOCALE_PATHS = [BASE_DIR / 'locale']

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'UNAUTHENTICATED_USER': None,
}

# Keyed feature source, one namespace per feature group.
# Keys may be overridden by <NAMESPACE>_<KEY> environment variables.
FEATURES = {
    'powerconfiguration': {
        'unitsRequired': 1,
        'useAlphabeticNames': True,
        'unitComponents': ['PORT', 'OUTLET'],
        'uniqueComponents': ['PORT'],
    },
}

POWER_CONFIGURATION_VALIDATE_ON_STARTUP = env_bool("POWER_CONFIG_VALIDATE_ON_STARTUP", True)

LOG_LEVEL = os.environ.get("POWER_CONFIG_LOG_LEVEL", "INFO").upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'power_config': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': True,
        },
    },
}
