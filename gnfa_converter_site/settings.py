import os

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'gnfa-converter-development-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '') == '1'

ALLOWED_HOSTS = ['localhost', '127.0.0.1', 'testserver']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'gnfa_converter',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'gnfa_converter_site.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

GNFA_CONVERTER = {
    'ELIMINATION_ORDER': 'lowest',
    'SUPER_START': False,
    'PRUNE_USELESS_STATES': False,
    'VERIFY': False,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'gnfa_converter': {
            'handlers': ['console'],
            'level': os.environ.get('GNFA_CONVERTER_LOG_LEVEL', 'WARNING'),
        },
    },
}
