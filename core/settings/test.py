from .base import *

SECRET_KEY = "test-secret-key-not-for-production"

DEBUG = False

ALLOWED_HOSTS = ['*']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
EMAIL_HOST_USER = 'store@example.com'
DEFAULT_FROM_EMAIL = EMAIL_HOST_USER

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_CLASSES': [],
}

CATALOG_TAXONOMY = {
    'accessories': [
        'sunglasses',
        'wrist-watches',
        'belts',
        'bangles-bracelet',
        'earrings',
        'necklace',
        'pearls',
    ],
    'fragrance': [
        'designer-niche',
        'unboxed',
        'testers',
        'arabian',
        'diffuser',
        'mist',
    ],
    'bags': [],
    'clothes': [],
    'jewerly': [],
}

RELATED_PRODUCTS_LIMIT = 20
PRODUCTS_SEARCH_LIMIT = 20

ADMIN_EMAILS = []
