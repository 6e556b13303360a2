"""
Base settings for the SparkleClean website.

There is no local database: bookings and admin passwords live in the remote
store at SPARKLE_API_BASE, and the admin marker lives in a signed session cookie.
"""
from pathlib import Path
from decouple import config, Csv

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = config('SECRET_KEY', default='')

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

DJANGO_APPS = [
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

LOCAL_APPS = [
    'apps.core',
    'apps.services',
    'apps.bookings',
    'apps.dashboard.apps.DashboardConfig',
    'apps.pages',
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'sparkleclean.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'apps.dashboard.context_processors.admin_session',
            ],
        },
    },
]

WSGI_APPLICATION = 'sparkleclean.wsgi.application'

DATABASES = {}

# Session holds nothing but the admin marker; keep it client-side.
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_EXPIRE_AT_BROWSER_CLOSE = True
SESSION_COOKIE_HTTPONLY = True
MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'

CSRF_TRUSTED_ORIGINS = config('CSRF_TRUSTED_ORIGINS', default='http://localhost:8000', cast=Csv())

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'America/New_York'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# ── Remote store ───────────────────────────────────────────────────────────────
SPARKLE_API_BASE = config('API_BASE', default='http://localhost:8080')
SPARKLE_API_TIMEOUT = config('API_TIMEOUT', default=10.0, cast=float)

# ── Admin gate ─────────────────────────────────────────────────────────────────
SPARKLE_PASSWORDS_READY_TIMEOUT = config('PASSWORDS_READY_TIMEOUT', default=10.0, cast=float)
SPARKLE_PRELOAD_PASSWORDS = config('PRELOAD_PASSWORDS', default=True, cast=bool)

# ── Business details ───────────────────────────────────────────────────────────
BUSINESS_NAME = 'SparkleClean'
BUSINESS_PHONE = config('BUSINESS_PHONE', default='+14752080329')

# ── Logging ────────────────────────────────────────────────────────────────────
LOG_LEVEL = config('LOG_LEVEL', default='INFO')

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
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': True,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
