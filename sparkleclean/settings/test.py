from .base import *

DEBUG = False

SECRET_KEY = 'sparkleclean-test-secret'

ALLOWED_HOSTS = ['testserver', 'localhost']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

SPARKLE_API_BASE = 'http://store.test'
SPARKLE_API_TIMEOUT = 2.0
SPARKLE_PASSWORDS_READY_TIMEOUT = 2.0
SPARKLE_PRELOAD_PASSWORDS = False
