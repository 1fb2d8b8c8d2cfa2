"""
Django settings for storefront project.

This package contains environment-specific settings:
- base.py: Common settings for all environments
- dev.py: Development environment settings
- prod.py: Production environment settings
- test.py: Test runner settings (SQLite, console logging)

Usage:
    Set DJANGO_SETTINGS_MODULE environment variable:
    - Development: storefront.settings.dev
    - Production: storefront.settings.prod
    - Tests: storefront.settings.test
"""

import os

# Default to development settings if not specified
environment = os.getenv('DJANGO_ENV', 'dev')

if environment == 'prod':
    from .prod import *
elif environment == 'test':
    from .test import *
else:
    from .dev import *
