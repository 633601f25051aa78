"""
Import order tests.

Each module is imported first thing after ``django.setup()`` in a fresh
interpreter, the way ``manage.py`` commands and test collection reach them.
"""
import os
import subprocess
import sys

import pytest
from django.conf import settings


ENTRY_MODULES = [
    'apps.core.exceptions',
    'apps.core.renderers',
    'apps.accounts.services',
    'apps.accounts.services.exceptions',
    'apps.notifications.services.exceptions',
    'apps.messaging.services',
    'apps.products.services',
    'apps.rentals.services',
    'apps.payments.services',
    'apps.subscriptions.services',
    'apps.reviews.services',
    'apps.moderation.services',
    'apps.accounts.management.commands.create_sample_data',
]


@pytest.mark.parametrize('module', ENTRY_MODULES)
def test_module_imports_in_fresh_interpreter(module):
    env = dict(os.environ, DJANGO_SETTINGS_MODULE='config.settings')
    code = f'import django; django.setup(); import {module}'

    result = subprocess.run(
        [sys.executable, '-c', code],
        cwd=settings.BASE_DIR,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert result.returncode == 0, result.stderr
