"""Shared fixtures: an application with a fixed language list and its test client."""

from __future__ import annotations

import pytest

from app import create_app

LANG_TYPES = "en-US|zh-CN|fr-FR|de-DE"
LANG_NAMES = "English|简体中文|Français|Deutsch"


@pytest.fixture
def app_overrides() -> dict:
    """Config overrides for the ``app`` fixture; override per module if needed."""
    return {}


@pytest.fixture
def app(app_overrides):
    config = {
        "TESTING": True,
        "LANG_TYPES": LANG_TYPES,
        "LANG_NAMES": LANG_NAMES,
        "LANG_COOKIE_SECURE": False,
        "APP_VER": "1.2.3",
        "IS_PRO_MODE": False,
        "IS_BETA": True,
    }
    config.update(app_overrides)
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def registry(app):
    return app.extensions["lang_registry"]
