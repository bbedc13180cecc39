"""
Программа: «Lingo» – веб-приложение с выбором языка интерфейса.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Чтение параметров приложения Flask из переменных окружения.
- Описание списка поддерживаемых языков (секция `lang`: коды и названия через `|`).
- Параметры cookie, в которой сохраняется выбранный язык.
- Флаги версии приложения, которые передаются в шаблоны.
"""

import os


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Преобразует переменную окружения в int."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_env_str(name: str, default: str) -> str:
    """Читает строковую переменную окружения без пробелов по краям."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip()


def _is_production() -> bool:
    """Определяет production-режим по FLASK_ENV."""
    return os.environ.get("FLASK_ENV", "").strip().lower() == "production"


class Config:
    """Базовая конфигурация приложения."""

    _PRODUCTION = _is_production()

    # Секция `lang`: коды и названия сопоставляются по позиции
    LANG_TYPES = _get_env_str("LANG_TYPES", "en-US|zh-CN")
    LANG_NAMES = _get_env_str("LANG_NAMES", "English|简体中文")

    LANG_COOKIE_NAME = _get_env_str("LANG_COOKIE_NAME", "lang") or "lang"
    LANG_COOKIE_MAX_AGE = _get_env_int("LANG_COOKIE_MAX_AGE", 2**31 - 1)
    LANG_COOKIE_SECURE = _get_env_bool("LANG_COOKIE_SECURE", default=_PRODUCTION)

    BABEL_DEFAULT_LOCALE = _get_env_str("BABEL_DEFAULT_LOCALE", "en_US")

    APP_VER = _get_env_str("APP_VER", "0.1.0")
    IS_PRO_MODE = _get_env_bool("IS_PRO_MODE", default=_PRODUCTION)
    IS_BETA = _get_env_bool("IS_BETA", default=False)
