"""
Модуль: `utils/i18n.py`.
Назначение: Реестр поддерживаемых языков и выбор языка интерфейса для запроса.

Порядок выбора языка (первый подходящий источник выигрывает):
- параметр `lang` в строке запроса (требует редиректа на чистый URL);
- cookie `lang`;
- первые 5 символов заголовка `Accept-Language`;
- язык по умолчанию `en-US`.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Callable, Iterator, Mapping

from flask import current_app

FALLBACK_LANGUAGE = "en-US"
LANG_SEPARATOR = "|"
ACCEPT_LANGUAGE_PREFIX = 5


class LanguageConfigError(RuntimeError):
    """Некорректная конфигурация списка языков (`LANG_TYPES` / `LANG_NAMES`)."""


@dataclass(frozen=True)
class SupportedLanguage:
    """Поддерживаемый язык: код локали и отображаемое название."""

    code: str
    name: str


@dataclass(frozen=True)
class LanguageResolution:
    code: str
    needs_redirect: bool = False


@dataclass(frozen=True)
class PresentationContext:
    """Данные о языке для шаблонов текущего запроса."""

    lang: str
    current_language_name: str
    other_languages: tuple[SupportedLanguage, ...]

    def as_view_data(self) -> dict:
        return {
            "Lang": self.lang,
            "CurLang": self.current_language_name,
            "RestLangs": list(self.other_languages),
        }


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(LANG_SEPARATOR)]


def parse_language_list(types: str | None, names: str | None) -> tuple[SupportedLanguage, ...]:
    """Строит упорядоченный список языков из двух строк через `|`.

    Коды и названия сопоставляются по позиции. Несовпадение длин списков,
    пустые значения и повторяющиеся коды считаются фатальной ошибкой
    конфигурации.
    """
    if not types or not types.strip() or not names or not names.strip():
        raise LanguageConfigError(
            "LANG_TYPES and LANG_NAMES must both be set (pipe-delimited lists)."
        )

    codes = _split(types)
    titles = _split(names)
    if len(codes) != len(titles):
        raise LanguageConfigError(
            f"LANG_TYPES has {len(codes)} entries but LANG_NAMES has {len(titles)}."
        )

    seen = set()
    languages = []
    for code, title in zip(codes, titles):
        if not code:
            raise LanguageConfigError("LANG_TYPES contains an empty language code.")
        if code in seen:
            raise LanguageConfigError(f"Duplicate language code in LANG_TYPES: {code!r}.")
        seen.add(code)
        languages.append(SupportedLanguage(code=code, name=title))
    return tuple(languages)


class LanguageRegistry:
    """Реестр поддерживаемых языков, общий для всего процесса.

    Заполняется один раз при первом вызове `ensure_loaded()`; дальше только
    читается. Готовый кортеж публикуется одним присваиванием под блокировкой,
    поэтому читатель никогда не видит частично собранный список.
    """

    def __init__(self):
        self._languages: tuple[SupportedLanguage, ...] | None = None
        self._lock = Lock()

    @property
    def is_loaded(self) -> bool:
        return self._languages is not None

    def ensure_loaded(self, config: Mapping) -> "LanguageRegistry":
        if self._languages is not None:
            return self

        with self._lock:
            if self._languages is not None:
                return self

            languages = parse_language_list(config.get("LANG_TYPES"), config.get("LANG_NAMES"))
            for language in languages:
                if len(language.code) != ACCEPT_LANGUAGE_PREFIX:
                    current_app.logger.warning(
                        "Код языка %r не из %d символов: Accept-Language его не выберет",
                        language.code,
                        ACCEPT_LANGUAGE_PREFIX,
                    )
            self._languages = languages

        current_app.logger.info(
            "Загружены языки интерфейса: %s", ", ".join(lang.code for lang in languages)
        )
        return self

    @property
    def languages(self) -> tuple[SupportedLanguage, ...]:
        if self._languages is None:
            raise LanguageConfigError("Language registry used before ensure_loaded().")
        return self._languages

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(language.code for language in self.languages)

    def get(self, code: str | None) -> SupportedLanguage | None:
        for language in self.languages:
            if language.code == code:
                return language
        return None

    def __contains__(self, code) -> bool:
        return self.get(code) is not None

    def __iter__(self) -> Iterator[SupportedLanguage]:
        return iter(self.languages)

    def __len__(self) -> int:
        return len(self.languages)


def _explicit_candidate(
    query_lang: str | None, cookie_lang: str | None, registry: LanguageRegistry
) -> LanguageResolution | None:
    # Значение из cookie проверяется, только если в URL ничего не передано.
    if query_lang:
        tentative = LanguageResolution(query_lang, needs_redirect=True)
    elif cookie_lang:
        tentative = LanguageResolution(cookie_lang)
    else:
        return None

    if tentative.code in registry:
        return tentative
    return None


def _accept_language_candidate(accept_language: str | None, registry: LanguageRegistry) -> LanguageResolution | None:
    if not accept_language or len(accept_language) < ACCEPT_LANGUAGE_PREFIX:
        return None
    prefix = accept_language[:ACCEPT_LANGUAGE_PREFIX]
    if prefix in registry:
        return LanguageResolution(prefix)
    return None


def resolve_language(
    query_lang: str | None,
    cookie_lang: str | None,
    accept_language: str | None,
    registry: LanguageRegistry,
) -> LanguageResolution:
    """Определяет язык запроса и необходимость редиректа на чистый URL.

    Функция чистая: cookie не записывается здесь, это делает вызывающий код.
    Неизвестный код из URL или cookie отбрасывается и никогда не приводит
    к редиректу.
    """
    strategies: tuple[Callable[[], LanguageResolution | None], ...] = (
        lambda: _explicit_candidate(query_lang, cookie_lang, registry),
        lambda: _accept_language_candidate(accept_language, registry),
    )
    for strategy in strategies:
        resolution = strategy()
        if resolution is not None:
            return resolution
    return LanguageResolution(FALLBACK_LANGUAGE)


def build_presentation(code: str, registry: LanguageRegistry) -> PresentationContext:
    """Собирает название текущего языка и меню остальных языков."""
    current = registry.get(code)
    return PresentationContext(
        lang=code,
        current_language_name=current.name if current else "",
        other_languages=tuple(language for language in registry if language.code != code),
    )


def to_babel_locale(code: str) -> str:
    """`en-US` -> `en_US` для Flask-Babel."""
    return code.replace("-", "_")
