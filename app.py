"""
Название: «Lingo»
Язык: Python (Flask)
Краткое описание: веб-приложение, выбирающее язык интерфейса для каждого запроса
"""

import os
from typing import Mapping
from urllib.parse import quote

from flask import Flask, g, has_request_context, redirect, request

from config import Config
from extensions import babel
from routes.pages import register_routes as register_page_routes
from utils.i18n import (
    FALLBACK_LANGUAGE,
    LanguageRegistry,
    build_presentation,
    resolve_language,
    to_babel_locale,
)


def create_app(overrides: Mapping | None = None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    def select_locale() -> str:
        """Отдаёт Flask-Babel язык, выбранный для текущего запроса."""
        if not has_request_context():
            return to_babel_locale(FALLBACK_LANGUAGE)
        return to_babel_locale(getattr(g, "lang", FALLBACK_LANGUAGE))

    babel.init_app(app, locale_selector=select_locale)

    # Список языков читается один раз при старте: ошибка конфигурации
    # должна остановить приложение, а не всплыть на первом запросе
    lang_registry = LanguageRegistry()
    with app.app_context():
        lang_registry.ensure_loaded(app.config)
    app.extensions["lang_registry"] = lang_registry

    register_page_routes(app)

    @app.before_request
    def resolve_request_language_middleware():
        """Выбирает язык запроса и при необходимости убирает `?lang=` из URL."""
        lang_registry.ensure_loaded(app.config)

        query_lang = request.args.get("lang", "")
        cookie_lang = request.cookies.get(app.config["LANG_COOKIE_NAME"])
        resolution = resolve_language(
            query_lang=query_lang,
            cookie_lang=cookie_lang,
            accept_language=request.headers.get("Accept-Language", ""),
            registry=lang_registry,
        )

        if query_lang and query_lang != resolution.code:
            app.logger.debug("Отброшен неизвестный язык из URL: %r", query_lang)
        elif not query_lang and cookie_lang and cookie_lang != resolution.code:
            app.logger.debug("Отброшен неизвестный язык из cookie: %r", cookie_lang)

        g.lang = resolution.code
        g.lang_view = build_presentation(resolution.code, lang_registry)

        if resolution.needs_redirect:
            # Редирект на чистый URL без строки запроса; путь уже раскодирован,
            # поэтому кодируем его заново, иначе `%3F` обрежет адрес раньше времени
            target = quote(request.script_root + request.path, safe="/:@!$&'()*+,;=~")
            return redirect(target, code=302)
        return None

    @app.context_processor
    def inject_template_globals():
        """Передаёт в шаблоны данные о языке и флаги версии приложения."""
        data = {
            "AppVer": app.config["APP_VER"],
            "IsProMode": app.config["IS_PRO_MODE"],
            "IsBeta": app.config["IS_BETA"],
        }
        lang_view = getattr(g, "lang_view", None)
        if lang_view is not None:
            data.update(lang_view.as_view_data())
        return data

    @app.after_request
    def persist_lang_cookie(response):
        """Сохраняет выбранный язык в долгоживущей cookie."""
        lang = getattr(g, "lang", None)
        if lang:
            response.set_cookie(
                app.config["LANG_COOKIE_NAME"],
                lang,
                max_age=app.config["LANG_COOKIE_MAX_AGE"],
                secure=app.config["LANG_COOKIE_SECURE"],
                httponly=False,
                samesite="Lax",
                path="/",
            )
        return response

    return app


app = create_app()


if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
