"""
Программа: «Lingo» – веб-приложение с выбором языка интерфейса.
Модуль: routes/pages.py – маршруты пользовательских страниц.
"""

from flask import render_template


def register_routes(app):
    """Регистрирует страницы, на которые ведёт редирект на чистый URL."""

    @app.get("/")
    def index():
        return render_template("index.html")

    @app.get("/about")
    def about():
        return render_template("about.html")
