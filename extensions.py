"""
Модуль: `extensions.py`.
Назначение: Инициализация и экспорт экземпляров Flask-расширений.
"""

from flask_babel import Babel

# Расширения создаём здесь и инициализируем в фабрике приложения
babel = Babel()
