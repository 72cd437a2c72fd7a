"""Настройки генератора.

Без pydantic и env-магии: если надо поменять дефолты, правь здесь.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Набор параметров по умолчанию для генерации и записи графа."""

    # Запись в хранилище
    DEFAULT_BATCH_SIZE: int = 1000

    # Генерация
    # Потолок попыток на одно ребро, после которого считаем, что генерация не сошлась.
    MAX_TRIALS_PER_EDGE: int = 1000

    # Логи
    LOG_NAME: str = "graphgen"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


settings = Settings()
