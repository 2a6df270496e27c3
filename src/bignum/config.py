"""
BigintConfig — параметры парсинга и форматирования

Значения по умолчанию воспроизводят строгий контракт:
- цифры base-N выводятся в верхнем регистре (0-9A-Z)
- длина входной строки не ограничена
- любые пробелы во входной строке отклоняются
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BigintConfig:
    """Конфигурация конверсий Bigint <-> текст.

    Передаётся опционально в from_decimal_string / from_based_string /
    to_based_string; при отсутствии используется DEFAULT_CONFIG.
    """

    # Регистр букв при выводе в base-N (11..36)
    uppercase_digits: bool = True

    # Максимум цифр в разбираемой строке (None = без лимита)
    max_digits: Optional[int] = None

    # Обрезать пробелы по краям перед парсингом (внутренние всегда ошибка)
    strip_whitespace: bool = False

    def __post_init__(self):
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_CONFIG = BigintConfig()
