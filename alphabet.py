#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Буква латинского алфавита A–Z.

AlphabetValue всегда хранит заглавную букву: строчные переводятся в
заглавные при создании, всё остальное (цифры, пробелы, знаки, кириллица)
буквой не считается.
"""

from dataclasses import dataclass
from typing import Optional

ALPHABET_SIZE = 26
FIRST = ord('A')  # 65
LAST = ord('Z')   # 90


class InvalidLetterError(ValueError):
    """Попытка создать AlphabetValue не из заглавной буквы A–Z.

    Означает ошибку в коде, а не во входных данных: from_char() и shift()
    никогда не создают невалидных значений.
    """


@dataclass(frozen=True)
class AlphabetValue:
    """Одна заглавная буква A–Z (неизменяемая)"""
    char: str

    def __post_init__(self):
        if not (len(self.char) == 1 and FIRST <= ord(self.char) <= LAST):
            raise InvalidLetterError(f"не заглавная латинская буква: {self.char!r}")

    @classmethod
    def from_char(cls, c: str) -> Optional['AlphabetValue']:
        """
        Умный конструктор.
        'A'..'Z' — как есть, 'a'..'z' — в верхний регистр, иначе None.
        """
        if len(c) != 1:
            return None
        if 'A' <= c <= 'Z':
            return cls(c)
        if 'a' <= c <= 'z':
            return cls(c.upper())
        return None

    @property
    def offset(self) -> int:
        return ord(self.char) - FIRST

    def shift(self, n: int) -> 'AlphabetValue':
        """Сдвиг вперёд на n позиций по модулю 26. Отрицательный n — сдвиг назад."""
        return AlphabetValue(chr((self.offset + n) % ALPHABET_SIZE + FIRST))

    def __str__(self) -> str:
        return self.char
