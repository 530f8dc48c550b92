#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Шифровальщик текста шифром Цезаря (латиница, вывод блоками по 5 букв)"""

import re
from typing import List, Tuple

from alphabet import ALPHABET_SIZE, AlphabetValue

BLOCK_SIZE = 5

_SHIFT_RE = re.compile(r'[+-]?[0-9]+')


def parse(text: str) -> List[AlphabetValue]:
    """Текст → список букв. Не-буквы молча выбрасываются, порядок сохраняется."""
    letters = []
    for char in text:
        value = AlphabetValue.from_char(char)
        if value is not None:
            letters.append(value)
    return letters


def render(letters: List[AlphabetValue], block: int = BLOCK_SIZE) -> str:
    """Склеивает буквы и режет на блоки по `block` символов через пробел"""
    if block < 1:
        raise ValueError(f"размер блока должен быть >= 1, получено {block}")
    joined = ''.join(str(a) for a in letters)
    return ' '.join(joined[i:i + block] for i in range(0, len(joined), block))


def encode(text: str, shift: int, block: int = BLOCK_SIZE) -> str:
    """Шифрует текст шифром Цезаря"""
    return render([a.shift(shift) for a in parse(text)], block)


def decode(text: str, shift: int, block: int = BLOCK_SIZE) -> str:
    """Расшифровка = шифрование обратным сдвигом. Пробелы блоков игнорируются."""
    return encode(text, -shift, block)


def normalize(text: str, block: int = BLOCK_SIZE) -> str:
    """Только буквы, верхний регистр, блоки (сдвиг 0)"""
    return encode(text, 0, block)


def all_shifts(text: str, block: int = BLOCK_SIZE) -> List[Tuple[int, str]]:
    """Все 26 вариантов сдвига — классический перебор"""
    letters = parse(text)
    return [
        (s, render([a.shift(s) for a in letters], block))
        for s in range(ALPHABET_SIZE)
    ]


def parse_shift(raw: str) -> int:
    """Ключ из командной строки: целое число со знаком или без"""
    value = raw.strip()
    if not _SHIFT_RE.fullmatch(value):
        raise ValueError(f"ключ должен быть целым числом, получено {raw!r}")
    return int(value)
