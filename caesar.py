#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR — ШИФР ЦЕЗАРЯ БЛОКАМИ ПО 5
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Учебный шифровальщик:
  1. Из текста остаются только латинские буквы
  2. Строчные переводятся в заглавные
  3. Каждая буква сдвигается на ключ по модулю 26
  4. Результат выводится блоками по 5 букв, как в учебниках
"""

import sys
import argparse
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from caesar_encode import (
    BLOCK_SIZE, all_shifts, decode, encode, parse, parse_shift,
)

DEFAULT_KEY = 3  # Классический ключ Цезаря

_QUIT_WORDS = ('exit', 'quit', 'q')


# ═══════════════════════════════════════════════════════════════════════════════
# UI (Rich)
# ═══════════════════════════════════════════════════════════════════════════════

class UI:
    def __init__(self, console: Optional[Console] = None):
        self.c = console or Console()

    def header(self):
        self.c.print(Panel(
            "[bold cyan]CAESAR — ШИФР ЦЕЗАРЯ[/bold cyan]\n"
            "[dim]A–Z • Сдвиг по модулю 26 • Блоки по 5[/dim]",
            border_style="cyan", box=box.DOUBLE
        ))
        self.c.print()

    def info(self, key: int, decoding: bool, block: int, n_letters: int):
        mode = "[yellow]🔓 Расшифровка[/yellow]" if decoding else "[green]🔐 Шифрование[/green]"
        self.c.print(Panel(
            f"🔑 Ключ: [bold]{key}[/bold] (≡ {key % 26})\n"
            f"📊 Режим: {mode}\n"
            f"🧱 Блок: [bold]{block}[/bold]\n"
            f"🔤 Букв: [bold]{n_letters}[/bold]",
            title="[bold]Конфигурация[/bold]", border_style="blue"
        ))
        self.c.print()

    def result(self, text: str):
        # Без рамки — легко копировать
        self.c.print("[bold green]💬 РЕЗУЛЬТАТ:[/bold green]")
        self.c.print()
        self.c.print(text if text else "[dim](нет букв)[/dim]")
        self.c.print()

    def result_all(self, variants: List[Tuple[int, str]], key: int):
        tbl = Table(
            box=box.SIMPLE, show_header=True,
            header_style="bold", title="[bold]Все сдвиги[/bold]"
        )
        tbl.add_column("#", width=4)
        tbl.add_column("Ключ", width=6, style="yellow")
        tbl.add_column("Текст")

        for shift, text in variants:
            marker = "⭐" if shift == key % 26 else ""
            preview = text[:60] + "…" if len(text) > 60 else text
            tbl.add_row(marker, str(shift), preview)

        self.c.print(tbl)

    def ask_multiline(self, prompt: str) -> str:
        """Многострочный ввод: пустая строка или Ctrl+D завершает"""
        self.c.print(f"[bold yellow]{prompt}[/bold yellow]")
        self.c.print("[dim](пустая строка = конец ввода)[/dim]")

        lines = []
        try:
            while True:
                line = input()
                if line == '':
                    break
                lines.append(line)
        except EOFError:
            pass
        return '\n'.join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# ПРИЛОЖЕНИЕ
# ═══════════════════════════════════════════════════════════════════════════════

def _key(raw: str) -> int:
    try:
        return parse_shift(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _block(raw: str) -> int:
    try:
        value = parse_shift(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"размер блока должен быть >= 1, получено {value}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='caesar',
        description='Caesar — шифрование латинского текста шифром Цезаря с выводом блоками',
    )
    p.add_argument('text', nargs='*', help='Исходный текст')
    p.add_argument('-k', '--key', type=_key, default=DEFAULT_KEY,
                   help=f'Сдвиг (по умолчанию {DEFAULT_KEY}); отрицательный — сдвиг назад')
    p.add_argument('-d', '--decode', action='store_true',
                   help='Расшифровать вместо шифрования')
    p.add_argument('-b', '--block', type=_block, default=BLOCK_SIZE,
                   help=f'Размер блока (по умолчанию {BLOCK_SIZE})')
    p.add_argument('-a', '--all', action='store_true',
                   help='Показать все 26 сдвигов')
    p.add_argument('-r', '--raw', action='store_true',
                   help='Вывести только результат (удобно для копирования и pipe)')
    return p.parse_args(argv)


def run(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    raw = args.raw
    ui = None

    # Ввод текста
    if args.text:
        text = ' '.join(args.text)
    elif not sys.stdin.isatty():
        text = sys.stdin.read().strip()
    else:
        if raw:
            print("Ошибка: в режиме --raw нужно передать текст аргументом или через pipe", file=sys.stderr)
            sys.exit(1)
        ui = UI()
        ui.header()
        text = ui.ask_multiline("Введите текст:")

    if not text or text.lower() in _QUIT_WORDS:
        return

    convert = decode if args.decode else encode
    key = args.key

    # --- RAW MODE: только текст ---
    if raw:
        if args.all:
            for shift, variant in all_shifts(text, args.block):
                print(f"{shift}\t{variant}")
        else:
            print(convert(text, key, args.block))
        return

    # --- FULL UI MODE ---
    if ui is None:
        ui = UI()
        ui.header()

    ui.info(key, args.decode, args.block, len(parse(text)))
    ui.result(convert(text, key, args.block))

    if args.all:
        ui.result_all(all_shifts(text, args.block), -key if args.decode else key)


def main():
    try:
        run()
    except KeyboardInterrupt:
        print("\n👋")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
