"""
Тесты командной строки: raw-режим, rich-режим, stdin, ошибки аргументов.
"""

import io

import pytest

import caesar


class _TTY(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def piped_stdin(monkeypatch):
    def _set(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _set


class TestRawMode:
    """--raw печатает только результат."""

    def test_encode_default_key(self, capsys):
        caesar.run(["-r", "attackatdawn"])
        assert capsys.readouterr().out == "DWWDF NDWGD ZQ\n"

    def test_words_joined(self, capsys):
        caesar.run(["-r", "-k", "3", "attack", "at", "dawn"])
        assert capsys.readouterr().out == "DWWDF NDWGD ZQ\n"

    def test_decode(self, capsys):
        caesar.run(["-r", "-d", "-k", "3", "DWWDF NDWGD ZQ"])
        assert capsys.readouterr().out == "ATTAC KATDA WN\n"

    def test_negative_key(self, capsys):
        caesar.run(["-r", "-k", "-1", "A"])
        assert capsys.readouterr().out == "Z\n"

    def test_block(self, capsys):
        caesar.run(["-r", "-k", "0", "-b", "2", "HELLOWORLD"])
        assert capsys.readouterr().out == "HE LL OW OR LD\n"

    def test_all(self, capsys):
        caesar.run(["-r", "-a", "abc"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 26
        assert lines[0] == "0\tABC"
        assert lines[25] == "25\tZAB"

    def test_stdin(self, capsys, piped_stdin):
        piped_stdin("Hello, World!\n")
        caesar.run(["-r"])
        assert capsys.readouterr().out == "KHOOR ZRUOG\n"

    def test_no_letters_prints_empty_line(self, capsys):
        caesar.run(["-r", "12345"])
        assert capsys.readouterr().out == "\n"

    @pytest.mark.parametrize("word", ["quit", "EXIT", "q"])
    def test_quit_words(self, capsys, word):
        caesar.run(["-r", word])
        assert capsys.readouterr().out == ""

    def test_tty_without_text_fails(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", _TTY())
        with pytest.raises(SystemExit) as exc:
            caesar.run(["-r"])
        assert exc.value.code == 1
        assert "--raw" in capsys.readouterr().err


class TestRichMode:
    """Вывод через rich."""

    def test_result_and_config(self, capsys):
        caesar.run(["-k", "0", "HELLOWORLD"])
        out = capsys.readouterr().out
        assert "HELLO WORLD" in out
        assert "Конфигурация" in out
        assert "Шифрование" in out

    def test_decode_mode(self, capsys):
        caesar.run(["-d", "KHOOR ZRUOG"])
        out = capsys.readouterr().out
        assert "HELLO WORLD" in out
        assert "Расшифровка" in out

    def test_all_table(self, capsys):
        caesar.run(["-a", "-k", "1", "abc"])
        out = capsys.readouterr().out
        assert "Все сдвиги" in out
        assert "ZAB" in out

    def test_no_letters(self, capsys):
        caesar.run(["!!!"])
        assert "нет букв" in capsys.readouterr().out

    def test_interactive_input(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", _TTY())
        answers = iter(["attack at", "dawn", ""])
        monkeypatch.setattr("builtins.input", lambda: next(answers))
        caesar.run([])
        assert "DWWDF NDWGD ZQ" in capsys.readouterr().out


class TestArguments:
    """Ошибки разбора аргументов."""

    @pytest.mark.parametrize("argv", [
        ["-k", "abc", "x"],
        ["-k", "1.5", "x"],
        ["-b", "0", "x"],
        ["-b", "-2", "x"],
    ])
    def test_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            caesar.run(argv)
        assert exc.value.code == 2

    def test_defaults(self):
        args = caesar.parse_args(["x"])
        assert args.key == 3
        assert args.block == 5
        assert not args.decode
        assert not args.all
        assert not args.raw


class TestMain:
    """Верхнеуровневый обработчик."""

    def test_keyboard_interrupt(self, monkeypatch, capsys):
        def boom():
            raise KeyboardInterrupt
        monkeypatch.setattr(caesar, "run", boom)
        with pytest.raises(SystemExit) as exc:
            caesar.main()
        assert exc.value.code == 130

    def test_unexpected_error(self, monkeypatch, capsys):
        def boom():
            raise RuntimeError("boom")
        monkeypatch.setattr(caesar, "run", boom)
        with pytest.raises(SystemExit) as exc:
            caesar.main()
        assert exc.value.code == 1
        assert "❌ boom" in capsys.readouterr().err
