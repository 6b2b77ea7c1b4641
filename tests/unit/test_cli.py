"""
Тесты для командной строки nelsc

Проверяет:
1. Вывод каждой подкоманды в текстовом макете
2. JSON вывод отчётов (проходит JSON Schema контракты)
3. Ошибки ввода: диагностика в stderr, код возврата 1
4. Уровень логирования из флага и окружения
"""

import json
import logging

import pytest

from nelsc.cli import LOG_LEVEL_ENV, main

DAY_ZERO_REPORT = (
    "Day offset:      0\n"
    "Absolute month:  0\n"
    "NELSC date:      00:B3-1\n"
    "Month length:    short\n"
    "Year length:     short\n"
    "Gregorian date:  1925-02-02\n"
)


@pytest.fixture(autouse=True)
def clean_log_level(monkeypatch):
    """Уровень логирования не зависит от окружения разработчика."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


class TestHelp:
    """Тесты справки"""

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert capsys.readouterr().out.startswith("nelsc command summary:")

    def test_help_command(self, capsys) -> None:
        assert main(["help"]) == 0
        assert "newyear - create a chart" in capsys.readouterr().out

    def test_unknown_command(self, capsys) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["sunrise"])
        assert excinfo.value.code == 2

    def test_help_takes_no_arguments(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["help", "day"])
        assert excinfo.value.code == 2


class TestBase24Commands:
    """Тесты конвертеров base-24"""

    def test_to24pair_negative(self, capsys) -> None:
        assert main(["to24pair", "-96"]) == 0
        assert capsys.readouterr().out == "Decimal value:  -96\nBase-24 pair:   T0\n"

    def test_to24pair_out_of_range(self, capsys) -> None:
        assert main(["to24pair", "480"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Argument must be in range -96 to 479!" in captured.err

    def test_from24pair(self, capsys) -> None:
        assert main(["from24pair", " ry "]) == 0
        assert capsys.readouterr().out == "Base-24 pair:   RY\nDecimal value:  479\n"

    def test_from24pair_invalid(self, capsys) -> None:
        assert main(["from24pair", "R"]) == 1
        assert "Could not parse as a base-24 pair!" in capsys.readouterr().err

    def test_to24digit(self, capsys) -> None:
        assert main(["to24digit", "10"]) == 0
        assert capsys.readouterr().out == "Decimal value:  10\nBase-24 digit:  A\n"

    def test_to24digit_out_of_range(self, capsys) -> None:
        assert main(["to24digit", "24"]) == 1
        assert "Argument must be in range 0 to 23!" in capsys.readouterr().err

    def test_from24digit_echoes_input(self, capsys) -> None:
        assert main(["from24digit", "m"]) == 0
        assert capsys.readouterr().out == "Base-24 digit:  m\nDecimal value:  17\n"

    def test_from24digit_two_digits(self, capsys) -> None:
        assert main(["from24digit", "1 2"]) == 1
        assert "Provide no more than one base-24 digit!" in capsys.readouterr().err


class TestDayCommands:
    """Тесты day / month / date"""

    def test_day(self, capsys) -> None:
        assert main(["day", "0"]) == 0
        assert capsys.readouterr().out == DAY_ZERO_REPORT

    def test_day_out_of_range(self, capsys) -> None:
        assert main(["day", "175021"]) == 1
        assert "Argument must be in range -35364 to 175020!" in capsys.readouterr().err

    def test_day_not_a_number(self, capsys) -> None:
        assert main(["day", "zero"]) == 1
        assert "Could not parse argument as decimal integer!" in capsys.readouterr().err

    def test_month(self, capsys) -> None:
        assert main(["month", "0"]) == 0
        out = capsys.readouterr().out
        assert "Day offset:      -14\n" in out
        assert "NELSC date:      00:B1-1\n" in out
        assert "Gregorian date:  1925-01-19\n" in out

    @pytest.mark.parametrize("text", ["1925-02-02", "00:B3-1", " 1925-2-2 "])
    def test_date(self, capsys, text: str) -> None:
        assert main(["date", text]) == 0
        assert capsys.readouterr().out == DAY_ZERO_REPORT

    def test_date_end_to_end(self, capsys) -> None:
        assert main(["date", "3V:14-1"]) == 0
        assert "NELSC date:      3V:14-1\n" in capsys.readouterr().out

    @pytest.mark.parametrize("text", ["-a4X", "--json", "-h"])
    def test_date_dash_prefixed_value(self, capsys, text: str) -> None:
        """Значение с ведущим дефисом разбирается как дата, а не как опция"""
        assert main(["date", text]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Could not parse as a valid calendar date!" in captured.err

    def test_day_dash_prefixed_value(self, capsys) -> None:
        assert main(["day", "-x"]) == 1
        assert "Could not parse argument as decimal integer!" in capsys.readouterr().err

    def test_date_out_of_range(self, capsys) -> None:
        assert main(["date", "1828-04-06"]) == 1
        err = capsys.readouterr().err
        assert "Could not parse as a valid calendar date!" in err
        assert "1828-04-07 to 2404-04-11" in err

    def test_day_json(self, capsys) -> None:
        assert main(["--json", "day", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["nelsc_date"] == "00:B3-1"
        assert data["gregorian_date"] == "1925-02-02"
        assert data["long_month"] is False


class TestFullMoonCommand:
    """Тесты fullmoon"""

    def test_range(self, capsys) -> None:
        assert main(["fullmoon", "0", "1"]) == 0
        assert capsys.readouterr().out == (
            "1925-02-02 - 1925-02-08\n"
            "1925-03-09 - 1925-03-15\n"
        )

    def test_reversed(self, capsys) -> None:
        assert main(["fullmoon", "1", "0"]) == 1
        assert "Second argument must not be less than first!" in capsys.readouterr().err

    def test_out_of_range(self, capsys) -> None:
        assert main(["fullmoon", "0", "5927"]) == 1
        assert "Arguments must be in range -1197 to 5926!" in capsys.readouterr().err

    def test_second_not_a_number(self, capsys) -> None:
        assert main(["fullmoon", "0", "x"]) == 1
        assert "Could not parse second argument as decimal integer!" in capsys.readouterr().err

    def test_json(self, capsys) -> None:
        assert main(["--json", "fullmoon", "0", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"absolute_month": 0, "begin": "1925-02-02", "end": "1925-02-08"}]

    def test_wrong_argument_count(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["fullmoon", "0"])
        assert excinfo.value.code == 2

    def test_negative_dash_arguments(self, capsys) -> None:
        assert main(["fullmoon", "-1197", "-b"]) == 1
        assert "Could not parse second argument as decimal integer!" in capsys.readouterr().err


class TestNewYearCommand:
    """Тесты newyear"""

    def test_text(self, capsys) -> None:
        assert main(["newyear"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "T0  1828-04-07  equinox month offset -1"
        assert lines[1] == "T1  1829-04-27  equinox month offset -2"
        assert lines[-2] == "Range of first day of year:  03-04 - 05-03"
        assert lines[-1] == "Range of equinox offsets:    [-2, 0]"

    def test_json(self, capsys) -> None:
        assert main(["--json", "newyear"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["entries"]) == 576
        assert data["entries"][-1]["year_pair"] == "RY"


class TestLogLevel:
    """Тесты уровня логирования"""

    def test_flag(self, capsys) -> None:
        assert main(["--log-level", "debug", "day", "0"]) == 0
        assert logging.getLogger().level == logging.DEBUG
        assert capsys.readouterr().out == DAY_ZERO_REPORT

    def test_environment(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "error")
        assert main(["day", "0"]) == 0
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        with pytest.raises(SystemExit) as excinfo:
            main(["day", "0"])
        assert excinfo.value.code == 2
