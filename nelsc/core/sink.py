"""
Output Sink: запись форматированного текста

Единственный внешний побочный эффект движка: запись готового текста в
текстовый поток. Одна попытка, без retry. Отказ записи: отдельный, третий
класс ошибок (OutputWriteError), который пробрасывается вызывающему коду.
"""

from typing import TextIO

from nelsc.core.math.safeguards import require


class OutputWriteError(OSError):
    """
    Отказ записи в output sink.

    Поднимается, если поток бросил OSError или записал не весь текст.
    """
    pass


def write_exact(sink: TextIO, text: str) -> None:
    """
    Запись текста в sink целиком.

    Args:
        sink: Текстовый поток (sys.stdout, io.StringIO, файл)
        text: Текст для записи

    Raises:
        ContractViolation: если sink is None
        OutputWriteError: если запись не удалась или записана часть текста
    """
    require(sink is not None, "sink must not be None")

    try:
        written = sink.write(text)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write {text!r}: {exc}") from exc

    # Потоки без счётчика (write() -> None) считаем записавшими всё
    if written is not None and written != len(text):
        raise OutputWriteError(
            f"Short write: {written} of {len(text)} characters of {text!r}"
        )
