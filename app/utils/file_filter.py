from typing import Any, Callable, Optional

from app.core.exceptions import FileValidationError

# "jepg" (а не "jpeg") оставлен как есть: от этого списка зависит, какие файлы принимаются
VALID_EXTENSIONS = ("jpg", "jepg", "png", "gif")

FilterCallback = Callable[[Optional[Exception], bool], Any]


def file_filter(file: Any, callback: FilterCallback) -> Any:
    """
    Проверяет MIME-тип загружаемого файла.

    Нет файла -> callback(ошибка, False); неподходящий тип -> callback(None, False)
    без ошибки; иначе callback(None, True). Возвращает результат callback.
    """
    if file is None:
        return callback(FileValidationError("File is empty"), False)

    parts = (getattr(file, "content_type", None) or "").split("/")
    file_extension = parts[1] if len(parts) > 1 else ""

    if file_extension in VALID_EXTENSIONS:
        return callback(None, True)
    return callback(None, False)
