from typing import Any, NoReturn

from fastapi import HTTPException
from starlette import status


class FileValidationError(ValueError):
    """Загруженный файл отсутствует или повреждён"""


def raise_400(message: str = "Bad request") -> NoReturn:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def raise_404(message: str = "Not found", *, entity: str = None, id: Any = None) -> NoReturn:
    if entity and id:
        message = f"{entity} with {id} not found"
    elif entity:
        message = f"{entity} not found"
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def raise_500(message: str = "Internal server error") -> NoReturn:
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)
