import logging
from typing import Optional

from fastapi import APIRouter, File, UploadFile

from app.core.exceptions import raise_400
from app.utils.file_filter import file_filter

router = APIRouter()
logger = logging.getLogger(__name__)


def _accept_or_raise(error: Optional[Exception], accepted: bool) -> bool:
    if error:
        raise_400(str(error))
    return accepted


@router.post("/product")
async def upload_product_image(file: Optional[UploadFile] = File(None)):
    """Проверка загружаемого изображения; сам файл не сохраняется"""
    if not file_filter(file, _accept_or_raise):
        logger.info("Отклонён файл %s (%s)", file.filename, file.content_type)
        raise_400("Make sure that the file is an image")

    return {"filename": file.filename, "content_type": file.content_type}
