import hashlib
import re
import time

# Транслитерация кириллицы для slug
TRANSLIT_MAP = {
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e', 'ё': 'yo',
    'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'j', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't', 'у': 'u',
    'ф': 'f', 'х': 'h', 'ц': 'ts', 'ч': 'ch', 'ш': 'sh', 'щ': 'sch', 'ъ': '',
    'ы': 'y', 'ь': '', 'э': 'e', 'ю': 'yu', 'я': 'ya'
}


def generate_slug(text: str) -> str:
    """
    Генерирует slug из текста, гарантируя непустой результат.

    Уже нормализованный slug ("chair-1") возвращается без изменений.
    """
    if not text:
        # Если входной текст пустой, генерируем уникальный хеш
        return f"product-{hashlib.md5(str(time.time()).encode()).hexdigest()[:8]}"

    result = text.lower()
    for cyr, lat in TRANSLIT_MAP.items():
        result = result.replace(cyr, lat)

    # Апострофы просто убираем: "men's" -> "mens"
    result = result.replace("'", "")

    # Заменяем все не буквенно-цифровые символы на дефис
    slug = re.sub(r'[^a-z0-9]', '-', result)
    slug = re.sub(r'-+', '-', slug).strip('-')

    if not slug:
        slug = f"p-{hashlib.md5(text.encode()).hexdigest()[:12]}"

    return slug


def normalize_slug(slug: str) -> str:
    """
    Приводит переданный slug к виду для хранения: нижний регистр,
    без апострофов, пробелы -> "_". Остальные символы не трогаем.
    """
    return slug.lower().replace("'", "").replace(" ", "_")
