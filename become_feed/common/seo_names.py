"""
SEO Name Utilities

Builds URL slugs for catalog entities that have no stored slug.
Cyrillic characters are transliterated to Latin before filtering.
"""

import re

OK_CHARS = "abcdefghijklmnopqrstuvwxyz1234567890 _-"

# Cyrillic to Latin transliteration map (lowercase; input is lowered first)
TRANSLIT_MAP = {
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e',
    'ё': 'yo', 'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'y', 'к': 'k',
    'л': 'l', 'м': 'm', 'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r',
    'с': 's', 'т': 't', 'у': 'u', 'ф': 'f', 'х': 'h', 'ц': 'ts',
    'ч': 'ch', 'ш': 'sh', 'щ': 'sht', 'ъ': 'a', 'ы': 'y', 'ь': '',
    'э': 'e', 'ю': 'yu', 'я': 'ya',
}


def transliterate(text: str) -> str:
    """
    Transliterate Cyrillic characters to Latin.

    Example:
        >>> transliterate("козметика")
        'kozmetika'
    """
    return ''.join(TRANSLIT_MAP.get(char, char) for char in text)


def generate_se_name(name: str, convert_non_western_chars: bool = True) -> str:
    """
    Generate a URL slug from an entity name.

    Lowercases the name, optionally transliterates non-western characters,
    drops everything outside [a-z0-9 _-], turns spaces into hyphens and
    collapses repeated hyphens and underscores.

    Args:
        name: Product or category name
        convert_non_western_chars: Transliterate Cyrillic before filtering

    Returns:
        URL slug (may be empty if nothing usable remains)

    Example:
        >>> generate_se_name("Test! @Product# $100")
        'test-product-100'
    """
    if not name:
        return ""

    text = name.strip().lower()
    if convert_non_western_chars:
        text = transliterate(text)

    slug = ''.join(char for char in text if char in OK_CHARS)
    slug = slug.replace(' ', '-')
    slug = re.sub(r'-{2,}', '-', slug)
    slug = re.sub(r'_{2,}', '_', slug)

    return slug
