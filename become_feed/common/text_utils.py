"""
Text Utilities

Helper functions for preparing text fields for the feed.
The feed format has no quoting or escaping, so every free-text field is
passed through remove_special_chars before it is written.
"""

from decimal import Decimal
from typing import Optional

from bs4 import BeautifulSoup


def remove_special_chars(text: Optional[str]) -> Optional[str]:
    """
    Make text safe for a semicolon-delimited, line-oriented feed.

    Semicolons become commas; carriage returns and line feeds each become
    a single space.

    Args:
        text: Text to sanitize

    Returns:
        Sanitized text (empty or None input is returned unchanged)
    """
    if not text:
        return text

    return text.replace(';', ',').replace('\r', ' ').replace('\n', ' ')


def ensure_maximum_length(text: Optional[str], max_length: int) -> Optional[str]:
    """
    Cut text to at most max_length characters.

    Args:
        text: Text to cut
        max_length: Maximum number of characters

    Returns:
        Text unchanged if short enough, otherwise its first max_length characters
    """
    if not text or len(text) <= max_length:
        return text

    return text[:max_length]


def strip_tags(html: Optional[str]) -> str:
    """
    Remove HTML tags, keeping the text content.

    Args:
        html: HTML fragment

    Returns:
        Plain text
    """
    if not html:
        return ""

    return BeautifulSoup(html, 'html.parser').get_text()


def format_sku(product_id: int) -> str:
    """Zero-pad a product id to the 12-digit UPC column."""
    return f"{product_id:012d}"


def format_price(amount: Decimal) -> str:
    """
    Format a price with invariant number formatting.

    Always uses '.' as decimal separator, never groups thousands and drops
    trailing zeros, independent of the host locale.

    Examples:
        Decimal('1234.50') -> '1234.5'
        Decimal('9.990')   -> '9.99'
        Decimal('100')     -> '100'
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))

    text = format(amount, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
