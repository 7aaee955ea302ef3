# Common utilities
from .config_loader import (
    load_config,
    load_feed_settings,
    load_yaml,
    save_feed_settings,
)
from .log_config import setup_logging
from .seo_names import generate_se_name, transliterate
from .text_utils import (
    ensure_maximum_length,
    format_price,
    format_sku,
    remove_special_chars,
    strip_tags,
)
