"""Feed generation errors."""


class FeedError(Exception):
    """Base class for feed generation failures."""


class CurrencyNotFoundError(FeedError):
    """Neither the feed currency nor the primary store currency could be resolved."""


class CatalogLookupError(FeedError):
    """A catalog link points to an entity that does not exist."""
