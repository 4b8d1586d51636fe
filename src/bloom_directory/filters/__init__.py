"""Company filtering and shareable filter state."""

from . import predicates, composer, url_state

__all__ = ["predicates", "composer", "url_state"]
