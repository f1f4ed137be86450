"""Cache keys for event data that does not depend on the viewer."""

from django.core.cache import cache

CATEGORY_LIST_KEY = "events:categories"


def invalidate_categories() -> None:
    cache.delete(CATEGORY_LIST_KEY)
