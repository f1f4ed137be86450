"""Django signals for cache invalidation.

Event listings depend on the viewer and are never cached; only the
category list is.
"""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import invalidate_categories
from events.models import Category


@receiver([post_save, post_delete], sender=Category)
def invalidate_category_cache(sender, instance, **kwargs):
    """Invalidate the category list when a category is saved or deleted."""
    invalidate_categories()
