"""
Sampleman configuration.

Usage in settings.py:
    SAMPLEMAN = {
        "ORDER_ITEM_MODEL": "orders.OrderItem",
        "ORDER_ITEM_ADAPTER": "sampleman.adapters.attributes.AttributeOrderItemAdapter",
        "DEFAULT_ORDER_ITEM_STATUS": "draft",
        "HIDE_COMPLETED": True,
        "HIDE_CANCELLED": True,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class SamplemanSettings:
    """Sampleman configuration settings."""

    # Host order item model ("app_label.ModelName"), used for lookups by id
    ORDER_ITEM_MODEL: str = ""

    # Reads status and listing fields from host order items (dotted path)
    ORDER_ITEM_ADAPTER: str = "sampleman.adapters.attributes.AttributeOrderItemAdapter"

    # Status assumed when an order item has none
    DEFAULT_ORDER_ITEM_STATUS: str = "draft"

    # Listing defaults
    HIDE_COMPLETED: bool = True
    HIDE_CANCELLED: bool = True


def get_sampleman_settings() -> SamplemanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "SAMPLEMAN", {})
    return SamplemanSettings(**{
        k: v for k, v in user_settings.items()
        if k in SamplemanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_sampleman_settings(), name)


sampleman_settings = _LazySettings()
