"""
Order item adapter loading.

Loads the configured OrderItemAdapter from settings, once per process.

Usage:
    from sampleman.adapters import get_order_item_adapter

    adapter = get_order_item_adapter()
    adapter.get_status(order_item)

Settings:
    SAMPLEMAN = {
        "ORDER_ITEM_ADAPTER": "myshop.adapters.ShopOrderItemAdapter",
    }
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from sampleman.conf import sampleman_settings
from sampleman.protocols.order_item import OrderItemAdapter

logger = logging.getLogger(__name__)


# Cached adapter instance
_lock = threading.Lock()
_adapter: OrderItemAdapter | None = None


def get_order_item_adapter() -> OrderItemAdapter:
    """
    Return the configured order item adapter.

    Returns:
        OrderItemAdapter instance

    Raises:
        ImproperlyConfigured: If ORDER_ITEM_ADAPTER is empty, fails to import,
            or does not implement the protocol
    """
    global _adapter

    if _adapter is None:
        with _lock:
            if _adapter is None:  # double-checked
                adapter_path = sampleman_settings.ORDER_ITEM_ADAPTER

                if not adapter_path:
                    raise ImproperlyConfigured(
                        "SAMPLEMAN['ORDER_ITEM_ADAPTER'] must be configured. "
                        "Example: 'sampleman.adapters.attributes.AttributeOrderItemAdapter'"
                    )

                try:
                    adapter_class = import_string(adapter_path)
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import order item adapter '{adapter_path}': {e}"
                    ) from e

                adapter = adapter_class()
                if not isinstance(adapter, OrderItemAdapter):
                    raise ImproperlyConfigured(
                        f"'{adapter_path}' does not implement OrderItemAdapter "
                        "(get_status, describe)"
                    )
                _adapter = adapter
                logger.debug("Loaded order item adapter: %s", adapter_path)

    return _adapter


def reset_order_item_adapter() -> None:
    """Reset the cached adapter. Useful for testing."""
    global _adapter
    _adapter = None
