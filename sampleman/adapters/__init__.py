"""
Sampleman Adapters.

Implementations of protocols for host projects.
"""

from sampleman.adapters.attributes import AttributeOrderItemAdapter
from sampleman.adapters.loading import get_order_item_adapter, reset_order_item_adapter

__all__ = [
    "AttributeOrderItemAdapter",
    "get_order_item_adapter",
    "reset_order_item_adapter",
]
