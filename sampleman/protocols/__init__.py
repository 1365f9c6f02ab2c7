"""
Sampleman Protocols.

Defines interfaces for host project integration.
"""

from sampleman.protocols.order_item import OrderItemAdapter, OrderItemInfo

__all__ = [
    "OrderItemAdapter",
    "OrderItemInfo",
]
