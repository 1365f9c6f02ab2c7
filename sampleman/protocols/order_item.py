"""
Order Item Protocol — Interface for reading host order items.

Sampleman does not own orders. The host project's order item model is
read through this protocol, so any schema works as long as an adapter
can extract a status and a few listing fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class OrderItemInfo:
    """Listing fields of an order item."""

    product_title: str
    quantity: int
    created_at: datetime | None
    order_id: Any
    order_number: str
    order_created_at: datetime | None
    product_image: str | None = None


@runtime_checkable
class OrderItemAdapter(Protocol):
    """
    Protocol for reading host order items.

    Implementations should provide methods to:
    - Return the order item's own status (raw string)
    - Describe the order item for list pages
    """

    def get_status(self, order_item) -> str | None:
        """
        Raw status of the order item.

        Args:
            order_item: Host order item instance

        Returns:
            Status string, or None if the item has none
        """
        ...

    def describe(self, order_item) -> OrderItemInfo:
        """
        Listing fields of the order item.

        Args:
            order_item: Host order item instance

        Returns:
            OrderItemInfo
        """
        ...
