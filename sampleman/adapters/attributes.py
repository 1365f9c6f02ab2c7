"""
Attribute Order Item Adapter — reads host order items by attribute name.

Works out of the box for order item models shaped like:

    class OrderItem(models.Model):
        order = models.ForeignKey(Order, ...)        # .order_number, .created_at
        product = models.ForeignKey(Product, ...)    # .title, .thumbnail_image
        status = models.CharField(...)
        quantity = models.PositiveIntegerField()
        created_at = models.DateTimeField()

Any of these may be missing; listing fields then fall back to
placeholders ("Untitled", "Unknown").

Usage in settings.py:
    SAMPLEMAN = {
        "ORDER_ITEM_ADAPTER": "sampleman.adapters.attributes.AttributeOrderItemAdapter",
    }
"""

from __future__ import annotations

from sampleman.protocols.order_item import OrderItemInfo

UNTITLED = "Untitled"
UNKNOWN_ORDER_NUMBER = "Unknown"


class AttributeOrderItemAdapter:
    """
    Default OrderItemAdapter: plain attribute access with fallbacks.

    Subclass and override a single method to adapt a differently
    named field instead of writing a whole adapter.
    """

    status_attr = "status"

    def get_status(self, order_item) -> str | None:
        status = getattr(order_item, self.status_attr, None)
        return str(status) if status else None

    def get_product_title(self, order_item) -> str:
        title = getattr(order_item, "product_title", None)
        if not title:
            product = getattr(order_item, "product", None)
            title = getattr(product, "title", None)
        return title or UNTITLED

    def get_product_image(self, order_item) -> str | None:
        image = getattr(order_item, "product_image", None)
        if not image:
            product = getattr(order_item, "product", None)
            image = getattr(product, "thumbnail_image", None)
        return image or None

    def describe(self, order_item) -> OrderItemInfo:
        order = getattr(order_item, "order", None)
        return OrderItemInfo(
            product_title=self.get_product_title(order_item),
            quantity=getattr(order_item, "quantity", 0) or 0,
            created_at=getattr(order_item, "created_at", None),
            order_id=getattr(order, "pk", None),
            order_number=str(getattr(order, "order_number", None) or UNKNOWN_ORDER_NUMBER),
            order_created_at=getattr(order, "created_at", None),
            product_image=self.get_product_image(order_item),
        )
