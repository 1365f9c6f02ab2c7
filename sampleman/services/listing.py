"""
Sample listing — rows, order grouping, filtering and sorting for list pages.

Usage:
    from sampleman.services.listing import build_items, group_by_order, filter_items

    items = build_items(OrderItem.objects.filter(order__organization=org))
    visible = filter_items(items, search="mug", status="in_production")
    orders = group_by_order(items)

Filtering and sorting are pure: they work on SampleOrderItem rows and
never touch the database.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from sampleman.adapters.loading import get_order_item_adapter
from sampleman.conf import sampleman_settings
from sampleman.models.enums import DisplayStatus
from sampleman.services.queries import SampleQueries

# Filter value meaning "no status filter"
ALL_STATUSES = 'all'


class SortOption(str, Enum):
    """Sort order for list pages."""

    NEWEST = "newest"
    OLDEST = "oldest"
    ORDER_NUMBER_DESC = "order_number_desc"
    ORDER_NUMBER_ASC = "order_number_asc"


@dataclass(frozen=True)
class SampleOrderItem:
    """One order item row with its computed display status."""

    id: Any
    status: str
    display_status: DisplayStatus
    quantity: int
    created_at: datetime | None
    product_title: str
    order_id: Any
    order_number: str
    order_created_at: datetime | None
    product_image: str | None = None


@dataclass
class SampleOrder:
    """An order with its sample item rows."""

    id: Any
    order_number: str
    status: str
    created_at: datetime | None
    items: list[SampleOrderItem] = field(default_factory=list)


def build_items(order_items) -> list[SampleOrderItem]:
    """
    Build list rows for host order items.

    Display statuses are resolved with one records query for all items.
    """
    order_items = list(order_items)
    adapter = get_order_item_adapter()
    statuses = SampleQueries.display_statuses(order_items)

    rows = []
    for item in order_items:
        info = adapter.describe(item)
        rows.append(SampleOrderItem(
            id=item.pk,
            status=SampleQueries.order_item_status(item),
            display_status=statuses[item.pk],
            quantity=info.quantity,
            created_at=info.created_at,
            product_title=info.product_title,
            order_id=info.order_id,
            order_number=info.order_number,
            order_created_at=info.order_created_at,
            product_image=info.product_image,
        ))
    return rows


def group_by_order(items: list[SampleOrderItem]) -> list[SampleOrder]:
    """
    Group rows by order, highest order number first.

    Items keep their incoming order within each order. The order status
    is taken from its first item.
    """
    orders: dict[Any, SampleOrder] = {}
    for item in items:
        if item.order_id not in orders:
            orders[item.order_id] = SampleOrder(
                id=item.order_id,
                order_number=item.order_number,
                status=item.status,
                created_at=item.order_created_at,
            )
        orders[item.order_id].items.append(item)

    return sorted(orders.values(), key=lambda o: str(o.order_number), reverse=True)


def _matches(text: str, search: str) -> bool:
    return search.lower() in str(text or '').lower()


def _hide_flags(hide_completed, hide_cancelled) -> tuple[bool, bool]:
    if hide_completed is None:
        hide_completed = sampleman_settings.HIDE_COMPLETED
    if hide_cancelled is None:
        hide_cancelled = sampleman_settings.HIDE_CANCELLED
    return hide_completed, hide_cancelled


def filter_items(items: list[SampleOrderItem], search: str = '',
                 status: str = ALL_STATUSES, hide_completed: bool | None = None,
                 hide_cancelled: bool | None = None) -> list[SampleOrderItem]:
    """
    Filter rows for the items view.

    Args:
        search: Case-insensitive match on product title or order number
        status: Display status to keep ('all' = no filter)
        hide_completed: Drop completed rows (None = HIDE_COMPLETED setting)
        hide_cancelled: Drop cancelled rows (None = HIDE_CANCELLED setting)
    """
    hide_completed, hide_cancelled = _hide_flags(hide_completed, hide_cancelled)

    result = []
    for item in items:
        if search and not (_matches(item.product_title, search)
                           or _matches(item.order_number, search)):
            continue
        if status != ALL_STATUSES and item.display_status != status:
            continue
        if hide_completed and item.display_status == DisplayStatus.COMPLETED:
            continue
        # never produced by resolve(), but hosts may build rows themselves
        if hide_cancelled and item.display_status == 'cancelled':
            continue
        result.append(item)
    return result


def filter_orders(orders: list[SampleOrder], search: str = '',
                  status: str = ALL_STATUSES, hide_completed: bool | None = None,
                  hide_cancelled: bool | None = None) -> list[SampleOrder]:
    """
    Filter orders for the orders view.

    An order matches the search if its number or any item title matches,
    and the status filter if any item has that display status. It is
    hidden as completed (or cancelled) only when all its items are.
    """
    hide_completed, hide_cancelled = _hide_flags(hide_completed, hide_cancelled)

    result = []
    for order in orders:
        if search and not (_matches(order.order_number, search)
                           or any(_matches(i.product_title, search) for i in order.items)):
            continue
        if status != ALL_STATUSES and not any(i.display_status == status for i in order.items):
            continue
        if hide_completed and all(i.display_status == DisplayStatus.COMPLETED for i in order.items):
            continue
        if hide_cancelled and all(i.display_status == 'cancelled' for i in order.items):
            continue
        result.append(order)
    return result


def _date_key(value):
    # Undated rows count as created now, after any dated one
    return (value is None, value)


def _sort(rows: list, option, date_attr: str) -> list:
    option = SortOption(option)
    if option in (SortOption.NEWEST, SortOption.OLDEST):
        return sorted(
            rows,
            key=lambda r: _date_key(getattr(r, date_attr)),
            reverse=option == SortOption.NEWEST,
        )
    return sorted(
        rows,
        key=lambda r: str(r.order_number),
        reverse=option == SortOption.ORDER_NUMBER_DESC,
    )


def sort_items(items: list[SampleOrderItem], option=SortOption.NEWEST) -> list[SampleOrderItem]:
    """Sort item rows by creation date or order number."""
    return _sort(items, option, 'created_at')


def sort_orders(orders: list[SampleOrder], option=SortOption.NEWEST) -> list[SampleOrder]:
    """Sort orders by order creation date or order number."""
    return _sort(orders, option, 'created_at')
