"""
Sample Service — The single public interface for sample status.

Usage:
    from sampleman import samples, SampleError

    samples.display_status(order_item)            # DisplayStatus.IN_PRODUCTION
    samples.display_statuses(order_items)         # {pk: DisplayStatus, ...}
    samples.resolve(records, "pending")           # pure, no database
    samples.list_orders(order_items, search="mug")
"""

from sampleman.models.enums import DisplayStatus
from sampleman.presentation import StatusBadge, status_badge
from sampleman.resolver import resolve
from sampleman.services import listing
from sampleman.services.listing import (
    ALL_STATUSES,
    SampleOrder,
    SampleOrderItem,
    SortOption,
)
from sampleman.services.queries import SampleQueries


class Samples(SampleQueries):
    """
    Single interface for sample status operations.

    Queries (records, display_status, display_statuses, display_status_for)
    come from SampleQueries.

    Everything here is read-only: sample records are written by the
    factory update workflow, and display statuses are recomputed on
    every call.
    """

    # ══════════════════════════════════════════════════════════════
    # CORE: RESOLUTION
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def resolve(cls, manufacturers, order_item_status) -> DisplayStatus:
        """Display status from in-memory records (see sampleman.resolver.resolve)."""
        return resolve(manufacturers, order_item_status)

    @classmethod
    def badge(cls, status) -> StatusBadge:
        """Label and style for a status."""
        return status_badge(status)

    # ══════════════════════════════════════════════════════════════
    # LISTING
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def list_items(cls, order_items, search: str = '', status: str = ALL_STATUSES,
                   hide_completed: bool | None = None, hide_cancelled: bool | None = None,
                   sort=SortOption.NEWEST) -> list[SampleOrderItem]:
        """
        Filtered, sorted item rows for a list page.

        Args:
            order_items: Host order items (QuerySet or iterable)
            search: Product title / order number search
            status: Display status filter ('all' = none)
            hide_completed / hide_cancelled: None = settings default
            sort: SortOption or its value
        """
        rows = listing.build_items(order_items)
        rows = listing.filter_items(rows, search, status, hide_completed, hide_cancelled)
        return listing.sort_items(rows, sort)

    @classmethod
    def list_orders(cls, order_items, search: str = '', status: str = ALL_STATUSES,
                    hide_completed: bool | None = None, hide_cancelled: bool | None = None,
                    sort=SortOption.NEWEST) -> list[SampleOrder]:
        """Filtered, sorted orders (with all their item rows) for a list page."""
        orders = listing.group_by_order(listing.build_items(order_items))
        orders = listing.filter_orders(orders, search, status, hide_completed, hide_cancelled)
        return listing.sort_orders(orders, sort)
