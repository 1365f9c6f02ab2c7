"""
Display status resolution — isolated, pure, reusable.

Collapses the sample attempts of an order item into the single
"furthest along" status shown to the customer.

Examples:
    - Order item shipped:                  shipped (sample records ignored)
    - One factory shipped, not at forwarder: completed
    - Any factory at forwarder:            ready_to_ship
    - Everything cancelled:                draft

Usage:
    from sampleman.resolver import resolve

    resolve(item.samples.all(), item.status)
    resolve([{'status': 'approved', 'arrived_at_forwarder': False}], 'pending')
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable

from sampleman.models.enums import (
    INACTIVE_MANUFACTURER_STATUSES,
    DisplayStatus,
    ManufacturerStatus,
)


def normalize_status(raw: Any) -> ManufacturerStatus:
    """
    Map a raw manufacturer status to a ManufacturerStatus.

    None, empty and unrecognized values become DRAFT, which feeds no
    signal. Matching is exact: 'Shipped' is not 'shipped'.
    """
    if isinstance(raw, ManufacturerStatus):
        return raw
    if not raw:
        return ManufacturerStatus.DRAFT
    try:
        return ManufacturerStatus(raw)
    except (ValueError, TypeError):
        return ManufacturerStatus.DRAFT


def _read(record, field: str):
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


@dataclass(frozen=True)
class SampleSignals:
    """Progress flags aggregated over the live sample records."""

    has_arrived_at_forwarder: bool = False
    has_shipped_manufacturer: bool = False
    has_in_production: bool = False
    has_approved: bool = False


def collect_signals(manufacturers: Iterable) -> SampleSignals:
    """
    Aggregate flags over every record, skipping cancelled and on-hold ones.

    Records may be model instances, objects with ``status`` and
    ``arrived_at_forwarder`` attributes, or mappings with those keys.
    """
    arrived = shipped = in_production = approved = False

    for record in manufacturers:
        status = normalize_status(_read(record, 'status'))
        if status in INACTIVE_MANUFACTURER_STATUSES:
            continue

        # Only an explicit True counts; None means "not reported"
        if _read(record, 'arrived_at_forwarder') is True:
            arrived = True
        if status == ManufacturerStatus.SHIPPED:
            shipped = True
        elif status == ManufacturerStatus.IN_PRODUCTION:
            in_production = True
        elif status == ManufacturerStatus.APPROVED:
            approved = True

    return SampleSignals(
        has_arrived_at_forwarder=arrived,
        has_shipped_manufacturer=shipped,
        has_in_production=in_production,
        has_approved=approved,
    )


# Evaluated top to bottom, first match wins.
PRECEDENCE: tuple[tuple[Callable[[SampleSignals], bool], DisplayStatus], ...] = (
    (lambda s: s.has_shipped_manufacturer and not s.has_arrived_at_forwarder,
     DisplayStatus.COMPLETED),
    (lambda s: s.has_arrived_at_forwarder, DisplayStatus.READY_TO_SHIP),
    (lambda s: s.has_in_production, DisplayStatus.IN_PRODUCTION),
    (lambda s: s.has_approved, DisplayStatus.APPROVED),
)

# Order item statuses that override any sample progress
ORDER_ITEM_OVERRIDES = {
    'shipped': DisplayStatus.SHIPPED,
    'delivered': DisplayStatus.DELIVERED,
}


def status_from_signals(signals: SampleSignals) -> DisplayStatus:
    """Apply PRECEDENCE to aggregated signals (DRAFT when nothing matches)."""
    for predicate, result in PRECEDENCE:
        if predicate(signals):
            return result
    return DisplayStatus.DRAFT


def resolve(manufacturers: Iterable | None, order_item_status: Any) -> DisplayStatus:
    """
    Furthest-along display status for an order item.

    Args:
        manufacturers: Sample records of the order item (any order, may be empty)
        order_item_status: Raw status of the order item itself

    Returns:
        DisplayStatus. Never raises, never returns None.
    """
    if isinstance(order_item_status, str):
        override = ORDER_ITEM_OVERRIDES.get(str(order_item_status))
        if override is not None:
            return override

    records = list(manufacturers or ())
    if not records:
        return DisplayStatus.DRAFT

    return status_from_signals(collect_signals(records))
