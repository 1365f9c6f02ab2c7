"""
Django Sampleman — Sample tracking and display status for order items.

Keeps each factory's sample attempt for an order item and derives the
single status the customer sees.

Usage:
    from sampleman import samples, SampleError

    samples.display_status(order_item)        # 'in_production'
    samples.resolve(records, 'pending')       # 'ready_to_ship'
    samples.list_orders(order_items)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'samples':
        from sampleman.service import Samples
        return Samples
    elif name == 'resolve':
        from sampleman.resolver import resolve
        return resolve
    elif name == 'SampleError':
        from sampleman.exceptions import SampleError
        return SampleError
    elif name == 'SampleManufacturer':
        from sampleman.models.sample import SampleManufacturer
        return SampleManufacturer
    elif name == 'ManufacturerStatus':
        from sampleman.models.enums import ManufacturerStatus
        return ManufacturerStatus
    elif name == 'OrderItemStatus':
        from sampleman.models.enums import OrderItemStatus
        return OrderItemStatus
    elif name == 'DisplayStatus':
        from sampleman.models.enums import DisplayStatus
        return DisplayStatus
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'samples',
    'resolve',
    'SampleError',
    'SampleManufacturer',
    'ManufacturerStatus',
    'OrderItemStatus',
    'DisplayStatus',
]

__version__ = '0.1.0'
