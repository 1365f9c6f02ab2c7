"""
Sampleman Models.

- SampleManufacturer: one factory's sample attempt for an order item
- ManufacturerStatus / OrderItemStatus / DisplayStatus: status vocabularies
"""

from sampleman.models.enums import DisplayStatus, ManufacturerStatus, OrderItemStatus
from sampleman.models.sample import SampleManufacturer

__all__ = [
    'ManufacturerStatus',
    'OrderItemStatus',
    'DisplayStatus',
    'SampleManufacturer',
]
