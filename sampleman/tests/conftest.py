"""
Pytest fixtures for Sampleman tests.
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from sampleman.adapters import reset_order_item_adapter
from sampleman.models import ManufacturerStatus, OrderItemStatus, SampleManufacturer
from sampleman.tests.testapp.models import Order, OrderItem, Product


@pytest.fixture(autouse=True)
def _reset_adapter():
    """Adapter is cached per process; tests may swap it via settings."""
    reset_order_item_adapter()
    yield
    reset_order_item_adapter()


@pytest.fixture
def product(db):
    """Create a test product."""
    return Product.objects.create(
        title='Ceramic Mug',
        thumbnail_image='https://cdn.example.com/mug.png',
    )


@pytest.fixture
def tote(db):
    """Create a second test product."""
    return Product.objects.create(title='Canvas Tote')


@pytest.fixture
def order(db):
    """Create a test order."""
    return Order.objects.create(order_number='SO-1001')


@pytest.fixture
def later_order(db):
    """Create an order placed a day later."""
    return Order.objects.create(
        order_number='SO-1002',
        created_at=timezone.now() + timedelta(days=1),
    )


@pytest.fixture
def order_item(db, order, product):
    """Create a pending order item."""
    return OrderItem.objects.create(
        order=order,
        product=product,
        status=OrderItemStatus.SOURCING,
        quantity=3,
    )


@pytest.fixture
def make_sample(db):
    """Factory: attach a sample record to an order item."""

    def _make(order_item, status=ManufacturerStatus.DRAFT, arrived_at_forwarder=None, **kwargs):
        kwargs.setdefault('factory_ref', 'FAC-01')
        kwargs.setdefault('sample_price', Decimal('25.00'))
        return SampleManufacturer.objects.create(
            order_item=order_item,
            status=status,
            arrived_at_forwarder=arrived_at_forwarder,
            **kwargs,
        )

    return _make
