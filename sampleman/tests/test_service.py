"""
Tests for Samples service API (database-backed).
"""

import pytest
from django.db import connection
from django.test.utils import CaptureQueriesContext

from sampleman import samples, SampleError
from sampleman.models import (
    DisplayStatus,
    ManufacturerStatus,
    OrderItemStatus,
    SampleManufacturer,
)
from sampleman.tests.testapp.models import OrderItem


pytestmark = pytest.mark.django_db


class TestDisplayStatus:
    """Tests for samples.display_status()."""

    def test_no_samples_is_draft(self, order_item):
        """Item without sample records is draft."""
        assert samples.display_status(order_item) == DisplayStatus.DRAFT

    def test_in_production(self, order_item, make_sample):
        """Furthest record wins."""
        make_sample(order_item, ManufacturerStatus.APPROVED)
        make_sample(order_item, ManufacturerStatus.IN_PRODUCTION)

        assert samples.display_status(order_item) == DisplayStatus.IN_PRODUCTION

    def test_arrived_at_forwarder(self, order_item, make_sample):
        """Forwarder arrival outranks a shipped record."""
        make_sample(order_item, ManufacturerStatus.SHIPPED, arrived_at_forwarder=False)
        make_sample(order_item, ManufacturerStatus.APPROVED, arrived_at_forwarder=True)

        assert samples.display_status(order_item) == DisplayStatus.READY_TO_SHIP

    def test_cancelled_records_ignored(self, order_item, make_sample):
        """Cancelled arrival does not count."""
        make_sample(order_item, ManufacturerStatus.CANCELLED, arrived_at_forwarder=True)
        make_sample(order_item, ManufacturerStatus.IN_PRODUCTION, arrived_at_forwarder=False)

        assert samples.display_status(order_item) == DisplayStatus.IN_PRODUCTION

    def test_null_status_record(self, order_item, make_sample):
        """Null status record keeps the item in draft."""
        make_sample(order_item, status=None)

        assert samples.display_status(order_item) == DisplayStatus.DRAFT

    def test_order_item_shipped_overrides(self, order_item, make_sample):
        """Order item status shipped wins over sample progress."""
        make_sample(order_item, ManufacturerStatus.APPROVED)
        order_item.status = OrderItemStatus.SHIPPED
        order_item.save()

        assert samples.display_status(order_item) == DisplayStatus.SHIPPED

    def test_empty_order_item_status_uses_default(self, order_item, make_sample, settings):
        """Empty item status falls back to DEFAULT_ORDER_ITEM_STATUS."""
        order_item.status = ''
        order_item.save()
        settings.SAMPLEMAN = {'DEFAULT_ORDER_ITEM_STATUS': 'delivered'}

        assert samples.display_status(order_item) == DisplayStatus.DELIVERED

    def test_records_of_other_items_ignored(self, order_item, order, tote, make_sample):
        """Only the item's own records are considered."""
        other = OrderItem.objects.create(order=order, product=tote, status='sourcing')
        make_sample(other, ManufacturerStatus.SHIPPED)

        assert samples.display_status(order_item) == DisplayStatus.DRAFT
        assert samples.display_status(other) == DisplayStatus.COMPLETED

    def test_resolution_reads_only(self, order_item, make_sample):
        """Resolving does not touch the records."""
        record = make_sample(order_item, ManufacturerStatus.SHIPPED, arrived_at_forwarder=None)
        updated_at = record.updated_at

        samples.display_status(order_item)

        record.refresh_from_db()
        assert record.status == ManufacturerStatus.SHIPPED
        assert record.arrived_at_forwarder is None
        assert record.updated_at == updated_at


class TestDisplayStatuses:
    """Tests for samples.display_statuses()."""

    def test_batch(self, order, product, tote, make_sample):
        """Each item gets its own status."""
        mug = OrderItem.objects.create(order=order, product=product, status='sourcing')
        bag = OrderItem.objects.create(order=order, product=tote, status='sourcing')
        plain = OrderItem.objects.create(order=order, product=tote, status='delivered')
        make_sample(mug, ManufacturerStatus.SHIPPED, arrived_at_forwarder=True)
        make_sample(bag, ManufacturerStatus.ON_HOLD, arrived_at_forwarder=True)

        result = samples.display_statuses([mug, bag, plain])

        assert result == {
            mug.pk: DisplayStatus.READY_TO_SHIP,
            bag.pk: DisplayStatus.DRAFT,
            plain.pk: DisplayStatus.DELIVERED,
        }

    def test_single_records_query(self, order, product, make_sample):
        """Records for all items are fetched in one query."""
        items = [
            OrderItem.objects.create(order=order, product=product, status='sourcing')
            for _ in range(3)
        ]
        for item in items:
            make_sample(item, ManufacturerStatus.APPROVED)

        with CaptureQueriesContext(connection) as ctx:
            samples.display_statuses(items)

        record_queries = [q for q in ctx.captured_queries if 'sampleman_samplemanufacturer' in q['sql']]
        assert len(record_queries) == 1

    def test_empty(self):
        """No items, no statuses."""
        assert samples.display_statuses([]) == {}


class TestDisplayStatusFor:
    """Tests for samples.display_status_for()."""

    def test_by_id(self, order_item, make_sample):
        """Looks up the configured order item model."""
        make_sample(order_item, ManufacturerStatus.APPROVED)

        assert samples.display_status_for(order_item.pk) == DisplayStatus.APPROVED

    def test_not_found(self, db):
        """Missing item raises ORDER_ITEM_NOT_FOUND."""
        with pytest.raises(SampleError) as exc:
            samples.display_status_for(999999)

        assert exc.value.code == 'ORDER_ITEM_NOT_FOUND'
        assert exc.value.order_item_id == 999999

    def test_malformed_id(self, db):
        """A non-numeric id is a missing item, not a crash."""
        with pytest.raises(SampleError) as exc:
            samples.display_status_for('not-a-number')

        assert exc.value.code == 'ORDER_ITEM_NOT_FOUND'

    def test_model_not_configured(self, settings):
        """Empty ORDER_ITEM_MODEL raises ORDER_ITEM_MODEL_NOT_CONFIGURED."""
        settings.SAMPLEMAN = {}

        with pytest.raises(SampleError) as exc:
            samples.display_status_for(1)

        assert exc.value.code == 'ORDER_ITEM_MODEL_NOT_CONFIGURED'

    def test_invalid_model(self, settings):
        """Unknown model label raises INVALID_ORDER_ITEM_MODEL."""
        settings.SAMPLEMAN = {'ORDER_ITEM_MODEL': 'testapp.Nope'}

        with pytest.raises(SampleError) as exc:
            samples.display_status_for(1)

        assert exc.value.code == 'INVALID_ORDER_ITEM_MODEL'
        assert exc.value.data['model'] == 'testapp.Nope'


class TestSampleManufacturerModel:
    """Tests for SampleManufacturer helpers."""

    def test_for_order_item(self, order_item, make_sample):
        """Generic relation round-trips to the order item."""
        record = make_sample(order_item, ManufacturerStatus.APPROVED)

        assert list(SampleManufacturer.objects.for_order_item(order_item)) == [record]
        assert record.order_item == order_item

    def test_live_excludes_cancelled_and_on_hold(self, order_item, make_sample):
        """live() keeps null-status records and drops inactive ones."""
        draft = make_sample(order_item, status=None)
        approved = make_sample(order_item, ManufacturerStatus.APPROVED)
        make_sample(order_item, ManufacturerStatus.CANCELLED)
        make_sample(order_item, ManufacturerStatus.ON_HOLD)

        live = SampleManufacturer.objects.for_order_item(order_item).live()

        assert set(live) == {draft, approved}

    def test_arrived(self, order_item, make_sample):
        """arrived() keeps only explicit True."""
        arrived = make_sample(order_item, ManufacturerStatus.SHIPPED, arrived_at_forwarder=True)
        make_sample(order_item, ManufacturerStatus.SHIPPED, arrived_at_forwarder=None)

        assert list(SampleManufacturer.objects.arrived()) == [arrived]

    def test_properties(self, order_item, make_sample):
        """normalized_status and is_live."""
        record = make_sample(order_item, status=None)
        assert record.normalized_status == ManufacturerStatus.DRAFT
        assert record.is_live

        record.status = ManufacturerStatus.ON_HOLD
        assert not record.is_live

    def test_str(self, order_item, make_sample):
        """String shows factory, status and arrival."""
        record = make_sample(order_item, ManufacturerStatus.SHIPPED, arrived_at_forwarder=True)
        assert str(record) == 'FAC-01: shipped (at forwarder)'


class TestSampleError:
    """Tests for SampleError."""

    def test_default_message(self):
        """Known codes get a default message."""
        error = SampleError('ORDER_ITEM_NOT_FOUND', order_item_id=7)

        assert error.message == 'Order item not found'
        assert str(error) == '[ORDER_ITEM_NOT_FOUND] Order item not found'

    def test_as_dict(self):
        """Serializable for APIs."""
        error = SampleError('ORDER_ITEM_NOT_FOUND', order_item_id=7, model=object)

        data = error.as_dict()

        assert data['code'] == 'ORDER_ITEM_NOT_FOUND'
        assert data['data']['order_item_id'] == 7
        assert isinstance(data['data']['model'], str)
