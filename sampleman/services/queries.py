"""
Sample queries — read-only operations.

Fetch sample records and order item status, then hand them to the
pure resolver. All methods are classmethods and use no locking.
"""

import logging
from collections import defaultdict

from django.apps import apps

from sampleman.adapters.loading import get_order_item_adapter
from sampleman.conf import sampleman_settings
from sampleman.exceptions import SampleError
from sampleman.models.enums import DisplayStatus
from sampleman.models.sample import SampleManufacturer
from sampleman.resolver import resolve

logger = logging.getLogger('sampleman')


class SampleQueries:
    """Read-only sample status query methods."""

    @classmethod
    def records(cls, order_item):
        """Sample records of an order item (QuerySet)."""
        return SampleManufacturer.objects.for_order_item(order_item)

    @classmethod
    def order_item_status(cls, order_item) -> str:
        """Raw order item status, falling back to DEFAULT_ORDER_ITEM_STATUS."""
        status = get_order_item_adapter().get_status(order_item)
        return status or sampleman_settings.DEFAULT_ORDER_ITEM_STATUS

    @classmethod
    def display_status(cls, order_item) -> DisplayStatus:
        """
        Display status of one order item.

        Args:
            order_item: Host order item instance

        Returns:
            DisplayStatus computed from the item's sample records
        """
        status = cls.order_item_status(order_item)
        records = list(
            cls.records(order_item).only('status', 'arrived_at_forwarder')
        )
        result = resolve(records, status)
        logger.debug(
            "sample.status.resolved",
            extra={
                "order_item_id": order_item.pk,
                "order_item_status": status,
                "records": len(records),
                "display_status": str(result),
            },
        )
        return result

    @classmethod
    def display_statuses(cls, order_items) -> dict:
        """
        Display status of many order items with a single records query.

        Args:
            order_items: Iterable of host order items (same model)

        Returns:
            Dict[order_item.pk, DisplayStatus]
        """
        order_items = list(order_items)
        if not order_items:
            return {}

        by_item = defaultdict(list)
        records = SampleManufacturer.objects.for_order_items(order_items).only(
            'object_id', 'status', 'arrived_at_forwarder'
        )
        for record in records:
            by_item[record.object_id].append(record)

        return {
            item.pk: resolve(by_item.get(item.pk, []), cls.order_item_status(item))
            for item in order_items
        }

    @classmethod
    def get_order_item_model(cls):
        """
        Host order item model from SAMPLEMAN['ORDER_ITEM_MODEL'].

        Raises:
            SampleError('ORDER_ITEM_MODEL_NOT_CONFIGURED'): Setting is empty
            SampleError('INVALID_ORDER_ITEM_MODEL'): Model can't be loaded
        """
        model_label = sampleman_settings.ORDER_ITEM_MODEL
        if not model_label:
            raise SampleError('ORDER_ITEM_MODEL_NOT_CONFIGURED')
        try:
            return apps.get_model(model_label)
        except (LookupError, ValueError) as e:
            raise SampleError(
                'INVALID_ORDER_ITEM_MODEL',
                f"Invalid SAMPLEMAN['ORDER_ITEM_MODEL'] {model_label!r}: {e}",
                model=model_label,
            ) from e

    @classmethod
    def display_status_for(cls, order_item_id) -> DisplayStatus:
        """
        Display status of an order item looked up by primary key.

        Raises:
            SampleError('ORDER_ITEM_NOT_FOUND'): No order item with this id
        """
        model = cls.get_order_item_model()
        try:
            order_item = model._default_manager.get(pk=order_item_id)
        except (model.DoesNotExist, ValueError, TypeError) as e:
            logger.warning(
                "sample.order_item.not_found",
                extra={"order_item_id": order_item_id, "model": model._meta.label},
            )
            raise SampleError('ORDER_ITEM_NOT_FOUND', order_item_id=order_item_id) from e
        return cls.display_status(order_item)
