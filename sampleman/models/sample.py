"""
SampleManufacturer model — one factory's sample attempt for an order item.
"""

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from sampleman.models.enums import INACTIVE_MANUFACTURER_STATUSES, ManufacturerStatus


class SampleManufacturerQuerySet(models.QuerySet):
    """Custom QuerySet for SampleManufacturer with convenience filters."""

    def for_order_item(self, order_item):
        """Sample records attached to a specific order item."""
        ct = ContentType.objects.get_for_model(order_item)
        return self.filter(content_type=ct, object_id=order_item.pk)

    def for_order_items(self, order_items):
        """Sample records attached to any of the given order items."""
        order_items = list(order_items)
        if not order_items:
            return self.none()
        ct = ContentType.objects.get_for_model(order_items[0])
        return self.filter(content_type=ct, object_id__in=[item.pk for item in order_items])

    def for_model(self, model):
        """Sample records attached to any order item of the given model."""
        ct = ContentType.objects.get_for_model(model)
        return self.filter(content_type=ct)

    def live(self):
        """Records that count towards the display status (not cancelled / on hold)."""
        return self.filter(
            Q(status__isnull=True) | ~Q(status__in=list(INACTIVE_MANUFACTURER_STATUSES))
        )

    def arrived(self):
        """Records already received by the forwarder."""
        return self.filter(arrived_at_forwarder=True)


class SampleManufacturer(models.Model):
    """
    A factory's attempt to produce a pre-production sample.

    An order item may have several concurrent or historical attempts.
    Status and forwarder arrival are written by the factory update
    workflow; the display status only ever reads them.

    status=None is a record nobody has touched yet (treated as draft).
    arrived_at_forwarder=None means "not reported" (treated as False).
    """

    # Order item reference (generic, works with any order item model)
    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.PROTECT,
        related_name='+',
        verbose_name=_('Order Item Type'),
    )
    object_id = models.PositiveIntegerField(verbose_name=_('Order Item ID'))
    order_item = GenericForeignKey('content_type', 'object_id')

    status = models.CharField(
        max_length=20,
        choices=ManufacturerStatus.choices,
        null=True,
        blank=True,
        db_index=True,
        verbose_name=_('Status'),
        help_text=_('Empty = draft'),
    )
    arrived_at_forwarder = models.BooleanField(
        null=True,
        blank=True,
        verbose_name=_('Arrived at forwarder'),
        help_text=_('Sample received by the export forwarder'),
    )

    # Factory / pricing (informational)
    factory_ref = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name=_('Factory'),
    )
    sample_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name=_('Sample price'),
    )
    eta = models.DateField(
        null=True,
        blank=True,
        verbose_name=_('ETA'),
    )
    notes = models.TextField(
        blank=True,
        default='',
        verbose_name=_('Notes'),
    )
    metadata = models.JSONField(default=dict, blank=True, verbose_name=_('Metadata'))

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created at'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated at'))

    objects = SampleManufacturerQuerySet.as_manager()

    class Meta:
        verbose_name = _('Sample Manufacturer')
        verbose_name_plural = _('Sample Manufacturers')
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='sampleman_sample_item_idx'),
        ]

    @property
    def normalized_status(self) -> ManufacturerStatus:
        """Status with None/unknown values mapped to DRAFT."""
        from sampleman.resolver import normalize_status
        return normalize_status(self.status)

    @property
    def is_live(self) -> bool:
        """Does this record count towards the display status?"""
        return self.normalized_status not in INACTIVE_MANUFACTURER_STATUSES

    def __str__(self) -> str:
        factory = self.factory_ref or '?'
        arrived = " (at forwarder)" if self.arrived_at_forwarder else ""
        return f"{factory}: {self.normalized_status}{arrived}"
