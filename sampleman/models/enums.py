"""
Enums for Sampleman models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ManufacturerStatus(models.TextChoices):
    """
    Status of one factory's sample attempt.

    Shares the vocabulary of the order status, since factories report
    samples through the same workflow. Only a handful of values drive
    the display status:

    APPROVED / IN_PRODUCTION / SHIPPED: progress signals
    CANCELLED / ON_HOLD:               dead or paused attempts, ignored
    """
    DRAFT = 'draft', _('Draft')
    INVOICED = 'invoiced', _('Invoiced')
    PENDING = 'pending', _('Pending')
    APPROVED = 'approved', _('Approved')
    SUBMITTED = 'submitted', _('Submitted')
    CONFIRMED = 'confirmed', _('Confirmed')
    IN_PRODUCTION = 'in_production', _('In Production')
    PARTIAL_SHIPPED = 'partial_shipped', _('Partially Shipped')
    SHIPPED = 'shipped', _('Shipped')
    PARTIAL_DELIVERY = 'partial_delivery', _('Partial Delivery')
    DELIVERED = 'delivered', _('Delivered')
    COMPLETED = 'completed', _('Completed')
    CANCELLED = 'cancelled', _('Cancelled')
    ON_HOLD = 'on_hold', _('On Hold')
    PAID = 'paid', _('Paid')
    SOURCING = 'sourcing', _('Sourcing')
    REVIEW = 'review', _('Review')


# Records in these states never influence the display status
INACTIVE_MANUFACTURER_STATUSES = frozenset({
    ManufacturerStatus.CANCELLED,
    ManufacturerStatus.ON_HOLD,
})


class OrderItemStatus(models.TextChoices):
    """Order item lifecycle status (owned by the host order item)."""
    DRAFT = 'draft', _('Draft')
    SOURCING = 'sourcing', _('Sourcing')
    QUOTED = 'quoted', _('Quoted')
    DRAWING_CONFIRMED = 'drawing_confirmed', _('Drawing Confirmed')
    PAID_TO_FACTORY = 'paid_to_factory', _('Paid To Factory')
    IN_PRODUCTION = 'in_production', _('In Production')
    COMPLETED = 'completed', _('Completed')
    ISSUE = 'issue', _('Issue')
    REMOVED = 'removed', _('Removed')
    UNASSIGNED = 'unassigned', _('Unassigned')
    CANCELLED = 'cancelled', _('Cancelled')
    ON_HOLD = 'on_hold', _('On Hold')
    SHIPPED = 'shipped', _('Shipped')          # Production order left the forwarder
    DELIVERED = 'delivered', _('Delivered')    # Production order reached the customer


class DisplayStatus(models.TextChoices):
    """
    Customer-facing summary of sampling/shipping progress.

    Derived on every read, never stored. Declared from most to least
    advanced.
    """
    SHIPPED = 'shipped', _('Shipped')
    DELIVERED = 'delivered', _('Delivered')
    COMPLETED = 'completed', _('Completed')
    READY_TO_SHIP = 'ready_to_ship', _('Ready To Ship')
    IN_PRODUCTION = 'in_production', _('In Production')
    APPROVED = 'approved', _('Approved')
    DRAFT = 'draft', _('Draft')
