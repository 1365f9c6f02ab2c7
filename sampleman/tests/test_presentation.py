"""
Tests for status labels and badge styles.
"""

import pytest

from sampleman import samples
from sampleman.models import DisplayStatus, ManufacturerStatus
from sampleman.presentation import (
    DEFAULT_STYLE,
    STATUS_STYLES,
    format_status,
    get_status_style,
    status_badge,
)


class TestFormatStatus:

    @pytest.mark.parametrize('status, label', [
        ('ready_to_ship', 'Ready To Ship'),
        ('in_production', 'In Production'),
        ('draft', 'Draft'),
        (DisplayStatus.SHIPPED, 'Shipped'),
        ('', 'Draft'),
        (None, 'Draft'),
        ('qa_inREVIEW', 'Qa InREVIEW'),
    ])
    def test_labels(self, status, label):
        assert format_status(status) == label


class TestStyles:

    def test_every_display_status_has_a_style(self):
        """All resolver outputs are styled."""
        for status in DisplayStatus:
            assert status.value in STATUS_STYLES

    def test_every_manufacturer_status_has_a_style(self):
        """Partial shipment and delivery are styled like their full forms."""
        for status in ManufacturerStatus:
            assert status.value in STATUS_STYLES
        assert STATUS_STYLES['partial_shipped'] == STATUS_STYLES['shipped']
        assert STATUS_STYLES['partial_delivery'].bg == 'bg-teal-50'

    def test_unknown_status_is_neutral(self):
        assert get_status_style('mystery') == DEFAULT_STYLE

    def test_badge(self):
        badge = samples.badge(DisplayStatus.READY_TO_SHIP)

        assert badge.value == 'ready_to_ship'
        assert badge.label == 'Ready To Ship'
        assert badge.style.border == 'border-indigo-400'

    def test_badge_for_missing_status(self):
        badge = status_badge(None)

        assert badge.value == 'draft'
        assert badge.style == DEFAULT_STYLE
