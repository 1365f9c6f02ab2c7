"""
Management command to report sample display statuses.

Usage:
    python manage.py sample_status_report
    python manage.py sample_status_report --item 42
"""

from collections import Counter

from django.core.management.base import BaseCommand, CommandError

from sampleman import samples, SampleError
from sampleman.models import DisplayStatus, SampleManufacturer
from sampleman.presentation import format_status


class Command(BaseCommand):
    """Sample status report command."""

    help = 'Shows the display status of order items with samples'

    def add_arguments(self, parser):
        parser.add_argument(
            '--item',
            help='Order item id (SAMPLEMAN["ORDER_ITEM_MODEL"]) to resolve'
        )

    def handle(self, *args, **options):
        try:
            if options['item'] is not None:
                status = samples.display_status_for(options['item'])
                self.stdout.write(f'{options["item"]}: {status} ({format_status(status)})')
                return

            model = samples.get_order_item_model()
        except SampleError as e:
            raise CommandError(str(e)) from e

        item_ids = SampleManufacturer.objects.for_model(model).values_list(
            'object_id', flat=True
        ).order_by().distinct()
        order_items = model._default_manager.filter(pk__in=list(item_ids))
        counts = Counter(samples.display_statuses(order_items).values())

        for status in DisplayStatus:
            self.stdout.write(f'{format_status(status)}: {counts.get(status, 0)}')
        self.stdout.write(
            self.style.SUCCESS(f'{sum(counts.values())} order item(s) with samples')
        )
