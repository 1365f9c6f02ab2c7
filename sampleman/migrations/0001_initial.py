"""
Initial migration for Sampleman models.
"""

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Sampleman models: SampleManufacturer."""

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='SampleManufacturer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('object_id', models.PositiveIntegerField(verbose_name='Order Item ID')),
                ('status', models.CharField(blank=True, choices=[('draft', 'Draft'), ('invoiced', 'Invoiced'), ('pending', 'Pending'), ('approved', 'Approved'), ('submitted', 'Submitted'), ('confirmed', 'Confirmed'), ('in_production', 'In Production'), ('partial_shipped', 'Partially Shipped'), ('shipped', 'Shipped'), ('partial_delivery', 'Partial Delivery'), ('delivered', 'Delivered'), ('completed', 'Completed'), ('cancelled', 'Cancelled'), ('on_hold', 'On Hold'), ('paid', 'Paid'), ('sourcing', 'Sourcing'), ('review', 'Review')], db_index=True, help_text='Empty = draft', max_length=20, null=True, verbose_name='Status')),
                ('arrived_at_forwarder', models.BooleanField(blank=True, help_text='Sample received by the export forwarder', null=True, verbose_name='Arrived at forwarder')),
                ('factory_ref', models.CharField(blank=True, default='', max_length=100, verbose_name='Factory')),
                ('sample_price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, verbose_name='Sample price')),
                ('eta', models.DateField(blank=True, null=True, verbose_name='ETA')),
                ('notes', models.TextField(blank=True, default='', verbose_name='Notes')),
                ('metadata', models.JSONField(blank=True, default=dict, verbose_name='Metadata')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('content_type', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='+', to='contenttypes.contenttype', verbose_name='Order Item Type')),
            ],
            options={
                'verbose_name': 'Sample Manufacturer',
                'verbose_name_plural': 'Sample Manufacturers',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['content_type', 'object_id'], name='sampleman_sample_item_idx')],
            },
        ),
    ]
