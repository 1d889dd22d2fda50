from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tours', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Quotation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quotation_number', models.PositiveIntegerField(unique=True)),
                ('customer_name', models.CharField(max_length=255)),
                ('customer_email', models.EmailField(blank=True, max_length=254, null=True)),
                ('customer_phone', models.CharField(blank=True, max_length=32, null=True)),
                ('vehicle_no', models.CharField(blank=True, max_length=32, null=True)),
                ('number_of_persons', models.PositiveIntegerField(default=1)),
                ('start_date', models.DateTimeField(blank=True, null=True)),
                ('pricing_mode', models.CharField(choices=[('PER_KM', 'Per km'), ('PER_DAY', 'Per day')], default='PER_KM', max_length=10)),
                ('hire_rate_per_km', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('hire_rate_per_day', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('km_per_day', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('driver_cost_per_day', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('markup', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=7)),
                ('discount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('total_distance', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('transport_cost', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('driver_total', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('accommodation_total', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('meals_total', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('activities_total', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('other_costs_total', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('subtotal', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('markup_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('advance_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('excluded_items', models.TextField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('valid_until', models.DateTimeField(blank=True, null=True)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('SENT', 'Sent'), ('ACCEPTED', 'Accepted'), ('EXPIRED', 'Expired')], default='DRAFT', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tour_schedule', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='quotations', to='tours.tourschedule')),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['customer_name', '-created_at'], name='idx_quote_customer_created')],
            },
        ),
    ]
