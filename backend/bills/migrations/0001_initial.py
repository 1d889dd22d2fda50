from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('bookings', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Bill',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('bill_number', models.PositiveIntegerField(unique=True)),
                ('vehicle_no', models.CharField(max_length=32)),
                ('customer_name', models.CharField(max_length=255)),
                ('customer_address', models.TextField(blank=True, null=True)),
                ('route', models.CharField(max_length=255)),
                ('start_meter', models.DecimalField(decimal_places=2, max_digits=12)),
                ('end_meter', models.DecimalField(decimal_places=2, max_digits=12)),
                ('hire_rate', models.DecimalField(decimal_places=2, max_digits=12)),
                ('allowed_km', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('waiting_charge', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('gate_pass', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('package_charge', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('advance_amount', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('currency', models.CharField(default='LKR', max_length=3)),
                ('exchange_rate', models.DecimalField(decimal_places=4, default=Decimal('1'), max_digits=12)),
                ('payment_method', models.CharField(choices=[('CASH', 'Cash'), ('CREDIT', 'Credit')], default='CASH', max_length=10)),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=14)),
                ('total_amount_lkr', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('booking', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bills', to='bookings.booking')),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['-created_at'], name='idx_bill_created'),
                    models.Index(fields=['vehicle_no'], name='idx_bill_vehicle'),
                ],
            },
        ),
    ]
