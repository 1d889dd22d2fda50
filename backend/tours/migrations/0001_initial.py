from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='TourSchedule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('days', models.PositiveIntegerField()),
                ('base_price_per_person', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('vehicle_category', models.CharField(default='CAR', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-updated_at'],
                'indexes': [models.Index(fields=['is_active', '-updated_at'], name='idx_tour_active_updated')],
            },
        ),
        migrations.CreateModel(
            name='TourScheduleDayItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('day_number', models.PositiveIntegerField()),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, null=True)),
                ('distance_km', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('accommodation', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('meals', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('activities', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('other_costs', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('schedule', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='tours.tourschedule')),
            ],
            options={
                'ordering': ['day_number'],
            },
        ),
    ]
