from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Vehicle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('vehicle_no', models.CharField(max_length=32, unique=True)),
                ('model', models.CharField(blank=True, max_length=120, null=True)),
                ('category', models.CharField(choices=[('CAR', 'Car'), ('VAN', 'Van'), ('SUV', 'SUV'), ('BUS', 'Bus'), ('LORRY', 'Lorry')], default='CAR', max_length=20)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('MAINTENANCE', 'Maintenance'), ('INACTIVE', 'Inactive')], default='ACTIVE', max_length=20)),
                ('default_rate', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('rate_per_day', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('km_per_day', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10)),
                ('excess_km_rate', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('extra_hour_rate', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=12)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-updated_at'],
            },
        ),
        migrations.CreateModel(
            name='BusinessProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('company_name', models.CharField(max_length=255)),
                ('address', models.TextField(blank=True, null=True)),
                ('phone', models.CharField(blank=True, max_length=64, null=True)),
                ('email', models.EmailField(blank=True, max_length=254, null=True)),
                ('website', models.CharField(blank=True, max_length=255, null=True)),
                ('logo_url', models.CharField(blank=True, max_length=500, null=True)),
                ('usd_rate', models.DecimalField(decimal_places=4, default=Decimal('300'), max_digits=12)),
                ('bank_name', models.CharField(blank=True, max_length=255, null=True)),
                ('bank_branch', models.CharField(blank=True, max_length=255, null=True)),
                ('bank_account_no', models.CharField(blank=True, max_length=64, null=True)),
                ('bank_account_name', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
