# backend/core/management/commands/check_health.py
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connection

from bills.models import Bill
from bookings.models import Booking
from core.models import BusinessProfile, Vehicle
from customers.models import Customer
from quotes.models import Quotation
from tours.models import TourSchedule

MODELS = [Vehicle, Customer, Booking, Bill, TourSchedule, Quotation, BusinessProfile]


class Command(BaseCommand):
    help = "Check the database connection and print a record count per table."

    def handle(self, *args, **opts):
        connection.ensure_connection()
        self.stdout.write(self.style.SUCCESS(f"Database OK ({connection.vendor})"))

        failed = []
        for model in MODELS:
            table = model._meta.db_table
            try:
                self.stdout.write(f"  {table}: {model.objects.count()}")
            except DatabaseError as exc:
                failed.append(table)
                self.stderr.write(self.style.ERROR(f"  {table}: {exc}"))

        if failed:
            raise CommandError(f"{len(failed)} table(s) unreadable: {', '.join(failed)}")
