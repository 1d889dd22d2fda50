# backend/bills/management/commands/backfill_bill_currency.py
from django.core.management.base import BaseCommand

from bills.services import backfill_base_currency_totals


class Command(BaseCommand):
    help = "Fill in base-currency totals on bills saved before multi-currency support."

    def handle(self, *args, **opts):
        updated = backfill_base_currency_totals()
        self.stdout.write(self.style.SUCCESS(f"Updated {updated} bill(s)"))
