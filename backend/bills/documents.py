"""
Printable invoice data.

Builds the itemised structure a print renderer needs; every figure comes
from the calculation engine so the lines always add up to the total.
"""
from django.conf import settings
from django.utils import timezone

from core.services import get_business_profile
from pricing.services.utils import format_currency, q2


def _line(label, amount, prefix):
    return {"label": label, "amount": str(q2(amount)), "formatted": format_currency(amount, prefix)}


def build_invoice_document(bill, profile=None, prefix=None) -> dict:
    profile = profile or get_business_profile()
    prefix = prefix if prefix is not None else settings.HIRE_CURRENCY_PREFIX
    totals = bill.totals

    if totals.package_mode:
        base_label = f"Excess distance ({totals.excess_distance} km x {q2(bill.hire_rate)})"
    else:
        base_label = f"Hire charge ({totals.distance} km x {q2(bill.hire_rate)})"

    lines = [_line(base_label, totals.base_charge, prefix)]
    for label, amount in (("Waiting charge", bill.waiting_charge),
                          ("Gate pass", bill.gate_pass),
                          ("Package charge", bill.package_charge)):
        lines.append(_line(label, amount, prefix))

    return {
        "company": {
            "name": profile.company_name,
            "address": profile.address,
            "phone": profile.phone,
            "email": profile.email,
            "website": profile.website,
            "logo_url": profile.logo_url,
            "bank": {
                "name": profile.bank_name,
                "branch": profile.bank_branch,
                "account_no": profile.bank_account_no,
                "account_name": profile.bank_account_name,
            },
        },
        "bill_number": bill.bill_number,
        "date": timezone.localtime(bill.created_at).date().isoformat() if bill.created_at else None,
        "customer": {"name": bill.customer_name, "address": bill.customer_address},
        "vehicle_no": bill.vehicle_no,
        "route": bill.route,
        "payment_method": bill.payment_method,
        "start_meter": str(bill.start_meter),
        "end_meter": str(bill.end_meter),
        "distance": str(totals.distance),
        "allowed_km": str(bill.allowed_km) if totals.package_mode else None,
        "lines": lines,
        "total": _line("Total", totals.total_amount, prefix),
        "advance": _line("Advance", bill.advance_amount, prefix),
        "balance_due": _line("Balance due", totals.balance_due, prefix),
        "currency": bill.currency,
        "exchange_rate": str(bill.exchange_rate),
        "total_amount_lkr": str(bill.total_amount_lkr),
    }
