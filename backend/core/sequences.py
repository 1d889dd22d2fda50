"""
Sequential document numbers (bill numbers, quotation numbers).

The number is read as max + 1 under select_for_update. An empty table has
no row to lock, so two first writers can both pick 1; the unique
constraint rejects the loser and `create_numbered` retries it.
"""
import logging

from django.db import IntegrityError, transaction

logger = logging.getLogger(__name__)

NUMBER_ATTEMPTS = 3


def next_number(model, field: str) -> int:
    """Call inside the transaction that inserts the numbered row."""
    last = (model.objects.select_for_update()
            .order_by(f'-{field}')
            .values_list(field, flat=True)
            .first())
    return (last or 0) + 1


def create_numbered(create, label: str):
    for attempt in range(1, NUMBER_ATTEMPTS + 1):
        try:
            with transaction.atomic():
                return create()
        except IntegrityError:
            if attempt == NUMBER_ATTEMPTS:
                raise
            logger.warning("%s number taken concurrently, retrying (attempt %d)", label, attempt)
