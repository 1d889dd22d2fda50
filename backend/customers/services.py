from django.db.models import Q

from .models import Customer


def search_customers(query=None):
    qs = Customer.objects.all()
    if query:
        qs = qs.filter(Q(name__icontains=query) | Q(mobile__icontains=query))
    return qs.order_by('name')
