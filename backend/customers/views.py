from rest_framework import viewsets

from .serializers import CustomerSerializer
from .services import search_customers


class CustomerViewSet(viewsets.ModelViewSet):
    serializer_class = CustomerSerializer

    def get_queryset(self):
        return search_customers(self.request.query_params.get('q'))
