from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .documents import build_invoice_document
from .serializers import BillSerializer
from .services import create_bill, get_bill, search_bills


class BillViewSet(mixins.CreateModelMixin,
                  mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    serializer_class = BillSerializer

    def get_queryset(self):
        return search_bills(self.request.query_params.get('q'))

    def get_object(self):
        return get_bill(self.kwargs['pk'])

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        booking_id = data.pop('booking_id', None)
        serializer.instance = create_bill(data, booking_id=booking_id)

    @action(detail=True, methods=['get'], url_path='print')
    def document(self, request, pk=None):
        return Response(build_invoice_document(self.get_object()))
