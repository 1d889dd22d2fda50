# quotes/views.py
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .documents import build_quotation_document
from .serializers import QuotationSerializer, QuotationStatusSerializer
from .services import generate_quotation, get_quotation, search_quotations, update_quotation_status


class QuotationViewSet(mixins.CreateModelMixin,
                       mixins.ListModelMixin,
                       mixins.RetrieveModelMixin,
                       mixins.DestroyModelMixin,
                       viewsets.GenericViewSet):
    serializer_class = QuotationSerializer

    def get_queryset(self):
        return search_quotations(self.request.query_params.get('q'))

    def get_object(self):
        return get_quotation(self.kwargs['pk'])

    def perform_create(self, serializer):
        quotation = generate_quotation(dict(serializer.validated_data))
        serializer.instance = get_quotation(quotation.pk)

    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        ser = QuotationStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        quotation = update_quotation_status(pk, ser.validated_data['status'])
        return Response(QuotationSerializer(quotation).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=['get'], url_path='print')
    def document(self, request, pk=None):
        return Response(build_quotation_document(self.get_object()))
