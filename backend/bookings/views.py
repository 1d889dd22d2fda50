from django.utils import timezone
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import BookingSerializer
from .services import cancel_booking, create_booking, get_booking, list_bookings


class BookingViewSet(mixins.CreateModelMixin,
                     mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     viewsets.GenericViewSet):
    serializer_class = BookingSerializer

    def get_queryset(self):
        return list_bookings(self.request.query_params.get('status'))

    def get_object(self):
        return get_booking(self.kwargs['pk'])

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["now"] = timezone.now()
        return context

    def perform_create(self, serializer):
        serializer.instance = create_booking(serializer.validated_data)

    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        booking = cancel_booking(pk)
        return Response(self.get_serializer(booking).data, status=status.HTTP_200_OK)
