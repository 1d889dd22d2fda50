from rest_framework import viewsets

from .serializers import TourScheduleSerializer
from .services import (
    create_schedule,
    deactivate_schedule,
    get_schedule,
    search_schedules,
    update_schedule,
)


class TourScheduleViewSet(viewsets.ModelViewSet):
    serializer_class = TourScheduleSerializer
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_queryset(self):
        return search_schedules(self.request.query_params.get('q'))

    def get_object(self):
        return get_schedule(self.kwargs['pk'])

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        items = data.pop('items')
        serializer.instance = create_schedule(data, items)

    def perform_update(self, serializer):
        data = dict(serializer.validated_data)
        items = data.pop('items')
        schedule = update_schedule(serializer.instance.pk, data, items)
        serializer.instance = get_schedule(schedule.pk)

    def perform_destroy(self, instance):
        deactivate_schedule(instance.pk)
