from rest_framework.routers import DefaultRouter

from .views import TourScheduleViewSet

router = DefaultRouter()
router.register(r'tour-schedules', TourScheduleViewSet, basename='tour-schedules')

urlpatterns = router.urls
