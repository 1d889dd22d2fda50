from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import BusinessProfileView, DashboardView, VehicleViewSet

router = DefaultRouter()
router.register(r'vehicles', VehicleViewSet, basename='vehicles')

urlpatterns = [
    path('dashboard', DashboardView.as_view(), name='dashboard'),
    path('business-profile', BusinessProfileView.as_view(), name='business-profile'),
]
urlpatterns += router.urls
