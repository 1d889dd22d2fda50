from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from bills.serializers import BillSerializer
from bookings.serializers import BookingSerializer
from pricing.services.utils import q2

from .dashboard import get_dashboard_stats
from .serializers import BusinessProfileSerializer, VehicleSerializer
from .services import get_business_profile, search_vehicles, update_business_profile


class VehicleViewSet(viewsets.ModelViewSet):
    serializer_class = VehicleSerializer

    def get_queryset(self):
        return search_vehicles(self.request.query_params.get('q'))


class BusinessProfileView(APIView):
    def get(self, request):
        return Response(BusinessProfileSerializer(get_business_profile()).data)

    def put(self, request):
        ser = BusinessProfileSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        profile = update_business_profile(ser.validated_data)
        return Response(BusinessProfileSerializer(profile).data, status=status.HTTP_200_OK)


class DashboardView(APIView):
    def get(self, request):
        stats = get_dashboard_stats()
        return Response({
            "total_vehicles": stats["total_vehicles"],
            "occupied_vehicles": stats["occupied_vehicles"],
            "available_vehicles": stats["available_vehicles"],
            "revenue_yearly": str(q2(stats["revenue_yearly"])),
            "revenue_weekly": str(q2(stats["revenue_weekly"])),
            "recent_bills": BillSerializer(stats["recent_bills"], many=True).data,
            "ongoing_bookings": BookingSerializer(stats["ongoing_bookings"], many=True).data,
        })
