from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('core.urls')),
    path('api/', include('customers.urls')),
    path('api/', include('bookings.urls')),
    path('api/', include('bills.urls')),
    path('api/', include('tours.urls')),
    path('api/', include('quotes.urls')),
]
