from rest_framework import permissions, viewsets

from .models import Car, Location
from .serializers import CarSerializer, LocationSerializer


class CarViewSet(viewsets.ReadOnlyModelViewSet):
    """Public car catalogue with brand/type/size filters."""

    serializer_class = CarSerializer
    permission_classes = [permissions.AllowAny]
    filterset_fields = ["brand", "car_type", "size", "is_available"]
    search_fields = ["name", "brand__name"]
    ordering_fields = ["price_per_day", "name", "seats"]

    def get_queryset(self):
        return Car.objects.select_related("brand", "car_type", "size")


class LocationViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = LocationSerializer
    permission_classes = [permissions.AllowAny]
    search_fields = ["name", "address"]

    def get_queryset(self):
        return Location.objects.filter(is_active=True)
