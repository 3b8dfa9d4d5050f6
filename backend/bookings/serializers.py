from rest_framework import serializers

from cars.models import Car, Location

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    car_name = serializers.CharField(source="car.name", read_only=True)
    pick_up_location_name = serializers.CharField(source="pick_up_location.name", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "car",
            "car_name",
            "user",
            "pick_up_location",
            "pick_up_location_name",
            "received_date_time",
            "return_date_time",
            "amount",
            "booking_status",
            "created_at",
        ]
        read_only_fields = fields


class BookingRequestSerializer(serializers.Serializer):
    """Validate the car, location and time window of a new booking."""

    car = serializers.PrimaryKeyRelatedField(queryset=Car.objects.all())
    pick_up_location = serializers.PrimaryKeyRelatedField(
        queryset=Location.objects.filter(is_active=True)
    )
    received_date_time = serializers.DateTimeField()
    return_date_time = serializers.DateTimeField()
    amount = serializers.IntegerField(min_value=1)

    def validate_car(self, car: Car) -> Car:
        if not car.is_available:
            raise serializers.ValidationError("This car is not available for booking.")
        return car

    def validate(self, attrs):
        if attrs["received_date_time"] == attrs["return_date_time"]:
            raise serializers.ValidationError(
                {"return_date_time": "Return and received times must differ."}
            )
        return attrs
