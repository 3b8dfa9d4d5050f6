from rest_framework import serializers

from .models import Car, Location


class CarSerializer(serializers.ModelSerializer):
    brand = serializers.CharField(source="brand.name", read_only=True)
    car_type = serializers.CharField(source="car_type.name", read_only=True)
    size = serializers.CharField(source="size.name", read_only=True)

    class Meta:
        model = Car
        fields = [
            "id",
            "name",
            "brand",
            "car_type",
            "size",
            "seats",
            "price_per_day",
            "image_url",
            "is_available",
        ]
        read_only_fields = fields


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = ["id", "name", "address"]
        read_only_fields = fields
