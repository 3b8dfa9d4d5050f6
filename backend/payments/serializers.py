from rest_framework import serializers

from bookings.serializers import BookingRequestSerializer


class CheckoutSessionRequestSerializer(BookingRequestSerializer):
    """Booking parameters accepted by the checkout endpoint."""


class CheckoutSessionSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField(source="booking.id")
    booking_status = serializers.CharField(source="booking.booking_status")
    session_id = serializers.CharField()
    url = serializers.URLField()
