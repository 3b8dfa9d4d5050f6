from rest_framework import viewsets

from bookings.serializers import BookingSerializer
from bookings.services.bookings import BookingService


class BookingViewSet(viewsets.ReadOnlyModelViewSet):
    """Bookings owned by the authenticated user."""

    serializer_class = BookingSerializer
    filterset_fields = ["booking_status"]
    ordering_fields = ["created_at", "received_date_time"]

    def get_queryset(self):
        return BookingService().get_bookings_by_user_id(self.request.user.id)
