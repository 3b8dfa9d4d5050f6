from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db import transaction

from bookings.models import Booking

logger = logging.getLogger(__name__)


class BookingService:
    """Create, read and transition bookings.

    A booking starts PENDING and moves at most once to SUCCESS or FAIL; the
    first terminal status written wins.
    """

    def create_booking(self, data: Mapping[str, Any], user) -> Booking:
        booking = Booking.objects.create(
            car=data["car"],
            user=user,
            pick_up_location=data["pick_up_location"],
            received_date_time=data["received_date_time"],
            return_date_time=data["return_date_time"],
            amount=data["amount"],
            booking_status=Booking.PENDING,
        )
        logger.info("Created booking %s for user %s", booking.pk, user.pk)
        return booking

    def get_booking(self, booking_id) -> Booking | None:
        pk = _coerce_id(booking_id)
        if pk is None:
            return None
        return Booking.objects.filter(pk=pk).first()

    def get_bookings_by_user_id(self, user_id):
        return Booking.objects.filter(user_id=user_id).select_related("car", "pick_up_location")

    def update_booking_status(self, booking_id, booking_status: str) -> Booking | None:
        """Move a PENDING booking to a terminal status.

        Returns the booking (possibly unchanged) or None when it does not exist.
        Re-applying a transition is a no-op, and a booking already in a terminal
        state keeps that state.
        """
        if booking_status not in Booking.TERMINAL_STATUSES:
            raise ValueError(f"Cannot transition a booking to {booking_status!r}.")

        pk = _coerce_id(booking_id)
        if pk is None:
            return None

        with transaction.atomic():
            booking = Booking.objects.select_for_update().filter(pk=pk).first()
            if booking is None:
                return None
            if booking.is_terminal:
                if booking.booking_status != booking_status:
                    logger.info(
                        "Ignoring %s for booking %s already in %s",
                        booking_status,
                        booking.pk,
                        booking.booking_status,
                    )
                return booking

            booking.booking_status = booking_status
            booking.save(update_fields=["booking_status", "updated_at"])

        logger.info("Booking %s moved to %s", booking.pk, booking_status)
        return booking


def _coerce_id(value) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
