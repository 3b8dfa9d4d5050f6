from django.conf import settings
from django.db import models


class Booking(models.Model):
    """Reservation of a car for a user, paid for through a Stripe Checkout session."""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
    BOOKING_STATUSES = [
        (PENDING, "Pending"),
        (SUCCESS, "Success"),
        (FAIL, "Fail"),
    ]
    TERMINAL_STATUSES = frozenset({SUCCESS, FAIL})

    car = models.ForeignKey("cars.Car", on_delete=models.PROTECT, related_name="bookings")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    pick_up_location = models.ForeignKey(
        "cars.Location",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    received_date_time = models.DateTimeField()
    return_date_time = models.DateTimeField()
    amount = models.PositiveIntegerField(help_text="Total in minor currency units.")
    booking_status = models.CharField(max_length=12, choices=BOOKING_STATUSES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.car} booking #{self.pk} ({self.booking_status})"

    @property
    def is_terminal(self) -> bool:
        return self.booking_status in self.TERMINAL_STATUSES
