from django.db import models


class Payment(models.Model):
    """Links a booking to the Stripe Checkout session opened for it."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    STATUSES = [
        (PENDING, "Pending"),
        (SUCCEEDED, "Succeeded"),
        (FAILED, "Failed"),
    ]

    booking = models.ForeignKey('bookings.Booking', on_delete=models.CASCADE, related_name='payments')
    amount = models.PositiveIntegerField()
    currency = models.CharField(max_length=10, default='usd')
    stripe_checkout_session = models.CharField(max_length=200, db_index=True)
    stripe_payment_intent = models.CharField(max_length=200, blank=True, db_index=True)
    status = models.CharField(max_length=30, choices=STATUSES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Payment {self.stripe_checkout_session} ({self.status})"
