from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

import stripe
from django.conf import settings

from bookings.models import Booking

logger = logging.getLogger(__name__)


@dataclass
class CheckoutSessionStub:
    """
    Lightweight stand-in for stripe.checkout.Session when running in stub mode.

    Tests and local development do not hit Stripe; instead, we return predictable
    identifiers so the rest of the booking flow (payment records, redirect links)
    behaves as if Stripe responded.
    """

    id: str
    payment_intent: str
    payment_status: str
    url: str


def build_checkout_preview_url(*, booking: Booking, session_id: str) -> str:
    return (
        f"{settings.FRONTEND_URL.rstrip('/')}/payments/preview?"
        f"booking={booking.id}&amount={booking.amount}&session={session_id}"
    )


def _get_stripe_api_key() -> Optional[str]:
    key = getattr(settings, "STRIPE_SECRET_KEY", "")
    return key or None


class StripeService:
    """Thin wrapper over the Stripe SDK for checkout sessions and webhook events."""

    def should_use_stub(self) -> bool:
        if getattr(settings, "STRIPE_USE_STUB", False):
            return True
        return _get_stripe_api_key() is None

    def create_checkout_session(self, booking: Booking):
        """
        Create a Stripe Checkout session (or stub equivalent) for a booking.

        Returns an object with the subset of attributes (`id`, `payment_intent`,
        `payment_status`, `url`) consumed by the payment workflow. The booking id
        travels in the metadata of both the session and its payment intent so
        webhooks can be correlated back to the booking.
        """

        if self.should_use_stub():
            session_id = f"cs_test_{uuid4().hex}"
            return CheckoutSessionStub(
                id=session_id,
                payment_intent=f"pi_test_{uuid4().hex}",
                payment_status="unpaid",
                url=build_checkout_preview_url(booking=booking, session_id=session_id),
            )

        stripe.api_key = _get_stripe_api_key()
        metadata = {"booking_id": str(booking.id)}
        frontend_url = settings.FRONTEND_URL.rstrip("/")

        return stripe.checkout.Session.create(
            mode="payment",
            payment_method_types=["card"],
            customer_email=booking.user.email or None,
            line_items=[
                {
                    "quantity": 1,
                    "price_data": {
                        "currency": settings.STRIPE_CURRENCY,
                        "unit_amount": booking.amount,
                        "product_data": {
                            "name": str(booking.car),
                        },
                    },
                }
            ],
            success_url=f"{frontend_url}/payment/success?booking={booking.id}",
            cancel_url=f"{frontend_url}/payment/cancel?booking={booking.id}",
            metadata=metadata,
            payment_intent_data={"metadata": metadata},
        )

    def construct_event(self, payload, sig_header, secret):
        """Verify the signature of a webhook payload and return the parsed event.

        Raises ``ValueError`` for unparseable payloads and
        ``stripe.SignatureVerificationError`` for bad signatures.
        """
        return stripe.Webhook.construct_event(payload, sig_header, secret)
