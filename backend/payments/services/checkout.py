from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Mapping

import stripe
from django.conf import settings

from accounts.helpers import has_complete_profile
from bookings.models import Booking
from bookings.services.bookings import BookingService
from payments.exceptions import GatewayError, IncompleteProfileError, WebhookSignatureError
from payments.models import Payment
from payments.services.stripe_gateway import StripeService

logger = logging.getLogger(__name__)


class EventKind(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    OTHER = "other"


EVENT_KINDS = {
    "payment_intent.succeeded": EventKind.SUCCESS,
    "payment_intent.payment_failed": EventKind.FAILURE,
}

BOOKING_TRANSITIONS = {
    EventKind.SUCCESS: (Booking.SUCCESS, Payment.SUCCEEDED),
    EventKind.FAILURE: (Booking.FAIL, Payment.FAILED),
}


@dataclass(frozen=True)
class WebhookEvent:
    """The parts of a Stripe event this service acts on."""

    kind: EventKind
    type: str
    booking_id: str | None = None
    payment_intent: str | None = None


@dataclass(frozen=True)
class CheckoutResult:
    booking: Booking
    session_id: str
    url: str


def _lookup(obj, key):
    try:
        return obj[key]
    except (KeyError, TypeError):
        return None


def to_webhook_event(event) -> WebhookEvent:
    """Reduce a verified Stripe event (or plain dict) to a ``WebhookEvent``."""
    event_type = _lookup(event, "type") or ""
    data_object = _lookup(_lookup(event, "data"), "object")
    metadata = _lookup(data_object, "metadata")
    booking_id = _lookup(metadata, "booking_id") or _lookup(metadata, "bookingId")
    return WebhookEvent(
        kind=EVENT_KINDS.get(event_type, EventKind.OTHER),
        type=event_type,
        booking_id=str(booking_id) if booking_id else None,
        payment_intent=_lookup(data_object, "id"),
    )


class PaymentService:
    """Orchestrates checkout creation and webhook-driven booking transitions."""

    def __init__(self, *, booking_service: BookingService, stripe_service: StripeService):
        self.booking_service = booking_service
        self.stripe_service = stripe_service

    def create_checkout_session(self, data: Mapping[str, Any], user) -> CheckoutResult:
        """Create a PENDING booking and open a Stripe Checkout session for it.

        If Stripe fails the booking is left PENDING and ``GatewayError`` is raised.
        """
        if not has_complete_profile(user):
            raise IncompleteProfileError(
                "Name, date of birth and phone number are required before booking."
            )

        booking = self.booking_service.create_booking(data, user)
        try:
            session = self.stripe_service.create_checkout_session(booking)
        except stripe.StripeError as exc:
            logger.exception("Failed to create checkout session for booking %s: %s", booking.pk, exc)
            raise GatewayError(str(exc)) from exc

        Payment.objects.create(
            booking=booking,
            amount=booking.amount,
            currency=settings.STRIPE_CURRENCY,
            stripe_checkout_session=session.id,
            stripe_payment_intent=getattr(session, "payment_intent", None) or "",
            status=Payment.PENDING,
        )
        logger.info("Checkout session %s opened for booking %s", session.id, booking.pk)
        return CheckoutResult(booking=booking, session_id=session.id, url=session.url)

    def handle_intent_webhook(self, payload, sig_header: str | None) -> WebhookEvent:
        """Verify a payment-intent webhook and apply it to its booking.

        Unknown bookings and unrelated event types are acknowledged without
        changing any state.
        """
        if not payload or not sig_header:
            raise WebhookSignatureError("Missing webhook payload or signature.")

        try:
            raw_event = self.stripe_service.construct_event(
                payload, sig_header, settings.STRIPE_WEBHOOK_SECRET
            )
        except ValueError as exc:
            logger.warning("Invalid payload received on Stripe webhook.")
            raise WebhookSignatureError("Invalid payload.") from exc
        except stripe.SignatureVerificationError as exc:
            logger.warning("Invalid Stripe signature.")
            raise WebhookSignatureError("Invalid signature.") from exc

        event = to_webhook_event(raw_event)
        if event.kind is EventKind.OTHER:
            logger.debug("Ignoring Stripe event %s", event.type)
            return event

        booking_id = event.booking_id or self._booking_id_for_intent(event.payment_intent)
        booking_status, payment_status = BOOKING_TRANSITIONS[event.kind]
        booking = self.booking_service.update_booking_status(booking_id, booking_status)
        if booking is None:
            logger.warning(
                "Stripe event %s references unknown booking %s", event.type, booking_id
            )
            return event

        if booking.booking_status == booking_status:
            self._record_payment_outcome(booking, payment_status, event.payment_intent)
        return event

    def _booking_id_for_intent(self, payment_intent: str | None):
        if not payment_intent:
            return None
        return (
            Payment.objects.filter(stripe_payment_intent=payment_intent)
            .values_list("booking_id", flat=True)
            .first()
        )

    def _record_payment_outcome(self, booking: Booking, status: str, payment_intent: str | None):
        payment = booking.payments.order_by("-created_at").first()
        if payment is None:
            return
        update_fields = []
        if payment.status != status:
            payment.status = status
            update_fields.append("status")
        if payment_intent and payment.stripe_payment_intent != payment_intent:
            payment.stripe_payment_intent = payment_intent
            update_fields.append("stripe_payment_intent")
        if update_fields:
            update_fields.append("updated_at")
            payment.save(update_fields=update_fields)


def get_payment_service() -> PaymentService:
    return PaymentService(
        booking_service=BookingService(),
        stripe_service=StripeService(),
    )
