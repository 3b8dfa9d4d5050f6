from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from bookings.models import Booking
from payments.models import Payment
from payments.tests.helpers import build_intent_event, signed_event


@pytest.mark.django_db
def test_end_to_end_booking_flow(settings, car, location):
    client = APIClient()

    # Register user
    register_payload = {
        "email": "renter@example.com",
        "password": "pass12345",
        "first_name": "Riley",
        "last_name": "Renter",
    }
    register_response = client.post("/api/auth/register/", register_payload, format="json")
    assert register_response.status_code == 201
    access_token = register_response.data["access"]
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")

    received = timezone.now() + timedelta(days=3)
    checkout_payload = {
        "car": car.id,
        "pick_up_location": location.id,
        "received_date_time": received.isoformat(),
        "return_date_time": (received + timedelta(days=2)).isoformat(),
        "amount": 8000,
    }

    # Booking is refused until the profile is complete
    refused = client.post("/api/payments/checkout-session/", checkout_payload, format="json")
    assert refused.status_code == 400
    assert Booking.objects.count() == 0

    profile_response = client.patch(
        "/api/auth/me/",
        {"date_of_birth": "1988-02-29", "phone_number": "555-0199"},
        format="json",
    )
    assert profile_response.status_code == 200
    assert profile_response.data["profile_complete"] is True

    # Open checkout
    checkout_response = client.post("/api/payments/checkout-session/", checkout_payload, format="json")
    assert checkout_response.status_code == 201
    booking_id = checkout_response.data["booking_id"]

    bookings_response = client.get("/api/bookings/")
    assert [item["booking_status"] for item in bookings_response.data] == [Booking.PENDING]

    # Stripe reports the payment
    payload, signature = signed_event(
        build_intent_event("payment_intent.succeeded", booking_id=booking_id, intent_id="pi_e2e"),
        settings.STRIPE_WEBHOOK_SECRET,
    )
    webhook_client = APIClient()
    webhook_response = webhook_client.generic(
        "POST",
        "/api/webhooks/stripe/intent/",
        payload,
        content_type="application/json",
        HTTP_STRIPE_SIGNATURE=signature,
    )
    assert webhook_response.status_code == 200

    detail_response = client.get(f"/api/bookings/{booking_id}/")
    assert detail_response.data["booking_status"] == Booking.SUCCESS
    payment = Payment.objects.get(booking_id=booking_id)
    assert payment.status == Payment.SUCCEEDED
    assert payment.stripe_payment_intent == "pi_e2e"
