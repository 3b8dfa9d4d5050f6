import hashlib
import hmac
import json
import time


def build_intent_event(event_type: str, booking_id=None, intent_id: str = "pi_test_123") -> dict:
    metadata = {}
    if booking_id is not None:
        metadata["booking_id"] = str(booking_id)
    return {
        "id": "evt_test_webhook",
        "object": "event",
        "type": event_type,
        "data": {
            "object": {
                "id": intent_id,
                "object": "payment_intent",
                "metadata": metadata,
            }
        },
    }


def sign_payload(payload: str, secret: str, timestamp: int | None = None) -> str:
    """Build a Stripe-Signature header the same way Stripe signs webhooks."""
    timestamp = timestamp or int(time.time())
    signed_payload = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def signed_event(event: dict, secret: str) -> tuple[bytes, str]:
    payload = json.dumps(event)
    return payload.encode("utf-8"), sign_payload(payload, secret)
