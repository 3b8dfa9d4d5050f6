class PaymentError(Exception):
    """Base class for checkout and webhook failures."""


class IncompleteProfileError(PaymentError):
    """The requesting user is missing name, date of birth or phone number."""


class GatewayError(PaymentError):
    """Stripe could not be reached or rejected the request."""


class WebhookSignatureError(PaymentError):
    """The webhook payload could not be parsed or its signature did not verify."""
