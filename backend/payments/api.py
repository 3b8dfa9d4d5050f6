import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import GatewayError, IncompleteProfileError, WebhookSignatureError
from .serializers import CheckoutSessionRequestSerializer, CheckoutSessionSerializer
from .services.checkout import get_payment_service

logger = logging.getLogger(__name__)


class CheckoutSessionView(APIView):
    """Create a PENDING booking and return the Stripe Checkout redirect for it."""

    def post(self, request, *args, **kwargs):
        serializer = CheckoutSessionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = get_payment_service().create_checkout_session(
                serializer.validated_data, request.user
            )
        except IncompleteProfileError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except GatewayError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(
            CheckoutSessionSerializer(result).data, status=status.HTTP_201_CREATED
        )


class StripeIntentWebhookView(APIView):
    """Receive Stripe payment-intent webhook events."""

    permission_classes: list = []
    authentication_classes: list = []

    def post(self, request, *args, **kwargs):
        if not settings.STRIPE_WEBHOOK_SECRET:
            logger.error("Stripe webhook secret not configured.")
            return Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        try:
            get_payment_service().handle_intent_webhook(
                request.body, request.META.get("HTTP_STRIPE_SIGNATURE")
            )
        except WebhookSignatureError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_200_OK)
