from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from accounts.api import (
    LoginView,
    MeView,
    RegisterView,
)
from bookings.api import BookingViewSet
from cars.api import CarViewSet, LocationViewSet
from payments.api import CheckoutSessionView, StripeIntentWebhookView

router = DefaultRouter()
router.register(r"cars", CarViewSet, basename="car")
router.register(r"locations", LocationViewSet, basename="location")
router.register(r"bookings", BookingViewSet, basename="booking")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/register/", RegisterView.as_view(), name="auth-register"),
    path("api/auth/login/", LoginView.as_view(), name="auth-login"),
    path("api/auth/refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("api/auth/me/", MeView.as_view(), name="auth-me"),
    path(
        "api/payments/checkout-session/",
        CheckoutSessionView.as_view(),
        name="payment-checkout-session",
    ),
    path(
        "api/webhooks/stripe/intent/",
        StripeIntentWebhookView.as_view(),
        name="stripe-intent-webhook",
    ),
    path("api/", include(router.urls)),
]
