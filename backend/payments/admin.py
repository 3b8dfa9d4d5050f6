from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("booking", "amount", "currency", "status", "stripe_checkout_session", "created_at")
    list_filter = ("status", "currency")
    search_fields = ("stripe_checkout_session", "stripe_payment_intent", "booking__user__email")
    readonly_fields = ("created_at", "updated_at")
