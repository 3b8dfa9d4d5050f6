from django.contrib import admin

from payments.models import Payment

from .models import Booking


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    readonly_fields = ("stripe_checkout_session", "stripe_payment_intent", "status", "created_at")


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "car", "user", "pick_up_location", "amount", "booking_status", "created_at")
    list_filter = ("booking_status", "pick_up_location")
    search_fields = ("user__email", "car__name")
    readonly_fields = ("created_at", "updated_at")
    inlines = [PaymentInline]
