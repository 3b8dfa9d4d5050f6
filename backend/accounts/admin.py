from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Booking profile", {"fields": ("name", "date_of_birth", "phone_number")}),
    )
    list_display = ("email", "name", "phone_number", "date_of_birth", "is_staff")
    search_fields = ("email", "name", "phone_number")
