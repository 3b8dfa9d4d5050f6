from django.contrib import admin

from .models import Car, CarBrand, CarSize, CarType, Location

admin.site.register((CarBrand, CarType, CarSize))


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("name", "brand", "car_type", "size", "price_per_day", "is_available")
    list_filter = ("brand", "car_type", "size", "is_available")
    search_fields = ("name", "brand__name")


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "is_active")
    search_fields = ("name", "address")
