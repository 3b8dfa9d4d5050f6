from django.core.validators import MinValueValidator
from django.db import models


class CarBrand(models.Model):
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class CarType(models.Model):
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class CarSize(models.Model):
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Car(models.Model):
    """A rentable vehicle in the catalogue."""

    name = models.CharField(max_length=200)
    brand = models.ForeignKey("CarBrand", on_delete=models.PROTECT, related_name="cars")
    car_type = models.ForeignKey("CarType", on_delete=models.PROTECT, related_name="cars")
    size = models.ForeignKey("CarSize", on_delete=models.PROTECT, related_name="cars")
    seats = models.PositiveSmallIntegerField(default=4, validators=[MinValueValidator(1)])
    price_per_day = models.PositiveIntegerField(help_text="Daily price in minor currency units.")
    image_url = models.URLField(blank=True)
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["brand__name", "name"]

    def __str__(self):
        return f"{self.brand} {self.name}"


class Location(models.Model):
    """Pickup point where a booked car is handed over."""

    name = models.CharField(max_length=120)
    address = models.CharField(max_length=255, blank=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
