from datetime import date

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import User
from cars.models import Car, CarBrand, CarSize, CarType, Location


SEED_PASSWORD = "CarBooking123!"
SUPERUSER_EMAIL = "admin@carbooking.test"
SUPERUSER_PASSWORD = "AdminCarBooking123!"

CATALOGUE = [
    # (brand, type, size, name, seats, price per day in cents)
    ("Toyota", "Sedan", "Medium", "Corolla", 5, 4000),
    ("Toyota", "SUV", "Large", "Land Cruiser", 7, 11000),
    ("Honda", "Hatchback", "Small", "Jazz", 5, 3200),
    ("Tesla", "Sedan", "Medium", "Model 3", 5, 9000),
    ("Ford", "Van", "Large", "Transit", 9, 12500),
]

LOCATIONS = [
    ("Downtown", "1 Main St"),
    ("Airport", "Terminal 2 arrivals hall"),
    ("Central Station", "12 Station Square"),
]


class Command(BaseCommand):
    help = "Populate the local development database with sample cars, locations and users."

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError("Refusing to seed data while DEBUG is False.")

        with transaction.atomic():
            self.stdout.write(self.style.MIGRATE_HEADING("Ensuring admin superuser"))
            self._ensure_superuser()

            self.stdout.write(self.style.MIGRATE_HEADING("Creating car catalogue"))
            for brand, car_type, size, name, seats, price in CATALOGUE:
                _, created = Car.objects.update_or_create(
                    name=name,
                    brand=CarBrand.objects.get_or_create(name=brand)[0],
                    defaults={
                        "car_type": CarType.objects.get_or_create(name=car_type)[0],
                        "size": CarSize.objects.get_or_create(name=size)[0],
                        "seats": seats,
                        "price_per_day": price,
                        "is_available": True,
                    },
                )
                if created:
                    self.stdout.write(self.style.NOTICE(f"Added {brand} {name}"))

            self.stdout.write(self.style.MIGRATE_HEADING("Creating pickup locations"))
            for name, address in LOCATIONS:
                Location.objects.update_or_create(
                    name=name, defaults={"address": address, "is_active": True}
                )

            self.stdout.write(self.style.MIGRATE_HEADING("Creating users"))
            self._ensure_user(
                email="driver@carbooking.test",
                name="Dana Driver",
                date_of_birth=date(1990, 4, 12),
                phone_number="555-0100",
            )
            self._ensure_user(email="newcomer@carbooking.test", name="Nina Newcomer")

        self.stdout.write(self.style.SUCCESS("Development seed data created."))
        self.stdout.write(self.style.NOTICE(f"Sample login accounts use password: {SEED_PASSWORD}"))
        self.stdout.write(self.style.NOTICE(f"Admin superuser {SUPERUSER_EMAIL} password: {SUPERUSER_PASSWORD}"))

    def _ensure_user(self, email: str, name: str, **profile) -> User:
        user, created = User.objects.update_or_create(
            email=email,
            defaults={"username": email, "name": name, **profile},
        )
        if created or not user.has_usable_password():
            user.set_password(SEED_PASSWORD)
            user.save(update_fields=["password"])
        return user

    def _ensure_superuser(self) -> User:
        user, created = User.objects.get_or_create(
            email=SUPERUSER_EMAIL,
            defaults={
                "username": SUPERUSER_EMAIL,
                "name": "Admin User",
                "is_staff": True,
                "is_superuser": True,
            },
        )
        flag_updates = {}
        if not user.is_staff:
            flag_updates["is_staff"] = True
        if not user.is_superuser:
            flag_updates["is_superuser"] = True
        if flag_updates:
            for attr, value in flag_updates.items():
                setattr(user, attr, value)
            user.save(update_fields=list(flag_updates.keys()))
        if created or not user.has_usable_password():
            user.set_password(SUPERUSER_PASSWORD)
            user.save(update_fields=["password"])
        return user
