"""Shared pytest configuration and fixtures."""

from datetime import date

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from cars.models import Car, CarBrand, CarSize, CarType, Location

User = get_user_model()


@pytest.fixture
def api_client():
    """DRF API client for request/response helpers."""
    return APIClient()


@pytest.fixture
def driver(db):
    """User with every profile field needed to book a car."""
    return User.objects.create_user(
        username="driver@example.com",
        email="driver@example.com",
        password="examplepass",
        name="Dana Driver",
        date_of_birth=date(1990, 4, 12),
        phone_number="555-0100",
    )


@pytest.fixture
def incomplete_user(db):
    return User.objects.create_user(
        username="newcomer@example.com",
        email="newcomer@example.com",
        password="examplepass",
        name="Nina Newcomer",
    )


@pytest.fixture
def car(db):
    return Car.objects.create(
        name="Corolla",
        brand=CarBrand.objects.create(name="Toyota"),
        car_type=CarType.objects.create(name="Sedan"),
        size=CarSize.objects.create(name="Medium"),
        seats=5,
        price_per_day=4000,
    )


@pytest.fixture
def location(db):
    return Location.objects.create(name="Downtown", address="1 Main St")
