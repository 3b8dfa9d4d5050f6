from datetime import timedelta

import pytest
from django.utils import timezone

from bookings.models import Booking
from bookings.services.bookings import BookingService


@pytest.fixture
def service():
    return BookingService()


@pytest.fixture
def booking_data(car, location):
    received = timezone.now() + timedelta(days=3)
    return {
        "car": car,
        "pick_up_location": location,
        "received_date_time": received,
        "return_date_time": received + timedelta(days=2),
        "amount": 8000,
    }


@pytest.fixture
def booking(service, booking_data, driver):
    return service.create_booking(booking_data, driver)


@pytest.mark.django_db
def test_create_booking_starts_pending(service, booking_data, driver):
    booking = service.create_booking(booking_data, driver)

    assert booking.booking_status == Booking.PENDING
    assert booking.car == booking_data["car"]
    assert booking.user == driver
    assert booking.amount == 8000
    assert [b.id for b in service.get_bookings_by_user_id(driver.id)] == [booking.id]


@pytest.mark.django_db
def test_get_booking_accepts_string_ids(service, booking):
    assert service.get_booking(str(booking.id)) == booking
    assert service.get_booking("not-a-number") is None
    assert service.get_booking(booking.id + 1000) is None


@pytest.mark.django_db
@pytest.mark.parametrize("target", [Booking.SUCCESS, Booking.FAIL])
def test_update_booking_status_from_pending(service, booking, target):
    updated = service.update_booking_status(booking.id, target)

    assert updated.booking_status == target
    booking.refresh_from_db()
    assert booking.booking_status == target


@pytest.mark.django_db
def test_update_booking_status_is_idempotent(service, booking):
    service.update_booking_status(booking.id, Booking.SUCCESS)
    service.update_booking_status(booking.id, Booking.SUCCESS)

    booking.refresh_from_db()
    assert booking.booking_status == Booking.SUCCESS


@pytest.mark.django_db
def test_terminal_status_is_not_overwritten(service, booking):
    service.update_booking_status(booking.id, Booking.SUCCESS)
    result = service.update_booking_status(booking.id, Booking.FAIL)

    assert result.booking_status == Booking.SUCCESS
    booking.refresh_from_db()
    assert booking.booking_status == Booking.SUCCESS


@pytest.mark.django_db
def test_update_unknown_booking_returns_none(service):
    assert service.update_booking_status(999, Booking.SUCCESS) is None


@pytest.mark.django_db
def test_update_rejects_non_terminal_target(service, booking):
    with pytest.raises(ValueError):
        service.update_booking_status(booking.id, Booking.PENDING)
