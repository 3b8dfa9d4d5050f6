import pytest

from cars.models import Car, CarBrand, CarSize, CarType, Location


@pytest.fixture
def catalogue(car):
    suv = CarType.objects.create(name="SUV")
    large = CarSize.objects.create(name="Large")
    honda = CarBrand.objects.create(name="Honda")
    pilot = Car.objects.create(
        name="Pilot",
        brand=honda,
        car_type=suv,
        size=large,
        seats=8,
        price_per_day=9000,
        is_available=False,
    )
    return car, pilot


@pytest.mark.django_db
def test_list_cars_is_public(api_client, catalogue):
    response = api_client.get("/api/cars/")

    assert response.status_code == 200
    names = {item["name"] for item in response.json()}
    assert names == {"Corolla", "Pilot"}


@pytest.mark.django_db
def test_filter_cars_by_type_and_availability(api_client, catalogue):
    corolla, pilot = catalogue

    response = api_client.get("/api/cars/", {"car_type": pilot.car_type_id})
    assert [item["id"] for item in response.json()] == [pilot.id]

    response = api_client.get("/api/cars/", {"is_available": "true"})
    assert [item["id"] for item in response.json()] == [corolla.id]


@pytest.mark.django_db
def test_search_cars_by_brand_name(api_client, catalogue):
    response = api_client.get("/api/cars/", {"search": "honda"})

    payload = response.json()
    assert len(payload) == 1
    assert payload[0]["brand"] == "Honda"
    assert payload[0]["car_type"] == "SUV"


@pytest.mark.django_db
def test_retrieve_car(api_client, car):
    response = api_client.get(f"/api/cars/{car.id}/")

    assert response.status_code == 200
    assert response.json()["price_per_day"] == 4000


@pytest.mark.django_db
def test_inactive_locations_are_hidden(api_client, location):
    Location.objects.create(name="Closed depot", is_active=False)

    response = api_client.get("/api/locations/")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Downtown"]
