"""
Tests for core models
"""

import pytest
from pydantic import ValidationError

from kitchenfinder.core.models import (
    AddressResolutionFailure,
    ClosestKitchenRequest,
    EnrichedKitchen,
    Kitchen,
    Location,
    Metric,
    TravelInfo,
)


@pytest.fixture
def kitchen():
    """Sample kitchen"""
    return Kitchen(
        id=1,
        name="Downtown",
        address="729 N Pennsylvania St",
        city="Indianapolis",
        state="IN",
        zip="46204",
        location=Location(lat=39.7784, lng=-86.1559),
    )


class TestKitchen:
    """Test Kitchen model"""

    def test_kitchen_creation(self, kitchen):
        """Test creating a kitchen"""
        assert kitchen.id == 1
        assert kitchen.name == "Downtown"
        assert kitchen.location.lat == 39.7784

    def test_kitchen_is_immutable(self, kitchen):
        """Test kitchens cannot be changed after creation"""
        with pytest.raises(ValidationError):
            kitchen.name = "Uptown"

    def test_numeric_zip_coerced(self):
        """Test numeric zip codes become strings"""
        kitchen = Kitchen(
            id="k1",
            name="Test",
            address="1 Main St",
            city="Pasadena",
            state="CA",
            zip=91101,
            location={"lat": 34.14, "lng": -118.14},
        )

        assert kitchen.zip == "91101"

    def test_missing_location(self):
        """Test location is required"""
        with pytest.raises(ValidationError):
            Kitchen(id=1, name="Test", address="1 Main St", city="A", state="B", zip="1")

    def test_location_waypoint(self):
        """Test lat,lng waypoint formatting"""
        assert Location(lat=34.1, lng=-118.2).as_waypoint() == "34.1,-118.2"


class TestEnrichedKitchen:
    """Test EnrichedKitchen model"""

    def test_from_travel_info(self, kitchen):
        """Test merging a kitchen with travel info"""
        travel_info = TravelInfo(
            distance={"value": 4200, "text": "2.6 mi"},
            duration={"value": 540, "text": "9 mins"},
        )

        enriched = EnrichedKitchen.from_travel_info(kitchen, travel_info)

        assert enriched.id == kitchen.id
        assert enriched.address == kitchen.address
        assert enriched.location == kitchen.location
        assert enriched.distance.value == 4200
        assert enriched.duration.text == "9 mins"
        assert enriched.metric_value(Metric.DURATION) == 540
        assert enriched.metric_value(Metric.DISTANCE) == 4200

    def test_dump_matches_response_shape(self, kitchen):
        """Test the merged record serializes kitchen and travel fields side by side"""
        travel_info = TravelInfo(
            distance={"value": 100, "text": "0.1 km"},
            duration={"value": 60, "text": "1 min"},
        )

        data = EnrichedKitchen.from_travel_info(kitchen, travel_info).model_dump(mode="json")

        assert data == {
            "id": 1,
            "name": "Downtown",
            "address": "729 N Pennsylvania St",
            "city": "Indianapolis",
            "state": "IN",
            "zip": "46204",
            "location": {"lat": 39.7784, "lng": -86.1559},
            "distance": {"value": 100, "text": "0.1 km"},
            "duration": {"value": 60, "text": "1 min"},
        }


class TestAddressResolutionFailure:
    """Test AddressResolutionFailure model"""

    def test_default_message(self):
        """Test the default failure message"""
        assert AddressResolutionFailure().message == "Could not locate provided address"


class TestClosestKitchenRequest:
    """Test ClosestKitchenRequest model"""

    def test_default_metric(self):
        """Test duration is the default metric"""
        request = ClosestKitchenRequest(address="Pasadena, CA")

        assert request.metric == Metric.DURATION

    def test_metric_from_string(self):
        """Test metric parsing from a string"""
        request = ClosestKitchenRequest(address="Pasadena, CA", metric="distance")

        assert request.metric == Metric.DISTANCE

    def test_invalid_metric(self):
        """Test unsupported metrics are rejected"""
        with pytest.raises(ValidationError):
            ClosestKitchenRequest(address="Pasadena, CA", metric="calories")

    def test_empty_address(self):
        """Test empty addresses are rejected"""
        with pytest.raises(ValidationError):
            ClosestKitchenRequest(address="")
