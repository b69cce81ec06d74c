import pytest
from pydantic import ValidationError

from airline_services.shared.config import TicketSettings


class TestTicketSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "TICKET_ADULT_PASSENGER_MIN_AGE",
            "TICKET_CHILD_FARE_RATE",
            "TICKET_REPRESENTATIVE_MIN_AGE",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = TicketSettings()

        assert settings.adult_passenger_min_age == 12
        assert settings.child_fare_rate == 50
        assert settings.representative_min_age == 18

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("TICKET_REPRESENTATIVE_MIN_AGE", "20")

        assert TicketSettings().representative_min_age == 20

    def test_settings_are_immutable(self, settings):
        with pytest.raises(ValidationError):
            settings.child_fare_rate = 70

    def test_child_fare_rate_over_100_is_rejected(self):
        with pytest.raises(ValidationError):
            TicketSettings(child_fare_rate=120)
