from datetime import date, datetime, timedelta

from farmhub.services.alerts import (
    ALERT_WINDOW_DAYS,
    as_date,
    is_low_stock,
    is_maintenance_due,
    is_upcoming_harvest,
)

TODAY = date(2026, 3, 15)


def _crop(days):
    return {"expected_harvest_date": TODAY + timedelta(days=days)}


def _tool(days):
    return {"next_maintenance_date": TODAY + timedelta(days=days)}


class TestUpcomingHarvest:
    def test_today_is_upcoming(self):
        assert is_upcoming_harvest(_crop(0), TODAY)

    def test_window_end_is_inclusive(self):
        assert is_upcoming_harvest(_crop(ALERT_WINDOW_DAYS), TODAY)

    def test_beyond_window(self):
        assert not is_upcoming_harvest(_crop(31), TODAY)

    def test_past_harvest(self):
        assert not is_upcoming_harvest(_crop(-1), TODAY)

    def test_missing_date(self):
        assert not is_upcoming_harvest({"expected_harvest_date": None}, TODAY)

    def test_datetime_reference_uses_calendar_day(self):
        late_evening = datetime(2026, 3, 15, 23, 59)
        assert is_upcoming_harvest(_crop(0), late_evening)
        assert is_upcoming_harvest(_crop(30), late_evening)

    def test_iso_string_dates(self):
        assert is_upcoming_harvest({"expected_harvest_date": "2026-03-20"}, "2026-03-15T08:00:00Z")


class TestLowStock:
    def test_equal_is_low(self):
        assert is_low_stock({"quantity": 5, "alert_level": 5})

    def test_just_above_is_not_low(self):
        assert not is_low_stock({"quantity": 5.01, "alert_level": 5})

    def test_below(self):
        assert is_low_stock({"quantity": 2, "alert_level": 5})

    def test_missing_values_are_zero(self):
        assert is_low_stock({"quantity": None, "alert_level": None})
        assert not is_low_stock({"quantity": 1, "alert_level": None})


class TestMaintenanceDue:
    def test_overdue_counts(self):
        assert is_maintenance_due(_tool(-10), TODAY)

    def test_window_end_is_inclusive(self):
        assert is_maintenance_due(_tool(30), TODAY)

    def test_beyond_window(self):
        assert not is_maintenance_due(_tool(31), TODAY)

    def test_no_date_is_never_due(self):
        assert not is_maintenance_due({"next_maintenance_date": None}, TODAY)


def test_works_with_objects():
    class Item:
        quantity = 1
        alert_level = 3

    assert is_low_stock(Item())


def test_as_date_rejects_garbage():
    assert as_date("not a date") is None
    assert as_date(datetime(2026, 1, 2, 3, 4)) == date(2026, 1, 2)
