"""
Tests for schema validation and activity ordering.
"""

import copy

import pytest

from itinerary.shared.contracts import GenerationResult, TripRequest
from itinerary.generation.errors import SchemaMismatchError
from itinerary.generation.validator import validate_itinerary

from fakes import make_payload


def _request(duration: int = 2) -> TripRequest:
    return TripRequest(destination="Chiang Mai", duration=duration)


class TestValidItinerary:
    """Tests for payloads that satisfy the contract."""

    def test_builds_generation_result(self):
        result = validate_itinerary(make_payload(2), _request(2), generated_by="model-a")

        assert isinstance(result, GenerationResult)
        assert result.destination == "Chiang Mai"
        assert result.duration == 2
        assert result.generated_by == "model-a"
        assert len(result.daily_schedules) == 2
        assert len(result.recommendations) == 5

    def test_sorts_activities_by_time(self):
        payload = make_payload(2, activities_per_day=5, shuffled=True)
        result = validate_itinerary(payload, _request(2))

        for schedule in result.daily_schedules:
            times = [a.time for a in schedule.activities]
            assert times == sorted(times)
            assert times[0] == "09:00"

    def test_other_fields_pass_through(self):
        payload = make_payload(1)
        payload["dailySchedules"][0]["day"] = 1
        result = validate_itinerary(payload, _request(1))

        names = {a.name for a in result.daily_schedules[0].activities}
        expected = {a["name"] for a in payload["dailySchedules"][0]["activities"]}
        assert names == expected
        assert result.recommendations[2].location == "Nimman"
        assert result.recommendations[0].location is None

    def test_does_not_mutate_input(self):
        payload = make_payload(1, shuffled=True)
        original = copy.deepcopy(payload)
        validate_itinerary(payload, _request(1))
        assert payload == original

    def test_validation_is_idempotent(self):
        first = validate_itinerary(make_payload(3, shuffled=True), _request(3))
        second = validate_itinerary(first.model_dump(by_alias=True), _request(3))

        assert second.daily_schedules == first.daily_schedules
        assert second.recommendations == first.recommendations

    def test_boundary_times_accepted(self):
        payload = make_payload(1)
        times = ["23:59", "00:00", "12:00"]
        for activity, t in zip(payload["dailySchedules"][0]["activities"], times):
            activity["time"] = t
        result = validate_itinerary(payload, _request(1))
        assert [a.time for a in result.daily_schedules[0].activities] == [
            "00:00",
            "12:00",
            "23:59",
        ]


class TestSchemaMismatch:
    """Tests for payloads that must be rejected."""

    def test_non_object(self):
        with pytest.raises(SchemaMismatchError, match="JSON object"):
            validate_itinerary([1, 2], _request())

    @pytest.mark.parametrize("key", ["dailySchedules", "recommendations"])
    def test_missing_top_level_list(self, key):
        payload = make_payload(2)
        del payload[key]
        with pytest.raises(SchemaMismatchError, match=key):
            validate_itinerary(payload, _request(2))

    def test_top_level_not_a_list(self):
        payload = make_payload(2)
        payload["recommendations"] = {"category": "place"}
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(2))

    @pytest.mark.parametrize("day", [0, -1, "1", 1.5, None])
    def test_day_must_be_positive_integer(self, day):
        payload = make_payload(1)
        payload["dailySchedules"][0]["day"] = day
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(1))

    def test_fewer_than_three_activities(self):
        payload = make_payload(2)
        payload["dailySchedules"][1]["activities"] = payload["dailySchedules"][1][
            "activities"
        ][:2]
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(2))

    @pytest.mark.parametrize("time", ["24:00", "9:00", "09:60", "0900", "noon", "09:00:00"])
    def test_bad_time_format(self, time):
        payload = make_payload(1)
        payload["dailySchedules"][0]["activities"][0]["time"] = time
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(1))

    def test_unknown_recommendation_category(self):
        payload = make_payload(1)
        payload["recommendations"][0]["category"] = "hotel"
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(1))

    def test_missing_activity_field(self):
        payload = make_payload(1)
        del payload["dailySchedules"][0]["activities"][1]["location"]
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(1))

    @pytest.mark.parametrize("produced", [2, 4])
    def test_day_count_must_match_duration(self, produced):
        """No truncation and no padding."""
        with pytest.raises(SchemaMismatchError, match=f"Expected 3 days but got {produced}"):
            validate_itinerary(make_payload(produced), _request(3))

    @pytest.mark.parametrize("days", [[2, 2, 2], [1, 3, 2], [0, 1, 2], [2, 3, 4]])
    def test_day_numbers_must_match_position(self, days):
        payload = make_payload(3)
        for schedule, day in zip(payload["dailySchedules"], days):
            schedule["day"] = day
        with pytest.raises(SchemaMismatchError):
            validate_itinerary(payload, _request(3))

    def test_day_number_mismatch_message(self):
        payload = make_payload(2)
        payload["dailySchedules"][1]["day"] = 1
        with pytest.raises(SchemaMismatchError, match="Schedule 2 is numbered day 1"):
            validate_itinerary(payload, _request(2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
