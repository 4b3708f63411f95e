import random

import pytest

from gilded_desk.exceptions import ValidationError
from gilded_desk.features.chat.service import CHAT_RESPONSES, pick_response
from gilded_desk.features.weather.service import WEATHER_DATA, lookup_weather


def test_lookup_is_case_insensitive_and_trimmed():
    rng = random.Random(0)

    assert lookup_weather("  LONDON ", rng) == lookup_weather("london", rng) == WEATHER_DATA["london"]


def test_partial_match_first_declared_wins():
    # "new york city" contains "new york"; "o" is contained in london first
    assert lookup_weather("new york city", random.Random(0))["city"] == "New York"
    assert lookup_weather("o", random.Random(0))["city"] == "London"


@pytest.mark.parametrize("seed", range(20))
def test_unknown_city_gets_synthetic_record(seed):
    report = lookup_weather("  Atlantis ", random.Random(seed))

    assert report["city"] == "Atlantis"
    assert report["country"] == "Unknown"
    assert 5 <= report["temp"] < 40
    assert report["weather"] in ["Clear", "Clouds", "Rain", "Mist"]
    assert 40 <= report["humidity"] < 90
    assert 1 <= report["wind"] <= 9


def test_synthetic_weather_deterministic_for_seed():
    assert lookup_weather("zz", random.Random(7)) == lookup_weather("zz", random.Random(7))


@pytest.mark.parametrize("city", [None, "", "   "])
def test_blank_city_rejected(city):
    with pytest.raises(ValidationError):
        lookup_weather(city, random.Random(0))


def test_table_entries_not_mutated_by_callers():
    report = lookup_weather("paris", random.Random(0))
    report["temp"] = 99

    assert WEATHER_DATA["paris"]["temp"] == 15


def test_pick_response_from_fixed_set():
    rng = random.Random(3)

    assert {pick_response(rng) for _ in range(200)} == set(CHAT_RESPONSES)


# -------- API --------
def test_weather_api(client):
    r = client.get("/api/weather", params={"city": " Tokyo "})
    assert r.status_code == 200
    assert r.json()["country"] == "Japan"

    r2 = client.get("/api/weather")
    assert r2.status_code == 400
    assert r2.json() == {"error": "City name is required"}


def test_chat_api(client):
    r = client.post("/api/chat", json={"message": "Good evening"})

    assert r.status_code == 200
    assert r.json()["response"] in CHAT_RESPONSES
