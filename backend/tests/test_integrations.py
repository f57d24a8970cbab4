import asyncio

import httpx
import pytest

from farmhub.api.v1.endpoints.integrations.location import get_geocoder
from farmhub.api.v1.endpoints.integrations.weather import get_weather_client
from farmhub.main import app
from farmhub.services.assistant import FALLBACK_REPLY, TOPICS, reply_to
from farmhub.services.geocoding import Geocoder, LocationData, location_string
from farmhub.services.weather import WeatherClient, WeatherUnavailable, parse_current

WEATHER_PAYLOAD = {
    "location": {"name": "Fresno", "country": "United States of America"},
    "current": {
        "temp_c": 24.5,
        "feelslike_c": 25.1,
        "humidity": 40,
        "wind_kph": 12.2,
        "vis_km": 10.0,
        "pressure_mb": 1015.0,
        "condition": {"text": "Sunny", "icon": "//cdn.weatherapi.com/113.png"},
    },
}


def weather_client(handler):
    return WeatherClient(api_key="test-key", base_url="https://weather.test/v1", transport=httpx.MockTransport(handler))


@pytest.fixture
def seen_queries():
    return []


@pytest.fixture
def weather_ok(seen_queries):
    def handler(request):
        seen_queries.append(request.url.params["q"])
        assert request.url.path == "/v1/current.json"
        assert request.url.params["aqi"] == "no"
        return httpx.Response(200, json=WEATHER_PAYLOAD)

    app.dependency_overrides[get_weather_client] = lambda: weather_client(handler)


def test_parse_current():
    report = parse_current(WEATHER_PAYLOAD)

    assert report.location == "Fresno, United States of America"
    assert report.description == "Sunny"
    assert report.humidity == 40


def test_parse_current_rejects_incomplete_payload():
    with pytest.raises(WeatherUnavailable):
        parse_current({"location": {"name": "x"}})


def test_parse_current_rejects_null_sections():
    with pytest.raises(WeatherUnavailable):
        parse_current({**WEATHER_PAYLOAD, "current": None})
    with pytest.raises(WeatherUnavailable):
        parse_current({**WEATHER_PAYLOAD, "location": None})


def test_client_without_key_fails():
    with pytest.raises(WeatherUnavailable):
        asyncio.run(WeatherClient(api_key="").current("Fresno"))


def test_weather_uses_default_location(client, weather_ok, seen_queries):
    response = client.get("/api/v1/weather")

    assert response.status_code == 200
    assert response.json()["temperature_c"] == 24.5
    assert seen_queries == ["New York"]


def test_weather_uses_profile_location(client, weather_ok, seen_queries, auth_headers):
    client.put("/api/v1/profile", json={"location": "Fresno"}, headers=auth_headers)

    client.get("/api/v1/weather", headers=auth_headers)

    assert seen_queries == ["Fresno"]


def test_weather_explicit_location_wins(client, weather_ok, seen_queries, auth_headers):
    client.get("/api/v1/weather", params={"location": "Lyon"}, headers=auth_headers)

    assert seen_queries == ["Lyon"]


def test_weather_upstream_failure_is_bad_gateway(client):
    app.dependency_overrides[get_weather_client] = lambda: weather_client(lambda request: httpx.Response(500))

    response = client.get("/api/v1/weather")

    assert response.status_code == 502


def test_weather_null_payload_is_bad_gateway(client):
    payload = {**WEATHER_PAYLOAD, "current": None}
    app.dependency_overrides[get_weather_client] = lambda: weather_client(
        lambda request: httpx.Response(200, json=payload)
    )

    assert client.get("/api/v1/weather").status_code == 502


def _geocoder(handler):
    return Geocoder(base_url="https://geo.test", transport=httpx.MockTransport(handler))


def test_reverse_geocoding(client):
    def handler(request):
        assert request.headers["User-Agent"].startswith("FarmHub/")
        return httpx.Response(
            200,
            json={"display_name": "Fresno, California, USA", "address": {"town": "Fresno", "country": "USA"}},
        )

    app.dependency_overrides[get_geocoder] = lambda: _geocoder(handler)

    body = client.get("/api/v1/location/reverse", params={"lat": 36.7378, "lon": -119.7871}).json()

    assert body["city"] == "Fresno"
    assert body["label"] == "Fresno, USA"


def test_reverse_geocoding_failure_degrades_to_coordinates(client):
    app.dependency_overrides[get_geocoder] = lambda: _geocoder(lambda request: httpx.Response(503))

    body = client.get("/api/v1/location/reverse", params={"lat": 36.7378, "lon": -119.7871}).json()

    assert body["city"] is None
    assert body["label"] == "36.7378, -119.7871"


def test_location_string_prefers_display_name_without_city():
    assert location_string(LocationData(1.0, 2.0, display_name="Somewhere")) == "Somewhere"


SEARCH_MATCH = [{"lat": "36.7378", "lon": "-119.7871", "display_name": "Fresno, California, USA"}]


@pytest.fixture
def search_queries():
    return []


def _search_geocoder(search_queries, payload):
    def handler(request):
        assert request.url.path == "/search"
        assert request.url.params["limit"] == "1"
        assert request.headers["User-Agent"].startswith("FarmHub/")
        search_queries.append(request.url.params["q"])
        return httpx.Response(200, json=payload)

    app.dependency_overrides[get_geocoder] = lambda: _geocoder(handler)


def test_location_search_returns_map_links(client, search_queries):
    _search_geocoder(search_queries, SEARCH_MATCH)

    response = client.get("/api/v1/location/search", params={"q": "Fresno"})

    assert response.status_code == 200
    body = response.json()
    assert (body["latitude"], body["longitude"]) == (36.7378, -119.7871)
    assert body["display_name"] == "Fresno, California, USA"
    assert body["map_embed_url"] == (
        "https://www.openstreetmap.org/export/embed.html"
        "?bbox=-119.7971,36.7278,-119.7771,36.7478&layer=mapnik&marker=36.7378,-119.7871"
    )
    assert body["map_link_url"] == "https://www.openstreetmap.org/?mlat=36.7378&mlon=-119.7871#map=15/36.7378/-119.7871"
    assert search_queries == ["Fresno"]


def test_location_search_without_match_is_not_found(client, search_queries):
    _search_geocoder(search_queries, [])

    response = client.get("/api/v1/location/search", params={"q": "Nowhere at all"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Location not found"


def test_location_search_upstream_failure_is_bad_gateway(client):
    app.dependency_overrides[get_geocoder] = lambda: _geocoder(lambda request: httpx.Response(503))

    assert client.get("/api/v1/location/search", params={"q": "Fresno"}).status_code == 502


def test_location_search_malformed_match_is_bad_gateway(client, search_queries):
    _search_geocoder(search_queries, [{"display_name": "no coordinates"}])

    assert client.get("/api/v1/location/search", params={"q": "Fresno"}).status_code == 502


def test_location_search_defaults_to_profile_location(client, search_queries, auth_headers):
    _search_geocoder(search_queries, SEARCH_MATCH)
    client.put("/api/v1/profile", json={"location": "Fresno, CA"}, headers=auth_headers)

    response = client.get("/api/v1/location/search", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["query"] == "Fresno, CA"
    assert search_queries == ["Fresno, CA"]


def test_location_search_needs_a_query_without_profile_location(client, search_queries):
    _search_geocoder(search_queries, SEARCH_MATCH)

    response = client.get("/api/v1/location/search")

    assert response.status_code == 400
    assert search_queries == []


@pytest.mark.parametrize(
    "message, keyword",
    [
        ("Will it RAIN tomorrow?", "weather"),
        ("insects on my leaves", "pest"),
        ("best fertilizer?", "soil"),
        ("drip irrigation", "water"),
        ("what to plant", "crop"),
        ("fungus on tomatoes", "disease"),
        ("low yield", "harvest"),
        ("chemical-free methods", "organic"),
        ("how to make money", "profit"),
        ("tractor machinery", "equipment"),
    ],
)
def test_assistant_topics(message, keyword):
    expected = next(reply for keywords, reply in TOPICS if keyword in keywords)

    assert reply_to(message) == expected


def test_assistant_first_match_wins():
    # "plant disease" matches crop/plant before disease/fungus
    assert reply_to("plant disease") == reply_to("crop")


def test_assistant_fallback(client):
    response = client.post("/api/v1/assistant/chat", json={"message": "hello there"})

    assert response.json() == {"reply": FALLBACK_REPLY}


def test_assistant_rejects_empty_message(client):
    assert client.post("/api/v1/assistant/chat", json={"message": ""}).status_code == 422
