"""
Unit tests for HttpExerciseSource.

Part of ALT-2: Fetch the exercise catalog

Tests the httpx client for the remote exercise catalog using
httpx.MockTransport, so no network access is needed.
"""

from unittest.mock import patch

import httpx
import pytest

from application.errors import NetworkError, ParseError
from infrastructure.http import HttpExerciseSource

CATALOG_URL = "https://catalog.test/dev/workouts"


def _source(handler) -> HttpExerciseSource:
    """HttpExerciseSource whose client answers with ``handler``."""
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpExerciseSource(CATALOG_URL, client=client)


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFetchExercisesSuccess:
    """Tests for a 2xx catalog response."""

    def test_parses_array_of_exercises(self):
        payload = [
            {"id": "1", "name": "Plank", "description": "Hold", "duration": 60, "difficulty": "Beginner"},
            {"id": "2", "description": "Burpees", "duration": "45"},
        ]
        source = _source(lambda request: httpx.Response(200, json=payload))

        exercises = source.fetch_exercises()

        assert [e.id for e in exercises] == ["1", "2"]
        assert exercises[0].name == "Plank"
        assert exercises[1].name == "Burpees"
        assert exercises[1].duration == 45
        assert exercises[1].difficulty == "Unknown"

    def test_requests_configured_url_with_get(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            return httpx.Response(200, json=[])

        assert _source(handler).fetch_exercises() == []
        assert seen == {"method": "GET", "url": CATALOG_URL}

    def test_any_2xx_is_success(self):
        source = _source(lambda request: httpx.Response(203, json=[{"id": "1"}]))
        assert len(source.fetch_exercises()) == 1


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFetchExercisesFailures:
    """Tests for NetworkError and ParseError paths."""

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_non_2xx_raises_network_error(self, status):
        source = _source(lambda request: httpx.Response(status, text="nope"))

        with pytest.raises(NetworkError) as exc_info:
            source.fetch_exercises()

        assert exc_info.value.status_code == status
        assert str(status) in exc_info.value.message

    def test_connect_error_raises_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError) as exc_info:
            _source(handler).fetch_exercises()
        assert exc_info.value.status_code is None

    def test_timeout_raises_network_error(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(NetworkError, match="timed out"):
            _source(handler).fetch_exercises()

    def test_invalid_json_raises_parse_error(self):
        source = _source(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ParseError):
            source.fetch_exercises()

    def test_object_instead_of_array_raises_parse_error(self):
        source = _source(lambda request: httpx.Response(200, json={"id": "1"}))
        with pytest.raises(ParseError, match="JSON array"):
            source.fetch_exercises()

    def test_non_object_item_raises_parse_error(self):
        source = _source(lambda request: httpx.Response(200, json=[{"id": "1"}, "two"]))
        with pytest.raises(ParseError, match="item 1"):
            source.fetch_exercises()


# ---------------------------------------------------------------------------
# Client lifecycle
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestClientLifecycle:
    """One httpx client per source, reused across fetches."""

    def test_default_client_is_reused(self):
        with patch("infrastructure.http.exercise_source.httpx.Client") as mock_client_cls:
            mock_client_cls.return_value.get.return_value = httpx.Response(200, json=[{"id": "1"}])
            source = HttpExerciseSource(CATALOG_URL, timeout=2.5)

            source.fetch_exercises()
            source.fetch_exercises()

        mock_client_cls.assert_called_once_with(timeout=2.5)
        assert mock_client_cls.return_value.get.call_count == 2

    def test_close_closes_client(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))
        source = HttpExerciseSource(CATALOG_URL, client=client)

        source.close()

        assert client.is_closed
