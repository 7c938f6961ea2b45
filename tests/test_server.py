"""Tests for the Flask app in server.py."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from conftest import make_response
from videocheck.api.content_classifier import ContentClassifier
from videocheck.processors.video_checker import VideoChecker

CLASSIFIER_REPLY = (
    '{"summary": "A friendly welcome", "bad_language": 0, "sexual_content": 0, '
    '"coercion": 1, "min_age_rating": 6, "notes": []}'
)


@pytest.fixture
def make_client():
    """Build a test client around a config and a mocked classifier."""

    def _make(config):
        from server import create_app

        classifier = MagicMock(spec=ContentClassifier)
        classifier.classify.return_value = CLASSIFIER_REPLY
        checker = VideoChecker(config, classifier=classifier)
        app = create_app(config, checker)
        app.config["TESTING"] = True
        return app.test_client(), classifier

    return _make


def _post(client, body):
    return client.post("/", data=body, content_type="application/json")


class TestCheckVideo:
    def test_success_returns_classifier_content(self, make_client, config, youtube_transcript_xml):
        client, classifier = make_client(config)
        with patch("videocheck.api.base.requests.get", return_value=make_response(youtube_transcript_xml)):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))

        assert response.status_code == 200
        assert response.content_type == "application/json"
        assert response.get_data(as_text=True) == CLASSIFIER_REPLY
        classifier.classify.assert_called_once_with("Hello & welcome to the show")

    def test_transcript_clipped_before_classification(self, make_client, make_config):
        client, classifier = make_client(make_config(MAX_TRANSCRIPT_LENGTH="5"))
        body = "<text>Hello &amp; welcome</text><text>to the show</text>"
        with patch("videocheck.api.base.requests.get", return_value=make_response(body)):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))

        assert response.status_code == 200
        classifier.classify.assert_called_once_with("Hello")

    def test_malformed_json(self, make_client, config):
        client, classifier = make_client(config)
        with pytest.raises(json.JSONDecodeError) as excinfo:
            json.loads("not json")

        response = _post(client, "not json")

        assert response.status_code == 400
        assert response.get_json() == {"error": str(excinfo.value)}
        classifier.classify.assert_not_called()

    def test_missing_url(self, make_client, config):
        client, _ = make_client(config)
        response = _post(client, json.dumps({"link": "https://youtu.be/abc123"}))
        assert response.status_code == 400
        assert "url" in response.get_json()["error"]

    def test_captions_grabber_missing_text_element(self, make_client, make_config):
        client, _ = make_client(make_config(TRANSCRIPT_PROVIDER="captionsgrabber"))
        html = "<html><body><div id='other'>no captions</div></body></html>"
        with patch("videocheck.api.base.requests.get", return_value=make_response(html)):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))

        assert response.status_code == 400
        assert response.get_json() == {"error": "Text element not found on the page"}

    def test_unrecognized_url(self, make_client, config):
        client, _ = make_client(config)
        with patch("videocheck.api.base.requests.get") as mock_get:
            response = _post(client, json.dumps({"url": "https://vimeo.com/1"}))
        assert response.status_code == 400
        assert "Could not extract" in response.get_json()["error"]
        mock_get.assert_not_called()

    def test_provider_network_failure(self, make_client, config):
        client, _ = make_client(config)
        with patch(
            "videocheck.api.base.requests.get",
            side_effect=requests.ConnectionError("Name or service not known"),
        ):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))
        assert response.status_code == 400
        assert response.get_json() == {"error": "Name or service not known"}

    def test_provider_timeout(self, make_client, config):
        client, _ = make_client(config)
        with patch("videocheck.api.base.requests.get", side_effect=requests.Timeout()):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))
        assert response.status_code == 400
        assert response.get_json() == {"error": "youtube-transcript did not respond within 30s"}

    def test_classifier_failure(self, make_client, config, youtube_transcript_xml):
        client, classifier = make_client(config)
        classifier.classify.side_effect = RuntimeError("Rate limit reached")
        with patch("videocheck.api.base.requests.get", return_value=make_response(youtube_transcript_xml)):
            response = _post(client, json.dumps({"url": "https://youtu.be/abc123"}))
        assert response.status_code == 400
        assert response.get_json() == {"error": "Rate limit reached"}


class TestCors:
    def test_preflight(self, make_client, config):
        client, _ = make_client(config)
        response = client.options(
            "/",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert response.status_code == 200
        assert response.get_data(as_text=True) == "ok"
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_error_response_has_cors_headers(self, make_client, config):
        client, _ = make_client(config)
        response = client.post(
            "/", data="not json", headers={"Origin": "http://localhost:3000"}
        )
        assert response.status_code == 400
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestHealth:
    def test_health(self, make_client, config):
        client, _ = make_client(config)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy"}


class TestCreateApp:
    def test_invalid_config_rejected(self, make_config):
        from server import create_app

        with pytest.raises(ValueError, match="MAX_TRANSCRIPT_LENGTH"):
            create_app(make_config(MAX_TRANSCRIPT_LENGTH="0"))
