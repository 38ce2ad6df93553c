from unittest.mock import Mock, patch

import pytest
import requests

from MUSHFORM.api.client import ApiClient
from MUSHFORM.form import FormController


def make_client(routes="form", timeout=None):
    session = requests.Session()
    session.post = Mock()
    session.get = Mock()
    client = ApiClient(base_url="http://example.com/", routes=routes, timeout=timeout, session=session)
    return client, session


def ok_response(payload):
    resp = Mock(spec=requests.Response)
    resp.json.return_value = payload
    return resp


def error_response(status=500, payload=None):
    resp = Mock(spec=requests.Response)
    resp.status_code = status
    resp.json.return_value = payload or {}
    resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error", response=resp)
    return resp


# -----------------------
# predict
# -----------------------
def test_predict_posts_json_and_returns_body():
    client, session = make_client()
    session.post.return_value = ok_response({"prediction": "edible", "confidence": 0.9})
    features = {"odor": "none"}
    assert client.predict(features) == {"prediction": "edible", "confidence": 0.9}
    session.post.assert_called_once_with("http://example.com/predict", json=features, timeout=None)


def test_predict_service_routes():
    client, session = make_client(routes="service", timeout=5.0)
    session.post.return_value = ok_response({})
    client.predict({})
    session.post.assert_called_once_with("http://example.com/api/predict", json={}, timeout=5.0)


def test_predict_reraises_http_error_unchanged():
    client, session = make_client()
    resp = error_response(400, {"error": "bad odor"})
    session.post.return_value = resp
    with pytest.raises(requests.HTTPError) as excinfo:
        client.predict({})
    assert excinfo.value.response is resp
    session.post.assert_called_once()


def test_predict_reraises_connection_error():
    client, session = make_client()
    session.post.side_effect = requests.ConnectionError("refused")
    with pytest.raises(requests.ConnectionError):
        client.predict({})
    assert session.post.call_count == 1


# -----------------------
# analyze_image
# -----------------------
def test_analyze_image_sends_multipart_image_field():
    client, session = make_client(routes="service")
    session.post.return_value = ok_response({"features": {"cap-color": "red"}})
    data = client.analyze_image(b"\xff\xd8", filename="shroom.png", content_type="image/png")
    assert data == {"features": {"cap-color": "red"}}
    args, kwargs = session.post.call_args
    assert args == ("http://example.com/analyze-image",)
    assert kwargs["files"] == {"image": ("shroom.png", b"\xff\xd8", "image/png")}
    # lets requests set the multipart boundary
    assert kwargs["headers"] == {"Content-Type": None}


def test_analyze_image_reraises():
    client, session = make_client()
    session.post.return_value = error_response(502)
    with pytest.raises(requests.HTTPError):
        client.analyze_image(b"data")


# -----------------------
# check_health
# -----------------------
def test_check_health_routes():
    client, session = make_client()
    session.get.return_value = ok_response({"status": "ok"})
    assert client.check_health() == {"status": "ok"}
    session.get.assert_called_once_with("http://example.com/health", timeout=None)

    client, session = make_client(routes="service")
    session.get.return_value = ok_response({"status": "ok"})
    client.check_health()
    session.get.assert_called_once_with("http://example.com/api/health", timeout=None)


def test_check_health_reraises_invalid_json():
    client, session = make_client()
    resp = ok_response(None)
    resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "", 0)
    session.get.return_value = resp
    with pytest.raises(requests.RequestException):
        client.check_health()


def test_own_session_gets_json_content_type():
    client = ApiClient(base_url="http://example.com")
    assert client.session.headers["Content-Type"] == "application/json"


def test_caller_session_headers_untouched():
    session = requests.Session()
    before = dict(session.headers)
    ApiClient(base_url="http://example.com", session=session)
    assert dict(session.headers) == before


def test_failure_logged_once_by_client():
    client, session = make_client()
    session.post.side_effect = requests.ConnectionError("refused")
    form = FormController()
    with patch("MUSHFORM.api.client.logger") as client_logger, \
         patch("MUSHFORM.form.logger") as form_logger:
        form.upload_image(client, b"x")
    client_logger.error.assert_called_once()
    form_logger.error.assert_not_called()


def test_unknown_routes_variant():
    with pytest.raises(ValueError):
        ApiClient(base_url="http://example.com", routes="legacy")
