from unittest.mock import patch

import pytest
import requests

import health_check_api
from MUSHFORM.api.client import ApiClient


def test_health_check_ok(capsys):
    with patch.object(ApiClient, "check_health", return_value={"status": "ok"}), \
         patch.object(ApiClient, "predict", return_value={"prediction": "poisonous", "confidence": 0.87}) as predict, \
         patch.object(ApiClient, "analyze_image", return_value={"features": {}}) as analyze:
        health_check_api.main(["--url", "http://example.com", "--with-image"])

    sent = predict.call_args[0][0]
    assert len(sent) == 22
    assert sent["odor"] == "foul"
    assert analyze.call_args[1]["filename"] == "test.jpg"
    out = capsys.readouterr().out
    assert "Confidence: 87.00%" in out
    assert out.strip().endswith("OK")


def test_health_check_exits_when_unreachable():
    with patch.object(ApiClient, "check_health", side_effect=requests.ConnectionError("down")):
        with pytest.raises(SystemExit) as excinfo:
            health_check_api.main(["--url", "http://example.com"])
    assert excinfo.value.code == 1


def test_health_check_exits_on_unknown_prediction_shape():
    with patch.object(ApiClient, "check_health", return_value={}), \
         patch.object(ApiClient, "predict", return_value={"species": "amanita"}):
        with pytest.raises(SystemExit) as excinfo:
            health_check_api.main(["--url", "http://example.com"])
    assert excinfo.value.code == 1
