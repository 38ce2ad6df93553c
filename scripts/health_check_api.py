#!/usr/bin/env python
"""
Quick health check for the mushroom prediction service.

Checks:
 - GET /health
 - POST /predict with a fully filled sample feature set
 - POST /analyze-image with a generated 224x224 RGB image (--with-image)

Usage:
  python scripts/health_check_api.py --url http://127.0.0.1:5000
  python scripts/health_check_api.py --url http://127.0.0.1:8000 --routes service --with-image
"""
import argparse
import io
import sys

import requests
from PIL import Image
from pydantic import ValidationError

from MUSHFORM.api.client import ApiClient
from MUSHFORM.api.schemas import PredictionResult
from MUSHFORM.features import empty_feature_set
from MUSHFORM.params import API_ROUTES, API_URL, ROUTES

SAMPLE_FEATURES = {
    "odor": "foul",
    "spore-print-color": "black",
    "gill-color": "buff",
    "cap-color": "brown",
    "bruises": "no",
    "ring-type": "evanescent",
    "gill-spacing": "close",
    "cap-shape": "convex",
    "population": "several",
    "habitat": "woods",
    "stalk-surface-above-ring": "silky",
    "cap-surface": "scaly",
}


def sample_image() -> bytes:
    img = Image.new("RGB", (224, 224), color=(150, 110, 80))
    buf = io.BytesIO()
    img.save(buf, format="JPEG")
    return buf.getvalue()


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--url", default=API_URL)
    parser.add_argument("--routes", default=API_ROUTES, choices=sorted(ROUTES))
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--with-image", action="store_true")
    args = parser.parse_args(argv)

    client = ApiClient(base_url=args.url, routes=args.routes, timeout=args.timeout)

    try:
        print("GET health:", client.check_health())
    except requests.RequestException as e:
        print("GET health failed:", e)
        sys.exit(1)

    features = empty_feature_set()
    features.update(SAMPLE_FEATURES)
    try:
        data = client.predict(features)
        result = PredictionResult.model_validate(data)
        print("POST predict:", result.headline, "-", result.confidence_text)
    except requests.RequestException as e:
        print("POST predict failed:", e)
        sys.exit(1)
    except ValidationError as e:
        print("Unknown prediction shape ->", e)
        sys.exit(1)

    if args.with_image:
        try:
            data = client.analyze_image(sample_image(), filename="test.jpg")
            print("POST analyze-image:", data)
        except requests.RequestException as e:
            print("POST analyze-image failed:", e)
            sys.exit(1)

    print("OK")


if __name__ == "__main__":
    main()
