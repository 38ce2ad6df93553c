import os

##################  VARIABLES  ##################
API_URL = os.environ.get("MUSHROOM_API_URL", "http://localhost:5000")
API_ROUTES = os.environ.get("MUSHROOM_API_ROUTES", "form")
API_TIMEOUT = os.environ.get("MUSHROOM_API_TIMEOUT")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

##################  CONSTANTS  #####################
# The form posted to /predict and probed /health, the shared service module
# used the /api prefix for both. Image analysis lives at the root either way.
ROUTES = {
    "form": {
        "predict": "/predict",
        "analyze_image": "/analyze-image",
        "health": "/health",
    },
    "service": {
        "predict": "/api/predict",
        "analyze_image": "/analyze-image",
        "health": "/api/health",
    },
}

HEALTH_CACHE_TTL = 30  # seconds


def parse_timeout(value):
    """Turn the MUSHROOM_API_TIMEOUT string into seconds, None means no timeout."""
    if value is None or str(value).strip() == "":
        return None
    seconds = float(value)
    if seconds <= 0:
        raise ValueError(f"Timeout must be positive, got {value!r}")
    return seconds


def resolve_routes(variant: str) -> dict:
    try:
        return ROUTES[variant]
    except KeyError:
        raise ValueError(
            f"Unknown route variant {variant!r}, expected one of {sorted(ROUTES)}"
        ) from None
