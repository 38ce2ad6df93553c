"""State and actions behind the mushroom form.

One FormController lives per browser session. Image analysis and prediction
each have their own in-flight flag so one operation finishing never clears
the other's loading indicator.
"""
from typing import IO, Any, Dict, List, Optional, Union

import requests
from pydantic import ValidationError

from MUSHFORM.api.client import ApiClient
from MUSHFORM.api.schemas import ImageAnalysisResponse, PredictionResult
from MUSHFORM.features import (
    FEATURE_OPTIONS,
    empty_feature_set,
    humanize,
    missing_required,
    validate_option,
)
from MUSHFORM.logger import logger

PREDICTION_FAILED = "Failed to get prediction. Please try again."
IMAGE_ANALYSIS_FAILED = "Failed to analyze image. Please try again."


def server_error_message(exc: Exception) -> Optional[str]:
    """The `error` field of a JSON error body, if the server sent one."""
    response = getattr(exc, "response", None)
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


def check_service(client: ApiClient) -> bool:
    try:
        client.check_health()
    except requests.RequestException:
        return False
    return True


class FormController:
    def __init__(self):
        self.features: Dict[str, str] = empty_feature_set()
        self.result: Optional[PredictionResult] = None
        self.error: Optional[str] = None
        self.image: Optional[bytes] = None
        self.analyzing = False
        self.predicting = False

    @property
    def status(self) -> str:
        if self.analyzing or self.predicting:
            return "loading"
        if self.result is not None or self.error is not None:
            return "settled"
        return "idle"

    @property
    def can_submit(self) -> bool:
        return not self.predicting

    def set_feature(self, feature: str, value: str) -> None:
        validate_option(feature, value)
        self.features[feature] = value

    def missing_fields(self) -> List[str]:
        return [humanize(feature) for feature in missing_required(self.features)]

    def submit(self, client: ApiClient) -> Optional[PredictionResult]:
        self.predicting = True
        self.error = None
        self.result = None
        try:
            missing = self.missing_fields()
            if missing:
                self.error = f"Please fill in all required fields: {', '.join(missing)}"
                return None

            try:
                data = client.predict(dict(self.features))
                self.result = PredictionResult.model_validate(data)
            except requests.RequestException as e:
                # the client already logged the failure
                self.error = server_error_message(e) or PREDICTION_FAILED
            except ValidationError as e:
                logger.error("Unexpected prediction payload: %s", e)
                self.error = PREDICTION_FAILED
            return self.result
        finally:
            self.predicting = False

    def upload_image(
        self,
        client: ApiClient,
        image: Union[bytes, IO[bytes]],
        filename: str = "upload.jpg",
        content_type: str = "image/jpeg",
    ) -> Dict[str, str]:
        """
        Send a photo for feature extraction and pre-fill the form with what
        the service detected. Returns the features that were actually applied.
        """
        if not isinstance(image, bytes):
            image = image.read()
        self.image = image
        self.analyzing = True
        try:
            data = client.analyze_image(image, filename=filename, content_type=content_type)
            logger.info("Image analysis results: %s", data)
            response = ImageAnalysisResponse.model_validate(data)
            return self.apply_detected_features(response.features or {})
        except requests.RequestException:
            self.error = IMAGE_ANALYSIS_FAILED
            return {}
        except ValidationError as e:
            logger.error("Unexpected image analysis payload: %s", e)
            self.error = IMAGE_ANALYSIS_FAILED
            return {}
        finally:
            self.analyzing = False

    def apply_detected_features(self, detected: Dict[str, Any]) -> Dict[str, str]:
        applied = {}
        for feature, value in detected.items():
            if feature not in FEATURE_OPTIONS:
                logger.debug("Ignoring detected feature outside the schema: %s", feature)
                continue
            if not isinstance(value, str):
                # null means the service could not tell
                logger.warning("Ignoring non-text detected value %r for %s", value, feature)
                continue
            value = value.strip().lower()
            if value not in FEATURE_OPTIONS[feature]:
                logger.warning("Ignoring detected value %r for %s", value, feature)
                continue
            self.features[feature] = value
            applied[feature] = value
        return applied
