from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict


class PredictionResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prediction: Literal["edible", "poisonous"]
    # not clamped, whatever the service sends is shown
    confidence: float

    @property
    def is_edible(self) -> bool:
        return self.prediction == "edible"

    @property
    def headline(self) -> str:
        return f"This mushroom is predicted to be {self.prediction}"

    @property
    def confidence_text(self) -> str:
        return f"Confidence: {self.confidence * 100:.2f}%"


class ImageAnalysisResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    features: Optional[Dict[str, Any]] = None
