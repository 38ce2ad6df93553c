"""Categorical mushroom attributes accepted by the prediction service.

The table below is the single source of truth for which features exist, the
order they are rendered in and which values each one accepts.
"""
from typing import Dict, List

import pandas as pd

COLORS = ["brown", "buff", "cinnamon", "gray", "green", "pink", "purple", "red", "white", "yellow"]
STALK_COLORS = ["brown", "buff", "cinnamon", "gray", "orange", "pink", "red", "white", "yellow"]
SURFACES = ["fibrous", "scaly", "silky", "smooth"]

FEATURE_OPTIONS: Dict[str, List[str]] = {
    "cap-shape": ["bell", "conical", "convex", "flat", "knobbed", "sunken"],
    "cap-surface": ["fibrous", "grooves", "scaly", "smooth"],
    "cap-color": COLORS,
    "bruises": ["bruises", "no"],
    "odor": ["almond", "anise", "creosote", "fishy", "foul", "musty", "none", "pungent", "spicy"],
    "gill-attachment": ["attached", "descending", "free", "notched"],
    "gill-spacing": ["close", "crowded", "distant"],
    "gill-size": ["broad", "narrow"],
    "gill-color": ["black", "brown", "buff", "chocolate", "gray", "green",
                   "orange", "pink", "purple", "red", "white", "yellow"],
    "stalk-shape": ["enlarging", "tapering"],
    "stalk-root": ["bulbous", "club", "cup", "equal", "rhizomorphs", "rooted", "missing"],
    "stalk-surface-above-ring": SURFACES,
    "stalk-surface-below-ring": SURFACES,
    "stalk-color-above-ring": STALK_COLORS,
    "stalk-color-below-ring": STALK_COLORS,
    "veil-type": ["partial", "universal"],
    "veil-color": ["brown", "orange", "white", "yellow"],
    "ring-number": ["none", "one", "two"],
    "ring-type": ["cobwebby", "evanescent", "flaring", "large", "none", "pendant", "sheathing", "zone"],
    "spore-print-color": ["black", "brown", "buff", "chocolate", "green",
                          "orange", "purple", "white", "yellow"],
    "population": ["abundant", "clustered", "numerous", "scattered", "several", "solitary"],
    "habitat": ["grasses", "leaves", "meadows", "paths", "urban", "waste", "woods"],
}

REQUIRED_FEATURES = [
    "odor",                      # strong indicator of toxicity
    "spore-print-color",
    "gill-color",
    "cap-color",
    "bruises",
    "ring-type",
    "gill-spacing",
    "cap-shape",
    "population",                # environmental
    "habitat",
    "stalk-surface-above-ring",
    "cap-surface",
]


def is_required(feature: str) -> bool:
    return feature in REQUIRED_FEATURES


def humanize(name: str) -> str:
    """'spore-print-color' -> 'Spore Print Color'"""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def empty_feature_set() -> Dict[str, str]:
    return {feature: "" for feature in FEATURE_OPTIONS}


def missing_required(features: Dict[str, str]) -> List[str]:
    """Required features with no value, in the order they are displayed."""
    return [
        feature
        for feature in FEATURE_OPTIONS
        if is_required(feature) and not features.get(feature)
    ]


def validate_option(feature: str, value: str) -> None:
    if feature not in FEATURE_OPTIONS:
        raise ValueError(f"Unknown feature {feature!r}")
    if value and value not in FEATURE_OPTIONS[feature]:
        raise ValueError(
            f"{value!r} is not a valid option for {feature!r}, "
            f"expected one of {FEATURE_OPTIONS[feature]}"
        )


def feature_frame(features: Dict[str, str]) -> pd.DataFrame:
    """
    Summary table of a feature set for display.

    output:
        pd.DataFrame with columns Feature, Value, Required, one row per
        feature in schema order. Unset values are shown as "-".
    """
    rows = [
        {
            "Feature": humanize(feature),
            "Value": humanize(features.get(feature, "")) or "-",
            "Required": is_required(feature),
        }
        for feature in FEATURE_OPTIONS
    ]
    return pd.DataFrame(rows, columns=["Feature", "Value", "Required"])
