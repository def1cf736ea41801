"""Parsing of labelled prediction text returned by the LLM."""

import re
from dataclasses import dataclass, field

FALLBACK_PREDICTION = "Analysis completed"
DEFAULT_CONFIDENCE = 70
DEFAULT_WIN_PROBABILITY = 50
ANALYSIS_FALLBACK_CHARS = 500

# Text fields end where the next label in this order begins.
_TEXT_FIELDS = [
    ("reasoning", "REASONING", "ANALYSIS"),
    ("analysis", "ANALYSIS", "PREDICTION"),
    ("prediction", "PREDICTION", "SCORE"),
    ("score_prediction", "SCORE", "CONFIDENCE"),
]
_INT_FIELDS = [
    ("confidence_score", "CONFIDENCE"),
    ("win_probability", "WIN_PROBABILITY"),
]


@dataclass
class ParsedPrediction:
    """Structured prediction extracted from free text."""

    reasoning: str
    analysis: str
    prediction: str
    score_prediction: str
    confidence_score: int
    win_probability: int
    missing: list[str] = field(default_factory=list)  # fields that fell back

    @property
    def is_complete(self) -> bool:
        return not self.missing


def clamp_percentage(value: int) -> int:
    """Clamp an integer to 0-100."""
    return min(100, max(0, value))


def _extract_text(text: str, label: str, next_label: str) -> str | None:
    match = re.search(rf"{label}:\s*(.+?)(?={next_label}:|$)", text, re.DOTALL)
    if not match:
        return None
    return match.group(1).strip() or None


def _extract_int(text: str, label: str) -> int | None:
    match = re.search(rf"{label}:\s*(\d+)", text)
    if not match:
        return None
    return int(match.group(1))


def parse_prediction_response(text: str) -> ParsedPrediction:
    """
    Extract the labelled fields from an LLM response.

    Never raises: every field that cannot be found takes its fallback value
    and is listed in ``missing``. Numeric fields are clamped to 0-100.

    Args:
        text: Raw completion text

    Returns:
        ParsedPrediction
    """
    missing = []
    values = {}

    for name, label, next_label in _TEXT_FIELDS:
        value = _extract_text(text, label, next_label)
        if value is None:
            missing.append(name)
        values[name] = value

    for name, label in _INT_FIELDS:
        value = _extract_int(text, label)
        if value is None:
            missing.append(name)
        values[name] = value

    confidence = values["confidence_score"]
    win_probability = values["win_probability"]

    return ParsedPrediction(
        reasoning=values["reasoning"] or "",
        analysis=values["analysis"] or text[:ANALYSIS_FALLBACK_CHARS].strip(),
        prediction=values["prediction"] or FALLBACK_PREDICTION,
        score_prediction=values["score_prediction"] or "",
        confidence_score=clamp_percentage(DEFAULT_CONFIDENCE if confidence is None else confidence),
        win_probability=clamp_percentage(
            DEFAULT_WIN_PROBABILITY if win_probability is None else win_probability
        ),
        missing=missing,
    )
