"""Tests for LLM response parsing."""

import pytest

from matchcast.llm.parser import (
    DEFAULT_CONFIDENCE,
    DEFAULT_WIN_PROBABILITY,
    FALLBACK_PREDICTION,
    clamp_percentage,
    parse_prediction_response,
)

from tests.fixtures.factories import create_llm_text


class TestParsePredictionResponse:
    """Tests for parse_prediction_response."""

    def test_well_formed_response(self):
        """All six labelled fields are extracted."""
        parsed = parse_prediction_response(create_llm_text())

        assert parsed.reasoning.startswith("Arsenal have won four")
        assert parsed.analysis == "Arsenal should control the game at home."
        assert parsed.prediction == "Home win"
        assert parsed.score_prediction == "2-1"
        assert parsed.confidence_score == 78
        assert parsed.win_probability == 61
        assert parsed.is_complete
        assert parsed.missing == []

    def test_multiline_fields_run_until_next_label(self):
        """A field spans lines up to the next label."""
        text = create_llm_text(reasoning="Line one.\nLine two.\nLine three.")

        parsed = parse_prediction_response(text)

        assert parsed.reasoning == "Line one.\nLine two.\nLine three."

    def test_prediction_label_kept_verbatim(self):
        """Labels outside the suggested set are not rejected."""
        parsed = parse_prediction_response(create_llm_text(prediction="Under 1.5 goals"))

        assert parsed.prediction == "Under 1.5 goals"

    def test_malformed_response_uses_fallbacks(self):
        """Text with no labels falls back on every field."""
        text = "I cannot analyse this match right now."

        parsed = parse_prediction_response(text)

        assert parsed.prediction == FALLBACK_PREDICTION
        assert parsed.confidence_score == DEFAULT_CONFIDENCE == 70
        assert parsed.win_probability == DEFAULT_WIN_PROBABILITY == 50
        assert parsed.reasoning == ""
        assert parsed.score_prediction == ""
        assert parsed.analysis == text
        assert not parsed.is_complete
        assert set(parsed.missing) == {
            "reasoning",
            "analysis",
            "prediction",
            "score_prediction",
            "confidence_score",
            "win_probability",
        }

    def test_analysis_fallback_truncated(self):
        """Without an ANALYSIS label the first 500 characters are kept."""
        parsed = parse_prediction_response("x" * 800)

        assert len(parsed.analysis) == 500

    def test_missing_numbers_only(self):
        """Text fields parse while numbers fall back."""
        text = "REASONING: r\nANALYSIS: a\nPREDICTION: Draw\nSCORE: 1-1\nCONFIDENCE: high"

        parsed = parse_prediction_response(text)

        assert parsed.prediction == "Draw"
        assert parsed.score_prediction == "1-1"
        assert parsed.confidence_score == 70
        assert parsed.win_probability == 50
        assert parsed.missing == ["confidence_score", "win_probability"]

    @pytest.mark.parametrize(
        "confidence,win_probability,expected_confidence,expected_win",
        [
            ("150", "999", 100, 100),
            ("0", "0", 0, 0),
            ("100", "100", 100, 100),
        ],
    )
    def test_numbers_clamped(self, confidence, win_probability, expected_confidence, expected_win):
        """Parsed numbers always land in 0-100."""
        text = create_llm_text(confidence=confidence, win_probability=win_probability)

        parsed = parse_prediction_response(text)

        assert parsed.confidence_score == expected_confidence
        assert parsed.win_probability == expected_win

    def test_confidence_with_percent_sign(self):
        """Trailing text after the digits is ignored."""
        parsed = parse_prediction_response(create_llm_text(confidence="85%", win_probability="40 percent"))

        assert parsed.confidence_score == 85
        assert parsed.win_probability == 40


class TestClampPercentage:
    """Tests for clamp_percentage."""

    def test_bounds(self):
        assert clamp_percentage(-5) == 0
        assert clamp_percentage(42) == 42
        assert clamp_percentage(101) == 100
