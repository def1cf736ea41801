"""LLM client, prompts and response parsing."""

from matchcast.llm.client import LLMClient
from matchcast.llm.parser import ParsedPrediction, parse_prediction_response

__all__ = [
    "LLMClient",
    "ParsedPrediction",
    "parse_prediction_response",
]
