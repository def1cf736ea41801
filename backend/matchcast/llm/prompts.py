"""Prompt templates for match predictions and follow-up analyses."""

from datetime import date

PREDICTION_LABELS = [
    "Home win",
    "Draw",
    "Away win",
    "Both teams to score",
    "Over 2.5 goals",
]

PREDICTION_SYSTEM_PROMPT = """You are a world-renowned football analyst.

When analysing:
- Use chain-of-thought reasoning and work step by step
- Explain the logic behind every decision
- Take statistics and current form into account
- Say so when the outcome is uncertain

Always follow the requested output format exactly."""

PREDICTION_PROMPT_TEMPLATE = """As a professional football analyst, write a detailed betting analysis for the match below.

## MATCH
- Match: {match_name}
- League: {league_name}
- Date: {match_date}
{team_context}

## INSTRUCTIONS (think step by step)

1. **TEAMS**: weigh the strengths and weaknesses of both sides.
2. **FORM**: review their recent results.
3. **STATISTICS**: consider expected goals and defensive solidity.
4. **DECISION**: combine every factor into a reasoned conclusion.

## OUTPUT FORMAT (follow exactly)

REASONING: [your step-by-step reasoning, 3-4 sentences]

ANALYSIS: [short match analysis, 2-3 sentences]

PREDICTION: [exactly one of: {labels}]

SCORE: [predicted score, e.g. "2-1"]

CONFIDENCE: [a number from 0 to 100]

WIN_PROBABILITY: [home win probability, 0-100]"""

ANALYSIS_PROMPT_TEMPLATE = """Write a short, professional betting analysis for the match and prediction below.

Match: {match_name}
Current prediction: {prediction}
Model: {model_name}

Please:
1. Keep it brief (3-4 sentences at most)
2. Point out the strengths and weaknesses of this prediction

Reply with the analysis text only."""


def build_prediction_messages(
    match_name: str,
    league_name: str,
    match_date: date,
    team_context: list[str] | None = None,
) -> list[dict[str, str]]:
    """Build the system and user messages for a match prediction."""
    prompt = PREDICTION_PROMPT_TEMPLATE.format(
        match_name=match_name,
        league_name=league_name,
        match_date=match_date.isoformat(),
        team_context="\n".join(team_context or []),
        labels=", ".join(f'"{label}"' for label in PREDICTION_LABELS),
    )
    return [
        {"role": "system", "content": PREDICTION_SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


def build_analysis_messages(match_name: str, prediction: str, model_name: str) -> list[dict[str, str]]:
    """Build the single user message for a follow-up analysis."""
    prompt = ANALYSIS_PROMPT_TEMPLATE.format(
        match_name=match_name,
        prediction=prediction,
        model_name=model_name,
    )
    return [{"role": "user", "content": prompt}]
