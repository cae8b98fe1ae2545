"""Language-model advice on a computed plan, behind a narrow client interface."""
from __future__ import annotations

import logging
import os
from typing import List, Protocol

from google import genai
from google.genai import types

from models import PlanResult, Sheet

logger = logging.getLogger(__name__)

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", "")
ADVICE_MODEL = os.getenv("FINPAL_ADVICE_MODEL", "gemini-2.5-flash")

ADVICE_UNAVAILABLE_MESSAGE = (
    "Sorry, I encountered an error while analyzing your plan. Please try again later."
)
MISSING_VALUE = "N/A"

SYSTEM_INSTRUCTION = (
    "You are FinPal, a supportive financial assistant for salaried users in India. "
    "Read the plan summary you are given and answer the user's question using those figures. "
    "Keep the advice concise, actionable and encouraging, and do not fall back to generic tips "
    "that ignore the user's numbers. Format the answer with '*' bullet points and '**' for emphasis."
)


class AdviceError(ValueError):
    """Raised when an advice request is malformed."""


class AdviceClient(Protocol):
    def generate(self, prompt: str, *, system_instruction: str) -> str:
        ...


class GeminiAdviceClient:
    """:class:`AdviceClient` backed by the ``google-genai`` SDK."""

    def __init__(self, api_key: str | None = None, *, model: str = ADVICE_MODEL) -> None:
        key = (api_key if api_key is not None else GEMINI_API_KEY).strip()
        if not key:
            raise AdviceError("GEMINI_API_KEY is not configured.")
        self.model = model
        self._client = genai.Client(api_key=key)

    def generate(self, prompt: str, *, system_instruction: str) -> str:
        response = self._client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
        )
        return response.text or ""


def _find_sheet(result: PlanResult, name: str) -> Sheet | None:
    try:
        return result.sheet(name)
    except KeyError:
        return None


def build_plan_digest(result: PlanResult) -> str:
    """Bullet summary of the plan, read from the named sheets by row label."""

    parts: List[str] = []
    inputs = _find_sheet(result, "Inputs_Summary")
    if inputs is not None:
        pairs = ", ".join(f"{row[0]}: {row[1]}" for row in inputs.records)
        parts.append(f"- Key Inputs: {pairs}")

    expenses = _find_sheet(result, "Expenses")
    if expenses is not None and expenses.records:
        parts.append(f"- Total Monthly Expenses: {expenses.records[-1][1]}")

    sip = _find_sheet(result, "SIP_Plan")
    if sip is not None:
        goal = sip.lookup("Passive Monthly Target", MISSING_VALUE)
        corpus = sip.lookup("Corpus Needed for Goal", MISSING_VALUE)
        surplus = sip.lookup("Available Monthly Surplus", MISSING_VALUE)
        required = sip.lookup("Required Monthly SIP", MISSING_VALUE)
        parts.append(f"- Financial Goal: Achieve passive income of {goal}.")
        parts.append(f"- Goal Details: Requires a corpus of {corpus}.")
        parts.append(
            f"- Cash Flow: Monthly Surplus is {surplus}. Required Monthly SIP for goal is {required}."
        )

    recommendations = _find_sheet(result, "Recommendations")
    if recommendations is not None:
        lines = "\n".join(f"  - {row[0]}" for row in recommendations.records)
        parts.append(f"- Generated Recommendations:\n{lines}")
    return "\n".join(parts)


def build_advice_prompt(digest: str, question: str) -> str:
    return (
        "User's Financial Plan Summary:\n"
        "---\n"
        f"{digest}\n"
        "---\n\n"
        f'User\'s Question: "{question.strip()}"\n'
    )


def get_financial_advice(
    result: PlanResult,
    question: str,
    *,
    client: AdviceClient | None = None,
) -> str:
    """Ask the model about *result*; failures come back as an apology string."""

    if not question or not question.strip():
        raise AdviceError("Please enter a question about your plan.")
    prompt = build_advice_prompt(build_plan_digest(result), question)
    try:
        advisor = client if client is not None else GeminiAdviceClient()
    except AdviceError:
        logger.warning("Advice requested but no API key is configured")
        return ADVICE_UNAVAILABLE_MESSAGE

    logger.info("Requesting plan advice (%d prompt chars)", len(prompt))
    try:
        answer = advisor.generate(prompt, system_instruction=SYSTEM_INSTRUCTION)
    except Exception:
        logger.exception("Advice request failed")
        return ADVICE_UNAVAILABLE_MESSAGE
    if not answer.strip():
        logger.warning("Advice request returned an empty answer")
        return ADVICE_UNAVAILABLE_MESSAGE
    return answer


__all__ = [
    "ADVICE_MODEL",
    "ADVICE_UNAVAILABLE_MESSAGE",
    "AdviceClient",
    "AdviceError",
    "GeminiAdviceClient",
    "SYSTEM_INSTRUCTION",
    "build_advice_prompt",
    "build_plan_digest",
    "get_financial_advice",
]
