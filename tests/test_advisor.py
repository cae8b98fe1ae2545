"""Tests for the plan digest and the advice request flow."""
from typing import List

import pytest

from calc import generate_plan
from models import PlanResult, Sheet
from services import advisor
from services.advisor import (
    ADVICE_UNAVAILABLE_MESSAGE,
    SYSTEM_INSTRUCTION,
    AdviceError,
    GeminiAdviceClient,
    build_advice_prompt,
    build_plan_digest,
    get_financial_advice,
)


class RecordingClient:
    def __init__(self, answer: str = "* **Invest** the surplus.") -> None:
        self.answer = answer
        self.calls: List[tuple] = []

    def generate(self, prompt: str, *, system_instruction: str) -> str:
        self.calls.append((prompt, system_instruction))
        return self.answer


class FailingClient:
    def generate(self, prompt: str, *, system_instruction: str) -> str:
        raise RuntimeError("quota exceeded")


@pytest.fixture
def plan_result(default_plan) -> PlanResult:
    return generate_plan(default_plan)


def test_digest_reads_figures_from_sheets(plan_result) -> None:
    digest = build_plan_digest(plan_result)
    lines = digest.splitlines()
    assert lines[0].startswith("- Key Inputs: Net Monthly Income: ₹50,000, Side Income: ₹0")
    assert "- Total Monthly Expenses: ₹31,000" in lines
    assert "- Financial Goal: Achieve passive income of ₹10,000." in lines
    assert "- Goal Details: Requires a corpus of ₹17,14,286." in lines
    assert any(line.startswith("- Cash Flow: Monthly Surplus is ₹19,000.") for line in lines)
    assert "- Generated Recommendations:" in lines
    assert sum(1 for line in lines if line.startswith("  - ")) == len(plan_result.recommendations)


def test_digest_skips_missing_sheets_and_marks_missing_rows(plan_result) -> None:
    sip = Sheet.from_rows("SIP_Plan", [["Metric", "Value"], ["Passive Monthly Target", "₹10,000"]])
    sheets = (sip,) + tuple(
        sheet for sheet in plan_result.sheets if sheet.name not in {"SIP_Plan", "Inputs_Summary", "Recommendations"}
    )
    trimmed = PlanResult(sheets=sheets, chart_data=plan_result.chart_data, metrics=plan_result.metrics)
    digest = build_plan_digest(trimmed)
    assert "Key Inputs" not in digest
    assert "Generated Recommendations" not in digest
    assert "- Goal Details: Requires a corpus of N/A." in digest.splitlines()


def test_prompt_quotes_question() -> None:
    prompt = build_advice_prompt("- digest", "  Can I retire early?  ")
    assert prompt.startswith("User's Financial Plan Summary:\n---\n- digest\n---")
    assert prompt.rstrip().endswith('User\'s Question: "Can I retire early?"')


def test_advice_uses_client_and_system_instruction(plan_result) -> None:
    client = RecordingClient()
    answer = get_financial_advice(plan_result, "How do I close the SIP gap?", client=client)
    assert answer == client.answer
    prompt, instruction = client.calls[0]
    assert instruction == SYSTEM_INSTRUCTION
    assert "How do I close the SIP gap?" in prompt
    assert "Required Monthly SIP for goal is" in prompt


def test_blank_question_is_rejected(plan_result) -> None:
    with pytest.raises(AdviceError):
        get_financial_advice(plan_result, "   ", client=RecordingClient())


def test_client_failure_returns_apology(plan_result) -> None:
    assert get_financial_advice(plan_result, "Help?", client=FailingClient()) == ADVICE_UNAVAILABLE_MESSAGE


def test_empty_answer_returns_apology(plan_result) -> None:
    client = RecordingClient(answer="  ")
    assert get_financial_advice(plan_result, "Help?", client=client) == ADVICE_UNAVAILABLE_MESSAGE


def test_missing_api_key_returns_apology(plan_result, monkeypatch) -> None:
    monkeypatch.setattr(advisor, "GEMINI_API_KEY", "")
    assert get_financial_advice(plan_result, "Help?") == ADVICE_UNAVAILABLE_MESSAGE


def test_gemini_client_requires_key() -> None:
    with pytest.raises(AdviceError):
        GeminiAdviceClient(api_key="  ")
