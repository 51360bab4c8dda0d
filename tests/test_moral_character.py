"""
Tests for the good-moral-character bar evaluator.
"""

import pytest

from vawa_screener import legal_text as txt
from vawa_screener.models import EligibilityStatus, MoralCharacterAnswers, VawaAnswers
from vawa_screener.moral_character import evaluate_good_moral_character

CONDITIONAL_BARS = ["moral_turpitude", "controlled_substance", "incarceration_180_days", "false_testimony"]


def evaluate(**fields):
    return evaluate_good_moral_character(VawaAnswers(gmc=MoralCharacterAnswers(**fields)))


def test_aggravated_felony_is_permanent_bar():
    outcome = evaluate(aggravated_felony=True, moral_turpitude=True, conditional_bar_connected_to_abuse=True)

    assert len(outcome.criteria) == 1
    assert outcome.criteria[0].status == EligibilityStatus.NOT_ELIGIBLE
    assert outcome.criteria[0].legal_ref == txt.REF_GMC_AGGRAVATED_FELONY
    assert outcome.recommendations == []


def test_persecution_is_permanent_bar():
    outcome = evaluate(aggravated_felony=False, persecution_genocide=True, false_testimony=True)

    assert len(outcome.criteria) == 1
    assert outcome.criteria[0].status == EligibilityStatus.NOT_ELIGIBLE
    assert outcome.criteria[0].legal_ref == txt.REF_GMC_PERSECUTION


def test_aggravated_felony_checked_before_persecution():
    outcome = evaluate(aggravated_felony=True, persecution_genocide=True)
    assert [c.legal_ref for c in outcome.criteria] == [txt.REF_GMC_AGGRAVATED_FELONY]


@pytest.mark.parametrize("bar", CONDITIONAL_BARS)
def test_conditional_bar_connected_to_abuse(bar):
    outcome = evaluate(
        aggravated_felony=False,
        persecution_genocide=False,
        conditional_bar_connected_to_abuse=True,
        **{bar: True},
    )

    assert [c.status for c in outcome.criteria] == [EligibilityStatus.NEEDS_REVIEW]
    assert outcome.recommendations == [txt.DOCUMENT_ABUSE_CONNECTION_RECOMMENDATION]


@pytest.mark.parametrize("connected", [False, None])
def test_conditional_bar_without_mitigation(connected):
    outcome = evaluate(
        aggravated_felony=False,
        persecution_genocide=False,
        controlled_substance=True,
        conditional_bar_connected_to_abuse=connected,
    )

    assert [c.status for c in outcome.criteria] == [EligibilityStatus.NEEDS_REVIEW]
    assert outcome.recommendations == []


def test_conditional_bar_with_unanswered_permanent_bars():
    outcome = evaluate(incarceration_180_days=True)
    assert [c.status for c in outcome.criteria] == [EligibilityStatus.NEEDS_REVIEW]


def test_no_bars():
    outcome = evaluate(
        aggravated_felony=False,
        persecution_genocide=False,
        moral_turpitude=False,
    )
    assert [c.status for c in outcome.criteria] == [EligibilityStatus.ELIGIBLE]


@pytest.mark.parametrize("fields", [
    {},
    {"aggravated_felony": False},
    {"persecution_genocide": False},
    {"aggravated_felony": False, "persecution_genocide": None, "moral_turpitude": False},
])
def test_insufficient_answers_emit_nothing(fields):
    assert evaluate(**fields).criteria == []


def test_has_conditional_bar_ignores_unknown():
    assert not MoralCharacterAnswers().has_conditional_bar
    assert not MoralCharacterAnswers(false_testimony=False).has_conditional_bar
    assert MoralCharacterAnswers(false_testimony=True).has_conditional_bar
