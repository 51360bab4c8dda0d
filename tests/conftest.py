"""Shared fixtures: fully favourable answer records for each petitioner type."""

import pytest

from vawa_screener.scenarios import SCENARIOS


def _scenario_answers(scenario_id):
    return next(s.answers for s in SCENARIOS if s.id == scenario_id)


@pytest.fixture
def spouse_answers():
    return _scenario_answers("spouse-usc-eligible")


@pytest.fixture
def child_answers():
    return _scenario_answers("child-usc-eligible")


@pytest.fixture
def parent_answers():
    return _scenario_answers("parent-usc-eligible")
