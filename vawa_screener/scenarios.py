# vawa_screener/scenarios.py
"""
Canonical screening scenarios with their expected verdicts.

This library is the regression contract for the eligibility engine: the
/api/vawa/self-test endpoint and the test suite both run it.
"""
import logging
import sys
from datetime import date
from typing import List, Sequence

from pydantic import BaseModel

from vawa_screener.eligibility_engine import evaluate_eligibility
from vawa_screener.models import (
    AbuserStatus,
    ChildDetails,
    ChildInfo,
    ChildRelationship,
    ClientInfo,
    EligibilityStatus,
    LocalizedText,
    MaritalStatus,
    MoralCharacterAnswers,
    ParentDetails,
    PetitionerType,
    SpouseDetails,
    VawaAnswers,
)

logger = logging.getLogger(__name__)


class Scenario(BaseModel):
    id: str
    name: LocalizedText
    description: LocalizedText
    expected_overall: EligibilityStatus
    answers: VawaAnswers


class ScenarioResult(BaseModel):
    scenario_id: str
    expected_overall: EligibilityStatus
    actual_overall: EligibilityStatus
    passed: bool
    criteria_count: int


NO_BARS = MoralCharacterAnswers(
    aggravated_felony=False,
    persecution_genocide=False,
    moral_turpitude=False,
    controlled_substance=False,
    incarceration_180_days=False,
    false_testimony=False,
)


SCENARIOS: List[Scenario] = [
    # ── Clear eligibility: spouse of USC ──
    Scenario(
        id="spouse-usc-eligible",
        name=LocalizedText(en="Spouse of USC — Eligible", es="Cónyuge de USC — Elegible"),
        description=LocalizedText(
            en="Clear eligibility: abused spouse of USC, currently married, residing in US, "
               "no criminal history.",
            es="Caso claro de elegibilidad: cónyuge abusada por ciudadano americano, "
               "actualmente casada, residente en EE.UU., sin antecedentes.",
        ),
        expected_overall=EligibilityStatus.ELIGIBLE,
        answers=VawaAnswers(
            client=ClientInfo(
                name="Test Case 1", date_of_birth=date(1990, 5, 15),
                country_of_birth="Mexico", has_children=False,
            ),
            petitioner_type=PetitionerType.SPOUSE,
            abuser_status=AbuserStatus.CITIZEN,
            spouse=SpouseDetails(
                marital_status=MaritalStatus.MARRIED,
                marriage_legally_valid=True,
                marriage_bona_fide=True,
                prior_marriages_terminated=True,
                abuser_prior_marriages_terminated=True,
                has_remarried=False,
            ),
            abuse_occurred=True,
            abuse_types=("physical", "emotional", "threats"),
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS,
            currently_in_us=True,
        ),
    ),

    # ── Fundamental requirement unmet: abuser never USC/LPR ──
    Scenario(
        id="abuser-never-status",
        name=LocalizedText(en="Abuser no status — Not Eligible", es="Abusador sin estatus — No Elegible"),
        description=LocalizedText(
            en="Abuser was never a USC or LPR. Fundamental requirement not met.",
            es="El abusador nunca fue ciudadano ni residente permanente. "
               "Criterio fundamental no cumplido.",
        ),
        expected_overall=EligibilityStatus.NOT_ELIGIBLE,
        answers=VawaAnswers(
            client=ClientInfo(
                name="Test Case 2", date_of_birth=date(1988, 3, 20),
                country_of_birth="Guatemala", has_children=True,
                children=(ChildInfo(name="Child A", age=5),),
            ),
            petitioner_type=PetitionerType.SPOUSE,
            abuser_status=AbuserStatus.NEVER_QUALIFIED,
            spouse=SpouseDetails(marital_status=MaritalStatus.MARRIED),
            abuse_occurred=True,
            abuse_types=("physical",),
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=MoralCharacterAnswers(aggravated_felony=False, persecution_genocide=False),
            currently_in_us=True,
        ),
    ),

    # ── Conditional GMC bar possibly connected to abuse ──
    Scenario(
        id="gmc-conditional-review",
        name=LocalizedText(en="GMC conditional bar — Review", es="Barrera condicional GMC — Revisión"),
        description=LocalizedText(
            en="Spouse of LPR eligible on all criteria except for a minor criminal record "
               "potentially connected to abuse.",
            es="Cónyuge de LPR elegible en todos los criterios excepto por un antecedente "
               "penal menor que puede estar conectado al abuso.",
        ),
        expected_overall=EligibilityStatus.NEEDS_REVIEW,
        answers=VawaAnswers(
            client=ClientInfo(
                name="Test Case 3", date_of_birth=date(1985, 11, 10),
                country_of_birth="Honduras", has_children=False,
            ),
            petitioner_type=PetitionerType.SPOUSE,
            abuser_status=AbuserStatus.PERMANENT_RESIDENT,
            spouse=SpouseDetails(
                marital_status=MaritalStatus.MARRIED,
                marriage_legally_valid=True,
                marriage_bona_fide=True,
                prior_marriages_terminated=True,
                abuser_prior_marriages_terminated=True,
                has_remarried=False,
            ),
            abuse_occurred=True,
            abuse_types=("physical", "coercion", "economic"),
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS.model_copy(update={
                "moral_turpitude": True,
                "conditional_bar_connected_to_abuse": True,
            }),
            currently_in_us=True,
        ),
    ),

    # ── Child of USC ──
    Scenario(
        id="child-usc-eligible",
        name=LocalizedText(en="Child of USC — Eligible", es="Hijo/a de USC — Elegible"),
        description=LocalizedText(
            en="Under 21, unmarried biological child of abusive USC parent.",
            es="Menor de 21 años, soltero/a, hijo/a biológico de ciudadano americano abusivo.",
        ),
        expected_overall=EligibilityStatus.ELIGIBLE,
        answers=VawaAnswers(
            client=ClientInfo(
                name="Test Case 4", date_of_birth=date(2005, 7, 22),
                country_of_birth="El Salvador", has_children=False,
            ),
            petitioner_type=PetitionerType.CHILD,
            abuser_status=AbuserStatus.CITIZEN,
            child=ChildDetails(
                can_file_before_21=True,
                is_unmarried=True,
                relationship=ChildRelationship.BIO_WEDLOCK,
                relationship_exists=True,
            ),
            abuse_occurred=True,
            abuse_types=("physical", "emotional", "isolation"),
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS,
            currently_in_us=True,
        ),
    ),

    # ── Parent of USC ──
    Scenario(
        id="parent-usc-eligible",
        name=LocalizedText(en="Parent of USC — Eligible", es="Padre/Madre de USC — Elegible"),
        description=LocalizedText(
            en="Parent abused by USC son/daughter over 21 years old.",
            es="Padre abusado por hijo/a ciudadano americano mayor de 21 años.",
        ),
        expected_overall=EligibilityStatus.ELIGIBLE,
        answers=VawaAnswers(
            client=ClientInfo(
                name="Test Case 5", date_of_birth=date(1960, 1, 15),
                country_of_birth="Colombia", has_children=True,
                children=(ChildInfo(name="Abuser", age=28),),
            ),
            petitioner_type=PetitionerType.PARENT,
            abuser_status=AbuserStatus.CITIZEN,
            parent=ParentDetails(
                abuser_is_usc=True,
                abuser_over_21=True,
                is_parent_for_immigration=True,
            ),
            abuse_occurred=True,
            abuse_types=("emotional", "economic", "threats"),
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS,
            currently_in_us=True,
        ),
    ),

    # ── Child aged 21-25 claiming abuse-related delay ──
    Scenario(
        id="child-age-delay-review",
        name=LocalizedText(en="Child 21-25, abuse delay — Review", es="Hijo/a 21-25, retraso por abuso — Revisión"),
        description=LocalizedText(
            en="23-year-old unmarried child of USC who could not file before 21 because of "
               "the abuse. Age criterion alone requires review.",
            es="Hijo/a soltero/a de 23 años de ciudadano americano que no pudo solicitar antes "
               "de los 21 por el abuso. Solo el criterio de edad requiere revisión.",
        ),
        expected_overall=EligibilityStatus.NEEDS_REVIEW,
        answers=VawaAnswers(
            client=ClientInfo(name="Test Case 6", country_of_birth="Peru"),
            petitioner_type=PetitionerType.CHILD,
            abuser_status=AbuserStatus.CITIZEN,
            child=ChildDetails(
                current_age=23,
                can_file_before_21=False,
                can_file_before_25_with_abuse=True,
                is_unmarried=True,
                relationship=ChildRelationship.BIO_WEDLOCK,
                relationship_exists=True,
            ),
            abuse_occurred=True,
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS,
            currently_in_us=True,
        ),
    ),

    # ── Parent of LPR son/daughter ──
    Scenario(
        id="parent-lpr-child-not-eligible",
        name=LocalizedText(en="Parent of LPR — Not Eligible", es="Padre/Madre de LPR — No Elegible"),
        description=LocalizedText(
            en="Parent abused by a permanent-resident son. Only USC sons and daughters "
               "support a parent self-petition.",
            es="Padre abusado por un hijo residente permanente. Solo hijos ciudadanos "
               "americanos permiten la auto-petición de padres.",
        ),
        expected_overall=EligibilityStatus.NOT_ELIGIBLE,
        answers=VawaAnswers(
            client=ClientInfo(name="Test Case 7", country_of_birth="Philippines"),
            petitioner_type=PetitionerType.PARENT,
            abuser_status=AbuserStatus.PERMANENT_RESIDENT,
            parent=ParentDetails(abuser_is_usc=False, abuser_over_21=True),
            abuse_occurred=True,
            abuse_during_relationship=True,
            resided_with_abuser=True,
            gmc=NO_BARS,
            currently_in_us=True,
        ),
    ),
]


def run_self_test(scenarios: Sequence[Scenario] = SCENARIOS) -> List[ScenarioResult]:
    """Evaluates every scenario and compares the overall verdict to the expected one."""
    results = []
    for scenario in scenarios:
        result = evaluate_eligibility(scenario.answers)
        passed = result.overall == scenario.expected_overall
        if not passed:
            logger.warning(
                "Scenario %s failed: expected %s, got %s",
                scenario.id, scenario.expected_overall.value, result.overall.value,
            )
        results.append(ScenarioResult(
            scenario_id=scenario.id,
            expected_overall=scenario.expected_overall,
            actual_overall=result.overall,
            passed=passed,
            criteria_count=len(result.criteria),
        ))

    passed_count = sum(1 for r in results if r.passed)
    logger.info("Self-test: %d/%d scenarios passed", passed_count, len(results))
    return results


if __name__ == "__main__":
    from vawa_screener.logging_config import configure_logging

    configure_logging()
    outcome = run_self_test()
    sys.exit(0 if all(r.passed for r in outcome) else 1)
