# vawa_screener/eligibility_engine.py
import logging
from typing import Iterable, List, Optional

from vawa_screener import legal_text as txt
from vawa_screener.models import (
    AbuserStatus,
    CriterionResult,
    EligibilityResult,
    EligibilityStatus,
    OutsideUSException,
    PetitionerType,
    RuleOutcome,
    VawaAnswers,
)
from vawa_screener.moral_character import evaluate_good_moral_character
from vawa_screener.relationship_rules import evaluate_relationship

logger = logging.getLogger(__name__)

ELIGIBLE = EligibilityStatus.ELIGIBLE
NOT_ELIGIBLE = EligibilityStatus.NOT_ELIGIBLE
NEEDS_REVIEW = EligibilityStatus.NEEDS_REVIEW


# ==========================================
# 1. ABUSER STATUS
# ==========================================
def evaluate_abuser_status(answers: VawaAnswers) -> RuleOutcome:
    outcome = RuleOutcome()
    status = answers.abuser_status

    if status == AbuserStatus.NEVER_QUALIFIED:
        # Strong disqualifier, but the remaining criteria are still evaluated
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSER_STATUS_LABEL, NOT_ELIGIBLE,
            "The abuser is not and never was a USC or LPR. VAWA requires the abuser "
            "to be a USC or LPR.",
            "El abusador no es ni fue USC o LPR. VAWA requiere que el abusador sea USC o LPR.",
            txt.REF_ABUSER_NEVER,
        ))
        outcome.alternative_options.append(txt.U_VISA_ALTERNATIVE)

    elif status == AbuserStatus.LOST_STATUS:
        if answers.lost_status_related_to_abuse is True and answers.lost_status_within_2_years is True:
            outcome.criteria.append(CriterionResult.build(
                txt.ABUSER_STATUS_LABEL, ELIGIBLE,
                "Abuser lost status related to abuse within 2 years. Exception applies.",
                "El abusador perdió estatus relacionado con abuso dentro de 2 años. "
                "Aplica excepción.",
                txt.REF_ABUSER_LOST_STATUS,
            ))
        else:
            outcome.criteria.append(CriterionResult.build(
                txt.ABUSER_STATUS_LABEL, NOT_ELIGIBLE,
                "Abuser lost status but conditions for exception not met (must be "
                "related to abuse AND within 2 years).",
                "El abusador perdió estatus pero no se cumplen las condiciones de la excepción.",
                txt.REF_ABUSER_LOST_STATUS,
            ))

    elif status == AbuserStatus.CITIZEN:
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSER_STATUS_LABEL, ELIGIBLE,
            "Abuser is a U.S. Citizen.",
            "El abusador es Ciudadano Americano.",
            txt.REF_ABUSER_STATUS,
        ))

    elif status == AbuserStatus.PERMANENT_RESIDENT:
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSER_STATUS_LABEL, ELIGIBLE,
            "Abuser is a Lawful Permanent Resident.",
            "El abusador es Residente Permanente Legal.",
            txt.REF_ABUSER_STATUS,
        ))

    return outcome


# ==========================================
# 2. BATTERY OR EXTREME CRUELTY
# ==========================================
def evaluate_abuse(answers: VawaAnswers) -> RuleOutcome:
    outcome = RuleOutcome()

    if answers.abuse_occurred is False:
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSE_LABEL, NOT_ELIGIBLE,
            "No abuse reported. VAWA requires evidence of battery or extreme cruelty.",
            "No se reportó abuso. VAWA requiere evidencia de maltrato o crueldad extrema.",
            txt.REF_ABUSE,
        ))
        return outcome

    if answers.abuse_occurred is not True:
        return outcome

    if answers.abuse_during_relationship is False:
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSE_LABEL, NEEDS_REVIEW,
            "Abuse reported but timing relative to qualifying relationship needs review.",
            "Se reportó abuso pero se necesita revisar si ocurrió durante la relación "
            "calificante.",
            txt.REF_ABUSE,
        ))
    else:
        outcome.criteria.append(CriterionResult.build(
            txt.ABUSE_LABEL, ELIGIBLE,
            "Abuse occurred during the qualifying relationship.",
            "El abuso ocurrió durante la relación calificante.",
            txt.REF_ABUSE,
        ))

    # Abuse types are supporting text, not a separate criterion
    if answers.abuse_types:
        outcome.legal_basis.append(txt.ABUSE_TYPES_PREFIX + ", ".join(answers.abuse_types))

    return outcome


# ==========================================
# 3. RESIDENCE WITH ABUSER
# ==========================================
def evaluate_residence(answers: VawaAnswers) -> RuleOutcome:
    outcome = RuleOutcome()

    if answers.resided_with_abuser is True:
        outcome.criteria.append(CriterionResult.build(
            txt.RESIDENCE_LABEL, ELIGIBLE,
            "Self-petitioner resided with the abuser.",
            "El auto-peticionario residió con el abusador.",
            txt.REF_RESIDENCE,
        ))
    elif answers.resided_with_abuser is False:
        if (
            answers.petitioner_type == PetitionerType.CHILD
            and answers.child_abused_during_visitation is True
        ):
            outcome.criteria.append(CriterionResult.build(
                txt.RESIDENCE_LABEL, ELIGIBLE,
                "Child was abused during visitation period with abusive parent.",
                "El menor fue abusado durante un período de visita con el padre abusivo.",
                txt.REF_VISITATION,
            ))
        else:
            outcome.criteria.append(CriterionResult.build(
                txt.RESIDENCE_LABEL, NOT_ELIGIBLE,
                "Self-petitioner never resided with the abuser.",
                "El auto-peticionario nunca residió con el abusador.",
                txt.REF_RESIDENCE,
            ))

    return outcome


# ==========================================
# 4. PHYSICAL PRESENCE
# ==========================================
def evaluate_presence(answers: VawaAnswers) -> RuleOutcome:
    outcome = RuleOutcome()

    if answers.currently_in_us is True:
        outcome.criteria.append(CriterionResult.build(
            txt.PRESENCE_LABEL, ELIGIBLE,
            "Self-petitioner is currently in the United States.",
            "El auto-peticionario se encuentra actualmente en Estados Unidos.",
            txt.REF_PRESENCE,
        ))
    elif answers.currently_in_us is False:
        exception = answers.outside_us_exception
        if exception is None or exception == OutsideUSException.NONE:
            outcome.criteria.append(CriterionResult.build(
                txt.PRESENCE_LABEL, NOT_ELIGIBLE,
                "Self-petitioner is outside the US and no exception applies.",
                "El auto-peticionario está fuera de EE.UU. y no aplica ninguna excepción.",
                txt.REF_PRESENCE,
            ))
        else:
            reason = txt.OUTSIDE_US_EXCEPTION_LABELS[exception]
            outcome.criteria.append(CriterionResult.build(
                txt.PRESENCE_LABEL, ELIGIBLE,
                f"Exception applies: {reason.en}.",
                f"Aplica excepción: {reason.es}.",
                txt.REF_PRESENCE,
            ))

    return outcome


# ==========================================
# 5. AGGREGATION
# ==========================================
# Fixed evaluation order; this is also the order criteria are reported in.
EVALUATORS = (
    evaluate_abuser_status,
    evaluate_relationship,
    evaluate_abuse,
    evaluate_residence,
    evaluate_good_moral_character,
    evaluate_presence,
)


def reduce_statuses(statuses: Iterable[EligibilityStatus]) -> EligibilityStatus:
    """not_eligible beats needs_review beats eligible."""
    seen = set(statuses)
    if NOT_ELIGIBLE in seen:
        return NOT_ELIGIBLE
    if NEEDS_REVIEW in seen:
        return NEEDS_REVIEW
    return ELIGIBLE


def classify(answers: VawaAnswers) -> Optional[str]:
    """Immigrant category the petitioner would fall into if approved."""
    if answers.petitioner_type in (PetitionerType.SPOUSE, PetitionerType.CHILD):
        if answers.abuser_status == AbuserStatus.CITIZEN:
            return txt.IMMEDIATE_RELATIVE
        return txt.FAMILY_PREFERENCE_F2A
    if answers.petitioner_type == PetitionerType.PARENT:
        return txt.IMMEDIATE_RELATIVE_PARENT
    return None


def _allows_concurrent_filing(answers: VawaAnswers) -> bool:
    return answers.abuser_status == AbuserStatus.CITIZEN or (
        answers.abuser_status == AbuserStatus.PERMANENT_RESIDENT
        and answers.petitioner_type == PetitionerType.SPOUSE
    )


def standard_recommendations(overall: EligibilityStatus, answers: VawaAnswers) -> List[str]:
    if overall == ELIGIBLE:
        recs = list(txt.ELIGIBLE_RECOMMENDATIONS)
        if _allows_concurrent_filing(answers):
            recs.append(txt.CONCURRENT_FILING_RECOMMENDATION)
        return recs
    if overall == NEEDS_REVIEW:
        return [txt.NEEDS_REVIEW_RECOMMENDATION]
    return []


def evaluate_eligibility(answers: VawaAnswers) -> EligibilityResult:
    """
    The Deterministic Screener.
    Runs every evaluator against the answer record and reduces their criteria
    into one verdict. Unknown answers omit criteria; nothing here raises for a
    well-formed record.
    """
    combined = RuleOutcome()
    for evaluator in EVALUATORS:
        outcome = evaluator(answers)
        combined.criteria.extend(outcome.criteria)
        combined.recommendations.extend(outcome.recommendations)
        combined.alternative_options.extend(outcome.alternative_options)
        combined.legal_basis.extend(outcome.legal_basis)

    overall = reduce_statuses(c.status for c in combined.criteria)

    recommendations = combined.recommendations + standard_recommendations(overall, answers)

    alternatives = combined.alternative_options
    if overall == NOT_ELIGIBLE and not alternatives:
        alternatives = list(txt.FALLBACK_ALTERNATIVES)

    legal_basis = combined.legal_basis + list(txt.STANDARD_LEGAL_BASIS)

    logger.debug(
        "Evaluated %s petition: overall=%s criteria=%d",
        answers.petitioner_type.value if answers.petitioner_type else "unset",
        overall.value,
        len(combined.criteria),
    )

    return EligibilityResult(
        overall=overall,
        classification=classify(answers),
        criteria=combined.criteria,
        recommendations=recommendations,
        alternative_options=alternatives,
        legal_basis=legal_basis,
    )
