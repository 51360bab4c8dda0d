# vawa_screener/relationship_rules.py
"""
Qualifying-relationship rules, one evaluator per petitioner type.

Each evaluator only reads the sub-record matching its petitioner type and
returns a fresh RuleOutcome. Checks inside an evaluator are independent:
a failed marital-status check does not stop the remarriage check.
"""
from vawa_screener import legal_text as txt
from vawa_screener.models import (
    CriterionResult,
    EligibilityStatus,
    MaritalStatus,
    PetitionerType,
    RuleOutcome,
    VawaAnswers,
)

ELIGIBLE = EligibilityStatus.ELIGIBLE
NOT_ELIGIBLE = EligibilityStatus.NOT_ELIGIBLE
NEEDS_REVIEW = EligibilityStatus.NEEDS_REVIEW


# ==========================================
# 1. SPOUSE
# ==========================================
def evaluate_spouse_relationship(answers: VawaAnswers) -> RuleOutcome:
    s = answers.spouse
    outcome = RuleOutcome()
    criteria = outcome.criteria

    # A. Marital status
    if s.marital_status == MaritalStatus.MARRIED:
        criteria.append(CriterionResult.build(
            txt.MARITAL_RELATIONSHIP_LABEL, ELIGIBLE,
            "Currently married to USC/LPR abuser.",
            "Actualmente casado/a con el abusador USC/LPR.",
            txt.REF_MARRIED,
        ))
    elif s.marital_status == MaritalStatus.DIVORCED:
        if s.divorce_within_2_years is True and s.divorce_related_to_abuse is True:
            criteria.append(CriterionResult.build(
                txt.MARITAL_RELATIONSHIP_LABEL, ELIGIBLE,
                "Divorced within 2 years and connected to abuse.",
                "Divorciado/a dentro de 2 años y relacionado con el abuso.",
                txt.REF_DIVORCED,
            ))
        else:
            criteria.append(CriterionResult.build(
                txt.MARITAL_RELATIONSHIP_LABEL, NOT_ELIGIBLE,
                "Divorce exceeds 2-year window or not connected to abuse.",
                "El divorcio excede la ventana de 2 años o no está conectado al abuso.",
                txt.REF_DIVORCED,
            ))
            outcome.alternative_options.append(txt.U_VISA_IF_ELIGIBLE)
    elif s.marital_status == MaritalStatus.WIDOWED:
        if s.death_within_2_years is True:
            criteria.append(CriterionResult.build(
                txt.MARITAL_RELATIONSHIP_LABEL, ELIGIBLE,
                "Spouse died within 2 years of filing.",
                "El cónyuge falleció dentro de 2 años de la solicitud.",
                txt.REF_WIDOWED,
            ))
        else:
            criteria.append(CriterionResult.build(
                txt.MARITAL_RELATIONSHIP_LABEL, NOT_ELIGIBLE,
                "Spouse death exceeds 2-year filing window.",
                "La muerte del cónyuge excede la ventana de 2 años.",
                txt.REF_WIDOWED,
            ))

    # B. Remarriage before approval voids the petition
    if s.has_remarried is True:
        criteria.append(CriterionResult.build(
            txt.NO_REMARRIAGE_LABEL, NOT_ELIGIBLE,
            "Self-petitioner has remarried. I-360 must be denied if remarriage "
            "occurs before approval.",
            "El auto-peticionario se ha vuelto a casar. El I-360 debe ser denegado "
            "si hay nuevo matrimonio antes de la aprobación.",
            txt.REF_REMARRIAGE,
        ))

    # C. Legal validity (only scored when the marriage is invalid)
    if s.marriage_legally_valid is False:
        if s.intended_spouse is False:
            criteria.append(CriterionResult.build(
                txt.VALID_MARRIAGE_LABEL, NOT_ELIGIBLE,
                "Marriage is not legally valid and intended spouse exception does not apply.",
                "El matrimonio no es legalmente válido y la excepción de 'intended spouse' no aplica.",
                txt.REF_INVALID_MARRIAGE,
            ))
        elif s.intended_spouse is True:
            criteria.append(CriterionResult.build(
                txt.VALID_MARRIAGE_LABEL, ELIGIBLE,
                "Marriage invalid due to abuser's bigamy. Intended spouse exception applies.",
                "Matrimonio inválido por bigamia del abusador. Aplica excepción de 'intended spouse'.",
                txt.REF_INTENDED_SPOUSE,
            ))

    # D. Good faith
    if s.marriage_bona_fide is False:
        criteria.append(CriterionResult.build(
            txt.BONA_FIDE_MARRIAGE_LABEL, NOT_ELIGIBLE,
            "Marriage entered into for the purpose of evading immigration laws.",
            "Matrimonio contraído con el propósito de evadir las leyes de inmigración.",
            txt.REF_BONA_FIDE,
        ))
    elif s.marriage_bona_fide is True:
        criteria.append(CriterionResult.build(
            txt.BONA_FIDE_MARRIAGE_LABEL, ELIGIBLE,
            "Marriage was entered into in good faith.",
            "El matrimonio fue contraído de buena fe.",
            txt.REF_BONA_FIDE,
        ))

    return outcome


# ==========================================
# 2. CHILD
# ==========================================
def evaluate_child_relationship(answers: VawaAnswers) -> RuleOutcome:
    c = answers.child
    outcome = RuleOutcome()
    criteria = outcome.criteria

    # A. Age gate. Whether abuse was the central reason for a late filing is
    # an attorney determination, so the 21-25 path can only reach needs_review.
    if c.can_file_before_21 is True:
        criteria.append(CriterionResult.build(
            txt.CHILD_AGE_LABEL, ELIGIBLE,
            "Child can file before turning 21.",
            "El menor puede solicitar antes de cumplir 21 años.",
            txt.REF_CHILD_AGE,
        ))
    elif c.can_file_before_25_with_abuse is True:
        criteria.append(CriterionResult.build(
            txt.CHILD_AGE_LABEL, NEEDS_REVIEW,
            "Child is between 21-25 and claims abuse caused filing delay. "
            "Must demonstrate abuse was central reason.",
            "El menor tiene entre 21-25 años y alega que el abuso causó el retraso. "
            "Debe demostrar que el abuso fue la razón central.",
            txt.REF_CHILD_AGE,
        ))
    elif c.can_file_before_21 is False and c.can_file_before_25_with_abuse is False:
        criteria.append(CriterionResult.build(
            txt.CHILD_AGE_LABEL, NOT_ELIGIBLE,
            "Child is over 25 or cannot demonstrate abuse-related delay.",
            "El menor tiene más de 25 años o no puede demostrar retraso relacionado con abuso.",
            txt.REF_CHILD_AGE,
        ))
        outcome.alternative_options.append(txt.U_VISA_SHORT_ALTERNATIVE)

    # B. Marital status
    if c.is_unmarried is False:
        criteria.append(CriterionResult.build(
            txt.CHILD_UNMARRIED_LABEL, NOT_ELIGIBLE,
            "Child is currently married. Must be unmarried to self-petition as a child.",
            "El menor está actualmente casado/a. Debe estar soltero/a para "
            "auto-peticionar como hijo/a.",
            txt.REF_CHILD_DEFINITION,
        ))
    elif c.is_unmarried is True:
        criteria.append(CriterionResult.build(
            txt.CHILD_UNMARRIED_LABEL, ELIGIBLE,
            "Child is unmarried.",
            "El menor está soltero/a.",
            txt.REF_CHILD_DEFINITION,
        ))

    # C. Parent-child relationship
    if c.relationship_exists is False:
        criteria.append(CriterionResult.build(
            txt.PARENT_CHILD_RELATIONSHIP_LABEL, NOT_ELIGIBLE,
            "Parent-child relationship no longer exists or cannot be established.",
            "La relación padre-hijo ya no existe o no puede establecerse.",
            txt.REF_CHILD_DEFINITION,
        ))
    elif c.relationship is not None and c.relationship_exists is True:
        kind = txt.CHILD_RELATIONSHIP_LABELS[c.relationship]
        criteria.append(CriterionResult.build(
            txt.PARENT_CHILD_RELATIONSHIP_LABEL, ELIGIBLE,
            f"Qualifying relationship established as {kind.en}.",
            f"Relación calificante establecida como {kind.es}.",
            txt.REF_CHILD_RELATIONSHIP,
        ))

    return outcome


# ==========================================
# 3. PARENT
# ==========================================
def evaluate_parent_relationship(answers: VawaAnswers) -> RuleOutcome:
    p = answers.parent
    outcome = RuleOutcome()
    criteria = outcome.criteria

    # A. LPR sons and daughters never support a parent self-petition
    if p.abuser_is_usc is False:
        criteria.append(CriterionResult.build(
            txt.PARENT_ABUSER_USC_LABEL, NOT_ELIGIBLE,
            "Parents can only self-petition based on abuse by a U.S. citizen son or "
            "daughter. LPR children do not qualify.",
            "Los padres solo pueden auto-peticionar basados en abuso por un hijo/a "
            "ciudadano americano. Hijos LPR no califican.",
            txt.REF_PARENT,
        ))
        outcome.alternative_options.append(txt.U_VISA_SHORT_ALTERNATIVE)
    elif p.abuser_is_usc is True:
        criteria.append(CriterionResult.build(
            txt.PARENT_ABUSER_USC_LABEL, ELIGIBLE,
            "Abusive son/daughter is a U.S. citizen.",
            "El hijo/a abusivo es ciudadano americano.",
            txt.REF_PARENT,
        ))

    # B. Age of the abusive son/daughter
    if p.abuser_over_21 is False:
        criteria.append(CriterionResult.build(
            txt.PARENT_ABUSER_AGE_LABEL, NOT_ELIGIBLE,
            "Abusive USC son/daughter must be at least 21 years old at time of filing.",
            "El hijo/a abusivo USC debe tener al menos 21 años al momento de la solicitud.",
            txt.REF_PARENT,
        ))
    elif p.abuser_over_21 is True:
        criteria.append(CriterionResult.build(
            txt.PARENT_ABUSER_AGE_LABEL, ELIGIBLE,
            "Abusive USC son/daughter is 21 years or older.",
            "El hijo/a abusivo USC tiene 21 años o más.",
            txt.REF_PARENT,
        ))

    return outcome


# ==========================================
# 4. DISPATCH
# ==========================================
RELATIONSHIP_EVALUATORS = {
    PetitionerType.SPOUSE: evaluate_spouse_relationship,
    PetitionerType.CHILD: evaluate_child_relationship,
    PetitionerType.PARENT: evaluate_parent_relationship,
}


def evaluate_relationship(answers: VawaAnswers) -> RuleOutcome:
    if answers.petitioner_type is None:
        return RuleOutcome()
    return RELATIONSHIP_EVALUATORS[answers.petitioner_type](answers)
