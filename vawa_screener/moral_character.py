# vawa_screener/moral_character.py
from vawa_screener import legal_text as txt
from vawa_screener.models import (
    CriterionResult,
    EligibilityStatus,
    RuleOutcome,
    VawaAnswers,
)


def evaluate_good_moral_character(answers: VawaAnswers) -> RuleOutcome:
    """
    Layered bar check. Permanent bars short-circuit: once one fires, the
    conditional bars are moot and no further GMC criterion is emitted.
    """
    gmc = answers.gmc
    outcome = RuleOutcome()

    # ==========================================
    # 1. PERMANENT BARS
    # ==========================================
    if gmc.aggravated_felony is True:
        outcome.criteria.append(CriterionResult.build(
            txt.GMC_LABEL, EligibilityStatus.NOT_ELIGIBLE,
            "Aggravated felony conviction creates a permanent bar to good moral character.",
            "Condena por delito agravado crea una barrera permanente al buen carácter moral.",
            txt.REF_GMC_AGGRAVATED_FELONY,
        ))
        return outcome

    if gmc.persecution_genocide is True:
        outcome.criteria.append(CriterionResult.build(
            txt.GMC_LABEL, EligibilityStatus.NOT_ELIGIBLE,
            "Involvement in persecution, genocide, or torture creates a permanent bar.",
            "Participación en persecución, genocidio o tortura crea una barrera permanente.",
            txt.REF_GMC_PERSECUTION,
        ))
        return outcome

    # ==========================================
    # 2. CONDITIONAL BARS
    # ==========================================
    if gmc.has_conditional_bar:
        if gmc.conditional_bar_connected_to_abuse is True:
            outcome.criteria.append(CriterionResult.build(
                txt.GMC_LABEL, EligibilityStatus.NEEDS_REVIEW,
                "Conditional bar identified but may be connected to abuse. USCIS must "
                "consider waiver availability and connection to abuse before making "
                "determination.",
                "Se identificó barrera condicional pero puede estar conectada al abuso. "
                "USCIS debe considerar disponibilidad de waiver y conexión con el abuso.",
                txt.REF_GMC_CONDITIONAL,
            ))
            outcome.recommendations.append(txt.DOCUMENT_ABUSE_CONNECTION_RECOMMENDATION)
        else:
            outcome.criteria.append(CriterionResult.build(
                txt.GMC_LABEL, EligibilityStatus.NEEDS_REVIEW,
                "Conditional bar identified. Attorney review required to assess whether "
                "waiver or exception applies.",
                "Se identificó barrera condicional. Se requiere revisión de abogado para "
                "evaluar si aplica waiver o excepción.",
                txt.REF_GMC_CONDITIONAL,
            ))
        return outcome

    # ==========================================
    # 3. CLEAR (both permanent bars explicitly answered "no")
    # ==========================================
    if gmc.aggravated_felony is False and gmc.persecution_genocide is False:
        outcome.criteria.append(CriterionResult.build(
            txt.GMC_LABEL, EligibilityStatus.ELIGIBLE,
            "No permanent or conditional bars to good moral character identified.",
            "No se identificaron barreras permanentes o condicionales al buen carácter moral.",
            txt.REF_GMC_CLEAR,
        ))

    return outcome
