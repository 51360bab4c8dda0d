# vawa_screener/intake_gaps.py
from typing import List

from vawa_screener.models import PetitionerType, VawaAnswers


def evaluate_intake_gaps(answers: VawaAnswers) -> List[str]:
    """
    The Intake Gap Engine.
    Lists the answers the intake wizard must still collect before the
    eligibility engine can be run, in wizard order. The engine itself never
    gates on completeness; this is the caller-side check.
    """
    gaps = []

    # 1. CLIENT
    if not answers.client.name.strip():
        gaps.append("CONFIRM_CLIENT_NAME")

    # 2. PETITIONER TYPE
    # Fatal gap. Every later step depends on which sub-record applies.
    if answers.petitioner_type is None:
        gaps.append("SELECT_PETITIONER_TYPE")
        return gaps

    # 3. ABUSER STATUS
    if answers.abuser_status is None:
        gaps.append("CONFIRM_ABUSER_STATUS")

    # 4. RELATIONSHIP DETAILS (only the first question of each path is mandatory)
    if answers.petitioner_type == PetitionerType.SPOUSE:
        if answers.spouse.marital_status is None:
            gaps.append("CONFIRM_MARITAL_STATUS")
    elif answers.petitioner_type == PetitionerType.CHILD:
        if answers.child.can_file_before_21 is None:
            gaps.append("CONFIRM_CHILD_AGE_ELIGIBILITY")
    elif answers.petitioner_type == PetitionerType.PARENT:
        if answers.parent.abuser_is_usc is None:
            gaps.append("CONFIRM_ABUSER_IS_USC")

    # 5. ABUSE, RESIDENCE, GMC, LOCATION
    if answers.abuse_occurred is None:
        gaps.append("CONFIRM_ABUSE_OCCURRED")
    if answers.resided_with_abuser is None:
        gaps.append("CONFIRM_RESIDENCE")
    if answers.gmc.aggravated_felony is None:
        gaps.append("CONFIRM_PERMANENT_BARS")
    if answers.currently_in_us is None:
        gaps.append("CONFIRM_CURRENT_LOCATION")

    return gaps


def is_ready_for_evaluation(answers: VawaAnswers) -> bool:
    return not evaluate_intake_gaps(answers)
