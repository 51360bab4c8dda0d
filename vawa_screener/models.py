# vawa_screener/models.py
from enum import Enum
from datetime import date
from typing import Optional, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ==========================================
# 1. CLOSED VARIANTS
# ==========================================
class PetitionerType(str, Enum):
    SPOUSE = "spouse"
    CHILD = "child"
    PARENT = "parent"


class AbuserStatus(str, Enum):
    CITIZEN = "usc"
    PERMANENT_RESIDENT = "lpr"
    LOST_STATUS = "lost_status"
    NEVER_QUALIFIED = "never"


class MaritalStatus(str, Enum):
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"


class ChildRelationship(str, Enum):
    BIO_WEDLOCK = "bio_wedlock"
    BIO_OUT_MOTHER = "bio_out_mother"
    BIO_OUT_FATHER_LEGITIMATED = "bio_out_father_legit"
    BIO_OUT_FATHER_BONA_FIDE = "bio_out_father_bonafide"
    STEPCHILD = "stepchild"
    ADOPTED = "adopted"


class OutsideUSException(str, Enum):
    GOVERNMENT_EMPLOYMENT = "gov"
    MILITARY = "military"
    ABUSE_IN_US = "abuse_in_us"
    NONE = "none"


class EligibilityStatus(str, Enum):
    ELIGIBLE = "eligible"
    NOT_ELIGIBLE = "not_eligible"
    NEEDS_REVIEW = "needs_review"


# ==========================================
# 2. INTAKE SUB-RECORDS (The "Answers")
# ==========================================
# Every yes/no answer is Optional[bool]: None means "not asked / unknown",
# which is never the same thing as False.
class _Answers(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ChildInfo(_Answers):
    name: str = ""
    age: Optional[int] = Field(default=None, ge=0)


class ClientInfo(_Answers):
    name: str = ""
    date_of_birth: Optional[date] = None
    country_of_birth: str = ""
    has_children: Optional[bool] = None
    children: Tuple[ChildInfo, ...] = ()


class SpouseDetails(_Answers):
    marital_status: Optional[MaritalStatus] = None
    divorce_within_2_years: Optional[bool] = None
    divorce_related_to_abuse: Optional[bool] = None
    death_within_2_years: Optional[bool] = None
    has_remarried: Optional[bool] = None
    prior_marriages_terminated: Optional[bool] = None
    abuser_prior_marriages_terminated: Optional[bool] = None
    marriage_legally_valid: Optional[bool] = None
    intended_spouse: Optional[bool] = None
    marriage_bona_fide: Optional[bool] = None


class ChildDetails(_Answers):
    current_age: Optional[int] = Field(default=None, ge=0)
    can_file_before_21: Optional[bool] = None
    can_file_before_25_with_abuse: Optional[bool] = None
    is_unmarried: Optional[bool] = None
    relationship: Optional[ChildRelationship] = None
    relationship_exists: Optional[bool] = None


class ParentDetails(_Answers):
    abuser_is_usc: Optional[bool] = None
    abuser_over_21: Optional[bool] = None
    # Informational only, never scored.
    is_parent_for_immigration: Optional[bool] = None


class MoralCharacterAnswers(_Answers):
    # Permanent bars
    aggravated_felony: Optional[bool] = None
    persecution_genocide: Optional[bool] = None
    # Conditional bars
    moral_turpitude: Optional[bool] = None
    controlled_substance: Optional[bool] = None
    incarceration_180_days: Optional[bool] = None
    false_testimony: Optional[bool] = None
    conditional_bar_connected_to_abuse: Optional[bool] = None

    @property
    def has_conditional_bar(self) -> bool:
        return any(
            flag is True
            for flag in (
                self.moral_turpitude,
                self.controlled_substance,
                self.incarceration_180_days,
                self.false_testimony,
            )
        )


# ==========================================
# 3. THE CANONICAL ANSWER RECORD
# ==========================================
class VawaAnswers(_Answers):
    client: ClientInfo = Field(default_factory=ClientInfo)

    petitioner_type: Optional[PetitionerType] = None

    abuser_status: Optional[AbuserStatus] = None
    lost_status_related_to_abuse: Optional[bool] = None
    lost_status_within_2_years: Optional[bool] = None

    # Only the sub-record matching petitioner_type is evaluated
    spouse: SpouseDetails = Field(default_factory=SpouseDetails)
    child: ChildDetails = Field(default_factory=ChildDetails)
    parent: ParentDetails = Field(default_factory=ParentDetails)

    abuse_occurred: Optional[bool] = None
    abuse_types: Tuple[str, ...] = ()
    abuse_during_relationship: Optional[bool] = None

    resided_with_abuser: Optional[bool] = None
    child_abused_during_visitation: Optional[bool] = None

    gmc: MoralCharacterAnswers = Field(default_factory=MoralCharacterAnswers)

    currently_in_us: Optional[bool] = None
    outside_us_exception: Optional[OutsideUSException] = None

    @field_validator("abuse_types")
    @classmethod
    def _dedupe_abuse_types(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = []
        for tag in value:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return tuple(seen)


# ==========================================
# 4. ENGINE OUTPUT
# ==========================================
class LocalizedText(BaseModel):
    model_config = ConfigDict(frozen=True)

    en: str
    es: str

    def get(self, lang: str = "en") -> str:
        return self.es if lang == "es" else self.en


class CriterionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: LocalizedText
    status: EligibilityStatus
    detail: LocalizedText
    legal_ref: str

    @classmethod
    def build(
        cls,
        label: LocalizedText,
        status: EligibilityStatus,
        detail_en: str,
        detail_es: str,
        legal_ref: str,
    ) -> "CriterionResult":
        return cls(
            label=label,
            status=status,
            detail=LocalizedText(en=detail_en, es=detail_es),
            legal_ref=legal_ref,
        )


class RuleOutcome(BaseModel):
    """What a single evaluator contributes to the final result."""
    criteria: List[CriterionResult] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    alternative_options: List[str] = Field(default_factory=list)
    legal_basis: List[str] = Field(default_factory=list)


class EligibilityResult(BaseModel):
    overall: EligibilityStatus
    classification: Optional[str] = None
    criteria: List[CriterionResult] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    alternative_options: List[str] = Field(default_factory=list)
    legal_basis: List[str] = Field(default_factory=list)
