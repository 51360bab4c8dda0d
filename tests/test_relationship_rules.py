"""
Tests for the qualifying-relationship evaluators (spouse, child, parent).
"""

import pytest

from vawa_screener import legal_text as txt
from vawa_screener.models import (
    ChildDetails,
    ChildRelationship,
    EligibilityStatus,
    MaritalStatus,
    ParentDetails,
    PetitionerType,
    SpouseDetails,
    VawaAnswers,
)
from vawa_screener.relationship_rules import (
    RELATIONSHIP_EVALUATORS,
    evaluate_child_relationship,
    evaluate_parent_relationship,
    evaluate_relationship,
    evaluate_spouse_relationship,
)

ELIGIBLE = EligibilityStatus.ELIGIBLE
NOT_ELIGIBLE = EligibilityStatus.NOT_ELIGIBLE
NEEDS_REVIEW = EligibilityStatus.NEEDS_REVIEW


def spouse(**fields):
    return VawaAnswers(petitioner_type=PetitionerType.SPOUSE, spouse=SpouseDetails(**fields))


def child(**fields):
    return VawaAnswers(petitioner_type=PetitionerType.CHILD, child=ChildDetails(**fields))


def parent(**fields):
    return VawaAnswers(petitioner_type=PetitionerType.PARENT, parent=ParentDetails(**fields))


def by_label(outcome, label):
    return [c.status for c in outcome.criteria if c.label == label]


class TestDispatch:
    """Tests for petitioner-type dispatch."""

    def test_every_petitioner_type_has_an_evaluator(self):
        assert set(RELATIONSHIP_EVALUATORS) == set(PetitionerType)

    def test_unset_petitioner_emits_nothing(self):
        answers = VawaAnswers(
            spouse=SpouseDetails(marital_status=MaritalStatus.MARRIED),
            parent=ParentDetails(abuser_is_usc=False),
        )
        assert evaluate_relationship(answers).criteria == []

    def test_only_matching_sub_record_is_read(self):
        answers = VawaAnswers(
            petitioner_type=PetitionerType.PARENT,
            spouse=SpouseDetails(has_remarried=True),
            child=ChildDetails(is_unmarried=False),
            parent=ParentDetails(abuser_is_usc=True),
        )
        outcome = evaluate_relationship(answers)
        assert [c.label for c in outcome.criteria] == [txt.PARENT_ABUSER_USC_LABEL]


class TestSpouse:
    """Tests for the spouse path."""

    def test_married(self):
        outcome = evaluate_spouse_relationship(spouse(marital_status=MaritalStatus.MARRIED))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [ELIGIBLE]

    def test_divorced_within_window_and_abuse_related(self):
        outcome = evaluate_spouse_relationship(spouse(
            marital_status=MaritalStatus.DIVORCED,
            divorce_within_2_years=True,
            divorce_related_to_abuse=True,
        ))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [ELIGIBLE]
        assert outcome.alternative_options == []

    @pytest.mark.parametrize("within,related", [(False, True), (True, False), (None, True)])
    def test_divorced_outside_exception(self, within, related):
        outcome = evaluate_spouse_relationship(spouse(
            marital_status=MaritalStatus.DIVORCED,
            divorce_within_2_years=within,
            divorce_related_to_abuse=related,
        ))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [NOT_ELIGIBLE]
        assert outcome.alternative_options == [txt.U_VISA_IF_ELIGIBLE]

    def test_widowed_within_window(self):
        outcome = evaluate_spouse_relationship(spouse(
            marital_status=MaritalStatus.WIDOWED, death_within_2_years=True,
        ))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [ELIGIBLE]

    def test_widowed_outside_window(self):
        outcome = evaluate_spouse_relationship(spouse(
            marital_status=MaritalStatus.WIDOWED, death_within_2_years=False,
        ))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [NOT_ELIGIBLE]
        assert outcome.alternative_options == []

    def test_remarriage_is_independent_of_marital_status(self):
        outcome = evaluate_spouse_relationship(spouse(
            marital_status=MaritalStatus.MARRIED, has_remarried=True,
        ))
        assert by_label(outcome, txt.MARITAL_RELATIONSHIP_LABEL) == [ELIGIBLE]
        assert by_label(outcome, txt.NO_REMARRIAGE_LABEL) == [NOT_ELIGIBLE]

    def test_no_remarriage_emits_nothing(self):
        outcome = evaluate_spouse_relationship(spouse(has_remarried=False))
        assert by_label(outcome, txt.NO_REMARRIAGE_LABEL) == []

    def test_invalid_marriage_without_intended_spouse(self):
        outcome = evaluate_spouse_relationship(spouse(
            marriage_legally_valid=False, intended_spouse=False,
        ))
        assert by_label(outcome, txt.VALID_MARRIAGE_LABEL) == [NOT_ELIGIBLE]

    def test_intended_spouse_exception(self):
        outcome = evaluate_spouse_relationship(spouse(
            marriage_legally_valid=False, intended_spouse=True,
        ))
        assert by_label(outcome, txt.VALID_MARRIAGE_LABEL) == [ELIGIBLE]
        assert outcome.criteria[0].legal_ref == txt.REF_INTENDED_SPOUSE

    @pytest.mark.parametrize("valid,intended", [(True, False), (None, False), (False, None)])
    def test_validity_skipped(self, valid, intended):
        outcome = evaluate_spouse_relationship(spouse(
            marriage_legally_valid=valid, intended_spouse=intended,
        ))
        assert by_label(outcome, txt.VALID_MARRIAGE_LABEL) == []

    @pytest.mark.parametrize("bona_fide,expected", [
        (True, [ELIGIBLE]),
        (False, [NOT_ELIGIBLE]),
        (None, []),
    ])
    def test_bona_fide(self, bona_fide, expected):
        outcome = evaluate_spouse_relationship(spouse(marriage_bona_fide=bona_fide))
        assert by_label(outcome, txt.BONA_FIDE_MARRIAGE_LABEL) == expected


class TestChild:
    """Tests for the child path."""

    def test_can_file_before_21(self):
        outcome = evaluate_child_relationship(child(can_file_before_21=True))
        assert by_label(outcome, txt.CHILD_AGE_LABEL) == [ELIGIBLE]

    def test_abuse_delay_needs_review(self):
        outcome = evaluate_child_relationship(child(
            current_age=23, can_file_before_21=False, can_file_before_25_with_abuse=True,
        ))
        assert by_label(outcome, txt.CHILD_AGE_LABEL) == [NEEDS_REVIEW]

    def test_too_old(self):
        outcome = evaluate_child_relationship(child(
            can_file_before_21=False, can_file_before_25_with_abuse=False,
        ))
        assert by_label(outcome, txt.CHILD_AGE_LABEL) == [NOT_ELIGIBLE]
        assert outcome.alternative_options == [txt.U_VISA_SHORT_ALTERNATIVE]

    def test_age_unknown_emits_nothing(self):
        outcome = evaluate_child_relationship(child(can_file_before_21=False))
        assert by_label(outcome, txt.CHILD_AGE_LABEL) == []

    @pytest.mark.parametrize("unmarried,expected", [
        (True, [ELIGIBLE]),
        (False, [NOT_ELIGIBLE]),
        (None, []),
    ])
    def test_unmarried(self, unmarried, expected):
        outcome = evaluate_child_relationship(child(is_unmarried=unmarried))
        assert by_label(outcome, txt.CHILD_UNMARRIED_LABEL) == expected

    def test_relationship_established(self):
        outcome = evaluate_child_relationship(child(
            relationship=ChildRelationship.STEPCHILD, relationship_exists=True,
        ))
        assert by_label(outcome, txt.PARENT_CHILD_RELATIONSHIP_LABEL) == [ELIGIBLE]
        assert "stepchild" in outcome.criteria[0].detail.en

    def test_relationship_no_longer_exists(self):
        outcome = evaluate_child_relationship(child(
            relationship=ChildRelationship.ADOPTED, relationship_exists=False,
        ))
        assert by_label(outcome, txt.PARENT_CHILD_RELATIONSHIP_LABEL) == [NOT_ELIGIBLE]

    def test_relationship_exists_without_subtype_emits_nothing(self):
        outcome = evaluate_child_relationship(child(relationship_exists=True))
        assert by_label(outcome, txt.PARENT_CHILD_RELATIONSHIP_LABEL) == []

    def test_every_subtype_has_a_label(self):
        assert set(txt.CHILD_RELATIONSHIP_LABELS) == set(ChildRelationship)


class TestParent:
    """Tests for the parent path."""

    def test_citizen_adult_child(self):
        outcome = evaluate_parent_relationship(parent(abuser_is_usc=True, abuser_over_21=True))
        assert [c.status for c in outcome.criteria] == [ELIGIBLE, ELIGIBLE]

    def test_resident_child_never_qualifies(self):
        outcome = evaluate_parent_relationship(parent(abuser_is_usc=False, abuser_over_21=True))
        assert by_label(outcome, txt.PARENT_ABUSER_USC_LABEL) == [NOT_ELIGIBLE]
        assert outcome.alternative_options == [txt.U_VISA_SHORT_ALTERNATIVE]

    def test_minor_abuser(self):
        outcome = evaluate_parent_relationship(parent(abuser_is_usc=True, abuser_over_21=False))
        assert by_label(outcome, txt.PARENT_ABUSER_AGE_LABEL) == [NOT_ELIGIBLE]

    def test_parent_for_immigration_is_not_scored(self):
        outcome = evaluate_parent_relationship(parent(is_parent_for_immigration=False))
        assert outcome.criteria == []
