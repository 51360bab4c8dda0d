# vawa_screener/legal_text.py
# VAWA I-360 Screening Text Catalog
# Basis: AILA Cookbook Ch. 21 (Eligibility Screening Assessment Tool)
# Authority: INA §204(a)(1)(A)(iii)-(vii), §204(a)(1)(B)(ii)-(iii), 8 CFR §204.2(c)
# Languages: English ("en") / Spanish ("es")

from vawa_screener.models import (
    ChildRelationship,
    EligibilityStatus,
    LocalizedText,
    OutsideUSException,
    PetitionerType,
)


# ============================================================
# 1. CRITERION LABELS
# ============================================================

ABUSER_STATUS_LABEL = LocalizedText(
    en="Abuser is USC or LPR",
    es="El abusador es USC o LPR",
)
MARITAL_RELATIONSHIP_LABEL = LocalizedText(
    en="Qualifying Marital Relationship",
    es="Relación Matrimonial Calificante",
)
NO_REMARRIAGE_LABEL = LocalizedText(
    en="No Remarriage Before Approval",
    es="Sin Nuevo Matrimonio Antes de Aprobación",
)
VALID_MARRIAGE_LABEL = LocalizedText(
    en="Legally Valid Marriage",
    es="Matrimonio Legalmente Válido",
)
BONA_FIDE_MARRIAGE_LABEL = LocalizedText(
    en="Bona Fide Marriage",
    es="Matrimonio de Buena Fe",
)
CHILD_AGE_LABEL = LocalizedText(
    en="Child Age Requirement",
    es="Requisito de Edad del Menor",
)
CHILD_UNMARRIED_LABEL = LocalizedText(
    en="Child Must Be Unmarried",
    es="El Menor Debe Estar Soltero/a",
)
PARENT_CHILD_RELATIONSHIP_LABEL = LocalizedText(
    en="Qualifying Parent-Child Relationship",
    es="Relación Padre-Hijo Calificante",
)
PARENT_ABUSER_USC_LABEL = LocalizedText(
    en="Abuser Must Be USC (Parent Petition)",
    es="El Abusador Debe Ser USC (Petición de Padre)",
)
PARENT_ABUSER_AGE_LABEL = LocalizedText(
    en="Abuser Must Be 21+",
    es="El Abusador Debe Tener 21+ Años",
)
ABUSE_LABEL = LocalizedText(
    en="Battery or Extreme Cruelty",
    es="Maltrato o Crueldad Extrema",
)
RESIDENCE_LABEL = LocalizedText(
    en="Residence with Abuser",
    es="Residencia con el Abusador",
)
GMC_LABEL = LocalizedText(
    en="Good Moral Character",
    es="Buen Carácter Moral",
)
PRESENCE_LABEL = LocalizedText(
    en="Physical Presence / Filing from Abroad",
    es="Presencia Física / Solicitud desde el Exterior",
)


# ============================================================
# 2. CITATIONS
# ============================================================

REF_ABUSER_STATUS = "INA §204(a)(1)"
REF_ABUSER_NEVER = "INA §204(a)(1); 8 CFR §103.2(b)(1)"
REF_ABUSER_LOST_STATUS = "INA §204(a)(1)(A)(vi); INA §204(a)(1)(B)(v)"

REF_MARRIED = "INA §204(a)(1)(A)(iii)(I)"
REF_DIVORCED = "INA §204(a)(1)(A)(iii)(II)(aa)(CC)(ccc)"
REF_WIDOWED = "INA §204(a)(1)(A)(iii)(II)(aa)(CC)"
REF_REMARRIAGE = "8 CFR §204.2(c)(1)(ii)"
REF_INVALID_MARRIAGE = "8 CFR §204.2(c)(2)(ii)"
REF_INTENDED_SPOUSE = "INA §204(a)(1)(A)(iii)(II)(aa)(BB)"
REF_BONA_FIDE = "8 CFR §204.2(c)(1)(ix)"

REF_CHILD_AGE = "INA §204(a)(1)(D)(v)"
REF_CHILD_DEFINITION = "INA §101(b)(1)"
REF_CHILD_RELATIONSHIP = "INA §101(b)(1); USCIS Policy Manual Vol. 3, Pt. D, Ch. 2.B.3"

REF_PARENT = "INA §204(a)(1)(A)(vii)"

REF_ABUSE = "8 CFR §204.2(c)(1)(vi)"

REF_RESIDENCE = "8 CFR §204.2(c)(1)(i)(B)"
REF_VISITATION = "8 CFR §204.2(e)(1)(i)(D)"

REF_GMC_AGGRAVATED_FELONY = "INA §101(f)(8); INA §101(a)(43)"
REF_GMC_PERSECUTION = "INA §101(f)(9); INA §212(a)(3)(E)"
REF_GMC_CONDITIONAL = "INA §101(f); 8 CFR §204.2(c)(1)(vii)"
REF_GMC_CLEAR = "INA §101(f); 8 CFR §204.2(c)(2)(v)"

REF_PRESENCE = "INA §204(a)(1)(A)(v)"


# ============================================================
# 3. RECOMMENDATIONS
# ============================================================

ELIGIBLE_RECOMMENDATIONS = (
    "Proceed with filing Form I-360 VAWA Self-Petition.",
    "Gather documentation per the VAWA Document Checklist.",
    "Prepare client declaration detailing the abuse.",
)
CONCURRENT_FILING_RECOMMENDATION = "Consider concurrent filing of I-485 if eligible."
NEEDS_REVIEW_RECOMMENDATION = (
    "Schedule detailed consultation with immigration attorney to review flagged issues."
)
DOCUMENT_ABUSE_CONNECTION_RECOMMENDATION = (
    "Prepare detailed documentation showing connection between criminal conduct "
    "and abuse suffered."
)


# ============================================================
# 4. ALTERNATIVE RELIEF
# ============================================================

U_VISA_ALTERNATIVE = "Consider U nonimmigrant status (U-Visa) as an alternative."
U_VISA_IF_ELIGIBLE = "Consider U-Visa if eligible."
U_VISA_SHORT_ALTERNATIVE = "Consider U-Visa as an alternative."

FALLBACK_ALTERNATIVES = (
    "Consider U nonimmigrant status (U-Visa).",
    "Consider T nonimmigrant status if trafficking is involved.",
    "Explore VAWA cancellation of removal if in proceedings.",
)


# ============================================================
# 5. LEGAL BASIS
# ============================================================

STANDARD_LEGAL_BASIS = (
    "INA §204(a)(1)(A)(iii)-(iv) – VAWA Self-Petition Provisions",
    "8 CFR §204.2(c) – Filing Requirements for VAWA",
    "USCIS Policy Manual, Vol. 3, Part D – Humanitarian Benefits",
)
ABUSE_TYPES_PREFIX = "Types of abuse identified: "


# ============================================================
# 6. CLASSIFICATION
# ============================================================

IMMEDIATE_RELATIVE = "Immediate Relative (IR)"
FAMILY_PREFERENCE_F2A = "Family-Based Preference F-2A"
IMMEDIATE_RELATIVE_PARENT = "Immediate Relative (IR) – Parent of USC"


# ============================================================
# 7. DISPLAY LABELS FOR CLOSED VARIANTS
# ============================================================

PETITIONER_TYPE_LABELS = {
    PetitionerType.SPOUSE: LocalizedText(en="Spouse", es="Cónyuge"),
    PetitionerType.CHILD: LocalizedText(en="Child", es="Hijo/a"),
    PetitionerType.PARENT: LocalizedText(en="Parent", es="Padre/Madre"),
}

CHILD_RELATIONSHIP_LABELS = {
    ChildRelationship.BIO_WEDLOCK: LocalizedText(
        en="biological child born in wedlock",
        es="hijo biológico nacido en matrimonio",
    ),
    ChildRelationship.BIO_OUT_MOTHER: LocalizedText(
        en="biological child born out of wedlock (mother)",
        es="hijo biológico fuera de matrimonio (madre)",
    ),
    ChildRelationship.BIO_OUT_FATHER_LEGITIMATED: LocalizedText(
        en="biological child born out of wedlock (father, legitimated)",
        es="hijo biológico fuera de matrimonio (padre, legitimado)",
    ),
    ChildRelationship.BIO_OUT_FATHER_BONA_FIDE: LocalizedText(
        en="biological child born out of wedlock (father, bona fide relationship)",
        es="hijo biológico fuera de matrimonio (padre, relación bona fide)",
    ),
    ChildRelationship.STEPCHILD: LocalizedText(
        en="stepchild (marriage before age 18)",
        es="hijastro/a (matrimonio antes de los 18)",
    ),
    ChildRelationship.ADOPTED: LocalizedText(
        en="adopted child (before age 16)",
        es="hijo/a adoptivo/a (antes de los 16)",
    ),
}

# Exceptions that allow filing from abroad. OutsideUSException.NONE has no entry.
OUTSIDE_US_EXCEPTION_LABELS = {
    OutsideUSException.GOVERNMENT_EMPLOYMENT: LocalizedText(
        en="Abuser employed by US government abroad",
        es="Abusador empleado por gobierno de EE.UU. en el extranjero",
    ),
    OutsideUSException.MILITARY: LocalizedText(
        en="Abuser is US military stationed abroad",
        es="Abusador es militar de EE.UU. estacionado en el extranjero",
    ),
    OutsideUSException.ABUSE_IN_US: LocalizedText(
        en="Abuse occurred in the US",
        es="El abuso ocurrió en EE.UU.",
    ),
}

STATUS_LABELS = {
    EligibilityStatus.ELIGIBLE: LocalizedText(en="Eligible", es="Elegible"),
    EligibilityStatus.NOT_ELIGIBLE: LocalizedText(en="Not Eligible", es="No Elegible"),
    EligibilityStatus.NEEDS_REVIEW: LocalizedText(en="Needs Review", es="Requiere Revisión"),
}


# ============================================================
# 8. REPORT TEXT
# ============================================================

REPORT_TITLE = LocalizedText(
    en="VAWA I-360 Eligibility Screening Report",
    es="Informe de Evaluación de Elegibilidad VAWA I-360",
)

REPORT_SECTIONS = {
    "criteria": LocalizedText(en="Eligibility Criteria Analysis", es="Análisis de Criterios de Elegibilidad"),
    "recommendations": LocalizedText(en="Recommendations", es="Recomendaciones"),
    "alternatives": LocalizedText(en="Alternative Options", es="Opciones Alternativas"),
    "legal_basis": LocalizedText(en="Legal Basis", es="Base Legal"),
    "classification": LocalizedText(en="Immigration Classification", es="Clasificación Migratoria"),
}

REPORT_DISCLAIMER = LocalizedText(
    en=(
        "This screening is a preliminary assessment and does not constitute legal advice. "
        "Final eligibility must be determined by a licensed immigration attorney."
    ),
    es=(
        "Esta evaluación es preliminar y no constituye asesoría legal. "
        "La elegibilidad final debe ser determinada por un abogado de inmigración."
    ),
)
