"""Keyword-based document classification.

Rules are applied in order and every matching rule overwrites the label, so a
later rule wins over an earlier one. In particular the property rule beats
both the bond and the sale deed rules.
"""

import re
from dataclasses import dataclass

from docanalyzer.analysis.catalog import (
    CATEGORY_PROFILES,
    INVALID_ANALYSIS_DETAILS,
    LEGAL_FRAMEWORKS,
    VALID_ANALYSIS_DETAILS,
)
from docanalyzer.analysis.models import (
    ClassificationResult,
    ComplianceStatus,
    DocumentCategory,
)

_DEED_OF_SALE = re.compile(r"deed\s+of\s+sale", re.IGNORECASE)


@dataclass(frozen=True)
class KeywordRule:
    """Assigns ``category`` when the text or declared type contains a keyword."""

    category: DocumentCategory
    text_keywords: tuple[str, ...]
    declared_keywords: tuple[str, ...]
    text_pattern: re.Pattern[str] | None = None

    def matches(self, text: str, declared: str) -> bool:
        if any(keyword in text for keyword in self.text_keywords):
            return True
        if self.text_pattern is not None and self.text_pattern.search(text):
            return True
        return any(keyword in declared for keyword in self.declared_keywords)


RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        category=DocumentCategory.BOND_PAPER,
        text_keywords=("bond", "stamp paper"),
        declared_keywords=("bond", "stamp paper"),
    ),
    KeywordRule(
        category=DocumentCategory.SALE_DEED,
        text_keywords=("sale deed", "sale-deed", "sale agreement"),
        declared_keywords=("sale", "deed"),
        text_pattern=_DEED_OF_SALE,
    ),
    KeywordRule(
        category=DocumentCategory.PROPERTY_DOCUMENT,
        text_keywords=(
            "property",
            "real estate",
            "land",
            "apartment",
            "house",
            "flat",
            "conveyance",
            "title",
            "transfer",
        ),
        declared_keywords=("property",),
    ),
)


def resolve_category(declared_type: str | None, source_text: str) -> DocumentCategory:
    """Return the category the keyword rules settle on for these inputs."""
    declared = (declared_type or DocumentCategory.UNKNOWN.value).lower()
    text = source_text.lower()
    category = DocumentCategory.from_label(declared_type)
    for rule in RULES:
        if rule.matches(text, declared):
            category = rule.category
    return category


def classify(declared_type: str | None, source_text: str) -> ClassificationResult:
    """Classify a document and attach the fixed findings for its category."""
    category = resolve_category(declared_type, source_text)
    is_valid = category is not DocumentCategory.UNKNOWN
    profile = CATEGORY_PROFILES[category]
    return ClassificationResult(
        document_type=category,
        is_valid=is_valid,
        compliance_status=(
            ComplianceStatus.COMPLIANT if is_valid else ComplianceStatus.NON_COMPLIANT
        ),
        issues=profile.issues,
        warnings=profile.warnings,
        recommendations=profile.recommendations,
        legal_frameworks=LEGAL_FRAMEWORKS,
        analysis_details=VALID_ANALYSIS_DETAILS if is_valid else INVALID_ANALYSIS_DETAILS,
    )
