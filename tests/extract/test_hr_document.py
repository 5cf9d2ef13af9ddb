"""
Unit tests for HR document block detection and splitting.
"""

import pytest

from prowrite.catalog import DocumentCatalog
from prowrite.extract import (
    contains_hr_document,
    detect_document_type,
    is_hr_docs_module,
    parse_hr_document,
)
from prowrite.schema import ModuleType


class TestContainsHRDocument:
    """Tests for the three-part containment check."""

    def test_full_reply(self, hr_reply):
        """A complete letter is detected."""
        assert contains_hr_document(hr_reply) is True

    def test_no_document_type(self):
        """A letter without a known type is not a document."""
        assert contains_hr_document("Dear John,\n...\nSincerely,\nHR Manager") is False

    def test_no_opening(self):
        """A closing without an opening is not enough."""
        content = "Your Offer Letter is below.\nWelcome aboard.\nSincerely,\nHR Team"
        assert contains_hr_document(content) is False

    def test_no_closing(self):
        """An opening without a closing is not enough."""
        content = "Dear John,\nPlease find your Offer Letter attached.\nThanks"
        assert contains_hr_document(content) is False

    def test_case_insensitive(self):
        """Markers match in any case."""
        content = "dear sam,\nyour offer letter is ready.\nsincerely,\nthe team"
        assert contains_hr_document(content) is True

    @pytest.mark.parametrize("opening", [
        "Date: 2024-03-12",
        "March 12, 2024",
        "12/03/2024",
        "To: All Staff",
        "Subject: Leave Approval",
        "Ref: HR/2024/17",
    ])
    def test_opening_forms(self, opening):
        """Dates, To:, Subject: and Ref: all open a letter."""
        content = f"{opening}\nYour Leave Approval is confirmed.\nRegards,\nHR"
        assert contains_hr_document(content) is True

    def test_signatory_closes(self):
        """A signatory line closes a letter."""
        content = "To: Finance\nAsset Handover completed.\nAuthorized Signatory"
        assert contains_hr_document(content) is True

    def test_custom_catalog(self):
        """Types come from the given catalog."""
        catalog = DocumentCatalog(name="custom", document_types=("Visa Letter",))
        content = "Dear Officer,\nThis Visa Letter confirms employment.\nRegards,\nHR"

        assert contains_hr_document(content, catalog) is True
        assert contains_hr_document(content.replace("Visa", "Offer"), catalog) is False


class TestParseHRDocument:
    """Tests for parse_hr_document."""

    def test_split_around_fenced_document(self, hr_reply):
        """Intro, letter and commentary are separated."""
        parsed = parse_hr_document(hr_reply)

        assert parsed.explanation_before == "Here's the offer letter you requested:"
        assert parsed.document_block.document_content == (
            "Date: 12 March 2024\n"
            "\n"
            "Dear Priya Sharma,\n"
            "\n"
            "Subject: Offer Letter for Senior Analyst\n"
            "\n"
            "We are pleased to offer you the position of Senior Analyst.\n"
            "\n"
            "Sincerely,\n"
            "Rahul Mehta\n"
            "HR Manager\n"
            "Acme Corp"
        )
        assert parsed.document_block.document_type == "Offer Letter"
        assert parsed.explanation_after == "**WHY THIS WORKS:**\nClear structure."

    def test_code_fences_never_in_document(self, hr_reply):
        """Fence lines with a language tag are dropped."""
        parsed = parse_hr_document(hr_reply.replace("```\n", "```text\n", 1))
        assert "```" not in parsed.document_block.document_content

    def test_explanation_line_ends_signature(self):
        """Chat text after the sign-off is not signature."""
        content = (
            "Dear Sam,\n\n"
            "This Termination Letter confirms your last day.\n\n"
            "Regards,\n"
            "Anita Rao\n"
            "I hope this helps!"
        )
        parsed = parse_hr_document(content)

        assert parsed.explanation_before == ""
        assert parsed.document_block.document_content.endswith("Regards,\nAnita Rao")
        assert parsed.document_block.document_type == "Termination Letter"
        assert parsed.explanation_after == "I hope this helps!"

    def test_separator_ends_signature(self):
        """A === rule ends the signature."""
        content = (
            "Dear Sam,\n"
            "Your Experience Letter is attached.\n"
            "Warm regards,\n"
            "HR Team\n"
            "===\n"
            "Let me know if you need changes."
        )
        parsed = parse_hr_document(content)

        assert parsed.document_block.document_content.endswith("Warm regards,\nHR Team")
        assert parsed.explanation_after == "Let me know if you need changes."

    def test_signature_lookahead_is_bounded(self):
        """At most five lines follow the sign-off."""
        content = "Dear Sam,\nYour Promotion Letter.\nRegards,\n" + "\n".join(
            f"line {n}" for n in range(1, 9)
        )
        parsed = parse_hr_document(content)

        assert parsed.document_block.document_content.endswith("line 5")
        assert parsed.explanation_after.startswith("line 6")

    def test_salutation_after_explanation_skipped(self):
        """A salutation right after chat text is not an opening."""
        content = (
            "Here's a draft of the Warning Letter.\n"
            "Dear Sam,\n"
            "Please improve.\n"
            "Regards,\n"
            "Manager"
        )
        parsed = parse_hr_document(content)

        assert parsed.document_block is None
        assert parsed.explanation_before == content

    def test_date_line_starts_despite_explanation(self):
        """A date line opens even after chat text."""
        content = (
            "Below is the letter.\n"
            "March 12, 2024\n"
            "Dear Sam,\n"
            "Your Salary Increment Letter follows.\n"
            "Sincerely,\n"
            "HR"
        )
        parsed = parse_hr_document(content)

        assert parsed.explanation_before == "Below is the letter."
        assert parsed.document_block.document_content.startswith("March 12, 2024")

    def test_no_closing_after_opening(self):
        """A closing only before the opening fails the split."""
        content = "Regards,\nfrom the team\n\nDear Sam,\nYour Promotion Letter is ready."
        parsed = parse_hr_document(content)

        assert parsed.document_block is None
        assert parsed.explanation_before == content
        assert parsed.explanation_after == ""

    @pytest.mark.parametrize("content", [
        "",
        "Just some advice about writing letters.",
        "Dear John,\n...\nSincerely,\nHR Manager",
    ])
    def test_no_document_returns_content_verbatim(self, content):
        """Non-documents come back unchanged."""
        parsed = parse_hr_document(content)

        assert parsed.explanation_before == content
        assert parsed.document_block is None
        assert parsed.explanation_after == ""


class TestDetectDocumentType:
    """Tests for detect_document_type."""

    def test_subject_line_wins(self):
        """The Subject line is searched first."""
        content = "Subject: Termination Letter\n\nPer your Non-Disclosure Agreement, return all files."
        assert detect_document_type(content) == "Termination Letter"

    def test_catalog_order_without_subject(self):
        """Without a subject, catalog order decides."""
        content = "Reminder of your Non-Disclosure Agreement and this Termination Letter."
        assert detect_document_type(content) == "Non-Disclosure Agreement"

    def test_subject_without_type_falls_back_to_content(self):
        """A vague subject falls back to the body."""
        content = "Subject: Next steps\n\nYour Warning Letter is attached."
        assert detect_document_type(content) == "Warning Letter"

    def test_default_type(self):
        """No phrase gives the catalog default."""
        assert detect_document_type("Dear Sam,\nWelcome.\nRegards,") == "HR Document"

    def test_case_insensitive(self):
        """Type phrases match in any case."""
        assert detect_document_type("your RELIEVING LETTER") == "Relieving Letter"


class TestIsHRDocsModule:
    """Tests for is_hr_docs_module."""

    @pytest.mark.parametrize("module_type,expected", [
        ("hr_docs", True),
        (ModuleType.HR_DOCS, True),
        ("cold_email", False),
        (ModuleType.WEBSITE_COPY, False),
        ("HR_DOCS", False),
        (None, False),
    ])
    def test_module_types(self, module_type, expected):
        """Only the exact hr_docs value matches."""
        assert is_hr_docs_module(module_type) is expected
