"""
Tests for the document registry, renderers and dispatcher.
"""

import pytest

from core.documents import (
    DEFAULT_TEMPLATES,
    TemplateRegistry,
    generate_document,
    render_invoice,
    render_letter,
    render_proposal,
    render_report,
    salutation_name,
)
from core.models import DocumentDataError, TemplateId, TemplateNotFound


class TestRegistry:
    """Tests for TemplateRegistry."""

    @pytest.mark.parametrize("name", ["invoice", "report", "proposal", "letter"])
    def test_every_template_resolves(self, registry, name):
        definition = registry.lookup(name)
        assert definition is not None
        assert definition.template_id.value == name

    def test_lookup_accepts_enum(self, registry):
        assert registry.lookup(TemplateId.LETTER).title == "LETTER"

    @pytest.mark.parametrize("name", ["memo", "", "Invoice", "INVOICE", " invoice"])
    def test_unknown_names_return_none(self, registry, name):
        assert registry.lookup(name) is None

    def test_titles_and_fields(self, registry):
        titles = {d.template_id: d.title for d in registry}
        assert titles == {
            TemplateId.INVOICE: "INVOICE",
            TemplateId.REPORT: "REPORT",
            TemplateId.PROPOSAL: "BUSINESS PROPOSAL",
            TemplateId.LETTER: "LETTER",
        }
        assert registry.lookup("invoice").fields == (
            "invoiceNumber", "date", "clientName", "items", "total",
        )

    def test_registry_is_complete(self, registry):
        assert len(registry) == len(TemplateId)
        assert "proposal" in registry
        assert "memo" not in registry

    def test_missing_definition_rejected(self):
        with pytest.raises(ValueError, match="letter"):
            TemplateRegistry(d for d in DEFAULT_TEMPLATES if d.template_id != TemplateId.LETTER)

    def test_duplicate_definition_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            TemplateRegistry(DEFAULT_TEMPLATES + DEFAULT_TEMPLATES[:1])


class TestDispatcher:
    """Tests for generate_document."""

    def test_unknown_template_is_a_result(self, registry):
        result = generate_document("memo", {}, registry)
        assert result == TemplateNotFound("memo")
        assert result.message == "Error: Template 'memo' not found."
        assert str(result) == "Error: Template 'memo' not found."

    def test_returns_renderer_output_unmodified(self, registry):
        payload = {"title": "Q3", "author": "Ops"}
        assert generate_document("report", payload, registry) == render_report(payload)

    def test_idempotent(self, registry):
        payload = {
            "invoiceNumber": "42",
            "items": [{"description": "Widget", "amount": 9.5}],
            "total": 9.5,
        }
        first = generate_document("invoice", payload, registry)
        second = generate_document("invoice", payload, registry)
        assert first == second

    def test_does_not_mutate_payload(self, registry):
        payload = {"deliverables": ["Design"], "budget": 100}
        generate_document("proposal", payload, registry)
        assert payload == {"deliverables": ["Design"], "budget": 100}


class TestInvoice:

    def test_defaults(self, registry):
        text = generate_document("invoice", {}, registry)
        assert text == (
            "\nINVOICE #000000\n"
            "Date: 2023-01-01\n"
            "Client: Client Name\n"
            "\n"
            "Items:\n"
            "\n"
            "\n"
            "Total: $0.00\n"
        )

    def test_items_and_total(self, registry):
        text = generate_document(
            "invoice",
            {"items": [{"description": "Widget", "amount": 9.5}], "total": 9.5},
            registry,
        )
        assert "- Widget: $9.50" in text
        assert "Total: $9.50" in text

    def test_items_are_joined_by_newline(self):
        text = render_invoice({
            "invoiceNumber": 1042,
            "clientName": "Acme",
            "items": [
                {"description": "Design", "amount": 1200},
                {"description": "Hosting", "amount": 49.999},
            ],
            "total": 1249.999,
        })
        assert "INVOICE #1042" in text
        assert "Client: Acme" in text
        assert "Items:\n- Design: $1200.00\n- Hosting: $50.00\n\nTotal: $1250.00\n" in text

    def test_zero_total_is_formatted(self):
        assert "Total: $0.00" in render_invoice({"total": 0})

    def test_empty_strings_fall_back_to_defaults(self):
        text = render_invoice({"invoiceNumber": "", "clientName": "", "items": []})
        assert "INVOICE #000000" in text
        assert "Client: Client Name" in text

    def test_item_without_amount_is_rejected(self):
        with pytest.raises(DocumentDataError, match="amount"):
            render_invoice({"items": [{"description": "Widget"}]})

    def test_item_without_description_is_rejected(self):
        with pytest.raises(DocumentDataError, match="description"):
            render_invoice({"items": [{"amount": 5}]})

    def test_non_numeric_amount_is_rejected(self):
        with pytest.raises(DocumentDataError):
            render_invoice({"items": [{"description": "Widget", "amount": "5"}]})

    def test_items_must_be_a_list(self):
        with pytest.raises(DocumentDataError, match="items"):
            render_invoice({"items": {"description": "Widget", "amount": 5}})

    def test_non_numeric_total_is_rejected(self):
        with pytest.raises(DocumentDataError, match="total"):
            render_invoice({"total": "12.50"})


class TestReport:

    def test_section_formatting(self, registry):
        text = generate_document(
            "report", {"sections": [{"title": "Intro", "content": "Hello"}]}, registry,
        )
        assert "## Intro\n\nHello\n" in text
        assert text.index("## Intro") < text.index("Hello")

    def test_defaults(self):
        assert render_report({}) == (
            "\n# Untitled Report\n"
            "Author: Unknown\n"
            "Date: 2023-01-01\n"
            "\n"
            "\n"
        )

    def test_sections_separated_by_blank_line(self):
        text = render_report({
            "title": "Quarterly Review",
            "author": "Dana",
            "date": "2024-04-01",
            "sections": [
                {"title": "Revenue", "content": "Up 4%"},
                {"title": "Costs", "content": "Flat"},
            ],
        })
        assert text.startswith("\n# Quarterly Review\nAuthor: Dana\nDate: 2024-04-01\n")
        assert "## Revenue\n\nUp 4%\n\n## Costs\n\nFlat\n" in text

    def test_section_missing_content_is_rejected(self):
        with pytest.raises(DocumentDataError, match="content"):
            render_report({"sections": [{"title": "Intro"}]})


class TestProposal:

    def test_defaults(self):
        text = render_proposal({})
        assert "# Business Proposal: Untitled Project" in text
        assert "## Client\nClient Name\n" in text
        assert "## Project Scope\nProject scope details...\n" in text
        assert "## Deliverables\n\n\n## Timeline" in text
        assert "## Timeline\nProject timeline details...\n" in text
        assert text.endswith("## Budget\n$0.00\n")

    def test_deliverables_and_budget(self):
        text = render_proposal({
            "projectName": "Website Redesign",
            "client": "Acme",
            "deliverables": ["Wireframes", "Prototype", 3],
            "budget": 15000,
        })
        assert "# Business Proposal: Website Redesign" in text
        assert "## Deliverables\n- Wireframes\n- Prototype\n- 3\n\n## Timeline" in text
        assert text.endswith("## Budget\n$15000.00\n")

    def test_nested_list_deliverable_is_comma_joined(self):
        text = render_proposal({"deliverables": [["Logo", "Palette"], "Guide"]})
        assert "## Deliverables\n- Logo,Palette\n- Guide\n" in text


class TestLetter:

    def test_salutation_uses_first_name(self, registry):
        text = generate_document("letter", {"recipient": "Jane Doe"}, registry)
        assert "Dear Jane," in text
        assert "\nJane Doe\nRecipient Address\n" in text

    def test_defaults(self):
        assert render_letter({}) == (
            "\nSender Name\n"
            "Sender Address\n"
            "\n"
            "2023-01-01\n"
            "\n"
            "Recipient Name\n"
            "Recipient Address\n"
            "\n"
            "Subject: No Subject\n"
            "\n"
            "Dear Sir/Madam,\n"
            "\n"
            "Letter body...\n"
            "\n"
            "Sincerely,\n"
            "Sender\n"
        )

    def test_sender_signs_the_letter(self):
        text = render_letter({"sender": "Sam Lee", "closing": "Best regards"})
        assert text.startswith("\nSam Lee\n")
        assert text.endswith("Best regards,\nSam Lee\n")

    @pytest.mark.parametrize("recipient,expected", [
        ("Jane Doe", "Jane"),
        ("Cher", "Cher"),
        (" Jane", "Sir/Madam"),
        ("", "Sir/Madam"),
        (None, "Sir/Madam"),
    ])
    def test_salutation_name(self, recipient, expected):
        assert salutation_name(recipient) == expected
