# =============================================================================
# core/documents.py  —  Document Templates, Registry & Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a template name plus a loosely-typed payload into a plain-text
#   document.  Four shapes are supported: invoice, report, proposal, letter.
#
# THE FLOW:
#   caller payload
#       → generate_document()          (dispatcher)
#       → TemplateRegistry.lookup()    (name → TemplateDefinition)
#       → render_<template>()          (defaults + formatting)
#       → rendered text
#
# KEY DESIGN DECISIONS:
#
# 1. THE REGISTRY IS A VALUE, NOT A GLOBAL.
#    build_default_registry() is called once by whoever wires the server
#    (tools/mcp_server.py) and the result is passed into the dispatcher.
#    Tests can build their own registry without monkeypatching anything.
#
# 2. UNKNOWN TEMPLATES ARE A RESULT, NOT AN EXCEPTION.
#    generate_document() returns a TemplateNotFound value.  The tool layer
#    turns it into a normal text reply; the caller asked for something we
#    don't have, which is not a server fault.
#
# 3. MALFORMED PAYLOADS ARE AN EXCEPTION.
#    Missing fields get defaults.  Fields with the wrong shape (an invoice
#    item without an amount, `items` that isn't a list) raise
#    DocumentDataError from core/models.py.
#
# 4. NO ESCAPING, NO TEMPLATE LANGUAGE.
#    Each renderer is a plain f-string.  This is not a templating engine.
# =============================================================================

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from core.formatting import format_money, to_text
from core.models import (
    InvoiceData,
    LetterData,
    ProposalData,
    ReportData,
    TemplateDefinition,
    TemplateId,
    TemplateNotFound,
)

logger = logging.getLogger(__name__)

# Rendered when a numeric field (invoice total, proposal budget) is absent.
MISSING_AMOUNT = "0.00"


def _amount_or_default(value: Optional[float]) -> str:
    if value is None:
        return MISSING_AMOUNT
    return format_money(value)


# =============================================================================
# Renderers
# =============================================================================
# Every renderer returns text that starts and ends with a newline.  Callers
# relying on exact output (tests, diffing) should keep that in mind.
# =============================================================================

def render_invoice(payload: Mapping[str, Any]) -> str:
    """Render an invoice: header, one line per item, and the total."""
    data = InvoiceData.from_payload(payload)
    items_text = "\n".join(
        f"- {to_text(item.description)}: ${format_money(item.amount)}"
        for item in data.items
    )
    return f"""
INVOICE #{to_text(data.invoice_number)}
Date: {to_text(data.date)}
Client: {to_text(data.client_name)}

Items:
{items_text}

Total: ${_amount_or_default(data.total)}
"""


def render_report(payload: Mapping[str, Any]) -> str:
    """Render a report with a markdown-style heading per section."""
    data = ReportData.from_payload(payload)
    sections_text = "\n".join(
        f"## {to_text(section.title)}\n\n{to_text(section.content)}\n"
        for section in data.sections
    )
    return f"""
# {to_text(data.title)}
Author: {to_text(data.author)}
Date: {to_text(data.date)}

{sections_text}
"""


def render_proposal(payload: Mapping[str, Any]) -> str:
    data = ProposalData.from_payload(payload)
    deliverables_text = "\n".join(f"- {to_text(item)}" for item in data.deliverables)
    return f"""
# Business Proposal: {to_text(data.project_name)}

## Client
{to_text(data.client)}

## Project Scope
{to_text(data.scope)}

## Deliverables
{deliverables_text}

## Timeline
{to_text(data.timeline)}

## Budget
${_amount_or_default(data.budget)}
"""


def salutation_name(recipient: Any) -> str:
    """First token of the recipient's name, or "Sir/Madam" if there is none.

    >>> salutation_name("Jane Doe")
    'Jane'
    >>> salutation_name(None)
    'Sir/Madam'
    """
    if not recipient:
        return "Sir/Madam"
    return to_text(recipient).split(" ")[0] or "Sir/Madam"


def render_letter(payload: Mapping[str, Any]) -> str:
    data = LetterData.from_payload(payload)
    return f"""
{to_text(data.sender or "Sender Name")}
{to_text(data.sender_address)}

{to_text(data.date)}

{to_text(data.recipient or "Recipient Name")}
{to_text(data.recipient_address)}

Subject: {to_text(data.subject)}

Dear {salutation_name(data.recipient)},

{to_text(data.body)}

{to_text(data.closing)},
{to_text(data.sender or "Sender")}
"""


# =============================================================================
# Registry
# =============================================================================

DEFAULT_TEMPLATES: tuple[TemplateDefinition, ...] = (
    TemplateDefinition(
        template_id=TemplateId.INVOICE,
        title="INVOICE",
        fields=("invoiceNumber", "date", "clientName", "items", "total"),
        render=render_invoice,
    ),
    TemplateDefinition(
        template_id=TemplateId.REPORT,
        title="REPORT",
        fields=("title", "author", "date", "sections"),
        render=render_report,
    ),
    TemplateDefinition(
        template_id=TemplateId.PROPOSAL,
        title="BUSINESS PROPOSAL",
        fields=("projectName", "client", "scope", "deliverables", "timeline", "budget"),
        render=render_proposal,
    ),
    TemplateDefinition(
        template_id=TemplateId.LETTER,
        title="LETTER",
        fields=("sender", "recipient", "date", "subject", "body", "closing"),
        render=render_letter,
    ),
)


class TemplateRegistry:
    """Read-only mapping of TemplateId → TemplateDefinition.

    The constructor insists on exactly one definition per TemplateId, so a
    registry that exists is always complete.
    """

    def __init__(self, definitions: Iterable[TemplateDefinition]):
        by_id: dict[TemplateId, TemplateDefinition] = {}
        for definition in definitions:
            if definition.template_id in by_id:
                raise ValueError(
                    f"Duplicate template definition for '{definition.template_id.value}'"
                )
            by_id[definition.template_id] = definition

        missing = [t.value for t in TemplateId if t not in by_id]
        if missing:
            raise ValueError(f"Missing template definitions: {', '.join(missing)}")

        self._definitions = MappingProxyType(by_id)

    def lookup(self, template_id: Union[str, TemplateId]) -> Optional[TemplateDefinition]:
        """Return the definition for ``template_id``, or None if unknown."""
        parsed = TemplateId.parse(template_id)
        if parsed is None:
            return None
        return self._definitions[parsed]

    def __iter__(self) -> Iterator[TemplateDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, template_id: object) -> bool:
        return isinstance(template_id, str) and TemplateId.parse(template_id) is not None


def build_default_registry() -> TemplateRegistry:
    """Build the registry holding the four built-in templates."""
    return TemplateRegistry(DEFAULT_TEMPLATES)


# =============================================================================
# Dispatcher
# =============================================================================

def generate_document(
    template_id: str,
    payload: Mapping[str, Any],
    registry: TemplateRegistry,
) -> Union[str, TemplateNotFound]:
    """Render ``payload`` with the named template.

    Args:
        template_id: One of "invoice", "report", "proposal", "letter".
        payload: Arbitrary key/value data.  Missing fields fall back to
                 each template's defaults.
        registry: The registry to resolve ``template_id`` against.

    Returns:
        The rendered document, unmodified, or a TemplateNotFound value when
        ``template_id`` is not a known template.

    Raises:
        DocumentDataError: if a present field has the wrong shape.
    """
    definition = registry.lookup(template_id)
    if definition is None:
        logger.debug("Unknown template requested: %r", template_id)
        return TemplateNotFound(template_id)

    logger.debug("Rendering %s with fields %s", definition.title, list(payload))
    return definition.render(payload)
