# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the demo server.  They carry (almost) no behavior; they're
# structured bags of data that make tool contracts explicit.
#
# TWO FAMILIES OF MODELS:
#   1. Lookup results (WeatherReport, UserProfile, TodoItem, ...): what the
#      simple "hardcoded data" tools hand back.
#   2. Document models (TemplateId, TemplateDefinition, InvoiceData, ...):
#      the typed view of a loosely-typed document payload.
#
# DOCUMENT PAYLOADS:
#   Callers send an open key/value mapping.  Instead of poking at that mapping
#   with ad-hoc `.get()` chains inside every renderer, each template has its
#   own dataclass whose field defaults ARE the documented defaults.  The
#   `from_payload()` constructors are the only place that touches raw keys.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

Number = Union[int, float]


class DocumentDataError(ValueError):
    """Raised when a document payload is present but malformed.

    Missing fields are never an error (they fall back to defaults); a field
    with the wrong *shape* is, e.g. ``items`` that is not a list, or an
    invoice item without an ``amount``.
    """


# =============================================================================
# Lookup results
# =============================================================================

@dataclass(frozen=True)
class WeatherReport:
    """Canned weather conditions for a single location."""

    location: str
    temperature: str                   # "72°F", already formatted for display
    condition: str                     # "Sunny", "Rainy", ...


@dataclass
class UserProfile:
    """The sample user returned by the getUserProfile tool."""

    name: str
    email: str
    preferences: dict[str, Any] = field(default_factory=dict)
    # e.g., {"theme": "dark", "notifications": True}


@dataclass
class TodoItem:
    """One entry of the sample todo list."""

    id: int
    title: str
    completed: bool = False


@dataclass(frozen=True)
class CurrencyConversion:
    """The result of converting an amount between two supported currencies."""

    amount: Number
    from_currency: str                 # Upper-cased ISO code, e.g. "USD"
    to_currency: str
    converted: float


@dataclass(frozen=True)
class SentimentResult:
    text: str
    sentiment: str                     # "very positive" ... "very negative"
    confidence: float


# =============================================================================
# Document templates
# =============================================================================

class TemplateId(str, Enum):
    """The closed set of document shapes the generator knows about."""

    INVOICE = "invoice"
    REPORT = "report"
    PROPOSAL = "proposal"
    LETTER = "letter"

    @classmethod
    def parse(cls, value: str) -> Optional["TemplateId"]:
        """Return the matching TemplateId, or None for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class TemplateDefinition:
    """A registered template: display title, expected fields and renderer.

    ``fields`` is informational only; renderers never enforce it.
    """

    template_id: TemplateId
    title: str
    fields: tuple[str, ...]
    render: Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class TemplateNotFound:
    """Returned (not raised) by the dispatcher for an unknown template name."""

    template_id: str

    @property
    def message(self) -> str:
        return f"Error: Template '{self.template_id}' not found."

    def __str__(self) -> str:
        return self.message


# -----------------------------------------------------------------------------
# Payload helpers
# -----------------------------------------------------------------------------
# "Falsy means missing": an empty string or a zero invoice
# number renders the default, exactly like a key that was never sent.
# -----------------------------------------------------------------------------

def _scalar(payload: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return payload.get(key) or default


def _collection(payload: Mapping[str, Any], key: str) -> list:
    value = payload.get(key)
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        raise DocumentDataError(
            f"Field '{key}' must be a list, got {type(value).__name__}."
        )
    return list(value)


def _number(payload: Mapping[str, Any], key: str) -> Optional[Number]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DocumentDataError(
            f"Field '{key}' must be a number, got {type(value).__name__}."
        )
    return value


def _required(item: Any, key: str, where: str) -> Any:
    if not isinstance(item, Mapping):
        raise DocumentDataError(
            f"Each entry of '{where}' must be an object, got {type(item).__name__}."
        )
    if item.get(key) is None:
        raise DocumentDataError(f"Entry of '{where}' is missing '{key}'.")
    return item[key]


# -----------------------------------------------------------------------------
# Invoice
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class InvoiceItem:
    description: Any
    amount: Number

    @classmethod
    def from_payload(cls, item: Any) -> "InvoiceItem":
        description = _required(item, "description", "items")
        amount = _required(item, "amount", "items")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise DocumentDataError(
                f"Item amount must be a number, got {type(amount).__name__}."
            )
        return cls(description=description, amount=amount)


@dataclass(frozen=True)
class InvoiceData:
    """Fields of an invoice.  ``total=None`` renders as the literal "0.00"."""

    invoice_number: Any = "000000"
    date: Any = "2023-01-01"
    client_name: Any = "Client Name"
    items: tuple[InvoiceItem, ...] = ()
    total: Optional[Number] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "InvoiceData":
        return cls(
            invoice_number=_scalar(payload, "invoiceNumber", cls.invoice_number),
            date=_scalar(payload, "date", cls.date),
            client_name=_scalar(payload, "clientName", cls.client_name),
            items=tuple(InvoiceItem.from_payload(i) for i in _collection(payload, "items")),
            total=_number(payload, "total"),
        )


# -----------------------------------------------------------------------------
# Report
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ReportSection:
    title: Any
    content: Any

    @classmethod
    def from_payload(cls, item: Any) -> "ReportSection":
        return cls(
            title=_required(item, "title", "sections"),
            content=_required(item, "content", "sections"),
        )


@dataclass(frozen=True)
class ReportData:
    title: Any = "Untitled Report"
    author: Any = "Unknown"
    date: Any = "2023-01-01"
    sections: tuple[ReportSection, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ReportData":
        return cls(
            title=_scalar(payload, "title", cls.title),
            author=_scalar(payload, "author", cls.author),
            date=_scalar(payload, "date", cls.date),
            sections=tuple(
                ReportSection.from_payload(s) for s in _collection(payload, "sections")
            ),
        )


# -----------------------------------------------------------------------------
# Proposal
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ProposalData:
    """Fields of a business proposal.  ``budget=None`` renders as "0.00"."""

    project_name: Any = "Untitled Project"
    client: Any = "Client Name"
    scope: Any = "Project scope details..."
    deliverables: tuple[Any, ...] = ()
    timeline: Any = "Project timeline details..."
    budget: Optional[Number] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ProposalData":
        return cls(
            project_name=_scalar(payload, "projectName", cls.project_name),
            client=_scalar(payload, "client", cls.client),
            scope=_scalar(payload, "scope", cls.scope),
            deliverables=tuple(_collection(payload, "deliverables")),
            timeline=_scalar(payload, "timeline", cls.timeline),
            budget=_number(payload, "budget"),
        )


# -----------------------------------------------------------------------------
# Letter
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LetterData:
    """Fields of a letter.

    ``recipient`` stays None when absent so the salutation can tell
    "no recipient" (-> "Sir/Madam") apart from a real name.
    """

    sender: Any = None
    sender_address: Any = "Sender Address"
    date: Any = "2023-01-01"
    recipient: Any = None
    recipient_address: Any = "Recipient Address"
    subject: Any = "No Subject"
    body: Any = "Letter body..."
    closing: Any = "Sincerely"

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LetterData":
        return cls(
            sender=_scalar(payload, "sender"),
            sender_address=_scalar(payload, "senderAddress", cls.sender_address),
            date=_scalar(payload, "date", cls.date),
            recipient=_scalar(payload, "recipient"),
            recipient_address=_scalar(payload, "recipientAddress", cls.recipient_address),
            subject=_scalar(payload, "subject", cls.subject),
            body=_scalar(payload, "body", cls.body),
            closing=_scalar(payload, "closing", cls.closing),
        )
