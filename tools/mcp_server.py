# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools the demo server exposes.  Each tool is a thin
#   wrapper around a core/ function; it logs the call, invokes core, and
#   turns the result into the TEXT the caller sees.
#
# HOW IT WORKS (the flow):
#   1. A client (the demo agent, an IDE, an MCP inspector) lists our tools
#   2. It calls one by name, e.g. "generateDocument"
#   3. FastMCP validates the arguments against the function signature and
#      routes the call to the decorated function below
#   4. The function calls core/ logic and returns a string
#   5. FastMCP wraps that string in a text content block
#
# TOOL CATALOGUE:
#   add / multiply            → arithmetic
#   getWeather                → canned weather per city
#   getUserProfile            → sample profile (JSON)
#   getTodos                  → sample todo list (JSON)
#   convertCurrency           → fixed-rate conversion
#   analyzeSentiment          → keyword sentiment (JSON)
#   generateDocument          → invoice / report / proposal / letter
#   Tool names and argument keys are camelCase on the wire; the Python
#   functions behind them keep snake_case names.
#   All tools are read-only and idempotent; safe to retry.
#
# DEPENDENCY INJECTION:
#   create_server() takes the TemplateRegistry as an argument.  The module-
#   level `mcp` instance is built once with the default registry; tests can
#   build their own server with a different one.
#
# RUNNING THIS SERVER:
#   a) stdio (default):   python -m tools.mcp_server
#   b) over the network:  MCP_TRANSPORT=sse MCP_PORT=8000 python -m tools.mcp_server
#   c) from the demo agent, which spawns (a) as a subprocess (see agent/)
# =============================================================================

import json
import logging
import os
import sys
from typing import Any, Literal, Optional

from dotenv import find_dotenv, load_dotenv
from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core import currency, math_ops, sentiment, user_profile, weather
from core.documents import TemplateRegistry, build_default_registry, generate_document
from core.models import TemplateNotFound

SERVER_NAME = "Demo"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because, on the stdio transport, STDOUT *is* the MCP
# channel.  A stray log line on stdout corrupts the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

# .env must be loaded before basicConfig reads MCP_LOG_LEVEL.  Search from the
# working directory, where the server is launched, not from this file.
load_dotenv(find_dotenv(usecwd=True))

logging.basicConfig(
    level=os.environ.get("MCP_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the tool response (newlines escaped) in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(text, ensure_ascii=False)}{_RESET}")
    return text


# =============================================================================
# Server factory
# =============================================================================
def create_server(registry: Optional[TemplateRegistry] = None) -> FastMCP:
    """Build the FastMCP server with every demo tool registered.

    Args:
        registry: Templates available to generateDocument.  Defaults to
                  the four built-in templates.
    """
    if registry is None:
        registry = build_default_registry()

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # -------------------------------------------------------------------------
    # Math
    # -------------------------------------------------------------------------
    @mcp.tool()
    def add(a: float, b: float) -> str:
        """Add two numbers and return the sum."""
        _log_request("add", a=a, b=b)
        return _log_response("add", math_ops.as_text(math_ops.add(a, b)))

    @mcp.tool()
    def multiply(a: float, b: float) -> str:
        """Multiply two numbers and return the product."""
        _log_request("multiply", a=a, b=b)
        return _log_response("multiply", math_ops.as_text(math_ops.multiply(a, b)))

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    @mcp.tool(name="getWeather")
    def get_weather(location: str) -> str:
        """Get the current weather for a city.

        Known cities: New York, London, Tokyo, Sydney (exact spelling).
        Any other location reports 70°F with an "Unknown" condition.
        """
        _log_request("getWeather", location=location)
        report = weather.get_weather(location)
        if report.condition == weather.UNKNOWN_CONDITION:
            _log_status(f"No data for {location!r}. Known: {weather.list_known_locations()}")
        return _log_response("getWeather", weather.describe_weather(report))

    @mcp.tool(name="getUserProfile")
    def get_user_profile() -> str:
        """Return the current user's profile (name, email, preferences) as JSON."""
        _log_request("getUserProfile")
        return _log_response("getUserProfile", user_profile.to_pretty_json(user_profile.get_profile()))

    @mcp.tool(name="getTodos")
    def get_todos() -> str:
        """Return the user's todo list as a JSON array of {id, title, completed}."""
        _log_request("getTodos")
        todos = user_profile.get_todos()
        _log_status(f"{sum(not t.completed for t in todos)} of {len(todos)} todos open")
        return _log_response("getTodos", user_profile.to_pretty_json(todos))

    # Argument keys are camelCase on the wire (fromCurrency / toCurrency).
    @mcp.tool(name="convertCurrency")
    def convert_currency(amount: float, fromCurrency: str, toCurrency: str) -> str:
        """Convert an amount between USD, EUR, GBP, JPY and CAD.

        Currency codes are case-insensitive.  Unsupported pairs (including
        converting a currency to itself) get an apology instead of a number.
        """
        _log_request("convertCurrency", amount=amount,
                     fromCurrency=fromCurrency, toCurrency=toCurrency)
        conversion = currency.convert(amount, fromCurrency, toCurrency)
        if conversion is None:
            _log_status(f"No rate for {fromCurrency}→{toCurrency}. "
                        f"Supported: {currency.supported_currencies()}")
            return _log_response(
                "convertCurrency",
                currency.unsupported_pair_message(fromCurrency, toCurrency),
            )
        return _log_response("convertCurrency", currency.describe_conversion(conversion))

    @mcp.tool(name="analyzeSentiment")
    def analyze_sentiment(text: str) -> str:
        """Classify the sentiment of a piece of text.

        Returns JSON with the original text, a label (very positive,
        positive, neutral, negative, very negative) and a confidence score.
        """
        _log_request("analyzeSentiment", text=text)
        result = sentiment.analyze_sentiment(text)
        _log_status(f"Sentiment: {result.sentiment}")
        return _log_response("analyzeSentiment", sentiment.sentiment_to_json(result))

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------
    @mcp.tool(name="generateDocument")
    def generate_document(
        template: Literal["invoice", "report", "proposal", "letter"],
        data: dict[str, Any],
    ) -> str:
        """Generate a plain-text document from a built-in template.

        Templates and the fields they read (all optional, defaults filled in):
          - invoice:  invoiceNumber, date, clientName,
                      items [{description, amount}], total
          - report:   title, author, date, sections [{title, content}]
          - proposal: projectName, client, scope, deliverables [str],
                      timeline, budget
          - letter:   sender, senderAddress, date, recipient,
                      recipientAddress, subject, body, closing

        Args:
            template: Which document shape to render.
            data: Field values for the template.

        Returns:
            The rendered document, or "Error: Template '<name>' not found."
        """
        _log_request("generateDocument", template=template, data=data)
        result = generate_document_text(template, data, registry)
        return _log_response("generateDocument", result)

    return mcp


def generate_document_text(template: str, data: dict[str, Any], registry: TemplateRegistry) -> str:
    """Dispatch to the document generator and flatten the result to text.

    TemplateNotFound becomes its error message; it is a normal reply,
    not a tool failure.
    """
    document = generate_document(template, data, registry)
    if isinstance(document, TemplateNotFound):
        _log_status(f"Template {template!r} not found")
        return document.message
    _log_status(f"Rendered {template} ({len(document)} chars)")
    return document


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The name "Demo" becomes the server identity in MCP.
mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Run the server on the transport named by MCP_TRANSPORT."""
    transport = os.environ.get("MCP_TRANSPORT", "stdio").lower()
    if transport == "stdio":
        mcp.run()
        return
    if transport not in ("sse", "http", "streamable-http"):
        raise SystemExit(f"Unsupported MCP_TRANSPORT: {transport!r} (use stdio, sse or http)")

    host = os.environ.get("MCP_HOST", "127.0.0.1")
    port = int(os.environ.get("MCP_PORT", "8000"))
    logging.info(f"{_YELLOW}Serving {SERVER_NAME} over {transport} on {host}:{port}{_RESET}")
    mcp.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
