# src/a11y_auditor/dom/builder.py
import logging

from bs4 import BeautifulSoup

from .core import ParseError
from .models import HTMLDocument
from .registry import DOMRegistry

logger = logging.getLogger(__name__)


class DOMBuilder:
    """
    Builder responsible for parsing raw markup into an HTMLDocument.

    Uses the lenient 'html.parser' tree builder so that partial fragments,
    unclosed tags and implied elements are accepted the way a browser would.
    """

    def __init__(self):
        """Initializes the builder and ensures the DOMRegistry is populated."""
        DOMRegistry.discover()

    def parse_doc(self, html: str) -> HTMLDocument:
        """
        Parses a markup string into an HTMLDocument.

        Args:
            html (str): The markup fragment, exactly as submitted.

        Returns:
            HTMLDocument: The parsed document, holding the original source for position lookups.

        Raises:
            ParseError: If the input is not text or the parser rejects it.
        """
        if not isinstance(html, str):
            raise ParseError(f"Expected markup as str, got {type(html).__name__}")

        try:
            # Keep attribute values as raw strings (no class/rel splitting)
            soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
        except Exception as e:
            logger.debug("Markup rejected by parser: %s", e)
            raise ParseError(str(e) or type(e).__name__) from e

        return HTMLDocument(soup, html)
