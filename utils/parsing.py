"""
HTML parsing utilities.
"""

import re
from typing import Optional, Iterable, Sequence, Tuple

from selectolax.parser import HTMLParser, Node

# Listing IDs embedded in URLs, e.g. ".../departamento-palermo-51234567.html"
NUMERIC_ID_PATTERN = re.compile(r'[/-](\d{7,})')


def safe_extract_text(node: Optional[Node]) -> str:
    """Extract text from a node safely, handling None values"""
    if node is None:
        return ""
    return node.text().strip()


def safe_get_attribute(node: Optional[Node], attribute: str) -> Optional[str]:
    """Get an attribute from a node safely, handling None values"""
    if node is None:
        return None
    return node.attributes.get(attribute)


def match_labeled_code(text: str, patterns: Iterable[re.Pattern]) -> Optional[str]:
    """
    Try each labeled pattern against the text in order and return the first
    captured code, trimmed.
    """
    if not text:
        return None

    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def find_code_in_marked_elements(html: str, marker: str, patterns: Sequence[re.Pattern]) -> Optional[str]:
    """
    Scan every element whose class attribute contains `marker` and return the
    first labeled code found in an element's text.
    """
    parser = HTMLParser(html)
    for element in parser.css(f'[class*="{marker}"]'):
        code = match_labeled_code(safe_extract_text(element), patterns)
        if code:
            return code
    return None


def find_attribute_value(html: str, selectors: Sequence[Tuple[str, Sequence[str]]]) -> Optional[str]:
    """
    Return the value of the first present attribute on the first element
    matching each selector, checked in order.
    """
    parser = HTMLParser(html)
    for selector, attributes in selectors:
        node = parser.css_first(selector)
        if node is None:
            continue
        for attribute in attributes:
            value = safe_get_attribute(node, attribute)
            if value:
                return value
    return None


def find_numeric_id(url: str) -> Optional[str]:
    """Return the first run of 7+ digits preceded by "/" or "-" in the URL"""
    if not url:
        return None
    match = NUMERIC_ID_PATTERN.search(url)
    return match.group(1) if match else None
