"""Best-effort pretty-printing of JSON, XML and HTML bodies."""

import json
import logging
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

XML_TYPES = {"application/xml", "text/xml"}


def _mime_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_json(content_type: str | None) -> bool:
    mime = _mime_type(content_type)
    return mime == "application/json" or (mime.startswith("application/") and mime.endswith("+json"))


def is_xml(content_type: str | None) -> bool:
    mime = _mime_type(content_type)
    return mime in XML_TYPES or (mime.startswith("application/") and mime.endswith("+xml"))


def is_html(content_type: str | None) -> bool:
    return _mime_type(content_type) == "text/html"


def prettify_json(content: str) -> str:
    return json.dumps(json.loads(content), indent=2, ensure_ascii=False)


def prettify_xml(content: str) -> str:
    pretty = minidom.parseString(content).toprettyxml(indent="  ")
    # toprettyxml keeps the original whitespace text nodes as blank lines
    return "\n".join(line for line in pretty.splitlines() if line.strip())


def prettify_html(content: str) -> str:
    return BeautifulSoup(content, "html.parser").prettify().rstrip("\n")


def prettify(content: str, content_type: str | None) -> str:
    """Format ``content`` according to ``content_type``.

    Returns the content unchanged when the type is not recognised or the
    content cannot be parsed.
    """
    if not content:
        return content
    try:
        if is_json(content_type):
            return prettify_json(content)
        if is_xml(content_type):
            return prettify_xml(content)
        if is_html(content_type):
            return prettify_html(content)
    except (ValueError, ExpatError) as e:
        logger.debug("Could not prettify %s content: %s", content_type, e)
    return content
