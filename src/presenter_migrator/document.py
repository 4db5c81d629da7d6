"""ProPresenter 5 (.pro5) XML documents."""
from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Tag
from bs4.formatter import XMLFormatter

from .constants import DEFAULT_ENCODING, DOCUMENT_TAG, SLIDE_GROUP_TAG
from .errors import MalformedInputError


class AttributeFormatter(XMLFormatter):
    """Minimal XML formatter that keeps line breaks in attribute values as character references."""

    def __init__(self) -> None:
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attribute_value(self, value: str) -> str:
        # Parsers normalise literal newlines and tabs in attributes to spaces
        return (
            super().attribute_value(value)
            .replace("\r", "&#13;")
            .replace("\n", "&#10;")
            .replace("\t", "&#9;")
        )


FORMATTER = AttributeFormatter()


class ProPresenter5Document:
    """Wrapper around a parsed .pro5 document exposing the parts songs are merged into."""

    def __init__(self, markup: str | bytes, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding
        if isinstance(markup, bytes):
            self.xml = BeautifulSoup(markup, features="lxml-xml", from_encoding=encoding)
        else:
            self.xml = BeautifulSoup(markup, features="lxml-xml")

        doc = self.xml.find(DOCUMENT_TAG)
        if doc is None:
            raise MalformedInputError(f"No {DOCUMENT_TAG} element in ProPresenter document")
        self._doc: Tag = doc

    @property
    def doc(self) -> Tag:
        return self._doc

    @property
    def slide_groups(self) -> list[Tag]:
        return self._doc.find_all(SLIDE_GROUP_TAG)

    def to_bytes(self) -> bytes:
        """Serialize the document, declaring the configured encoding."""
        return self.xml.encode(self.encoding, formatter=FORMATTER)
