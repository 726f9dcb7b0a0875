"""Load and save MSBuild XML documents without disturbing their layout."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from constants import Constants
from msbuild.models import ProjectParseError

logger = logging.getLogger(__name__)

_BOM = b"\xef\xbb\xbf"


def namespace_of(tag: str) -> Optional[str]:
    """Return the namespace URI of a '{uri}local' tag, or None."""
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def local_name(tag: str) -> str:
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def strip_namespace(root: ET.Element, namespace: str) -> None:
    """Drop the '{namespace}' prefix from every tag in that namespace."""
    prefix = f"{{{namespace}}}"
    for elem in root.iter():
        if isinstance(elem.tag, str) and elem.tag.startswith(prefix):
            elem.tag = elem.tag[len(prefix):]


@dataclass
class XmlDocument:
    """A parsed XML file plus the byte-level details needed to write it back.

    Tags in the root element's namespace are stored without it; the
    namespace is declared again on the root when serialising.
    """
    path: str
    root: ET.Element
    namespace: Optional[str] = None
    has_bom: bool = False
    has_declaration: bool = False
    trailing_newline: bool = False

    def to_bytes(self) -> bytes:
        attrib = self.root.attrib
        if self.namespace:
            self.root.attrib = {"xmlns": self.namespace, **attrib}
        try:
            body = ET.tostring(self.root, encoding="utf-8", xml_declaration=self.has_declaration)
        finally:
            self.root.attrib = attrib
        if self.has_bom:
            body = _BOM + body
        if self.trailing_newline:
            body += b"\n"
        return body

    def save(self) -> None:
        """Write the document back to the path it was loaded from.

        The file is only opened once serialisation has succeeded.
        """
        data = self.to_bytes()
        with open(self.path, "wb") as fh:
            fh.write(data)
        logger.debug("Saved %s", self.path)


ProjectDocument = XmlDocument


def parse_document(path: str) -> XmlDocument:
    """Parse an XML file, keeping comments and processing instructions.

    Raises:
        ProjectParseError: The file is not well-formed XML.
        OSError: The file cannot be read.
    """
    with open(path, "rb") as fh:
        data = fh.read()

    has_bom = data.startswith(_BOM)
    if has_bom:
        data = data[len(_BOM):]

    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
    try:
        root = ET.fromstring(data, parser=parser)
    except ET.ParseError as e:
        raise ProjectParseError(path, str(e)) from e
    root.tail = None

    namespace = namespace_of(root.tag)
    if namespace:
        strip_namespace(root, namespace)

    return XmlDocument(
        path=path,
        root=root,
        namespace=namespace,
        has_bom=has_bom,
        has_declaration=data.lstrip().startswith(b"<?xml"),
        trailing_newline=data.endswith(b"\n"),
    )


def load_project(path: str) -> ProjectDocument:
    return parse_document(path)


def iter_package_elements(document: XmlDocument) -> Iterator[ET.Element]:
    """Yield reference elements found directly under top-level ItemGroups.

    All PackageReference elements come first, then DotNetCliToolReference.
    """
    groups = document.root.findall(Constants.ITEM_GROUP)
    for kind in Constants.REFERENCE_ELEMENTS:
        for group in groups:
            yield from group.findall(kind)


def get_attribute(element: ET.Element, field: str) -> Optional[Tuple[str, str]]:
    """Look up a logical attribute ("id" or "version") via ATTRIBUTE_NAMES.

    Returns:
        (actual attribute name, value) for the first spelling present, or None.
    """
    for name in Constants.ATTRIBUTE_NAMES[field]:
        value = element.get(name)
        if value is not None:
            return name, value
    return None


def serialize_element(element: ET.Element) -> str:
    """Render one element as markup, for warnings."""
    return ET.tostring(element, encoding="unicode").strip()
