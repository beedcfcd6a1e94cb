"""Descriptor loader — reads POM files into ``Descriptor`` values.

Parsing is delegated to a ``DescriptorParser``.  ``XmlDescriptorParser`` is
the default backend; any object with a matching ``parse`` method can be
injected instead.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Protocol, runtime_checkable

from pominstall.core.errors import DescriptorMalformed, DescriptorUnreadable
from pominstall.models.descriptor import Descriptor, ParentRef

logger = logging.getLogger(__name__)

DEFAULT_PACKAGING = "jar"


class DescriptorSyntaxError(ValueError):
    """Raised by parsers when descriptor bytes are not a valid POM."""


# ---------------------------------------------------------------------------
# Parser protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class DescriptorParser(Protocol):
    """Protocol for descriptor parsing backends."""

    def parse(self, data: bytes) -> Descriptor:
        """Parse raw descriptor bytes.

        Raises
        ------
        DescriptorSyntaxError
            If ``data`` is not a well-formed descriptor document.
        """
        ...


class XmlDescriptorParser:
    """Reads Maven POM XML, with or without the POM 4.0.0 namespace.

    Only the identity fields are extracted.  A missing ``<packaging>``
    element means ``jar``, matching the Maven model default.
    """

    def parse(self, data: bytes) -> Descriptor:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise DescriptorSyntaxError(str(exc)) from exc

        if _local_name(root.tag) != "project":
            raise DescriptorSyntaxError(
                f"expected root element 'project', found '{_local_name(root.tag)}'"
            )

        parent = None
        parent_el = _child(root, "parent")
        if parent_el is not None:
            parent = ParentRef(
                group_id=_text(parent_el, "groupId"),
                artifact_id=_text(parent_el, "artifactId"),
                version=_text(parent_el, "version"),
            )

        packaging = _text(root, "packaging")
        if _child(root, "packaging") is None:
            packaging = DEFAULT_PACKAGING

        return Descriptor(
            group_id=_text(root, "groupId"),
            artifact_id=_text(root, "artifactId"),
            version=_text(root, "version"),
            packaging=packaging,
            parent=parent,
        )


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child
    return None


def _text(element: ET.Element, name: str) -> str | None:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class DescriptorLoader:
    """Reads a descriptor file from disk and parses it.

    Parameters
    ----------
    parser:
        Parsing backend.  Defaults to ``XmlDescriptorParser``.
    """

    def __init__(self, parser: DescriptorParser | None = None) -> None:
        self._parser = parser or XmlDescriptorParser()

    def load(self, path: Path) -> Descriptor:
        """Parse the descriptor at ``path``.

        Raises
        ------
        DescriptorUnreadable
            If the file cannot be read.
        DescriptorMalformed
            If the content is not a well-formed descriptor.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise DescriptorUnreadable(path) from exc
        try:
            descriptor = self._parser.parse(data)
        except DescriptorSyntaxError as exc:
            raise DescriptorMalformed(path, str(exc)) from exc
        logger.debug("Loaded descriptor %s", path)
        return descriptor
