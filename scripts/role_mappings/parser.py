"""Mapping builder: walks a role-to-groups document and builds a RoleGroupIndex.

The walk is event driven (element start/end) with one accumulator for the
entry currently open:

    start <role-to-groups-mapping>   reset role and group list
    end   <role-name>                set role from the element text
    end   <group-dn>                 append the element text to the group list
    end   <role-to-groups-mapping>   commit role → groups (later entries win)

Any other element, including the root, changes nothing. The builder trusts a
prior validation pass for cardinality and ordering; it never re-checks them.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from lxml import etree

from role_mappings.errors import ParseError, StreamReadError
from role_mappings.types import ElementName, RoleGroupIndex

logger = logging.getLogger(__name__)


def _leaf_text(elem: etree._Element) -> str:
    """Return the simple-content value of a leaf: its text plus the tails of
    any comments or processing instructions inside it."""
    return (elem.text or "") + "".join(child.tail or "" for child in elem)


def parse(stream: BinaryIO) -> RoleGroupIndex:
    """Build a RoleGroupIndex from a mapping document.

    Consumes the stream but does not close it.

    Raises:
        ParseError: If the document is not a well-formed element stream.
        StreamReadError: If reading the stream fails.
    """
    index: dict[str, list[str]] = {}
    current_role: str | None = None
    current_groups: list[str] = []

    events = etree.iterparse(
        stream,
        events=("start", "end"),
        resolve_entities="internal",
        no_network=True,
    )
    try:
        for event, elem in events:
            name = ElementName.from_tag(etree.QName(elem).localname)
            if name is None:
                continue

            if event == "start":
                if name is ElementName.ROLE_TO_GROUPS_MAPPING:
                    current_role = None
                    current_groups = []
                continue

            if name is ElementName.ROLE_NAME:
                current_role = _leaf_text(elem)
            elif name is ElementName.GROUP_DN:
                current_groups.append(_leaf_text(elem))
            elif name is ElementName.ROLE_TO_GROUPS_MAPPING:
                if current_role in index:
                    logger.debug("Role %r redeclared; later entry replaces it", current_role)
                index[current_role] = current_groups
                elem.clear()
                while elem.getprevious() is not None:
                    del elem.getparent()[0]
    except etree.XMLSyntaxError as e:
        raise ParseError(
            f"Role mappings document could not be parsed: {e}. "
            f"The document passed validation but its event stream failed; "
            f"check whether the file changed between validation and parsing."
        ) from e
    except OSError as e:
        raise StreamReadError(
            f"I/O error while reading role mappings document for parsing: {e}"
        ) from e

    return RoleGroupIndex.from_mapping(index)
