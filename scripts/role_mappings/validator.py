"""Schema validation for role-to-groups mapping documents.

Public API:
    SCHEMA_RESOURCE   — logical name of the bundled schema inside this package
    load_schema()     — compiled XMLSchema (cached per process)
    validate(stream)  — raise unless stream is a conforming document

The schema is not caller-configurable: it is always read from the package
resource, never from a filesystem path.
"""

from __future__ import annotations

import functools
import logging
from importlib import resources
from typing import BinaryIO

from lxml import etree

from role_mappings.errors import StreamReadError, ValidationError, ValidationIssue

logger = logging.getLogger(__name__)

SCHEMA_RESOURCE = "xsd/role-to-groups.xsd"


def _issues(error_log: etree._ListErrorLog) -> tuple[ValidationIssue, ...]:
    return tuple(
        ValidationIssue(line=entry.line, column=entry.column, message=entry.message)
        for entry in error_log
    )


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities="internal", no_network=True)


@functools.lru_cache(maxsize=1)
def load_schema() -> etree.XMLSchema:
    """Compile the bundled role-to-groups schema."""
    source = resources.files("role_mappings").joinpath(SCHEMA_RESOURCE).read_bytes()
    schema = etree.XMLSchema(etree.fromstring(source, _xml_parser()))
    logger.debug("Compiled schema resource %s", SCHEMA_RESOURCE)
    return schema


def validate(stream: BinaryIO) -> None:
    """Validate a mapping document against the bundled schema.

    Consumes the stream but does not close it.

    Raises:
        StreamReadError: If reading the stream fails.
        ValidationError: If the document is not well-formed XML or violates
            the schema. The error carries the validator's issues.
    """
    schema = load_schema()

    try:
        document = etree.parse(stream, _xml_parser())
    except etree.XMLSyntaxError as e:
        raise ValidationError(
            f"Role mappings document is not well-formed XML: {e}. "
            f"Fix: correct the XML syntax at the reported line/column.",
            _issues(e.error_log),
        ) from e
    except OSError as e:
        raise StreamReadError(
            f"I/O error while reading role mappings document for validation: {e}"
        ) from e

    try:
        valid = schema.validate(document)
    except etree.XMLSchemaValidateError as e:
        raise ValidationError(
            f"Role mappings document could not be checked against {SCHEMA_RESOURCE}: {e}. "
            f"Fix: remove external entity references and DTD constructs the "
            f"validator cannot expand.",
            _issues(e.error_log),
        ) from e

    if not valid:
        issues = _issues(schema.error_log)
        raise ValidationError(
            f"Role mappings document violates {SCHEMA_RESOURCE} "
            f"({len(issues)} issue(s)). Each <role-to-groups-mapping> needs one "
            f"non-empty <role-name> followed by one or more non-empty <group-dn>. "
            f"Fix: correct the elements reported below.",
            issues,
        )
