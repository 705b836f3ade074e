"""Role-to-groups mappings — public API.

Loads an XML file that maps security roles to directory group DNs, validates
it against the bundled schema (role_mappings/xsd/role-to-groups.xsd), and
exposes forward and reverse lookups over the result.

Public API (re-exported from submodules):

Loader (from loader.py):
    load(pathname, *, base_dir=None, opener=open_stream) → RoleGroupIndex

Types (from types.py):
    RoleGroupIndex  — immutable role → group DNs index
                      groups_for_role(role), roles_for_group(group_dn)
    ElementName     — the four elements of a mapping document

Phases (usable on their own):
    validate(stream)  — raise ValidationError unless stream conforms
    parse(stream)     — build a RoleGroupIndex from a validated document
    resolve(pathname, base_dir=None) — absolute Path for a mapping file
    open_stream(path) — open a resolved path for binary reading

Errors (from errors.py):
    RoleMappingsError    — base class
    ResolutionError, StreamOpenError, StreamReadError,
    ValidationError, ParseError — stage errors
    InitializationError  — the only error load() raises
    ValidationIssue      — one line/column/message from the validator

Example::

    from role_mappings import load

    index = load("conf/role-to-groups.xml")
    index.groups_for_role("admin")
    index.roles_for_group("cn=admins,ou=groups,dc=example,dc=org")
"""

from role_mappings.errors import (
    InitializationError,
    ParseError,
    ResolutionError,
    RoleMappingsError,
    StreamOpenError,
    StreamReadError,
    ValidationError,
    ValidationIssue,
)
from role_mappings.loader import load
from role_mappings.parser import parse
from role_mappings.paths import BASE_DIR_ENV, get_base_dir, open_stream, resolve
from role_mappings.types import ElementName, RoleGroupIndex
from role_mappings.validator import SCHEMA_RESOURCE, load_schema, validate

__all__ = [
    "BASE_DIR_ENV",
    "ElementName",
    "InitializationError",
    "ParseError",
    "ResolutionError",
    "RoleGroupIndex",
    "RoleMappingsError",
    "SCHEMA_RESOURCE",
    "StreamOpenError",
    "StreamReadError",
    "ValidationError",
    "ValidationIssue",
    "get_base_dir",
    "load",
    "load_schema",
    "open_stream",
    "parse",
    "resolve",
    "validate",
]
