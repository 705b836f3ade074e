"""Type definitions for role-to-groups mappings.

ElementName enumerates the four elements of a mapping document.
RoleGroupIndex is the immutable result of a successful load.

Source of truth for the document shape: role_mappings/xsd/role-to-groups.xsd
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


# ─── Enums ────────────────────────────────────────────────────────────────────


class ElementName(StrEnum):
    """Elements recognized by the mapping builder.

    Member names are the XML local names upper-cased with hyphens replaced by
    underscores; values are the literal XML names.
    """

    ROLE_TO_GROUPS_MAPPINGS = "role-to-groups-mappings"
    ROLE_TO_GROUPS_MAPPING = "role-to-groups-mapping"
    ROLE_NAME = "role-name"
    GROUP_DN = "group-dn"

    @classmethod
    def from_tag(cls, tag: str) -> ElementName | None:
        """Return the member for an element local name, or None if unknown."""
        return cls.__members__.get(tag.upper().replace("-", "_"))


# ─── RoleGroupIndex ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RoleGroupIndex:
    """Read-only role → group DNs mapping with a derived reverse lookup.

    Keys are case-sensitive role names. Each value is the ordered tuple of
    group DNs declared for that role; repeats are kept as declared.
    Iteration order is the order in which each role was first committed.
    """

    mappings: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> RoleGroupIndex:
        """Build an index from a role → groups mapping, copying and freezing it."""
        frozen = {role: tuple(groups) for role, groups in mapping.items()}
        return cls(mappings=MappingProxyType(frozen))

    @property
    def roles(self) -> tuple[str, ...]:
        return tuple(self.mappings)

    def groups_for_role(self, role: str | None) -> tuple[str, ...]:
        """Return the group DNs for a role; empty for a missing or unknown role."""
        if not role:
            return ()
        return self.mappings.get(role, ())

    def roles_for_group(self, group_dn: str | None) -> tuple[str, ...]:
        """Return every role whose group list contains group_dn.

        Computed by scanning the forward mapping; no reverse index is kept.
        """
        if not group_dn:
            return ()
        return tuple(
            role for role, groups in self.mappings.items() if group_dn in groups
        )

    def __len__(self) -> int:
        return len(self.mappings)

    def __contains__(self, role: object) -> bool:
        return role in self.mappings
