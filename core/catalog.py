# =============================================================================
# core/catalog.py  —  Tool Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the static mapping from tool name to ToolDescriptor and answers
#   "which descriptor handles this tool name?".
#
# LIFECYCLE:
#   The catalog is populated exactly once, at construction, before any call is
#   served.  There is no add/remove at runtime; concurrent calls only ever
#   read it, so no locking is needed.
#
# The actual Interzoid tool list lives in core/tool_definitions.py.  This
# module only knows the *shape* of a catalog.
# =============================================================================

from typing import Iterable, Iterator

from core.models import ParamMapping, ToolDescriptor


def same(name: str, description: str = "") -> ParamMapping:
    """Parameter whose tool-facing name is also the API query-parameter name."""
    return ParamMapping(caller_name=name, remote_name=name, description=description)


def mapped(caller_name: str, remote_name: str, description: str = "") -> ParamMapping:
    """Parameter shown to the LLM under one name and sent to the API under another."""
    return ParamMapping(caller_name=caller_name, remote_name=remote_name, description=description)


class ToolCatalog:
    """Ordered, read-only collection of tool descriptors."""

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        by_name: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in by_name:
                raise ValueError(f"Duplicate tool name in catalog: {descriptor.name!r}")
            by_name[descriptor.name] = descriptor
        self._by_name = by_name

    def get(self, name: str) -> ToolDescriptor | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return list(self._by_name)

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
