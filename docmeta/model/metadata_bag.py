"""Read-only view over the field/value output of the upstream content-extraction engine."""

from datetime import datetime
from collections.abc import Iterable as IterableABC, Mapping as MappingABC
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from docmeta.common.dates import parse_datetime

RawValue = Union[str, int, float, bool, Iterable[Any], None]


class MetadataBag(MappingABC):
    """
    Immutable mapping from field name to an ordered tuple of string values.

    Field order and value order are preserved exactly as the upstream engine
    produced them. Lookups never raise for missing fields.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, RawValue]] = None):
        normalized: Dict[str, Tuple[str, ...]] = {}
        for name, raw in (fields or {}).items():
            values = _as_values(raw)
            if values:
                normalized[str(name)] = values
        self._fields = MappingProxyType(normalized)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "MetadataBag":
        """Build a bag from (name, value) pairs, appending repeated names in order."""
        fields: Dict[str, List[str]] = {}
        for name, value in pairs:
            fields.setdefault(name, []).append(value)
        return cls(fields)

    def __getitem__(self, name: str) -> Tuple[str, ...]:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"MetadataBag({dict(self._fields)!r})"

    def names(self) -> List[str]:
        """All field names in insertion order."""
        return list(self._fields)

    def get_values(self, name: str) -> Tuple[str, ...]:
        """All values recorded for a field (empty tuple when absent)."""
        return self._fields.get(name, ())

    def get_first(self, name: str) -> Optional[str]:
        """First value recorded for a field, or None."""
        values = self._fields.get(name)
        return values[0] if values else None

    def get_date(self, name: str) -> Optional[datetime]:
        """First value of a field parsed as a date, or None if absent or unparseable."""
        return parse_datetime(self.get_first(name))

    def with_values(self, updates: Mapping[str, RawValue], append: Iterable[str] = ()) -> "MetadataBag":
        """
        Return a new bag with fields replaced or appended.

        Args:
            updates: Field name -> value(s). Fields listed in ``append`` get the
                values added after any existing ones; every other field is replaced.
            append: Names of fields whose values should be appended

        Returns:
            A new MetadataBag; this bag is left untouched
        """
        append = set(append)
        merged: Dict[str, List[str]] = {name: list(values) for name, values in self._fields.items()}
        for name, raw in updates.items():
            values = list(_as_values(raw))
            if not values:
                continue
            if name in append:
                merged.setdefault(name, []).extend(values)
            else:
                merged[name] = values
        return MetadataBag(merged)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form: single values as strings, multiple values as lists."""
        return {
            name: values[0] if len(values) == 1 else list(values)
            for name, values in self._fields.items()
        }


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_values(raw: RawValue) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, IterableABC):
        # JSON numbers and booleans
        return (_as_text(raw),)
    return tuple(_as_text(value) for value in raw if value is not None)
