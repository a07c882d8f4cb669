"""Tolerant, claim-tracking reads from a MetadataBag."""

import math
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, TypeVar

from docmeta.common.dates import parse_bool, parse_datetime, parse_marked
from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.steps.metadata import properties as P

T = TypeVar("T")


def _parse_float(value: str) -> float:
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


class FieldMapper:
    """
    Reads typed values out of a bag and remembers which fields were consumed.

    A field is claimed once its value has been written to a typed slot. A
    value that cannot be parsed is logged and left unclaimed, so it shows up
    in ``additional_metadata()`` instead of being lost.
    """

    def __init__(self, bag: MetadataBag, logger=None):
        if not isinstance(bag, MetadataBag):
            raise TypeError(f"expected MetadataBag, got {type(bag).__name__}")
        self.bag = bag
        self.claimed: Set[str] = set()
        self.logger = logger or get_logger(self.__class__.__name__)

    def claim(self, *names: str) -> None:
        self.claimed.update(name for name in names if name in self.bag)

    def first(self, name: str) -> Optional[str]:
        """First value, trimmed; None when absent or blank. Does not claim."""
        value = self.bag.get_first(name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    def names_with_prefix(self, prefix: str) -> List[str]:
        return [name for name in self.bag.names() if name.startswith(prefix)]

    # --- typed single values -------------------------------------------------

    def string(self, name: str) -> Optional[str]:
        if name not in self.bag:
            return None
        self.claimed.add(name)
        return self.first(name)

    def _parsed(self, name: str, parser: Callable[[str], T], kind: str) -> Optional[T]:
        raw = self.first(name)
        if raw is None:
            self.claim(name)
            return None
        try:
            value = parser(raw)
        except (TypeError, ValueError):
            self.logger.warning(f"Ignoring malformed {kind} for {name}: {raw!r}")
            return None
        self.claimed.add(name)
        return value

    def integer(self, name: str) -> Optional[int]:
        return self._parsed(name, int, "integer")

    def floating(self, name: str) -> Optional[float]:
        return self._parsed(name, _parse_float, "number")

    def boolean(self, name: str) -> Optional[bool]:
        return self._parsed(name, parse_bool, "boolean")

    def marked(self, name: str) -> Optional[bool]:
        """Rights-marked flag: only "true" (any case) is True."""
        return self._parsed(name, parse_marked, "boolean")

    def timestamp(self, name: str) -> Optional[datetime]:
        raw = self.first(name)
        if raw is None:
            self.claim(name)
            return None
        value = parse_datetime(raw)
        if value is None:
            self.logger.warning(f"Ignoring malformed date for {name}: {raw!r}")
            return None
        self.claimed.add(name)
        return value

    def timestamp_with_raw(self, name: str) -> Tuple[Optional[datetime], Optional[str]]:
        """Parsed timestamp plus the raw string when parsing failed. Always claims."""
        raw = self.string(name)
        if raw is None:
            return None, None
        value = parse_datetime(raw)
        if value is None:
            self.logger.warning(f"Keeping unparsed date for {name}: {raw!r}")
            return None, raw
        return value, None

    # --- typed multi values --------------------------------------------------

    def strings(self, name: str) -> List[str]:
        """Every non-blank value, trimmed, in bag order."""
        self.claim(name)
        return [value.strip() for value in self.bag.get_values(name) if value.strip()]

    def _parsed_list(self, name: str, parser: Callable[[str], T], kind: str) -> List[T]:
        values = [value.strip() for value in self.bag.get_values(name) if value.strip()]
        try:
            parsed = [parser(value) for value in values]
        except (TypeError, ValueError):
            self.logger.warning(f"Ignoring malformed {kind} list for {name}: {values!r}")
            return []
        self.claim(name)
        return parsed

    def integers(self, name: str) -> List[int]:
        return self._parsed_list(name, int, "integer")

    def floats(self, name: str) -> List[float]:
        return self._parsed_list(name, _parse_float, "number")

    def timestamps(self, name: str) -> List[datetime]:
        def _parse(value: str) -> datetime:
            parsed = parse_datetime(value)
            if parsed is None:
                raise ValueError(value)
            return parsed

        return self._parsed_list(name, _parse, "date")

    def prefixed(self, prefix: str) -> Dict[str, str]:
        """First value of every field starting with ``prefix``, keyed by the remainder."""
        result = {}
        for name in self.names_with_prefix(prefix):
            value = self.string(name)
            if value is not None:
                result[name[len(prefix):]] = value
        return result

    # --- fallback ------------------------------------------------------------

    def additional_metadata(self) -> Dict[str, Any]:
        """Every unclaimed field with all of its trimmed, non-blank values."""
        result: Dict[str, Any] = {}
        for name, values in self.bag.items():
            if name in self.claimed:
                continue
            kept = [value.strip() for value in values if value.strip()]
            if not kept:
                continue
            result[name] = kept[0] if len(kept) == 1 else kept
        return result

    def base_fields(self, parser_id: Optional[str], engine_version: Optional[str], claim: bool = True) -> Dict[str, Any]:
        """
        Fields common to every metadata variant.

        Must be called after the variant-specific fields have been read, since
        it computes the fallback map from whatever is still unclaimed.

        Args:
            parser_id: Identifier of the upstream parser
            engine_version: Version string of the upstream engine
            claim: When False, the MIME type and parse warnings are read but left
                in the fallback map

        Returns:
            Keyword arguments for a ``TypedMetadata`` subclass
        """
        if claim:
            mime_type = self.string(P.CONTENT_TYPE)
            warnings = self.strings(P.PARSING_WARNING)
        else:
            mime_type = self.first(P.CONTENT_TYPE)
            warnings = [value.strip() for value in self.bag.get_values(P.PARSING_WARNING) if value.strip()]
        return {
            "detected_mime_type": mime_type,
            "parser_id": parser_id,
            "engine_version": engine_version,
            "raw_metadata": self.bag.to_dict(),
            "parse_warnings": warnings,
            "additional_metadata": self.additional_metadata(),
        }
