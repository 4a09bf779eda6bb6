"""
Configuration entry types.

A compiler configuration is an ordered list of entries, one per line of
``--print cfg`` output. Each entry is either a bare flag (``unix``,
``debug_assertions``) or a key bound to a quoted value (``target_os="linux"``).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


def escape_value(value: str) -> str:
    """
    Escape a value so it can be written back between double quotes.

    Quotes are always escaped. A backslash is doubled only where it would
    otherwise read as an escape (before a quote, a backslash or the end), so a
    literal sequence such as ``\\n`` is written back unchanged.
    """
    chars = []
    for i, ch in enumerate(value):
        if ch == '"':
            chars.append('\\"')
        elif ch == "\\" and (i + 1 == len(value) or value[i + 1] in '"\\'):
            chars.append("\\\\")
        else:
            chars.append(ch)
    return "".join(chars)



@dataclass(frozen=True)
class Flag:
    """
    A bare configuration flag with no associated value.

    Attributes:
        name: Flag identifier (e.g., 'unix', 'debug_assertions')
    """

    name: str

    @property
    def key(self) -> str:
        """Identifier of the entry, shared with KeyValue for uniform lookup."""
        return self.name

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "flag", "name": self.name}


@dataclass(frozen=True)
class KeyValue:
    """
    A configuration key bound to a string value.

    Attributes:
        key: Identifier (e.g., 'target_arch', 'target_feature')
        value: Unquoted, unescaped value (e.g., 'x86_64', 'sse2')
    """

    key: str
    value: str

    def __str__(self) -> str:
        return f'{self.key}="{escape_value(self.value)}"'

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "key_value", "key": self.key, "value": self.value}


ConfigurationEntry = Union[Flag, KeyValue]


@dataclass
class ConfigurationSet:
    """
    Ordered collection of configuration entries from one compiler query.

    Entries keep the order in which the compiler printed them. Duplicates are
    kept as well, since keys such as ``target_feature`` legitimately appear
    many times.
    """

    entries: List[ConfigurationEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ConfigurationEntry]:
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def __contains__(self, item) -> bool:
        return item in self.entries

    def append(self, entry: ConfigurationEntry) -> None:
        """Add an entry at the end of the set."""
        self.entries.append(entry)

    def flags(self) -> List[str]:
        """Names of all bare flags, in output order."""
        return [entry.name for entry in self.entries if isinstance(entry, Flag)]

    def key_values(self) -> List[KeyValue]:
        """All key/value entries, in output order."""
        return [entry for entry in self.entries if isinstance(entry, KeyValue)]

    def has_flag(self, name: str) -> bool:
        """
        Check whether a bare flag is present.

        Args:
            name: Flag identifier

        Returns:
            True if a Flag with this name appears in the set
        """
        return any(
            isinstance(entry, Flag) and entry.name == name for entry in self.entries
        )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the first value bound to a key.

        Args:
            key: Key identifier (e.g., 'target_os')
            default: Returned when the key is absent

        Returns:
            First value for the key, or default
        """
        for entry in self.entries:
            if isinstance(entry, KeyValue) and entry.key == key:
                return entry.value
        return default

    def get_all(self, key: str) -> List[str]:
        """
        Get every value bound to a key, in output order.

        Args:
            key: Key identifier (e.g., 'target_feature')

        Returns:
            List of values, empty if the key is absent
        """
        return [
            entry.value
            for entry in self.entries
            if isinstance(entry, KeyValue) and entry.key == key
        ]

    def keys(self) -> List[str]:
        """Distinct identifiers of all entries, in first-seen order."""
        seen: Dict[str, None] = {}
        for entry in self.entries:
            seen.setdefault(entry.key, None)
        return list(seen)

    def to_text(self) -> str:
        """Serialize back to ``--print cfg`` text, one entry per line."""
        return "".join(f"{entry}\n" for entry in self.entries)

    def to_list(self) -> List[Dict[str, Any]]:
        """Convert to plain data suitable for JSON or YAML output."""
        return [entry.to_dict() for entry in self.entries]


__all__ = [
    "Flag",
    "KeyValue",
    "ConfigurationEntry",
    "ConfigurationSet",
    "escape_value",
]
