"""
Structured view of the well-known ``target_*`` configuration keys.

The raw ConfigurationSet keeps every entry. Cfg picks out the target
description (architecture, OS, pointer width and so on) and leaves the rest
in ``extras``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .core.exceptions import MissingOutputError
from .entries import ConfigurationEntry, ConfigurationSet, KeyValue
from .invoker import CargoInvoker
from .parser import parse_cfg
from .query import query_host, query_target

REQUIRED_KEYS = (
    "target_arch",
    "target_endian",
    "target_os",
    "target_pointer_width",
)

OPTIONAL_KEYS = (
    "target_env",
    "target_family",
    "target_vendor",
)

FEATURE_KEY = "target_feature"


@dataclass
class Target:
    """
    Target description taken from ``target_*`` entries.

    Attributes:
        arch: Architecture (e.g., 'x86', 'x86_64', 'aarch64')
        endian: Byte order ('little' or 'big')
        os: Operating system (e.g., 'linux', 'macos', 'windows', 'none')
        pointer_width: Pointer width in bits as printed (e.g., '32', '64')
        env: ABI environment (e.g., 'gnu', 'msvc', 'musl'), None if empty
        family: Last printed target family (e.g., 'unix', 'wasm'), None if
            absent or empty
        vendor: Vendor (e.g., 'pc', 'apple', 'unknown'), None if empty
        features: Enabled target features, in output order
        families: Every non-empty target family, in output order
    """

    arch: str
    endian: str
    os: str
    pointer_width: str
    env: Optional[str] = None
    family: Optional[str] = None
    vendor: Optional[str] = None
    features: List[str] = field(default_factory=list)
    families: List[str] = field(default_factory=list)

    def has_feature(self, feature: str) -> bool:
        """Whether a target feature is enabled."""
        return feature in self.features

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arch": self.arch,
            "endian": self.endian,
            "env": self.env,
            "family": self.family,
            "families": list(self.families),
            "features": list(self.features),
            "os": self.os,
            "pointer_width": self.pointer_width,
            "vendor": self.vendor,
        }


@dataclass
class Cfg:
    """
    Parsed compiler configuration split into target description and extras.

    Attributes:
        target: Values of the well-known ``target_*`` keys
        extras: Every other entry, in output order
    """

    target: Target
    extras: List[ConfigurationEntry] = field(default_factory=list)

    @classmethod
    def from_configuration(cls, config: ConfigurationSet) -> "Cfg":
        """
        Build a Cfg from a parsed configuration.

        Args:
            config: Parsed ``--print cfg`` output

        Returns:
            Cfg instance

        Raises:
            MissingOutputError: If a required ``target_*`` key is absent
        """
        values: Dict[str, str] = {}
        families: List[str] = []
        features: List[str] = []
        extras: List[ConfigurationEntry] = []

        for entry in config:
            if not isinstance(entry, KeyValue):
                extras.append(entry)
            elif entry.key == FEATURE_KEY:
                features.append(entry.value)
            elif entry.key in REQUIRED_KEYS or entry.key in OPTIONAL_KEYS:
                # later duplicates overwrite, matching the last printed value
                values[entry.key] = entry.value
                if entry.key == "target_family" and entry.value:
                    families.append(entry.value)
            else:
                extras.append(entry)

        for key in REQUIRED_KEYS:
            if key not in values:
                raise MissingOutputError(key)

        target = Target(
            arch=values["target_arch"],
            endian=values["target_endian"],
            os=values["target_os"],
            pointer_width=values["target_pointer_width"],
            env=values.get("target_env") or None,
            family=values.get("target_family") or None,
            vendor=values.get("target_vendor") or None,
            features=features,
            families=families,
        )
        return cls(target=target, extras=extras)

    @classmethod
    def from_text(cls, text: str) -> "Cfg":
        """Parse ``--print cfg`` output and build a Cfg from it."""
        return cls.from_configuration(parse_cfg(text))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target.to_dict(),
            "extras": [str(entry) for entry in self.extras],
        }


def host_cfg(
    invoker: Optional[CargoInvoker] = None,
    cargo_args: Sequence[str] = (),
    rustc_args: Sequence[str] = (),
) -> Cfg:
    """Query the host configuration and summarize it as a Cfg."""
    return Cfg.from_configuration(query_host(invoker, cargo_args, rustc_args))


def target_cfg(
    triple: str,
    invoker: Optional[CargoInvoker] = None,
    cargo_args: Sequence[str] = (),
    rustc_args: Sequence[str] = (),
) -> Cfg:
    """
    Query a target triple's configuration and summarize it as a Cfg.

    Example:
        >>> cfg = target_cfg("i686-pc-windows-msvc")
        >>> cfg.target.arch, cfg.target.env
        ('x86', 'msvc')
    """
    return Cfg.from_configuration(
        query_target(triple, invoker, cargo_args, rustc_args)
    )


__all__ = [
    "Cfg",
    "Target",
    "host_cfg",
    "target_cfg",
]
