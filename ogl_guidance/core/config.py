"""
Guidance configuration.

Central configuration object holding the law gains.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .types import GuidanceGains


@dataclass
class GuidanceConfig:
    """Top-level guidance configuration.

    The default gains reproduce the constant-gravity optimal law. Other
    pairs emulate the generalized ZEM/ZEV family.
    """
    gains: GuidanceGains = field(default_factory=GuidanceGains.optimal)

    def describe(self) -> str:
        """Human-readable description of the configured law."""
        label = "OGL (optimal)" if self.gains.is_optimal else "Generalized ZEM/ZEV"
        return (f"{label}: k_r = {self.gains.zem_gain:g}, "
                f"k_v = {self.gains.zev_gain:g}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> GuidanceConfig:
        """Build a configuration from flat gain keys.

        Args:
            mapping: May contain ``zem_gain`` and ``zev_gain``; missing keys
                keep their optimal defaults.

        Returns:
            GuidanceConfig with the requested gains.

        Raises:
            ValueError: If the mapping holds keys other than the gains, or a
                gain value is not a number.
        """
        known = {f.name for f in fields(GuidanceGains)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(
                f"Unknown guidance config keys: {', '.join(unknown)} "
                f"(expected a subset of {sorted(known)})"
            )
        values = {}
        for key, value in mapping.items():
            try:
                values[key] = float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"Guidance config key {key!r} must be a number, got {value!r}"
                ) from exc
        return cls(gains=GuidanceGains(**values))
