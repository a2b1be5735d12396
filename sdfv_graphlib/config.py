# sdfv_graphlib/config.py
"""Tuning knobs shared by the graph analyses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """Tuning knobs for cycle enumeration and loop analysis.

    Attributes
    ----------
    coalesce_nested : bool
        Report only the outermost loop's back edge per loop header; inner
        back edges go to the eclipsed set.
    max_cycles : int or None
        Stop cycle enumeration after this many cycles.  ``None`` enumerates
        every elementary cycle.
    """
    coalesce_nested: bool = False
    max_cycles: Optional[int] = None

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.max_cycles is not None and self.max_cycles <= 0:
            warnings.append("max_cycles must be positive")
        return warnings

    def log_warnings(self, owner: str) -> None:
        for w in self.validate():
            logger.warning("%s: %s", owner, w)
