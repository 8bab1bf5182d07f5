"""Mode-specific scanners for the scriptlex external scanner.

Each scanner is a mixin that provides scanning logic for one part of a
scan() call (instruction text, pending dedents, line boundaries).
"""

from __future__ import annotations

from scriptlex.lexer.scanners.dedent import PendingDedentScannerMixin
from scriptlex.lexer.scanners.instruction import InstructionScannerMixin
from scriptlex.lexer.scanners.line import LineBoundary, LineScannerMixin

__all__ = [
    "InstructionScannerMixin",
    "LineBoundary",
    "LineScannerMixin",
    "PendingDedentScannerMixin",
]
