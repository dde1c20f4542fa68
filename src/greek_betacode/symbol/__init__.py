"""
Symbol submodule.

Re-exports the Betacode symbol accumulator and its result types.
"""

from greek_betacode.symbol._rules import (
    Accent,
    AddResult,
    AddStatus,
    Breathing,
    Symbol,
)

__all__ = ["Accent", "AddResult", "AddStatus", "Breathing", "Symbol"]
