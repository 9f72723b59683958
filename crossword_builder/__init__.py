"""Interactive crossword builder.

This package exposes the public API surface via:

- ``crossword_builder.engine.session.CrosswordSession``: editing surface with undo/redo.
- ``crossword_builder.engine.placement.place_best_fit``: greedy single-word placement.
- ``crossword_builder.engine.symmetry.toggle_block``: symmetric block editing.
- ``crossword_builder.engine.autofill.run_autofill``: prioritized multi-word fill.
"""

from .core.constants import Direction, SymmetryMode
from .core.models import NoPlacement, Placement, PlacedWord
from .data.word_bank import WordBank
from .data.word_source import BuiltinWordSource
from .engine.autofill import AutofillConfig, run_autofill
from .engine.grid import CrosswordGrid
from .engine.placement import place_best_fit
from .engine.session import CrosswordSession, SessionConfig
from .engine.symmetry import toggle_block

__all__ = [
    "AutofillConfig",
    "BuiltinWordSource",
    "CrosswordGrid",
    "CrosswordSession",
    "Direction",
    "NoPlacement",
    "PlacedWord",
    "Placement",
    "SessionConfig",
    "SymmetryMode",
    "WordBank",
    "place_best_fit",
    "run_autofill",
    "toggle_block",
]

__version__ = "0.1.0"
