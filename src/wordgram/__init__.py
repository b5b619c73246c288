"""
Formal grammars over single-character symbols, their validation
and single-step derivation.
"""

import logging

from .alphabet import Alphabet
from .word import Word
from .productions import Productions
from .grammar import (Grammar, GrammarError, InvalidGrammarError, DisjointAlphabetError,
    InvalidStartSymbolError, UnboundSymbolError, DerivationError, UnknownProductionError,
    AlternativeIndexError)

logging.getLogger(__name__).addHandler(logging.NullHandler())
