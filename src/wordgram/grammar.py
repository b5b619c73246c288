"""
This module provides the `Grammar` class, which binds together
the non-terminal and terminal alphabets, the start symbol and
the production rules, and the exceptions it raises.

A grammar is validated once, during construction, and cannot be
changed afterwards.

    >>> g = Grammar('SN', 'ab', 'S', {'S': ['N'], 'N': ['aNb', 'ab']})
    >>> g.root()
    'S'
    >>> g.rules('N')
    (Word('aNb'), Word('ab'))

Errors during grammar construction
----------------------------------
If the grammar violates one of its invariants, the constructor raises
a subclass of `InvalidGrammarError`. The checks are performed in a fixed
order and the first failing check determines the exception.

 1. The alphabets must be disjoint, otherwise `DisjointAlphabetError`
    is raised.
 2. The start symbol must be a non-terminal, otherwise
    `InvalidStartSymbolError` is raised.
 3. Every word used by the rules must be made of the grammar's symbols,
    otherwise `UnboundSymbolError` is raised.

    >>> Grammar('S', 'S', 'S', {})
    Traceback (most recent call last):
        ...
    wordgram.grammar.DisjointAlphabetError: the alphabets share symbols: S
    >>> Grammar('SN', 'ab', 'Z', {})
    Traceback (most recent call last):
        ...
    wordgram.grammar.InvalidStartSymbolError: the start symbol is not a non-terminal: 'Z'
    >>> Grammar('SN', 'ab', 'S', {'S': ['N', 'e'], 'N': ['aNb', 'ab']})
    Traceback (most recent call last):
        ...
    wordgram.grammar.UnboundSymbolError: the rules use undeclared symbols: e

Derivation
----------
The `apply` method performs a single derivation step. It rewrites
the leftmost occurrence of the rule's left hand side in the working string.

    >>> g.apply('S', 0, 'S')
    'N'
    >>> g.apply('N', 1, 'N')
    'ab'

If the left hand side doesn't occur in the working string,
the string is returned unchanged.

    >>> g.apply('N', 0, 'ab')
    'ab'

Asking for an unknown rule or for a nonexistent alternative
raises a subclass of `DerivationError`.

    >>> g.apply('a', 0, 'ab')
    Traceback (most recent call last):
        ...
    wordgram.grammar.UnknownProductionError: no production for 'a'
    >>> g.apply('N', 2, 'N')
    Traceback (most recent call last):
        ...
    wordgram.grammar.AlternativeIndexError: production 'N' has 2 alternatives, index 2 is out of range
"""

import logging

from .alphabet import Alphabet
from .productions import Productions
from .word import Word

logger = logging.getLogger(__name__)

class GrammarError(Exception):
    """The base class of all exceptions raised by this package."""

class InvalidGrammarError(GrammarError):
    """Raised during a construction of a grammar, if some invariant doesn't hold."""

class DisjointAlphabetError(InvalidGrammarError):
    """Raised if the non-terminal and terminal alphabets share a symbol."""
    def __init__(self, shared):
        InvalidGrammarError.__init__(self, 'the alphabets share symbols: %s' % ', '.join(shared))
        self.shared = shared

class InvalidStartSymbolError(InvalidGrammarError):
    """Raised if the start symbol is not a non-terminal."""
    def __init__(self, start):
        InvalidGrammarError.__init__(self, 'the start symbol is not a non-terminal: %r' % (start,))
        self.start = start

class UnboundSymbolError(InvalidGrammarError):
    """Raised if a rule uses a symbol that belongs to neither alphabet.

    The offending words are stored in `words`, the stray
    symbols themselves in `unbound`.
    """
    def __init__(self, words, unbound):
        InvalidGrammarError.__init__(self, 'the rules use undeclared symbols: %s' % ', '.join(unbound))
        self.words = words
        self.unbound = unbound

class DerivationError(GrammarError):
    """Raised if a derivation step is requested with invalid arguments."""

class UnknownProductionError(DerivationError, LookupError):
    """Raised if there is no production for the requested key."""
    def __init__(self, key):
        DerivationError.__init__(self, 'no production for %r' % str(key))
        self.key = key

class AlternativeIndexError(DerivationError, IndexError):
    """Raised if the requested alternative doesn't exist."""
    def __init__(self, key, index, count):
        DerivationError.__init__(self, 'production %r has %d alternatives, index %d is out of range' % (str(key), count, index))
        self.key = key
        self.index = index
        self.count = count

class Grammar:
    """Represents a formal grammar.

    The grammar consists of an alphabet of non-terminal symbols,
    an alphabet of terminal symbols, a start symbol and a set of production
    rules. Alphabets may be given as `Alphabet` objects or any iterables
    of symbols, the rules as `Productions` or a mapping.
    All of them are copied.

    >>> nonterms = Alphabet('SN')
    >>> rules = Productions({'S': ['N'], 'N': ['aNb', 'ab']})
    >>> g = Grammar(nonterms, Alphabet('ab'), 'S', rules)
    >>> nonterms.insert('X')
    >>> rules.insert('S', ['X'])
    >>> g.nonterms()
    Alphabet('NS')
    >>> g.rules('S')
    (Word('N'),)

    The grammar exposes its alphabets. Symbols that are not
    non-terminals of the grammar are considered terminal.

    >>> g.terminals()
    Alphabet('ab')
    >>> g.symbols()
    Alphabet('NSab')
    >>> [g.is_terminal(symbol) for symbol in 'SNab']
    [False, False, True, True]

    Rules are looked up by their left hand side. Unknown keys
    yield no alternatives.

    >>> 'N' in g, 'a' in g
    (True, False)
    >>> g.rules('a')
    ()
    """

    __hash__ = None

    def __init__(self, nonterms, terminals, start, productions):
        nonterms = Alphabet(nonterms)
        terminals = Alphabet(terminals)
        if not isinstance(productions, Productions):
            productions = Productions(productions)

        shared = nonterms.intersection(terminals)
        if shared:
            logger.debug('rejecting grammar, shared symbols: %r', shared)
            raise DisjointAlphabetError(shared)

        if not nonterms.contains(start):
            logger.debug('rejecting grammar, start symbol %r is not in %r', start, nonterms)
            raise InvalidStartSymbolError(start)

        symbols = nonterms.union(terminals)
        if not productions.all_words_covered_by(symbols):
            words = productions.uncovered_words(symbols)
            unbound = Alphabet()
            for word in words:
                unbound = unbound.union(word.unbound_symbols(symbols))
            logger.debug('rejecting grammar, words %r use unbound symbols %r', words, unbound)
            raise UnboundSymbolError(words, unbound)

        self._nonterms = nonterms
        self._terminals = terminals
        self._start = start
        self._productions = productions.clone()
        logger.debug('constructed grammar with %d productions', len(self._productions))

    def nonterms(self):
        """Returns a copy of the non-terminal alphabet."""
        return self._nonterms.clone()

    def terminals(self):
        """Returns a copy of the terminal alphabet."""
        return self._terminals.clone()

    def symbols(self):
        """Returns the union of both alphabets."""
        return self._nonterms.union(self._terminals)

    def root(self):
        """Returns the start symbol."""
        return self._start

    def rules(self, key):
        """Retrieves the alternatives of the rule with a given left hand side.

        The result is a tuple of words; for a key without a rule,
        the tuple is empty.
        """
        return self._productions.get(key, ())

    def is_terminal(self, symbol):
        return not self._nonterms.contains(symbol)

    def apply(self, key, alternative, working, start=0):
        """Rewrites one occurrence of `key` in `working` with the selected alternative.

        The occurrence rewritten is the leftmost one that begins
        at or after the index `start`; a negative `start` counts as 0.
        The rest of the working string is left untouched. If there is no such occurrence,
        the working string is returned unchanged.

        >>> g = Grammar('SN', 'ab', 'S', {'S': ['N'], 'N': ['aNb', 'ab']})
        >>> g.apply('N', 0, 'NaN')
        'aNbaN'
        >>> g.apply('N', 0, 'NaN', start=1)
        'NaaNb'
        >>> g.apply('N', 1, g.apply('N', 0, g.apply('S', 0, 'S')))
        'aabb'

        Callers wishing to rewrite some other occurrence can locate
        all of them with `Word.occurrences` and pass one as `start`.

        >>> [g.apply('N', 1, 'NN', start=pos) for pos in Word('N').occurrences('NN')]
        ['abN', 'Nab']
        """
        key = Word(key)
        alternatives = self._productions.get(key)
        if alternatives is None:
            raise UnknownProductionError(key)
        if not 0 <= alternative < len(alternatives):
            raise AlternativeIndexError(key, alternative, len(alternatives))

        working = str(working)
        pos = working.find(key.text, max(start, 0))
        if pos == -1:
            logger.debug('%r does not occur in %r, nothing to rewrite', key, working)
            return working

        replacement = alternatives[alternative]
        logger.debug('rewriting %r at %d with %r', key, pos, replacement)
        return working[:pos] + replacement.text + working[pos + len(key):]

    def __contains__(self, key):
        return key in self._productions

    def __eq__(self, other):
        if not isinstance(other, Grammar):
            return NotImplemented
        return (self._nonterms, self._terminals, self._start, self._productions) == (
            other._nonterms, other._terminals, other._start, other._productions)

    def __repr__(self):
        """
        >>> Grammar('SN', 'ab', 'S', {'S': ['N'], 'N': ['aNb', 'ab']})
        Grammar(Alphabet('NS'), Alphabet('ab'), 'S', Productions({'N': ('aNb', 'ab'), 'S': ('N',)}))
        """
        return 'Grammar(%r, %r, %r, %r)' % (self._nonterms, self._terminals, self._start, self._productions)
