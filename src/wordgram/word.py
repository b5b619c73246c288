from .alphabet import Alphabet

class Word:
    """Represents an immutable sequence of symbols.

    Words are built from strings, other words or any iterable of
    characters. Two words are equal if they consist of the same symbols
    in the same order; words can therefore serve as dictionary keys.

    >>> w = Word('aNb')
    >>> w
    Word('aNb')
    >>> print(w)
    aNb
    >>> len(w), list(w)
    (3, ['a', 'N', 'b'])
    >>> Word(w) == w, Word(['a', 'N', 'b']) == w, Word('ab') == w
    (True, True, False)

    A word is covered by an alphabet if every one of its symbols
    is a member of the alphabet.

    >>> w.covered_by(Alphabet('abN'))
    True
    >>> w.covered_by(Alphabet('ab'))
    False
    >>> sorted(w.unbound_symbols(Alphabet('ab')))
    ['N']

    The empty word is covered by every alphabet, even the empty one.

    >>> Word().covered_by(Alphabet())
    True
    """

    __slots__ = ('_text',)

    def __init__(self, value=''):
        if isinstance(value, Word):
            text = value._text
        elif isinstance(value, str):
            text = value
        else:
            text = ''.join(value)
        object.__setattr__(self, '_text', text)

    def __setattr__(self, name, value):
        raise AttributeError('Word objects are immutable')

    def __delattr__(self, name):
        raise AttributeError('Word objects are immutable')

    def __reduce__(self):
        return (Word, (self._text,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def text(self):
        return self._text

    def covered_by(self, alphabet):
        return all(alphabet.contains(symbol) for symbol in self._text)

    def unbound_symbols(self, alphabet):
        """Returns the alphabet of symbols not covered by `alphabet`."""
        return Alphabet(symbol for symbol in self._text if not alphabet.contains(symbol))

    def occurrences(self, text, start=0):
        """Yields every index at which the word occurs in `text`.

        Overlapping occurrences are reported as well, each of them
        is a distinct place where the word could be rewritten.
        A negative `start` is treated as 0.

        >>> list(Word('aa').occurrences('aaab'))
        [0, 1]
        >>> list(Word('N').occurrences('aNbN', start=2))
        [3]
        >>> list(Word('N').occurrences('ab'))
        []
        >>> list(Word('N').occurrences('NbN', start=-1))
        [0, 2]
        """
        text = str(text)
        pos = text.find(self._text, max(start, 0))
        while pos != -1:
            yield pos
            pos = text.find(self._text, pos + 1)

    def __len__(self):
        return len(self._text)

    def __iter__(self):
        return iter(self._text)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self._text < other._text

    def __hash__(self):
        return hash(self._text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return 'Word(%r)' % self._text
