class Alphabet:
    """Represents an unordered set of symbols.

    A symbol is a single character. An alphabet is constructed from
    any iterable of symbols, a string being the most convenient one.

    >>> a = Alphabet('abc')
    >>> a
    Alphabet('abc')
    >>> 'a' in a, 'z' in a
    (True, False)
    >>> len(a)
    3

    Alphabets are mutable. Inserting a symbol that is already present
    and deleting a symbol that is absent are both no-ops.

    >>> a.insert('d')
    >>> a.insert('d')
    >>> a
    Alphabet('abcd')
    >>> a.delete('a')
    >>> a.delete('a')
    >>> a
    Alphabet('bcd')

    Union and intersection never modify their operands, they return
    new alphabets. The operators | and & are available as well.

    >>> Alphabet('bcde').union(Alphabet('abF'))
    Alphabet('Fabcde')
    >>> Alphabet('bcde').intersection(Alphabet('abc'))
    Alphabet('bc')
    >>> Alphabet('SN') & Alphabet('ab')
    Alphabet('')

    Membership is defined for any value, no validation is performed.

    >>> 'not a symbol' in a
    False
    """

    __hash__ = None

    def __init__(self, symbols=()):
        self._symbols = set(symbols)

    def contains(self, symbol):
        """Tests the symbol for membership."""
        return symbol in self._symbols

    def insert(self, symbol):
        self._symbols.add(symbol)

    def delete(self, symbol):
        self._symbols.discard(symbol)

    def union(self, other):
        return Alphabet(self._symbols | other._symbols)

    def intersection(self, other):
        """Returns the symbols present in both alphabets.

        Only the smaller of the two sets is iterated.

        >>> Alphabet('ab').intersection(Alphabet('bcdef')) == Alphabet('bcdef').intersection(Alphabet('ab'))
        True
        """
        if len(self._symbols) <= len(other._symbols):
            smaller, bigger = self._symbols, other._symbols
        else:
            smaller, bigger = other._symbols, self._symbols
        return Alphabet(symbol for symbol in smaller if symbol in bigger)

    def isdisjoint(self, other):
        return not self.intersection(other)

    def clone(self):
        return Alphabet(self._symbols)

    def __or__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.intersection(other)

    def __contains__(self, symbol):
        return self.contains(symbol)

    def __iter__(self):
        return iter(sorted(self._symbols))

    def __len__(self):
        return len(self._symbols)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __repr__(self):
        return 'Alphabet(%r)' % ''.join(sorted(self._symbols))
