from .word import Word

class Productions:
    """Represents the production rules of a grammar.

    Each rule maps a word, the left hand side, to an ordered list
    of alternative right hand sides. Words may be passed either as strings
    or as `Word` objects.

    >>> p = Productions()
    >>> p.insert('S', ['N'])
    >>> p.insert('N', ['aNb', 'ab'])
    >>> p
    Productions({'N': ('aNb', 'ab'), 'S': ('N',)})

    The alternatives are kept in the order they were given,
    they are later addressed by their index.

    >>> p['N']
    (Word('aNb'), Word('ab'))
    >>> p.get('X') is None
    True
    >>> 'S' in p, 'X' in p
    (True, False)

    Inserting a key that is already present replaces its alternatives,
    the lists are never merged.

    >>> p.insert('S', ['N', 'SS'])
    >>> p['S']
    (Word('N'), Word('SS'))

    Productions can also be built from a mapping. A lone string stands
    for a single alternative.

    >>> Productions({'S': 'N', 'N': ['aNb', 'ab']})['S']
    (Word('N'),)
    >>> Productions({'S': ['N'], 'N': ['aNb', 'ab']}) == Productions({'N': ('aNb', 'ab'), 'S': ('N',)})
    True
    """

    __hash__ = None

    def __init__(self, rules=None):
        self._rules = {}
        if rules is not None:
            for key, alternatives in rules.items():
                self.insert(key, alternatives)

    def insert(self, key, alternatives):
        """Associates `key` with `alternatives`, replacing any previous association.

        Both arguments are copied, later changes to the caller's
        objects do not affect the rules.
        """
        if isinstance(alternatives, (str, Word)):
            alternatives = [alternatives]
        self._rules[Word(key)] = tuple(Word(alternative) for alternative in alternatives)

    def get(self, key, default=None):
        return self._rules.get(Word(key), default)

    def items(self):
        return self._rules.items()

    def words(self):
        """Returns the set of all distinct words referenced by the rules.

        >>> sorted(Productions({'S': ['N', 'S'], 'N': ['ab', 'N']}).words())
        [Word('N'), Word('S'), Word('ab')]
        """
        words = set(self._rules)
        for alternatives in self._rules.values():
            words.update(alternatives)
        return frozenset(words)

    def uncovered_words(self, alphabet):
        """Returns the words that contain a symbol outside of `alphabet`, sorted."""
        return tuple(sorted(word for word in self.words() if not word.covered_by(alphabet)))

    def all_words_covered_by(self, alphabet):
        """Tests whether every key and every alternative is covered by `alphabet`.

        >>> from wordgram.alphabet import Alphabet
        >>> p = Productions({'S': ['N', 'e'], 'N': ['aNb', 'ab']})
        >>> p.all_words_covered_by(Alphabet('SNabe'))
        True
        >>> p.all_words_covered_by(Alphabet('SNab'))
        False
        >>> Productions().all_words_covered_by(Alphabet())
        True
        """
        return all(word.covered_by(alphabet) for word in self.words())

    def clone(self):
        return Productions(self._rules)

    def __getitem__(self, key):
        return self._rules[Word(key)]

    def __contains__(self, key):
        return Word(key) in self._rules

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def __eq__(self, other):
        if not isinstance(other, Productions):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self):
        rules = ', '.join('%r: %r' % (str(key), tuple(str(alternative) for alternative in alternatives))
            for key, alternatives in sorted(self._rules.items()))
        return 'Productions({%s})' % rules
