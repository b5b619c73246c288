import copy
import pickle
import unittest

from wordgram.alphabet import Alphabet
from wordgram.word import Word

class TestWord(unittest.TestCase):
    def test_covered_by(self):
        self.assertTrue(Word('abc').covered_by(Alphabet('abc')))
        self.assertFalse(Word('abc').covered_by(Alphabet('ab')))

    def test_empty_word_is_always_covered(self):
        for alphabet in [Alphabet(), Alphabet('a'), Alphabet('SNab')]:
            self.assertTrue(Word().covered_by(alphabet))
            self.assertTrue(Word('').covered_by(alphabet))

    def test_unbound_symbols(self):
        self.assertEqual(Word('aNbe').unbound_symbols(Alphabet('SNab')), Alphabet('e'))
        self.assertEqual(Word('aNb').unbound_symbols(Alphabet('SNab')), Alphabet())

    def test_structural_equality(self):
        self.assertEqual(Word('aNb'), Word('aNb'))
        self.assertEqual(hash(Word('aNb')), hash(Word('aNb')))
        self.assertNotEqual(Word('aNb'), Word('abN'))
        self.assertNotEqual(Word('aNb'), 'aNb')

    def test_word_as_dict_key(self):
        rules = {Word('S'): 1}
        self.assertIn(Word('S'), rules)
        self.assertNotIn(Word('N'), rules)

    def test_construction(self):
        self.assertEqual(Word(Word('ab')), Word('ab'))
        self.assertEqual(Word(iter('ab')), Word('ab'))
        self.assertEqual(Word('ab').text, 'ab')
        self.assertEqual(str(Word('ab')), 'ab')

    def test_immutable(self):
        word = Word('ab')
        with self.assertRaises(AttributeError):
            word.text = 'cd'
        with self.assertRaises(AttributeError):
            word._text = 'cd'
        self.assertEqual(word, Word('ab'))

    def test_occurrences(self):
        self.assertEqual(list(Word('N').occurrences('aNbN')), [1, 3])
        self.assertEqual(list(Word('aa').occurrences('aaaa')), [0, 1, 2])
        self.assertEqual(list(Word('N').occurrences('aNbN', start=2)), [3])
        self.assertEqual(list(Word('N').occurrences('ab')), [])
        self.assertEqual(list(Word().occurrences('ab')), [0, 1, 2])

    def test_negative_start_counts_from_beginning(self):
        self.assertEqual(list(Word('N').occurrences('NbN', start=-1)), [0, 2])
        self.assertEqual(list(Word('N').occurrences('NbN', start=-10)), [0, 2])
        self.assertEqual(list(Word('N').occurrences('NbN', start=10)), [])

    def test_copy(self):
        word = Word('ab')
        self.assertEqual(copy.copy(word), word)
        self.assertEqual(copy.deepcopy(word), word)
        self.assertEqual(copy.deepcopy({word: [word]}), {Word('ab'): [Word('ab')]})

    def test_pickle(self):
        word = pickle.loads(pickle.dumps(Word('ab')))
        self.assertEqual(word, Word('ab'))
        self.assertEqual(hash(word), hash(Word('ab')))
        with self.assertRaises(AttributeError):
            word.text = 'cd'

    def test_ordering(self):
        self.assertEqual(sorted([Word('b'), Word('a'), Word('ab')]), [Word('a'), Word('ab'), Word('b')])

if __name__ == '__main__':
    unittest.main()
