def load_tests(loader, tests, ignore):
    import doctest

    import wordgram.alphabet
    import wordgram.grammar
    import wordgram.productions
    import wordgram.word

    from . import test_alphabet, test_word, test_productions, test_grammar

    tests.addTests(doctest.DocTestSuite(wordgram.alphabet))
    tests.addTests(doctest.DocTestSuite(wordgram.grammar))
    tests.addTests(doctest.DocTestSuite(wordgram.productions))
    tests.addTests(doctest.DocTestSuite(wordgram.word))

    for module in (test_alphabet, test_word, test_productions, test_grammar):
        tests.addTests(loader.loadTestsFromModule(module))

    return tests

if __name__ == '__main__':
    import unittest
    unittest.main()
