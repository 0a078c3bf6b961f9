import pytest

from phq.core import spelling


def test_spell_checker():
    """Test the spell-checking object."""
    words = {
        'apple': ['appple', 'appl', 'aplpe', 'Apple'],
        'dog': ['ddog', 'dg', 'odg', 'Dog'],
        'cheese': ['chheese', 'chese', 'cheees', 'Cheese'],
    }
    checker = spelling.SpellChecker(*words)
    for word, errors in words.items():
        assert checker.check(word, mode='suggest') == []
        assert checker.check(word, mode='truth')
        assert checker.check(word) is None
        for error in errors:
            assert checker.check(error, mode='suggest') == [word]
            assert not checker.check(error, mode='truth')
            with pytest.raises(spelling.SpellingError):
                checker.check(error)
    with pytest.raises(ValueError):
        checker.check('apple', mode='edit')


def test_unit_symbols():
    """The checker should suggest unit symbols that contain punctuation."""
    checker = spelling.SpellChecker('m/s', 'ft/s', 'km/hr', 'μm', 'm/s^2')
    assert checker.check('m/s', mode='truth')
    assert checker.check('ft/ss', mode='suggest') == ['ft/s']
    assert checker.check('m\\s', mode='suggest') == ['m/s']
    assert checker.check('m/s2', mode='suggest') == ['m/s', 'm/s^2']
    assert checker.check('um', mode='suggest') == ['μm']
    assert checker.check('km/h', mode='suggest') == ['km/hr']


def test_second_order_suggestions():
    """Words two edits away should be suggested when none is one edit away."""
    checker = spelling.SpellChecker('kelvin', 'rankine')
    assert checker.check('klevn', mode='suggest') == ['kelvin']
    assert checker.check('qqq', mode='suggest') == []


def test_second_order_limit():
    """Only short names should get suggestions that are two edits away."""
    checker = spelling.SpellChecker('kelvin', 'kilometre/hour', limit=5)
    assert checker.check('klevn', mode='suggest') == ['kelvin']
    assert checker.check('klevins', mode='suggest') == []
    assert checker.check('kilometre/huor', mode='suggest') == [
        'kilometre/hour'
    ]
    assert checker.limit == 5
    assert spelling.SpellChecker('kelvin').limit == 10


def test_alphabet():
    """Edits should only use characters of the known words."""
    checker = spelling.SpellChecker('m/s', 'μm')
    assert checker.letters == '/msμ'
    checker.words.add('K')
    assert checker.letters == '/Kmsμ'
    assert checker.check('k', mode='suggest') == ['K']


def test_spelling_error():
    """Test the message of the exception for misspelled words."""
    single = spelling.SpellingError('fot', ['ft'])
    assert str(single) == "Could not find 'fot'. Did you mean 'ft'?"
    many = spelling.SpellingError('fot', ['ft', 'fth'])
    assert many.suggestion == "Did you mean one of ['ft', 'fth']?"
    plain = spelling.SpellingError('fot', 'foot')
    assert plain.suggestion == "Did you mean 'foot'?"


def test_update_words():
    """Make sure the user can update the correctly-spelled words."""
    words = ['apple', 'pear']
    checker = spelling.SpellChecker(*words)
    assert checker.words == set(words)
    checker.words |= {'pie'}
    assert checker.words == set(words) | {'pie'}
