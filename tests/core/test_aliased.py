import pytest

from phq.core import aliased


def test_group():
    """Test the object that represents a group of aliases."""
    assert len(aliased.Group('ft')) == 1
    assert len(aliased.Group(('ft', 'foot', 'feet'))) == 3
    assert len(aliased.Group(['ft', 'foot', 'feet'])) == 3
    assert len(aliased.Group({'ft', 'foot', 'feet'})) == 3
    assert len(aliased.Group('ft', 'foot', 'feet')) == 3
    assert aliased.Group('m', 'metre') == aliased.Group('metre', 'm')
    assert aliased.Group('m', 'metre') == ('m', 'metre')
    assert 'foot' in aliased.Group('ft', 'foot')
    assert str(aliased.Group('ft', 'foot')) == 'foot | ft'
    groups = {aliased.Group('s', 'sec'): 1}
    assert groups[aliased.Group('sec', 's')] == 1
    assert aliased.Group.supports('m')
    with pytest.raises(TypeError):
        aliased.Group()


def test_mapping():
    """Test the object that represents a mapping with aliased keys."""
    # Set up mappings.
    _standard = {
        'this': 1,
        'that': 2,
        'the other': 3,
    }
    _basic = {
        ('this', 'first'): 1,
        ('that', 'second'): 2,
        ('the other', 'third'): 3,
    }
    _mixed = {
        'this': 1,
        ('that', 'second'): 2,
        ('the other',): 3,
    }
    standard = aliased.Mapping(_standard)
    basic = aliased.Mapping(_basic)
    mixed = aliased.Mapping(_mixed)

    # Use the common keys to check values.
    for key, value in standard.items():
        assert value == basic[key]
        assert value == mixed[key]

    # Check values by using aliases where they exist.
    for keys in _basic:
        assert standard[keys[0]] == basic[keys[1]]
        assert keys[1] not in standard
        assert mixed[keys[0]] == basic[keys[1]]

    # Test aliased-key look-up.
    for key, value in basic.items(aliased=True):
        assert basic[key] == value

    # Containment checks should support strings and aliased keys.
    assert 'the other' in mixed and ('the other',) not in mixed
    assert aliased.Group('that', 'second') in mixed
    assert ['unhashable'] not in mixed

    # Check lengths of keys, values, and items.
    for mapping, n_keys in zip([standard, basic, mixed], [3, 6, 4]):
        _check_aliased_keys(mapping, n_keys)

    # Key lists should be flat lists of strings.
    assert sorted(standard) == sorted(['this', 'that', 'the other'])
    assert sorted(basic) == sorted([
        'this', 'first', 'that', 'second', 'the other', 'third'
    ])
    assert sorted(mixed) == sorted(['this', 'that', 'second', 'the other'])

    # The caller should be able to get the de-aliased mapping.
    dealiased = {
        'this': 1,
        'first': 1,
        'that': 2,
        'second': 2,
        'the other': 3,
        'third': 3,
    }
    assert basic.flat == dealiased

    # The caller should be able to get known aliases.
    assert mixed.alias('that') == {'second'}
    assert mixed.alias('that', include=True) == {'that', 'second'}
    assert mixed.alias('this') == set()
    with pytest.raises(KeyError):
        mixed.alias('THIS')


def _check_aliased_keys(mapping: aliased.Mapping, n_keys: int):
    """Helper function for `test_mapping`."""
    assert len(mapping) == n_keys
    assert len(mapping.keys()) == n_keys
    assert len(mapping.values()) == n_keys
    assert len(mapping.items()) == n_keys
    assert len(list(mapping.keys(aliased=True))) == 3
    assert len(list(mapping.values(aliased=True))) == 3
    assert len(list(mapping.items(aliased=True))) == 3


def test_missing_key():
    """Looking up an unknown key should raise a descriptive error."""
    amap = aliased.Mapping({('m', 'metre'): 1})
    message = "The key 'ft' does not correspond to a known name or alias"
    with pytest.raises(KeyError, match=message):
        amap['ft']
    assert amap.get('ft') is None
    assert len(aliased.Mapping()) == 0


def test_alias_conflict():
    """Giving the same alias to two different keys should be an error."""
    mapping = {
        ('C', 'degC'): 'celsius',
        ('C', 'coulomb'): 'coulomb',
    }
    with pytest.raises(aliased.AliasConflictError) as err:
        aliased.Mapping(mapping)
    assert err.value.alias == 'C'
    assert isinstance(err.value, KeyError)
    assert "'C' is already an alias for" in str(err.value)
