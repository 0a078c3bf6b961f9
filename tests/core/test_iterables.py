import typing

import pytest

from phq.core import iterables


def test_unique():
    """Test the function that extracts unique items while preserving order."""
    cases = {
        'a': ['a'],
        ('a', 'b'): ['a', 'b'],
        ('a', 'b', 'a'): ['a', 'b'],
        ('a', 'b', 'a', 'c'): ['a', 'b', 'c'],
        ('a', 'b', 'b', 'a', 'c'): ['a', 'b', 'c'],
    }
    for items, expected in cases.items():
        assert list(iterables.unique(*items)) == expected


def test_separate():
    """Test the function that splits an argument into members."""
    assert iterables.separate(None) == []
    assert iterables.separate('m/s') == ['m/s']
    assert iterables.separate(('m', 'ft')) == ['m', 'ft']
    assert iterables.separate(3) == [3]


def test_unwrap():
    """Test the function that removes certain outer sequence types."""
    cases = [[3], (3,), [[3]], [(3,)], ([3],), ((3,),)]
    for case in cases:
        assert iterables.unwrap(case) == 3
    for case in [[3], [[3]], (3,), [(3,)]]:
        assert iterables.unwrap(case, wrap=list) == [3]
        assert iterables.unwrap(case, wrap=tuple) == (3,)
        assert isinstance(iterables.unwrap(case, wrap=iter), typing.Iterator)
    for case in [[3, 4], (3, 4), [(3, 4)], ([3, 4])]:
        assert iterables.unwrap(case, wrap=list) == [3, 4]
        assert iterables.unwrap(case, wrap=tuple) == (3, 4)
    assert iterables.unwrap('m/s', wrap=set) == {'m/s'}


def test_mapping_base():
    """Test the object that serves as a basis for concrete mappings."""
    class Incomplete(iterables.MappingBase):
        def __init__(self, mapping: typing.Mapping) -> None:
            __mapping = mapping or {}
            super().__init__(__mapping.keys())

    class Implemented(iterables.MappingBase):
        def __init__(self, mapping: typing.Mapping) -> None:
            __mapping = mapping or {}
            super().__init__(__mapping.keys())
            self.__mapping = __mapping
        def __getitem__(self, k: typing.Any):
            if k in self.__mapping:
                return self.__mapping[k]
            raise KeyError(k)

    with pytest.raises(TypeError):
        Incomplete({})
    in_dict = {'a': 1, 'b': 2}
    mapping = Implemented(in_dict)
    assert len(mapping) == len(in_dict)
    for key in in_dict.keys():
        assert key in mapping
    assert sorted(mapping) == sorted(in_dict)


@pytest.fixture
def standard_entries():
    """A collection of well-behaved entries for a Table instance."""
    return [
        {'symbol': 'm', 'name': 'metre', 'quantity': 'length'},
        {'symbol': 'ft', 'name': 'foot', 'quantity': 'length'},
        {'symbol': 's', 'name': 'second', 'quantity': 'time'},
        {'symbol': 'kg', 'name': 'kilogram', 'quantity': 'mass'},
    ]


@pytest.fixture
def extra_key():
    """A collection of entries in which one has an extra key."""
    return [
        {'lower': 'a', 'upper': 'A'},
        {'lower': 'b', 'upper': 'B'},
        {'lower': 'c', 'upper': 'C', 'example': 'car'},
    ]


def test_table_lookup(standard_entries: list):
    """Test the object that supports multi-key look-up."""
    table = iterables.Table(standard_entries)
    foot = table(symbol='ft')
    assert foot['name'] == 'foot'
    assert foot['quantity'] == 'length'
    this = table(name='second')
    assert this['symbol'] == 's'
    with pytest.raises(iterables.TableLookupError):
        table(name='parsec')
    with pytest.raises(iterables.AmbiguousRequestError):
        table(quantity='length')
    okay = table(quantity='length', name='metre')
    assert okay['symbol'] == 'm'
    with pytest.raises(iterables.TableLookupError):
        table(quantity='length', name='yard')
    assert table(quantity='time', name='foot')['name'] == 'second'


def test_table_errors(
    standard_entries: list,
    extra_key: list,
) -> None:
    """Regression test for `Table` error messages."""
    standard = iterables.Table(standard_entries)
    extra = iterables.Table(extra_key)

    message = "Table has no common key 'example'"
    with pytest.raises(iterables.TableKeyError, match=message):
        standard(example='bird')
    with pytest.raises(iterables.TableKeyError, match=message):
        extra(example='car')
    message = "Table has no entry with quantity=length and name=yard"
    with pytest.raises(iterables.TableLookupError, match=message):
        standard(quantity='length', name='yard')
    message = (
        "Table has no entry with"
        " symbol=yd, quantity=length, and name=yard"
    )
    with pytest.raises(iterables.TableLookupError, match=message):
        standard(symbol='yd', quantity='length', name='yard')
    message = "The search criterion 'quantity=length' is ambiguous"
    with pytest.raises(iterables.AmbiguousRequestError, match=message):
        standard(quantity='length')


def test_table_getitem(extra_key: list):
    """Test access to table values by common key."""
    table = iterables.Table(extra_key)
    assert len(table) == 3
    assert table.keys == {'lower', 'upper'}
    assert table['lower'] == ('a', 'b', 'c')
    assert table['upper'] == ('A', 'B', 'C')
    with pytest.raises(iterables.TableKeyError):
        table['example']

