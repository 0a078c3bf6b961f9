import collections.abc
import typing


T = typing.TypeVar('T')


def unique(*items: T) -> typing.List[T]:
    """Remove repeated items while preserving order."""
    collection = []
    for item in items:
        if item not in collection:
            collection.append(item)
    return collection


def separate(arg: typing.Optional[typing.Union[T, typing.Iterable[T]]]):
    """Convert `arg` into a list of independent members.

    Strings count as a single member even though they are iterable, and
    ``None`` produces an empty list.
    """
    if arg is None:
        return []
    if isinstance(arg, str):
        return [arg]
    if isinstance(arg, typing.Iterable):
        return list(arg)
    return [arg]


W = typing.TypeVar('W', bound=typing.Iterable)


def unwrap(
    obj: typing.Union[T, typing.Iterable[T]],
    wrap: typing.Type[W]=None,
) -> typing.Union[T, W]:
    """Remove redundant outer lists and tuples.

    This function will strip away enclosing instances of ``list`` or ``tuple``,
    as long as they contain a single item, until it finds an object of a
    different type, a ``list`` or ``tuple`` containing multiple items, or an
    empty ``list`` or ``tuple``.

    Parameters
    ----------
    obj : Any
        The object to "unwrap".

    wrap : type
        An iterable type into which to store the result.

    Examples
    --------
    >>> iterables.unwrap([[3]])
    3
    >>> iterables.unwrap(['m/s', 'ft/s'])
    ['m/s', 'ft/s']
    >>> iterables.unwrap('m/s', wrap=set)
    {'m/s'}
    """
    seed = [obj]
    wrapped = (list, tuple)
    while isinstance(seed, wrapped) and len(seed) == 1:
        seed = seed[0]
    if wrap is not None:
        return wrap(separate(seed))
    return seed


class ReprStrMixin:
    """A mixin class that provides support for `__repr__` and `__str__`.

    Subclasses define `__str__`; this class prefixes it with the qualified
    class name to create `__repr__`.
    """

    def __str__(self) -> str:
        """A simplified representation of this object."""
        return object.__repr__(self)

    def __repr__(self) -> str:
        """An unambiguous representation of this object."""
        module = f"{self.__module__.replace('phq.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({self})"


class MappingBase(collections.abc.Mapping):
    """A partial implementation of `collections.abc.Mapping`.

    This abstract base class is designed to serve as a basis for easily creating
    concrete implementations of `collections.abc.Mapping`. It defines simple
    implementations, based on a user-provided collection, for the abstract
    methods `__len__` and `__iter__` but leaves `__getitem__` abstract.
    """

    def __init__(self, __collection: typing.Collection) -> None:
        """Initialize this instance with the base collection.

        Parameters
        ----------
        __collection
            Any concrete implementation of `collections.abc.Collection`. This
            attribute's implementations of the required collection methods will
            support the equivalent implementations for this mapping.
        """
        self._collection = __collection

    def __len__(self) -> int:
        """The number of members in this collection."""
        return len(self._collection)

    def __iter__(self) -> typing.Iterator:
        """Iterate over members of this collection."""
        return iter(self._collection)


class TableKeyError(KeyError):
    """No common key with this name."""
    def __str__(self) -> str:
        if len(self.args) > 0:
            return f"Table has no common key '{self.args[0]}'"
        return "Key not found in table"


class TableRequestError(Exception):
    """An exception occurred during standard look-up."""

    def __init__(self, request: typing.Mapping) -> None:
        self.request = request

    def _criteria(self, template: str) -> str:
        """Join the requested pairs in the order provided."""
        items = [template.format(k=k, v=v) for k, v in self.request.items()]
        if len(items) <= 2:
            return " and ".join(items)
        return f"{', '.join(items[:-1])}, and {items[-1]}"


class AmbiguousRequestError(TableRequestError):
    """There are multiple instances of the same value for this key."""

    def __str__(self) -> str:
        requested = self._criteria("'{k}={v}'")
        if len(self.request) == 1:
            return f"The search criterion {requested} is ambiguous"
        return f"The search criteria {requested} are ambiguous"


class TableLookupError(TableRequestError):
    """Could not find the requested key-value pair(s)."""

    def __str__(self) -> str:
        return f"Table has no entry with {self._criteria('{k}={v}')}"


class Table(MappingBase):
    """A collection of mappings with support for multi-key search.

    Each entry is a mapping from column name to value. Indexing the table by a
    column name returns that column's values, in entry order.
    """

    _KT = typing.TypeVar('_KT', bound=str)
    _VT = typing.TypeVar('_VT')
    _ET = typing.TypeVar('_ET', bound=typing.Mapping)

    def __init__(self, entries: typing.Collection[_ET]) -> None:
        super().__init__(entries)
        self._entries = entries
        self._keys = None

    @property
    def keys(self) -> typing.Set[_KT]:
        """All the keys common to the individual mappings."""
        if self._keys is None:
            all_keys = [list(entry.keys()) for entry in self._entries]
            self._keys = set(all_keys[0]).intersection(*all_keys[1:])
        return self._keys

    def __getitem__(self, key: _KT) -> typing.Tuple[_VT]:
        """Get all the values for a given key if it is common."""
        if key in self.keys:
            values = [entry[key] for entry in self._entries]
            return tuple(values)
        raise TableKeyError(key)

    def __call__(self, **request):
        """Look up an entry by user-requested keys.

        The search iterates through the key-value pairs until it either finds
        a unique entry or runs out of pairs.

        Parameters
        ----------
        **request : mapping
            Key-value pairs that define the search criteria. Each key must
            appear in all table entries.

        Returns
        -------
        mapping
            The unique entry matching the request.

        Raises
        ------
        TableKeyError
            A requested key is not present in every entry.

        TableLookupError
            Could not find an entry that matched the requested key-value pairs.

        AmbiguousRequestError
            The given key-value pairs match more than one entry.
        """
        subset = [*self._entries]
        for n_checked, pair in enumerate(request.items(), start=1):
            key, value = pair
            if key not in self.keys:
                raise TableKeyError(key)
            subset = [
                entry for entry in subset
                if entry[key] == value
            ]
            count = self[key].count(value)
            if count > n_checked and len(request) == n_checked:
                raise AmbiguousRequestError(request)
            if len(subset) == 1:
                return subset[0]
        raise TableLookupError(request)
