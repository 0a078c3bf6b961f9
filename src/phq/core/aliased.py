import collections.abc
import typing

from phq.core import iterables


_KT = typing.TypeVar('_KT')
_VT = typing.TypeVar('_VT')


class Group(collections.abc.Set, typing.Generic[_KT]):
    """A group of associated aliases."""

    __slots__ = ('_aliases')

    @classmethod
    def supports(cls, key: _KT):
        """True if `key` can instantiate this class."""
        try:
            cls(key)
        except TypeError:
            return False
        return True

    def __init__(self, *a: typing.Union[_KT, typing.Iterable[_KT]]) -> None:
        if not a:
            raise TypeError("At least one alias is required") from None
        self._aliases = iterables.unwrap(a, wrap=frozenset)

    def __iter__(self):
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, key: str) -> bool:
        return key in self._aliases

    def __hash__(self) -> int:
        """Compute the hash of the underlying key set."""
        return hash(self._aliases)

    def __eq__(self, other) -> bool:
        if isinstance(other, Group):
            return self._aliases == other._aliases
        return self._aliases == Group(other)._aliases

    def __str__(self) -> str:
        """A simplified representation of this instance."""
        return ' | '.join(sorted(self._aliases))

    def __repr__(self) -> str:
        """An unambiguous representation of this instance."""
        items = ', '.join(repr(k) for k in sorted(self._aliases))
        module = f"{self.__module__.replace('phq.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({items})"


class AliasConflictError(KeyError):
    """The same alias refers to more than one key."""

    def __init__(self, alias: str, existing: Group, new: Group) -> None:
        self.alias = alias
        self.existing = existing
        self.new = new

    def __str__(self) -> str:
        return (
            f"{self.alias!r} is already an alias for {str(self.existing)!r}"
            f" and can't also refer to {str(self.new)!r}"
        )


class MappingView(collections.abc.MappingView, typing.Generic[_KT, _VT]):
    """Base class for views of aliased mappings."""

    __slots__ = ('_mapping', '_keys')

    def __init__(self, mapping: 'Mapping', aliased: bool=False) -> None:
        super().__init__(mapping)
        self._keys = (
            tuple(mapping.as_dict.keys()) if aliased
            else tuple(mapping._flat_dict.keys())
        )
        self._mapping = mapping

    def __len__(self):
        """Called for len(self)."""
        return len(self._keys)

    def __str__(self):
        """A simplified representation of this object."""
        return str([str(k) for k in self._keys])


class KeysView(MappingView[_KT, _VT], collections.abc.KeysView):
    """A view on the keys of an aliased mapping."""

    def __iter__(self):
        yield from self._keys


class ValuesView(MappingView[_KT, _VT], collections.abc.ValuesView):
    """A view on the values of an aliased mapping."""

    def __iter__(self):
        for key in self._keys:
            yield self._mapping[key]


class ItemsView(MappingView[_KT, _VT], collections.abc.ItemsView):
    """A view on the key-value pairs of an aliased mapping."""

    def __iter__(self):
        for key in self._keys:
            yield (key, self._mapping[key])


class Mapping(collections.abc.Mapping, typing.Generic[_KT, _VT]):
    """A read-only mapping class that supports aliased keys.

    Examples
    --------
    Create an instance from a standard `dict` with strings or tuples of strings
    as keys.

    >>> amap = aliased.Mapping({'m': 1, ('ft', 'foot', 'feet'): 2})
    >>> amap['foot']
    2
    >>> amap['feet'] is amap['ft']
    True

    Iterating over the mapping produces de-aliased keys, while the `aliased`
    flag of `keys`, `values`, and `items` groups them.

    >>> sorted(amap)
    ['feet', 'foot', 'ft', 'm']
    >>> len(amap.keys(aliased=True))
    2

    Giving the same alias to two different groups is an error.

    >>> aliased.Mapping({('ft', 'foot'): 1, ('foot', 'feet'): 2})
    ...
    AliasConflictError: 'foot' is already an alias for 'foot | ft' ...
    """

    def __init__(
        self,
        mapping: typing.Mapping[
            typing.Union[_KT, typing.Tuple[_KT, ...]], _VT
        ]=None,
    ) -> None:
        """Initialize this instance.

        Parameters
        ----------
        mapping : mapping, default=None
            An object that maps strings or iterables of strings to values of any
            type. If the keys are iterables of strings, grouped keys will
            represent aliases for each other. Omitting this argument will
            produce an empty mapping.
        """
        self.as_dict = {
            Group(key): value for key, value in (mapping or {}).items()
        }
        self._flat_dict = self._flatten(self.as_dict)

    @staticmethod
    def _flatten(groups: typing.Iterable[Group]) -> typing.Dict[str, Group]:
        """Map every alias to its group, rejecting collisions."""
        flat = {}
        for group in groups:
            for alias in group:
                if alias in flat:
                    raise AliasConflictError(alias, flat[alias], group)
                flat[alias] = group
        return flat

    @property
    def flat(self) -> typing.Dict[str, _VT]:
        """Expand aliased items into a standard dictionary."""
        return {key: self.as_dict[group] for key, group in self._flat_dict.items()}

    def __contains__(self, __o) -> bool:
        """True if `__o` is a key in this mapping.

        Overloaded to avoid going through `__getitem__`.
        """
        return self._resolve(__o) is not None

    def __iter__(self) -> typing.Iterator:
        yield from self._flat_dict

    def __len__(self) -> int:
        return len(self._flat_dict)

    def __getitem__(self, key: typing.Union[str, Group]) -> _VT:
        """Look up a value by one of its keys."""
        resolved = self._resolve(key)
        if resolved is not None:
            return self.as_dict[resolved]
        raise KeyError(
            f"The key {str(key)!r}"
            " does not correspond to a known name or alias"
        ) from None

    def _resolve(self, key: typing.Union[Group, typing.Any]):
        """Resolve `key` into an existing aliased key."""
        if isinstance(key, Group):
            return key if key in self.as_dict else None
        try:
            return self._flat_dict.get(key)
        except TypeError:
            return None

    def alias(self, key: str, *, include=False) -> typing.FrozenSet[str]:
        """Get the aliases of an existing key.

        Parameters
        ----------
        key : string
            An existing key for which to return aliases.

        include : bool, default=False
            If true, include the current key in the returned aliases.
        """
        group = self._resolve(key)
        if group is None:
            raise KeyError(key)
        if include:
            return frozenset(group)
        return frozenset(group) - {key}

    def __str__(self) -> str:
        """A simplified representation of this instance."""
        return ', '.join(
            f"{str(k)!r}: {v!r}" for k, v in self.as_dict.items()
        )

    def __repr__(self) -> str:
        """An unambiguous representation of this object."""
        module = f"{self.__module__.replace('phq.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({self})"

    def keys(self, aliased: bool=False):
        """A view on this instance's keys."""
        return KeysView(self, aliased=aliased)

    def values(self, aliased: bool=False):
        """A view on this instance's values."""
        return ValuesView(self, aliased=aliased)

    def items(self, aliased: bool=False):
        """A view on this instance's key-value pairs."""
        return ItemsView(self, aliased=aliased)
