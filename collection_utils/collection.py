import collections
import collections.abc
import functools
import inspect
import logging
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar, Union


LOGGER = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')
T = TypeVar('T')

_MISSING = object()


class EmptyReduceError(TypeError):
    pass


def _bind(fn, this_arg):
    # bound methods already carry their receiver
    if this_arg is _MISSING or inspect.ismethod(fn):
        return fn
    return functools.partial(fn, this_arg)


class Collection(collections.abc.MutableMapping, Generic[K, V]):
    '''
    An insertion-ordered mapping with array-style helpers
    '''

    def __init__(self, entries: Optional[Union[collections.abc.Mapping, Iterable[Tuple[K, V]]]] = None):
        self._container = collections.OrderedDict()
        if entries is not None:
            self.update(entries)

    @classmethod
    def species(cls):
        """Class used to build the collections returned by filter, clone and concat.

        Override in a subclass to make derived collections some other type.
        It is called with no argument or with a mapping to copy.
        """
        return cls

    def __delitem__(self, k):
        del self._container[k]

    def __getitem__(self, k):
        return self._container[k]

    def __iter__(self):
        return iter(self._container)

    def __len__(self):
        return len(self._container)

    def __setitem__(self, k, v):
        self._container[k] = v

    def clear(self):
        self._container.clear()

    def __repr__(self):
        return f"{type(self).__name__}({list(self._container.items())!r})"

    @property
    def size(self) -> int:
        return len(self._container)

    def find(self, predicate: Callable[..., bool], this_arg=_MISSING):
        """Return the first value whose entry satisfies predicate, or None."""
        predicate = _bind(predicate, this_arg)
        for key, val in self.items():
            if predicate(val, key, self):
                return val
        return None

    def find_key(self, predicate: Callable[..., bool], this_arg=_MISSING):
        """Return the first key whose entry satisfies predicate, or None."""
        predicate = _bind(predicate, this_arg)
        for key, val in self.items():
            if predicate(val, key, self):
                return key
        return None

    def filter(self, predicate: Callable[..., bool], this_arg=_MISSING) -> 'Collection[K, V]':
        predicate = _bind(predicate, this_arg)
        results = self.species()()
        for key, val in self.items():
            if predicate(val, key, self):
                results[key] = val
        return results

    def sweep(self, predicate: Callable[..., bool], this_arg=_MISSING) -> None:
        """Remove every entry that satisfies predicate, in place.

        Each entry is tested at most once, with its current value. Entries the
        predicate deletes before they are reached are skipped.
        Removals already made stay made if predicate raises.
        """
        predicate = _bind(predicate, this_arg)
        n_before = len(self)
        for key in list(self):
            if key not in self:
                continue
            if predicate(self[key], key, self):
                self.pop(key, None)
        LOGGER.debug('Swept %d of %d entries', n_before - len(self), n_before)

    def some(self, predicate: Callable[..., bool], this_arg=_MISSING) -> bool:
        predicate = _bind(predicate, this_arg)
        for key, val in self.items():
            if predicate(val, key, self):
                return True
        return False

    def every(self, predicate: Callable[..., bool], this_arg=_MISSING) -> bool:
        predicate = _bind(predicate, this_arg)
        for key, val in self.items():
            if not predicate(val, key, self):
                return False
        return True

    def map(self, callback: Callable[..., T], this_arg=_MISSING) -> List[T]:
        callback = _bind(callback, this_arg)
        return [callback(val, key, self) for key, val in self.items()]

    def reduce(self, callback: Callable[..., T], initial=_MISSING) -> T:
        """Fold the values into one, like functools.reduce

        callback is called as callback(accumulator, value, key, collection).

        Args:
            callback: the combining function
            initial: seed of the accumulator. When omitted the first value is
                the seed and is not passed through callback.

        Raises:
            EmptyReduceError: the collection is empty and no initial was given
        """
        items = iter(self.items())
        if initial is _MISSING:
            try:
                _, accumulator = next(items)
            except StopIteration:
                raise EmptyReduceError(
                    'Cannot reduce an empty Collection with no initial value',
                ) from None
        else:
            accumulator = initial

        for key, val in items:
            accumulator = callback(accumulator, val, key, self)
        return accumulator

    def clone(self) -> 'Collection[K, V]':
        """Shallow copy, values are shared"""
        return self.species()(self)

    def copy(self) -> 'Collection[K, V]':
        return self.clone()

    def concat(self, *others: 'Collection[K, V]') -> 'Collection[K, V]':
        new_coll = self.clone()
        for other in others:
            for key, val in other.items():
                new_coll[key] = val
        return new_coll

    def sort(self, compare_fn: Callable[[V, V, K, K], int]) -> 'Collection[K, V]':
        """Reorder the entries in place and return self.

        compare_fn(value_a, value_b, key_a, key_b) returns a negative, zero or
        positive number. The sort is stable. The entries are rebuilt, so live
        iterators over this collection raise RuntimeError afterwards.
        """
        entries = sorted(
            self.items(),
            key=functools.cmp_to_key(lambda a, b: compare_fn(a[1], b[1], a[0], b[0])),
        )
        self.clear()
        for key, val in entries:
            self[key] = val
        LOGGER.debug('Sorted %d entries', len(entries))
        return self
