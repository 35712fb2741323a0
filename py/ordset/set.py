# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

__all__ = (
    'Set',
    'Enumerator',
)

import contextlib

import ordset.globals
from .logging import report
from .messages import ENOTENUM, ENOTSET, EARITY, EFROZEN, WUNUSEDXFORM
from .source import each_entry, is_enumerable
from . import flatten, partition

# id(obj) -> obj, for sets whose repr or hash is being computed. A set
# that is reached again while in here contains itself.
_inspecting = {}
_hashing = {}

@contextlib.contextmanager
def _in_progress(registry, obj):
    registry[id(obj)] = obj
    try:
        yield
    finally:
        del registry[id(obj)]

def _entries(enum):
    if isinstance(enum, Set):
        return iter(enum._hash)
    return each_entry(enum)

class Set:
    '''Mutable set where iteration preserves insertion order.

    Elements are stored as keys of a dict, so they must be hashable,
    and adding an element that is already present does not move it.

    A set can be frozen with freeze(); after that, every method that
    would modify it raises EFROZEN, and methods that only read it work
    as before.

    Sets are hashable by content, so sets of sets work. As with any
    mutable dict key, a set must not be modified while it is an
    element of another set.
    '''
    __slots__ = ('_hash', '_frozen')

    def __init__(self, *args, transform=None):
        if len(args) > 1:
            raise EARITY(len(args))
        self._hash = {}
        self._frozen = False
        [enum] = args or [None]
        if enum is None:
            if transform is not None and ordset.globals.verbose:
                report(WUNUSEDXFORM())
        elif transform is None:
            self.merge(enum)
        else:
            for e in _entries(enum):
                self.add(transform(e))

    @classmethod
    def of(cls, *elements):
        '''Create a set containing the given elements'''
        s = cls()
        for e in elements:
            s.add(e)
        return s

    def _modify_check(self):
        if self._frozen:
            raise EFROZEN(self)

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def dup(self):
        '''Return a shallow copy of this set; the copy is never
        frozen'''
        cls = type(self)
        new = cls.__new__(cls)
        if hasattr(self, '__dict__'):
            new.__dict__.update(self.__dict__)
        new._hash = self._hash.copy()
        new._frozen = False
        return new

    def copy(self):
        return self.dup()

    __copy__ = copy

    def clone(self, freeze=None):
        '''Return a shallow copy of this set, frozen if this set is,
        unless freeze is given'''
        new = self.dup()
        new._frozen = self._frozen if freeze is None else bool(freeze)
        return new

    # Queries

    def size(self):
        return len(self._hash)

    def length(self):
        return len(self._hash)

    def __len__(self):
        return len(self._hash)

    def empty(self):
        return not self._hash

    def include(self, obj):
        return obj in self._hash

    def member(self, obj):
        return obj in self._hash

    def __contains__(self, obj):
        return obj in self._hash

    def __iter__(self):
        return iter(self._hash)

    def to_a(self):
        return list(self._hash)

    def to_set(self, klass=None, *args, transform=None):
        '''Return this set if no conversion is needed; otherwise a new
        set of class klass (default: this set's class) created from
        this set'''
        if klass is None:
            if transform is None:
                return self
            klass = type(self)
        elif klass is Set and not args and transform is None:
            return self
        return klass(self, *args, transform=transform)

    # Single element mutation

    def add(self, obj):
        self._modify_check()
        self._hash[obj] = True
        return self

    def __lshift__(self, obj):
        return self.add(obj)

    def try_add(self, obj):
        '''Like add, but return None if obj was already present'''
        self._modify_check()
        if obj in self._hash:
            return None
        return self.add(obj)

    def delete(self, obj):
        self._modify_check()
        self._hash.pop(obj, None)
        return self

    def try_delete(self, obj):
        '''Like delete, but return None if obj was not present'''
        self._modify_check()
        if obj not in self._hash:
            return None
        return self.delete(obj)

    # Bulk mutation

    def clear(self):
        self._modify_check()
        self._hash.clear()
        return self

    def merge(self, enum):
        '''Add the elements of enum to this set. When enum is a Set,
        its storage is merged directly, so add() is not called per
        element even if a subclass overrides it.'''
        self._modify_check()
        if isinstance(enum, Set):
            self._hash.update(enum._hash)
        else:
            h = self._hash
            for e in each_entry(enum):
                h[e] = True
        return self

    def subtract(self, enum):
        '''Delete every element of enum from this set'''
        self._modify_check()
        h = self._hash
        elements = list(h) if enum is self else _entries(enum)
        for e in elements:
            h.pop(e, None)
        return self

    def replace(self, enum):
        '''Replace the contents of this set with the elements of
        enum'''
        self._modify_check()
        if not isinstance(enum, Set) and not is_enumerable(enum):
            raise ENOTENUM(enum)
        if enum is not self:
            self._hash.clear()
            self.merge(enum)
        return self

    # Iteration

    def each(self, fn=None):
        '''Call fn for each element in insertion order, and return this
        set. Without fn, return an Enumerator over the set.

        fn may delete elements from the set; elements deleted before
        they are reached are not visited.'''
        if fn is None:
            return Enumerator(self)
        for e in _live(self._hash):
            fn(e)
        return self

    def collect_bang(self, fn):
        '''Replace each element with fn(element). The new elements keep
        the order of the elements they came from; duplicates
        collapse.'''
        self._modify_check()
        new = {}
        for e in list(self._hash):
            new[fn(e)] = True
        self._hash = new
        return self

    def map_bang(self, fn):
        return self.collect_bang(fn)

    def delete_if(self, pred):
        self._modify_check()
        h = self._hash
        for e in _live(h):
            if pred(e):
                h.pop(e, None)
        return self

    def keep_if(self, pred):
        self._modify_check()
        h = self._hash
        for e in _live(h):
            if not pred(e):
                h.pop(e, None)
        return self

    def reject_bang(self, pred):
        '''Like delete_if, but return None if nothing was deleted'''
        size = len(self._hash)
        self.delete_if(pred)
        return None if size == len(self._hash) else self

    def select_bang(self, pred):
        '''Like keep_if, but return None if nothing was deleted'''
        size = len(self._hash)
        self.keep_if(pred)
        return None if size == len(self._hash) else self

    def filter_bang(self, pred):
        return self.select_bang(pred)

    # Set algebra. Each operation returns a new set of the same class
    # as this set.

    def union(self, enum):
        return self.dup().merge(enum)

    def __or__(self, enum):
        return self.union(enum)

    def __add__(self, enum):
        return self.union(enum)

    def difference(self, enum):
        return self.dup().subtract(enum)

    def __sub__(self, enum):
        return self.difference(enum)

    def intersection(self, enum):
        '''Return the elements of enum that are also in this set, in
        the order of enum'''
        new = type(self)()
        h = self._hash
        nh = new._hash
        for e in _entries(enum):
            if e in h:
                nh[e] = True
        return new

    def __and__(self, enum):
        return self.intersection(enum)

    def symmetric_difference(self, enum):
        '''Return the elements that are in exactly one of this set and
        enum; (s ^ e) == ((s | e) - (s & e))'''
        new = type(self)(enum)
        nh = new._hash
        for e in self._hash:
            if e in nh:
                del nh[e]
            else:
                nh[e] = True
        return new

    def __xor__(self, enum):
        return self.symmetric_difference(enum)

    # Comparisons

    def _includes_all(self, other):
        h = self._hash
        return all(e in h for e in other._hash)

    def superset(self, other):
        if not isinstance(other, Set):
            raise ENOTSET(other)
        return len(self) >= len(other) and self._includes_all(other)

    def proper_superset(self, other):
        if not isinstance(other, Set):
            raise ENOTSET(other)
        return len(self) > len(other) and self._includes_all(other)

    def subset(self, other):
        if not isinstance(other, Set):
            raise ENOTSET(other)
        return len(self) <= len(other) and other._includes_all(self)

    def proper_subset(self, other):
        if not isinstance(other, Set):
            raise ENOTSET(other)
        return len(self) < len(other) and other._includes_all(self)

    def __ge__(self, other):
        return self.superset(other)

    def __gt__(self, other):
        return self.proper_superset(other)

    def __le__(self, other):
        return self.subset(other)

    def __lt__(self, other):
        return self.proper_subset(other)

    def intersects(self, other):
        '''Return True if this set and other have an element in
        common'''
        if not isinstance(other, Set):
            raise ENOTSET(other)
        # iterate over the smaller set
        if len(self) < len(other):
            (small, large) = (self._hash, other._hash)
        else:
            (small, large) = (other._hash, self._hash)
        return any(e in large for e in small)

    def disjoint(self, other):
        return not self.intersects(other)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Set):
            return NotImplemented
        if type(other) is type(self):
            return self._hash.keys() == other._hash.keys()
        return len(self) == len(other) and other._includes_all(self)

    def __hash__(self):
        if id(self) in _hashing:
            return 0
        with _in_progress(_hashing, self):
            return hash(frozenset(self._hash))

    # Flattening

    def flatten_merge(self, enum):
        '''Add the elements of enum to this set, replacing each nested
        set with its elements, recursively'''
        self._modify_check()
        flatten.flatten_merge(self, enum)
        return self

    def flatten(self):
        return type(self)().flatten_merge(self)

    def flatten_bang(self):
        '''Flatten this set in place. Return None if no element is a
        set.'''
        self._modify_check()
        if not flatten.needs_flatten(self):
            return None
        return self.replace(self.flatten())

    # Partitioning

    def classify(self, fn):
        return partition.classify(self, fn)

    def divide(self, fn, arity=None):
        '''Divide the set into a set of subsets of the same class as
        this set.

        If fn takes two arguments, x and y are in the same subset when
        they are connected both ways by chains of pairs where fn(a, b)
        is true. Otherwise, x and y are in the same subset when
        fn(x) == fn(y). Pass arity to override the detection.'''
        return partition.divide(self, fn, arity)

    # Representation

    def inspect(self):
        name = type(self).__name__
        if not self._hash:
            return '#<%s: {}>' % (name,)
        if id(self) in _inspecting:
            return '#<%s: {...}>' % (name,)
        with _in_progress(_inspecting, self):
            return '#<%s: {%s}>' % (name, ', '.join(map(repr, self._hash)))

    def __repr__(self):
        return self.inspect()

    def __str__(self):
        return self.__repr__()

def _live(h):
    '''Iterate over a snapshot of the keys of h, skipping keys that
    have been removed from h since the snapshot was taken'''
    for e in list(h):
        if e in h:
            yield e

class Enumerator:
    '''Restartable iteration over the elements of a set. Each
    iteration starts over from the set's current contents.'''
    __slots__ = ('_set',)
    def __init__(self, s):
        self._set = s

    def __iter__(self):
        return _live(self._set._hash)

    def size(self):
        return self._set.size()

    def __len__(self):
        return self._set.size()

    def each(self, fn):
        return self._set.each(fn)

    def to_a(self):
        return list(self)

    def __repr__(self):
        return '#<Enumerator: %r:each>' % (self._set,)
