# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Inlining of nested sets

__all__ = (
    'flatten_merge',
    'needs_flatten',
)

from .messages import ERECFLATTEN
from .source import each_entry

def needs_flatten(s):
    '''Return True if some element of s is itself a set'''
    from .set import Set
    return any(isinstance(e, Set) for e in s)

def flatten_merge(dest, source, seen=None):
    '''Add the elements of source to dest with add(), replacing each
    element that is a set by its own elements, recursively.

    seen maps id() of each set that is currently being expanded to the
    set itself; meeting one of those again means that the set contains
    itself, which raises ERECFLATTEN. Sets that are equal but not
    identical do not count as the same set.'''
    from .set import Set
    if seen is None:
        seen = {}
    elements = source.to_a() if isinstance(source, Set) else each_entry(source)
    for e in elements:
        if isinstance(e, Set):
            if id(e) in seen:
                raise ERECFLATTEN(e)
            seen[id(e)] = e
            try:
                flatten_merge(dest, e, seen)
            finally:
                del seen[id(e)]
        else:
            dest.add(e)
