# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Probing of values that can act as a source of set elements

__all__ = (
    'each_entry',
    'is_enumerable',
)

from .messages import ENOTENUM

def _bulk_entry(value):
    each = getattr(value, 'each_entry', None)
    return each if callable(each) else None

def is_enumerable(value):
    '''Return True if each_entry(value) would succeed'''
    return (_bulk_entry(value) is not None
            or hasattr(type(value), '__iter__'))

def each_entry(value):
    '''Return an iterator over the elements produced by value. An
    each_entry() method is preferred over plain iteration; values
    supporting neither raise ENOTENUM.'''
    each = _bulk_entry(value)
    if each is not None:
        return iter(each())
    if hasattr(type(value), '__iter__'):
        return iter(value)
    raise ENOTENUM(value)
