# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

from .logging import (SetWarning, ArgumentError, FrozenStateError,
                      ArityError)

class ENOTENUM(ArgumentError):
    """
    A set can only be built from, merged with or reduced by a value
    that produces elements: another set, an object with an
    `each_entry()` method, or an iterable.
    """
    fmt = "value must be enumerable"
    def __init__(self, value=None):
        ArgumentError.__init__(self)
        self.value = value

class ENOTSET(ArgumentError):
    """
    Subset, superset and intersection tests are only defined between
    two sets. Convert the operand with `Set(value)` first.
    """
    fmt = "value must be a set"
    def __init__(self, value=None):
        ArgumentError.__init__(self)
        self.value = value

class ERECFLATTEN(ArgumentError):
    """
    The set contains itself, directly or through a chain of nested
    sets, so flattening it would never terminate.
    """
    fmt = "tried to flatten recursive Set"
    def __init__(self, culprit=None):
        ArgumentError.__init__(self)
        self.culprit = culprit

class EFROZEN(FrozenStateError):
    """
    The set has been frozen with `freeze()`, and can no longer be
    modified. Use `dup()` to get a modifiable copy.
    """
    fmt = "can't modify frozen %s of size %d"
    def __init__(self, obj):
        FrozenStateError.__init__(self, type(obj).__name__, len(obj))
        self.obj = obj

class EARITY(ArityError):
    """
    A set is constructed from at most one source of elements.
    """
    fmt = "wrong number of arguments (given %d, expected 0..1)"
    def __init__(self, given):
        ArityError.__init__(self, given)
        self.given = given

class WUNUSEDXFORM(SetWarning):
    """
    A transform was passed to a set constructor without a source of
    elements, so it is never called.
    (Only reported when `ordset.globals.verbose` is set.)
    """
    fmt = "given transform not used"
