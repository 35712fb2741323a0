# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import unittest

from ordset.set import Set
from ordset.flatten import flatten_merge, needs_flatten
from ordset import logging, messages

class SubSet(Set):
    pass

class Test_flatten(unittest.TestCase):
    def test_flatten(self):
        self.assertEqual(Set([Set([1, 2]), 3]).flatten(), Set([1, 2, 3]))
        s = Set([0, Set([1, Set([2, Set([3])])]), Set([4, 1]), 5])
        self.assertEqual(list(s.flatten()), [0, 1, 2, 3, 4, 5])
        self.assertEqual(list(s), [0, Set([1, Set([2, Set([3])])]),
                                   Set([4, 1]), 5])
        self.assertEqual(Set().flatten(), Set())
        self.assertIs(type(SubSet([Set([1])]).flatten()), SubSet)

    def test_shared_subset(self):
        # the same set may appear more than once, as long as it does
        # not contain itself
        inner = Set([1, 2])
        s = Set([inner, Set([inner, 3])])
        self.assertEqual(list(s.flatten()), [1, 2, 3])

    def test_recursive(self):
        s = Set([1])
        s.add(s)
        with self.assertRaisesRegex(messages.ERECFLATTEN,
                                    'tried to flatten recursive Set'):
            s.flatten()
        a = Set([1])
        b = Set([2, a])
        a.add(b)
        with self.assertRaises(logging.ArgumentError) as cm:
            Set([a]).flatten()
        self.assertIn(cm.exception.culprit, (a, b))
        # the guard is released after a failure
        self.assertEqual(Set([Set([7])]).flatten(), Set([7]))

    def test_flatten_bang(self):
        s = Set([1, 2])
        self.assertIs(s.flatten_bang(), None)
        s.add(Set([3, Set([4])]))
        self.assertIs(s.flatten_bang(), s)
        self.assertEqual(list(s), [1, 2, 3, 4])
        r = Set([1])
        r.add(r)
        with self.assertRaises(messages.ERECFLATTEN):
            r.flatten_bang()
        self.assertEqual(len(r), 2)

    def test_flatten_merge(self):
        dest = Set([0])
        self.assertIs(dest.flatten_merge([Set([1]), 2, (3,)]), dest)
        # only sets are inlined
        self.assertEqual(list(dest), [0, 1, 2, (3,)])
        d = Set()
        flatten_merge(d, (Set([Set([5])]), 6))
        self.assertEqual(list(d), [5, 6])
        with self.assertRaises(messages.ENOTENUM):
            flatten_merge(d, 5)

    def test_needs_flatten(self):
        self.assertFalse(needs_flatten(Set([1, (2, 3)])))
        self.assertTrue(needs_flatten(Set([1, SubSet()])))
