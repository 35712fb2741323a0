# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Partitioning of a set into subsets

__all__ = (
    'classify',
    'divide',
    'relation_graph',
    'required_arity',
)

import inspect

import ordset.globals
from .logging import dbg
from .scc import each_strongly_connected_component

_positional = (inspect.Parameter.POSITIONAL_ONLY,
               inspect.Parameter.POSITIONAL_OR_KEYWORD)

def required_arity(fn):
    '''Return the number of required positional parameters of fn, or
    None if fn has no inspectable signature'''
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    return sum(1 for p in sig.parameters.values()
               if p.kind in _positional and p.default is p.empty)

def classify(s, fn):
    '''Return a dict mapping each distinct fn(e) to the subset of
    elements e in s that give that key. Keys and subsets are both in
    order of first occurrence; subsets have the same class as s.'''
    h = {}
    for e in s.to_a():
        key = fn(e)
        if key not in h:
            h[key] = type(s)()
        h[key].add(e)
    return h

def relation_graph(s, fn):
    '''Return a dict mapping each element u of s to the list of
    elements v of s for which fn(u, v) is true, self pairs included'''
    elements = s.to_a()
    return {u: [v for v in elements if fn(u, v)] for u in elements}

def divide(s, fn, arity=None):
    from .set import Set
    if arity is None:
        arity = required_arity(fn)
    result = Set()
    if arity == 2:
        graph = relation_graph(s, fn)
        components = list(each_strongly_connected_component(graph))
        if ordset.globals.debug:
            dbg('divide: %d elements, %d edges, %d components'
                % (len(graph), sum(map(len, graph.values())),
                   len(components)))
        for component in components:
            result.add(type(s)(component))
    else:
        for subset in classify(s, fn).values():
            result.add(subset)
    return result
