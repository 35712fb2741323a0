# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import unittest

import random
from ordset.scc import (strongly_connected_components,
                        each_strongly_connected_component_from)

class Test_scc(unittest.TestCase):
    def reachable(self, graph, node):
        seen = {node}
        todo = [node]
        while todo:
            for n in graph[todo.pop()]:
                if n not in seen:
                    seen.add(n)
                    todo.append(n)
        return seen

    def verify_components(self, graph):
        components = strongly_connected_components(graph)
        # a partition of the nodes
        nodes = [n for c in components for n in c]
        self.assertEqual(sorted(nodes), sorted(graph))
        component_of = {n: i for (i, c) in enumerate(components)
                        for n in c}
        reach = {n: self.reachable(graph, n) for n in graph}
        for a in graph:
            for b in graph:
                same = component_of[a] == component_of[b]
                self.assertEqual(same, b in reach[a] and a in reach[b],
                                 (graph, a, b))
                # components are emitted after those they can reach
                if not same and b in reach[a]:
                    self.assertLess(component_of[b], component_of[a])

    def generate_graph(self, size):
        nodes = random.sample(range(1000), size)
        return {n: [m for m in nodes if random.randrange(size + 1) == 0]
                for n in nodes}

    def test_random(self):
        self.verify_components({})
        for _ in range(20):
            self.verify_components(self.generate_graph(random.randrange(30)))

    def test_order(self):
        graph = {1: [], 3: [4], 4: [3], 6: [], 9: [10], 10: [9, 11],
                 11: [10]}
        self.assertEqual(strongly_connected_components(graph),
                         [[1], [3, 4], [6], [9, 10, 11]])
        self.assertEqual(strongly_connected_components({'a': ['b'],
                                                        'b': ['a', 'c'],
                                                        'c': []}),
                         [['c'], ['a', 'b']])

    def test_from(self):
        graph = {0: [1], 1: [0], 2: [0]}
        id_map = {}
        stack = []
        self.assertEqual(list(each_strongly_connected_component_from(
            0, graph, id_map, stack)), [[0, 1]])
        self.assertEqual(stack, [])
        # already visited components are not yielded again
        self.assertEqual(list(each_strongly_connected_component_from(
            2, graph, id_map, stack)), [[2]])

    def test_deep(self):
        # a long path does not hit the recursion limit
        n = 20000
        graph = {i: [i + 1] for i in range(n)}
        graph[n] = [0]
        [component] = strongly_connected_components(graph)
        self.assertEqual(component, list(range(n + 1)))

    def test_missing_node(self):
        with self.assertRaises(KeyError):
            strongly_connected_components({0: [1]})
