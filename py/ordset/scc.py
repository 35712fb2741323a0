# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Strongly connected components of a directed graph

__all__ = (
    'strongly_connected_components',
    'each_strongly_connected_component',
    'each_strongly_connected_component_from',
)

def each_strongly_connected_component_from(node, graph, id_map=None,
                                           stack=None):
    '''Yield the strongly connected components reachable from node
    that have not been yielded before. The graph is represented by a
    dict where the keys are the set of nodes, and the values are lists
    of edge targets from the respective node.

    This is Tarjan's algorithm with an explicit stack of frames.
    id_map maps each discovered node to its discovery index, or to
    None once its component has been yielded; stack holds discovered
    nodes whose component is not yet complete. Both can be shared
    between calls that walk the same graph.'''
    if id_map is None:
        id_map = {}
    if stack is None:
        stack = []
    node_id = id_map[node] = len(id_map)
    # Each frame is [node, node_id, stack_length, minimum_id, children]
    frames = [[node, node_id, len(stack), node_id, iter(graph[node])]]
    stack.append(node)
    while frames:
        frame = frames[-1]
        for child in frame[4]:
            if child in id_map:
                child_id = id_map[child]
                if child_id is not None and child_id < frame[3]:
                    frame[3] = child_id
            else:
                child_id = id_map[child] = len(id_map)
                frames.append([child, child_id, len(stack), child_id,
                               iter(graph[child])])
                stack.append(child)
                break
        else:
            frames.pop()
            (_, node_id, stack_length, minimum_id, _) = frame
            if node_id == minimum_id:
                component = stack[stack_length:]
                del stack[stack_length:]
                for n in component:
                    id_map[n] = None
                yield component
            if frames and minimum_id < frames[-1][3]:
                frames[-1][3] = minimum_id

def each_strongly_connected_component(graph):
    '''Yield all strongly connected components of graph. A component
    is yielded only after every component reachable from it, and the
    nodes of a component are listed in discovery order.'''
    id_map = {}
    stack = []
    for node in graph:
        if node not in id_map:
            yield from each_strongly_connected_component_from(
                node, graph, id_map, stack)

def strongly_connected_components(graph):
    return list(each_strongly_connected_component(graph))

