"""Post-construction graph analysis (cycle detection, depth)."""

from __future__ import annotations

from reuntangle.model import GraphNode


def find_cycles(nodes: dict[str, GraphNode]) -> list[list[str]]:
    """Return strongly-connected components of size ≥ 2 using Tarjan's algorithm.

    Each group holds node ids that reach one another through
    ``dependency_ids``.  Groups come out in discovery order, each sorted by
    node insertion order.
    """
    order = {node_id: i for i, node_id in enumerate(nodes)}
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    sccs: list[list[str]] = []
    counter = 0

    for root in nodes:
        if root in index:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(nodes[root].dependency_ids))]

        while work:
            v, successors = work[-1]
            descended = False
            for w in successors:
                if w not in nodes:
                    continue
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack.add(w)
                    work.append((w, iter(nodes[w].dependency_ids)))
                    descended = True
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[v])

            if lowlink[v] == index[v]:
                scc: list[str] = []
                while True:
                    w = stack.pop()
                    on_stack.discard(w)
                    scc.append(w)
                    if w == v:
                        break
                if len(scc) >= 2:
                    sccs.append(sorted(scc, key=order.__getitem__))

    return sccs


def find_circular_nodes(nodes: dict[str, GraphNode]) -> set[str]:
    """IDs of every node that takes part in at least one dependency cycle."""
    return {node_id for group in find_cycles(nodes) for node_id in group}


def compute_depths(nodes: dict[str, GraphNode]) -> dict[str, int]:
    """Longest distance from a root (a node nobody depends on) to each node.

    Walks ``dependent_ids`` upwards.  A dependent that is already on the
    current path closes a cycle and contributes nothing, so every node gets a
    finite depth even inside cycles.
    """
    depths: dict[str, int] = {}

    for start in nodes:
        if start in depths:
            continue

        on_path = {start}
        # frame: [node_id, iterator over dependents, best depth so far]
        work: list[list] = [[start, iter(nodes[start].dependent_ids), 0]]

        while work:
            frame = work[-1]
            node_id, dependents = frame[0], frame[1]
            descended = False
            for parent in dependents:
                if parent in on_path or parent not in nodes:
                    continue
                if parent in depths:
                    frame[2] = max(frame[2], depths[parent] + 1)
                    continue
                on_path.add(parent)
                work.append([parent, iter(nodes[parent].dependent_ids), 0])
                descended = True
                break
            if descended:
                continue

            work.pop()
            on_path.discard(node_id)
            depths[node_id] = frame[2]
            if work:
                work[-1][2] = max(work[-1][2], frame[2] + 1)

    return depths
