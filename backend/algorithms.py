import logging
from collections import deque
from time import perf_counter
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

EdgeTuple = Tuple[str, str, int]
ResidualGraph = Dict[str, Dict[str, int]]
Path = List[str]


def build_residual_graph(edges: Iterable[EdgeTuple]) -> ResidualGraph:
    """Fresh residual graph: forward arcs at capacity, reverse arcs at 0.

    A repeated (u, v) pair overwrites the earlier capacity instead of
    summing it. A reverse arc that is also an input edge keeps its own
    capacity whatever the input order.
    """
    graph: ResidualGraph = {}
    for u, v, c in edges:
        graph.setdefault(u, {})
        graph.setdefault(v, {})
        graph[u][v] = c
        graph[v].setdefault(u, 0)
    return graph


def find_augmenting_path_dfs(graph: ResidualGraph, source: str, sink: str) -> Optional[Path]:
    if source == sink or source not in graph or sink not in graph:
        return None
    visited = {source}
    path = [source]
    stack = [iter(graph[source].items())]
    while stack:
        for v, residual in stack[-1]:
            if v not in visited and residual > 0:
                visited.add(v)
                path.append(v)
                if v == sink:
                    return path
                stack.append(iter(graph[v].items()))
                break
        else:
            # dead end, backtrack
            stack.pop(); path.pop()
    return None


def find_augmenting_path_bfs(graph: ResidualGraph, source: str, sink: str) -> Optional[Path]:
    if source == sink or source not in graph or sink not in graph:
        return None
    parent: Dict[str, Optional[str]] = {source: None}
    q = deque([source])
    while q:
        u = q.popleft()
        for v, residual in graph[u].items():
            if v not in parent and residual > 0:
                parent[v] = u
                if v == sink:
                    path, node = [], sink
                    while node is not None:
                        path.append(node)
                        node = parent[node]
                    path.reverse()
                    return path
                q.append(v)
    return None


def augment(graph: ResidualGraph, path: Path) -> int:
    hops = list(zip(path, path[1:]))
    bottleneck = min(graph[u][v] for u, v in hops)
    for u, v in hops:
        graph[u][v] -= bottleneck
        graph[v][u] += bottleneck
    return bottleneck


STRATEGIES: Dict[str, Callable[[ResidualGraph, str, str], Optional[Path]]] = {
    "dfs": find_augmenting_path_dfs,
    "bfs": find_augmenting_path_bfs,
}


def min_cut(graph: ResidualGraph, edges: Iterable[EdgeTuple], source: str) -> Dict[str, Any]:
    seen = {source}
    dq = deque([source])
    while dq:
        u = dq.popleft()
        for v, residual in graph.get(u, {}).items():
            if v not in seen and residual > 0:
                seen.add(v); dq.append(v)
    S = [n for n in graph if n in seen]; T = [n for n in graph if n not in seen]
    cut_edges = [(u, v) for u, v, _ in edges if u in seen and v not in seen]
    return {"S": S, "T": T, "edges_S_to_T": cut_edges}


def max_flow(edges: Iterable[EdgeTuple], source: str, sink: str, strategy: str = "bfs") -> Dict[str, Any]:
    """Run augmenting-path rounds until none is left.

    ``strategy`` picks the path search: ``"dfs"`` for generic
    Ford-Fulkerson, ``"bfs"`` for Edmonds-Karp. Both give the same value;
    only the number of rounds and the timing differ.
    """
    try:
        find_path = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown strategy {strategy!r}, expected one of {sorted(STRATEGIES)}") from None

    edges = list(edges)
    start = perf_counter()
    graph = build_residual_graph(edges)
    logs = []
    flow = 0

    while True:
        path = find_path(graph, source, sink)
        if path is None:
            break
        bottleneck = augment(graph, path)
        flow += bottleneck
        logger.debug("%s round %d: %s carries %d", strategy, len(logs) + 1, "->".join(path), bottleneck)
        logs.append({"augmenting_path": list(zip(path, path[1:])), "bottleneck": bottleneck, "flow_so_far": flow})

    elapsed_ms = (perf_counter() - start) * 1000.0

    return {
        "max_flow": flow,
        "execution_time_ms": elapsed_ms,
        "logs": logs,
        "min_cut": min_cut(graph, edges, source),
    }


def compare_strategies(edges: Iterable[EdgeTuple], source: str, sink: str) -> Dict[str, Any]:
    edges = list(edges)
    ff = max_flow(edges, source, sink, strategy="dfs")
    ek = max_flow(edges, source, sink, strategy="bfs")
    agree = ff["max_flow"] == ek["max_flow"]
    if not agree:
        logger.error("strategies disagree on %s->%s: dfs=%d bfs=%d", source, sink, ff["max_flow"], ek["max_flow"])
    return {
        "max_flow": ff["max_flow"],
        "ford_fulkerson_time": ff["execution_time_ms"],
        "edmonds_karp_time": ek["execution_time_ms"],
        "agree": agree,
    }
