# aima_search/core/utils.py
# Reconstructs the solution path from a goal node and packs search outcomes into SearchResults.
from __future__ import annotations
from typing import Any, List, Optional, Tuple
from .metrics import MeasuredRun, Metrics, Outcome, SearchResult, PATH_COST
from .node import Node, SearchTree


def reconstruct_path(tree: SearchTree, node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = tree[cur.parent]
    actions.reverse()
    return actions, cost


def path_result(name: str, outcome: Outcome, tree: SearchTree, node: Node,
                meter: MeasuredRun) -> SearchResult:
    """Result carrying the root-to-node path; used for solutions and for local search endings."""
    actions, cost = reconstruct_path(tree, node)
    metrics = tree.metrics
    metrics.set(PATH_COST, cost)
    return SearchResult(name, outcome, actions, cost, metrics.nodes_expanded,
                        meter.elapsed, meter.peak_kb, final_state=node.state,
                        metrics=dict(metrics))


def empty_result(name: str, outcome: Outcome, metrics: Metrics, meter: MeasuredRun,
                 final_state: Optional[Any] = None) -> SearchResult:
    """Result with no plan: failure, cutoff or cancellation. Its path cost is +inf."""
    metrics.set(PATH_COST, float("inf"))
    return SearchResult(name, outcome, [], float("inf"), metrics.nodes_expanded,
                        meter.elapsed, meter.peak_kb, final_state=final_state,
                        metrics=dict(metrics))
