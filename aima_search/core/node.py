# aima_search/core/node.py
# Search-tree nodes. Nodes live in a per-search arena (SearchTree) and point at their
# parent by index, so a solution path is an index walk and the whole tree is dropped with the search.
from __future__ import annotations
from typing import Iterator, List, Optional
from .metrics import Metrics, NODES_EXPANDED
from .problem import Action, State


class Node:
    __slots__ = ("state", "parent", "action", "path_cost", "depth", "index")

    def __init__(self, state: State, parent: Optional[int] = None, action: Optional[Action] = None,
                 path_cost: float = 0.0, depth: int = 0, index: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = float(path_cost)
        self.depth = depth
        self.index = index

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"Node({self.state!r}, action={self.action!r}, g={self.path_cost}, d={self.depth})"


class SearchTree:
    """Arena owning every node generated by one search."""

    def __init__(self, metrics: Optional[Metrics] = None):
        self.nodes: List[Node] = []
        self.metrics = metrics if metrics is not None else Metrics()

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def root(self, state: State) -> Node:
        return self._add(state, None, None, 0.0, 0)

    def _add(self, state, parent, action, path_cost, depth) -> Node:
        node = Node(state, parent, action, path_cost, depth, len(self.nodes))
        self.nodes.append(node)
        return node

    def keep_only(self, children: List[Node], chosen: Optional[Node] = None) -> Optional[Node]:
        """Drop a freshly generated sibling batch, re-attaching ``chosen`` if given.

        Local search only ever follows one child, so the rest of the batch is dead weight.
        Returns the re-attached node (with its new index).
        """
        if not children:
            return chosen
        self.truncate(children[0].index)
        if chosen is None:
            return None
        chosen.index = len(self.nodes)
        self.nodes.append(chosen)
        return chosen

    def truncate(self, size: int) -> None:
        """Forget every node with index >= size (a finished depth-first subtree)."""
        del self.nodes[size:]

    def parent_of(self, node: Node) -> Optional[Node]:
        return None if node.parent is None else self.nodes[node.parent]

    def expand(self, node: Node, problem) -> Iterator[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost.

        No duplicate filtering happens here; that is the strategy's job.
        """
        self.metrics.increment(NODES_EXPANDED)
        s = node.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check your problem's ACTIONS/RESULT/cost mapping."
                )
            child = self._add(s2, node.index, a, node.path_cost + float(cost), node.depth + 1)
            self.metrics.track_depth(child.depth)
            yield child

    def path(self, node: Node) -> List[Node]:
        """Nodes from the root down to ``node``."""
        out = [node]
        while node.parent is not None:
            node = self.nodes[node.parent]
            out.append(node)
        out.reverse()
        return out

    def on_path(self, node: Node, state: State) -> bool:
        """True if ``state`` occurs on the path from the root to ``node``."""
        cur: Optional[Node] = node
        while cur is not None:
            if cur.state == state:
                return True
            cur = self.parent_of(cur)
        return False
