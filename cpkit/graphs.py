"""Graph algorithms: disjoint sets, 2-SAT, bipartite matching and binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence

_INF = float("inf")


class DisjointSetUnion:
    """Union-find with path compression and union by size."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def make_set(self, v: int) -> None:
        """Make v a singleton set."""
        self._parent[v] = v
        self._size[v] = 1

    def find_set(self, v: int) -> int:
        """Return the representative of v's set."""
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union_sets(self, a: int, b: int) -> None:
        """Merge the sets holding a and b."""
        a, b = self.find_set(a), self.find_set(b)
        if a != b:
            if self._size[a] < self._size[b]:
                a, b = b, a
            self._parent[b] = a
            self._size[a] += self._size[b]

    def size_of(self, v: int) -> int:
        """Return the size of the set holding v."""
        return self._size[self.find_set(v)]


class TwoSat:
    """2-SAT solver over n variables using Kosaraju's algorithm."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(2 * n)]
        self._adj_t: list[list[int]] = [[] for _ in range(2 * n)]

    def add_disjunction(self, a: int, pos_a: bool, b: int, pos_b: bool) -> None:
        """Add the clause (a if pos_a else not a) or (b if pos_b else not b)."""
        neg_a, neg_b = a + self.n, b + self.n
        if not pos_a:
            a, neg_a = neg_a, a
        if not pos_b:
            b, neg_b = neg_b, b
        self._adj[neg_a].append(b)
        self._adj[neg_b].append(a)
        self._adj_t[a].append(neg_b)
        self._adj_t[b].append(neg_a)

    def _finish_order(self) -> list[int]:
        total = 2 * self.n
        visited = [False] * total
        order: list[int] = []
        for start in range(total):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                u, it = stack[-1]
                for v in it:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                else:
                    stack.pop()
                    order.append(u)
        return order

    def solve(self) -> list[bool] | None:
        """Return a satisfying assignment, or None if none exists."""
        comp = [0] * (2 * self.n)
        label = 1
        for u in reversed(self._finish_order()):
            if comp[u]:
                continue
            comp[u] = label
            stack = [u]
            while stack:
                x = stack.pop()
                for y in self._adj_t[x]:
                    if not comp[y]:
                        comp[y] = label
                        stack.append(y)
            label += 1
        result = []
        for i in range(self.n):
            if comp[i] == comp[i + self.n]:
                return None
            result.append(comp[i] > comp[i + self.n])
        return result


class HopcroftKarp:
    """Maximum bipartite matching; vertices are 1..nodes-1, 0 is reserved."""

    def __init__(self, nodes: int) -> None:
        self.nodes = nodes
        self._graph: list[list[int]] = [[] for _ in range(nodes)]
        self._match = [0] * nodes
        self._dist: list[float] = [0] * nodes

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from left vertex u to right vertex v."""
        self._graph[u].append(v)

    def _bfs(self, n: int) -> bool:
        queue: deque[int] = deque()
        for i in range(1, n + 1):
            if not self._match[i]:
                self._dist[i] = 0
                queue.append(i)
            else:
                self._dist[i] = _INF
        self._dist[0] = _INF
        while queue:
            u = queue.popleft()
            if not u:
                continue
            for v in self._graph[u]:
                m = self._match[v]
                if self._dist[m] == _INF:
                    self._dist[m] = self._dist[u] + 1
                    queue.append(m)
        return self._dist[0] != _INF

    def _dfs(self, u: int) -> bool:
        if not u:
            return True
        for v in self._graph[u]:
            m = self._match[v]
            if self._dist[m] == self._dist[u] + 1 and self._dfs(m):
                self._match[u] = v
                self._match[v] = u
                return True
        self._dist[u] = _INF
        return False

    def max_matching(self) -> int:
        """Return the size of a maximum matching."""
        n = self.nodes - 1
        found = 0
        while self._bfs(n):
            for i in range(1, n + 1):
                if not self._match[i] and self._dfs(i):
                    found += 1
        return found


class BinaryLifting:
    """Ancestor and lowest-common-ancestor queries on a rooted tree."""

    def __init__(self, children: Mapping[int, Sequence[int]] | Sequence[Sequence[int]],
                 root: int) -> None:
        kids = children if isinstance(children, Mapping) else dict(enumerate(children))
        self._depth = {root: 0}
        parent = {root: root}
        order = [root]
        for node in order:
            for child in kids.get(node, ()):
                self._depth[child] = self._depth[node] + 1
                parent[child] = node
                order.append(child)
        self._log = max(1, max(self._depth.values()).bit_length())
        self._up: dict[int, list[int]] = {}
        for node in order:
            row = [parent[node]]
            for i in range(1, self._log):
                row.append(self._up[row[i - 1]][i - 1] if row[i - 1] != node
                           else node)
            self._up[node] = row

    def depth(self, node: int) -> int:
        """Return the depth of node; the root has depth 0."""
        return self._depth[node]

    def kth_ancestor(self, node: int, k: int) -> int:
        """Return the k-th ancestor of node, or -1 if it is shallower than k."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if self._depth[node] < k:
            return -1
        for i in range(self._log):
            if k >> i & 1:
                node = self._up[node][i]
        return node

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of u and v."""
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        u = self.kth_ancestor(u, self._depth[u] - self._depth[v])
        if u == v:
            return v
        for i in reversed(range(self._log)):
            if self._up[u][i] != self._up[v][i]:
                u, v = self._up[u][i], self._up[v][i]
        return self._up[v][0]