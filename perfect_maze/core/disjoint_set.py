from array import array

class DisjointSet:
    """
    Array-backed union-find over the integers [0, size).

    parent[i] == ROOT marks a root. rank[i] holds the size of the tree rooted
    at i (only meaningful for roots).
    """
    ROOT = -1

    __slots__ = ('size', 'parent', 'rank', 'component_count')

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Disjoint set size must be positive, got {size}")
        self.size = size
        # 'i' (signed int) so the ROOT sentinel fits
        self.parent = array('i', [self.ROOT] * size)
        self.rank = array('i', [1] * size)
        self.component_count = size

    def _check(self, element: int):
        if not (0 <= element < self.size):
            raise IndexError(f"Element {element} out of range [0, {self.size})")

    def find(self, element: int) -> int:
        """
        Returns the root of the tree containing element.
        Path compression is done in two passes so deep trees never recurse.
        """
        self._check(element)

        root = element
        while self.parent[root] != self.ROOT:
            root = self.parent[root]

        # Second pass: point everything on the walked chain at the root
        curr = element
        while curr != root:
            nxt = self.parent[curr]
            if nxt != root:
                self.parent[curr] = root
            curr = nxt

        return root

    def union(self, a: int, b: int) -> int:
        """
        Merges the sets containing a and b, smaller tree under the larger.
        Returns the surviving root. Merging two members of the same set is a no-op.
        """
        if a == b or not (0 <= a < self.size) or not (0 <= b < self.size):
            raise ValueError(f"Bad indices given to union: a={a}, b={b} (size {self.size})")

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a

        self.parent[root_b] = root_a
        self.rank[root_a] += self.rank[root_b]
        self.component_count -= 1
        return root_a

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
