"""
ordtree Ordered Tree
====================
In-memory ordered key-value container backed by an unbalanced binary
search tree. Supports insert-or-update, membership test, and lookup.

Architecture:
  - OrderedTree owns an optional root Node.
  - Each Node owns its two child slots (left, right) exclusively.
    No parent pointers, no shared subtrees, no cycles.

Key ordering:
  - Invariant: left subtree < K, right subtree > K.
  - Keys only need < and == between each other. Equal keys overwrite
    the stored value in place; a key is never stored twice.

Depth:
  - No rebalancing. Random insertion order gives O(log n) depth,
    sorted insertion degrades to a linked list with O(n) depth.
  - Every walk is iterative, so skewed trees deeper than the
    interpreter recursion limit are fine.

Concurrency: single caller, no locking.
Delete / iteration / range scan: not implemented.
"""

from typing import Any, List, Optional, Tuple


# ─── Node ───────────────────────────────────────────────────────────────────

class Node:
    """One stored key/value pair plus its two owned child slots."""
    __slots__ = ('key', 'value', 'left', 'right')

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


# ─── Ordered Tree ───────────────────────────────────────────────────────────

class OrderedTree:
    """
    Unbalanced binary search tree mapping keys to values.

    Usage:
        tree = OrderedTree()
        tree.insert(5, "a")
        tree.insert(5, "b")      # overwrites
        tree.contains(5)         # True
        tree.get(5)              # "b"
        tree.get(7)              # None
    """

    __hash__ = None  # mutable container

    def __init__(self):
        self._root: Optional[Node] = None

    # ─── Insert ─────────────────────────────────────────────────────

    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a (key, value) pair, or overwrite the value if the key
        is already present. The tree shape only changes when a new
        leaf is attached.
        """
        node = self._root
        if node is None:
            self._root = Node(key, value)
            return

        while True:
            if key == node.key:
                node.value = value
                return
            if key < node.key:
                if node.left is None:
                    node.left = Node(key, value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(key, value)
                    return
                node = node.right

    # ─── Search ─────────────────────────────────────────────────────

    def contains(self, key: Any) -> bool:
        """True if the key is stored, even when its value is None."""
        return self._find(key) is not None

    __contains__ = contains

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored for key, or default if it is absent."""
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def _find(self, key: Any) -> Optional[Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    # ─── Copy / Compare / Repr ──────────────────────────────────────

    def copy(self) -> 'OrderedTree':
        """
        Return a tree with the same shape. Nodes are duplicated,
        values are shared (like dict.copy).
        """
        clone = OrderedTree()
        if self._root is None:
            return clone

        clone._root = Node(self._root.key, self._root.value)
        stack: List[Tuple[Node, Node]] = [(self._root, clone._root)]
        while stack:
            src, dst = stack.pop()
            if src.left is not None:
                dst.left = Node(src.left.key, src.left.value)
                stack.append((src.left, dst.left))
            if src.right is not None:
                dst.right = Node(src.right.key, src.right.value)
                stack.append((src.right, dst.right))
        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        """Structural equality: same shape, same keys and values."""
        if not isinstance(other, OrderedTree):
            return NotImplemented

        stack: List[Tuple[Optional[Node], Optional[Node]]] = [(self._root, other._root)]
        while stack:
            a, b = stack.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.key != b.key or a.value != b.value:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
        return True

    def __repr__(self) -> str:
        # Pre-order: re-inserting these pairs in order rebuilds the same shape.
        pairs = ", ".join(f"({k!r}, {v!r})" for k, v in self._preorder())
        return f"OrderedTree([{pairs}])"

    def _preorder(self) -> List[Tuple[Any, Any]]:
        pairs: List[Tuple[Any, Any]] = []
        stack: List[Node] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            pairs.append((node.key, node.value))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return pairs
