from __future__ import annotations
from typing import TypeVar, Generic
from .priority import MAX_PRIORITY, PriorityGenerator
from .util import check_key, check_priority
T = TypeVar('T')

def rotate_right(node: Treap.Node) -> Treap.Node:
    y = node.left
    node.left = y.right
    y.right = node
    return y

def rotate_left(node: Treap.Node) -> Treap.Node:
    y = node.right
    node.right = y.left
    y.left = node
    return y

def to_string(node: Treap.Node | None) -> str:
    # Explicit stack of nodes and literal fragments, so deep trees do not hit the recursion limit
    parts: list[str] = []
    stack: list[Treap.Node | str | None] = [node]
    while stack:
        x = stack.pop()
        if isinstance(x, str):
            parts.append(x)
        elif x is None:
            parts.append("None")
        else:
            stack.extend([")", x.right, ") (", x.left, f"{x} ("])
    return "".join(parts)

class Treap(Generic[T]):
    """A binary search tree over unique keys that is also a max-heap over per-key priorities.

    Priorities are drawn from a per-tree random source unless given explicitly, which keeps the
    tree balanced in expectation. Passing a seed makes the shape of the tree reproducible."""
    class Node:
        def __init__(self, key: T, priority: int):
            self.key = key
            self.priority = priority
            self.left: Treap.Node | None = None
            self.right: Treap.Node | None = None

        def __str__(self):
            return f"{self.key},{self.priority}"

    def __init__(self, seed: int | None = None):
        self.root: Treap.Node | None = None
        self._size = 0
        self._priorities = PriorityGenerator(seed)

    def _replace_child(self, parent: Treap.Node | None, old: Treap.Node, new: Treap.Node | None):
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def insert(self, key: T, priority: int | None = None) -> bool:
        """Inserts the key and returns True, or returns False if an equal key is already present."""
        check_key(key)
        if priority is not None:
            priority = check_priority(priority, MAX_PRIORITY)

        path: list[Treap.Node] = []
        x = self.root
        while x is not None:
            if key < x.key:
                path.append(x)
                x = x.left
            elif key > x.key:
                path.append(x)
                x = x.right
            else:
                return False

        if priority is None:
            priority = self._priorities.next()
        node = Treap.Node(key, priority)
        self._size += 1

        if not path:
            self.root = node
            return True

        if key < path[-1].key:
            path[-1].left = node
        else:
            path[-1].right = node

        # Bubble the new node up while it strictly outranks its parent
        while path:
            parent = path.pop()
            if not node.priority > parent.priority:
                break
            if parent.left is node:
                rotate_right(parent)
            else:
                rotate_left(parent)
            self._replace_child(path[-1] if path else None, parent, node)
        return True

    def delete(self, key: T) -> bool:
        """Deletes the key and returns True, or returns False if the key is not present."""
        check_key(key)
        parent: Treap.Node | None = None
        x = self.root
        while x is not None:
            if key < x.key:
                parent, x = x, x.left
            elif key > x.key:
                parent, x = x, x.right
            else:
                break

        if x is None:
            return False

        # Push the node down towards the higher priority child until it is a leaf
        while x.left is not None or x.right is not None:
            if x.left is None:
                y = rotate_left(x)
            elif x.right is None or x.left.priority > x.right.priority:
                y = rotate_right(x)
            else:
                y = rotate_left(x)
            self._replace_child(parent, x, y)
            parent = y

        self._replace_child(parent, x, None)
        self._size -= 1
        return True

    def find(self, key: T) -> bool:
        check_key(key)
        x = self.root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                x = x.right
            else:
                return True
        return False

    def __contains__(self, key: T):
        return self.find(key)

    def empty(self):
        return self.root is None

    def __len__(self):
        return self._size

    def __str__(self):
        return to_string(self.root)
