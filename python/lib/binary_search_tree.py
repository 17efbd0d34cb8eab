#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
binary_search_tree.py
---------------------

An unbalanced binary search tree over numeric keys, with explicit parent
links.  Equal keys are kept (they sort to the right), so the tree behaves
like an ordered multiset rather than a mapping.

Features
~~~~~~~~
* `tree.insert(key)` / `tree.insert(node)` – attach a key or a pre-built node
* `tree.find(key)`    – first node holding *key* (an absent node if missing)
* `tree.remove(node)` – three-case deletion with subtree transplant
* `tree.traverse_in_order()` – all keys ascending, duplicates included
* `tree.deepest()`   – keys of the deepest leaves plus their depth
* `minimum(node)`, `maximum(node)`, `successor(node)`, `predecessor(node)`
* iteration, `len(tree)`, `key in tree`
* `tree.validate()` – sanity-check ordering and parent links

Every link slot of a real node holds either another real node or an
*absent* node (``exists`` is ``False``), so traversal code only ever checks
``.exists`` and never tests for ``None``.

No rebalancing is done: inserting keys in sorted order produces a chain.
All walks use explicit stacks, so chain-shaped trees do not hit the
recursion limit.

Typical usage
~~~~~~~~~~~~~
>>> from binary_search_tree import BinarySearchTree, successor
>>> bst = BinarySearchTree([10, 5, 15, 2, 7, 20, 6])
>>> bst.traverse_in_order()
[2, 5, 6, 7, 10, 15, 20]
>>> successor(bst.find(5)).key
6
>>> successor(bst.find(20)).exists
False
>>> bst.remove(bst.find(10))
>>> bst.root.key
15
>>> bst.deepest()
Deepest(keys=[6], depth=3)
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Generator, Iterable, List, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Keys are plain real numbers; bool is rejected even though it is an int
# ----------------------------------------------------------------------
Key = Union[int, float]


def is_key(value: Any) -> bool:
    """Return ``True`` if *value* can be stored as a key."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class InvalidKey(TypeError):
    """Raised when a key, node or seed sequence has the wrong type."""

    def __init__(self, message: str = "invalid key") -> None:
        super().__init__(message)


class Node:
    """
    A tree node, or the absent marker when built without a key.

    ``Node(5)`` is a real node with absent children and an absent parent.
    ``Node()`` is an absent node: ``exists`` is ``False`` and the other
    fields are ``None``.
    """

    __slots__ = ("exists", "key", "left", "right", "parent")

    def __init__(self, key: Optional[Key] = None, parent: Optional[Node] = None) -> None:
        if key is None:
            self.exists = False
            self.key = None
            self.left = self.right = self.parent = None
            return
        self.exists = True
        self.key = key
        self.left: Node = Node()
        self.right: Node = Node()
        self.parent: Node = parent if parent is not None else Node()

    def __bool__(self) -> bool:
        return self.exists

    def __repr__(self) -> str:
        if not self.exists:
            return "<Node absent>"
        return f"<Node {self.key!r}>"

    def is_leaf(self) -> bool:
        """A real node with no real children."""
        return self.exists and not self.left.exists and not self.right.exists

    def is_linked(self) -> bool:
        """A real node that has not been destroyed."""
        return self.exists and self.left is not None

    def destroy(self) -> None:
        """Drop every link so a detached node keeps nothing reachable."""
        self.left = None
        self.right = None
        self.parent = None


class Deepest(NamedTuple):
    """Result of :meth:`BinarySearchTree.deepest`."""

    keys: List[Key]
    depth: int


# ----------------------------------------------------------------------
#  Node-level queries (need no reference to the owning tree)
# ----------------------------------------------------------------------
def minimum(node: Node) -> Node:
    """Return the leftmost node of the subtree rooted at *node*."""
    if not node.exists:
        return node
    while node.left.exists:
        node = node.left
    return node


def maximum(node: Node) -> Node:
    """Return the rightmost node of the subtree rooted at *node*."""
    if not node.exists:
        return node
    while node.right.exists:
        node = node.right
    return node


def successor(node: Node) -> Node:
    """
    Return the node that follows *node* in an in-order walk.

    An absent node is returned when *node* is absent, destroyed, or holds
    the last key.  With duplicate keys this is the next node in traversal
    order, which may carry the same key.
    """
    if not node.is_linked():
        return Node()
    if node.right.exists:
        return minimum(node.right)

    # Climb until we arrive from a left child.
    ancestor = node.parent
    while ancestor.exists and node is ancestor.right:
        node = ancestor
        ancestor = ancestor.parent
    return ancestor


def predecessor(node: Node) -> Node:
    """Mirror of :func:`successor`."""
    if not node.is_linked():
        return Node()
    if node.left.exists:
        return maximum(node.left)

    ancestor = node.parent
    while ancestor.exists and node is ancestor.left:
        node = ancestor
        ancestor = ancestor.parent
    return ancestor


def depth(node: Node) -> int:
    """Number of parent links between *node* and the root (root is 0)."""
    count = 0
    while node.parent.exists:
        node = node.parent
        count += 1
    return count


class BinarySearchTree:
    """
    A container holding a single ``root`` reference.

    The root is an absent node while the tree is empty.  No size or other
    bookkeeping is stored; ``len()`` walks the tree.
    """

    __slots__ = ("root",)

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(self, keys: Iterable[Key] = ()) -> None:
        """
        Create an empty tree or seed it from *keys*.

        Parameters
        ----------
        keys : iterable of numbers   optional
            Inserted one by one in the given order.  A string, a
            non-iterable or any non-numeric element raises ``InvalidKey``.
        """
        self.root: Node = Node()

        if isinstance(keys, (str, bytes)):
            raise InvalidKey()
        try:
            iterator = iter(keys)
        except TypeError:
            raise InvalidKey() from None
        seed = list(iterator)
        if not all(is_key(key) for key in seed):
            raise InvalidKey()

        for key in seed:
            self.insert(key)

    def __iter__(self) -> Generator[Key, None, None]:
        """Yield keys in ascending order (in-order traversal)."""
        stack: List[Node] = []
        cur = self.root
        while stack or cur.exists:
            while cur.exists:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self.root.exists

    def __contains__(self, key: object) -> bool:
        return is_key(key) and self.find(key).exists  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.traverse_in_order()!r})"

    # ------------------------------------------------------------------
    #   Insertion / lookup
    # ------------------------------------------------------------------
    def insert(self, item: Union[Key, Node]) -> None:
        """
        Attach *item* (a number, or a real :class:`Node`) below the last
        node on its search path.

        Smaller keys go left, equal or greater keys go right, so a
        duplicate ends up in the right subtree of its first equal.  A
        pre-built node keeps whatever subtree it already carries.
        """
        if isinstance(item, Node):
            if not item.is_linked() or not is_key(item.key):
                raise InvalidKey()
            node = item
        elif is_key(item):
            node = Node(item)
        else:
            raise InvalidKey()

        parent = Node()
        cur = self.root
        while cur.exists:
            parent = cur
            if node.key < cur.key:
                cur = cur.left
            else:
                cur = cur.right

        node.parent = parent
        if not parent.exists:
            logger.debug("insert %r as root", node.key)
            self.root = node
        elif node.key < parent.key:
            logger.debug("insert %r left of %r", node.key, parent.key)
            parent.left = node
        else:
            logger.debug("insert %r right of %r", node.key, parent.key)
            parent.right = node

    def find(self, key: Key) -> Node:
        """Return the first node holding *key*, or an absent node."""
        if not is_key(key):
            raise InvalidKey()
        cur = self.root
        while cur.exists:
            if key == cur.key:
                return cur
            if key < cur.key:
                cur = cur.left
            else:
                cur = cur.right
        return Node()

    # ------------------------------------------------------------------
    #   Whole-tree queries
    # ------------------------------------------------------------------
    def minimum(self) -> Node:
        return minimum(self.root)

    def maximum(self) -> Node:
        return maximum(self.root)

    def traverse_in_order(self) -> List[Key]:
        """Return a fresh ascending list of every key, duplicates included."""
        return list(self)

    def deepest(self) -> Deepest:
        """
        Return the keys of the leaves lying deepest, and that depth.

        Keys come out in the order the leaves are met walking left
        subtree, right subtree, then the node itself, i.e. left to right
        across the tree, not sorted by key.  An empty tree gives
        ``Deepest([], 0)``.
        """
        leaves: List[Node] = []
        max_depth = 0
        if not self.root.exists:
            return Deepest([], max_depth)

        # Any left-first walk meets the leaves in the same order as a
        # post-order walk, so a plain pre-order stack is enough here.
        stack: List[Node] = [self.root]
        while stack:
            node = stack.pop()
            if node.right.exists:
                stack.append(node.right)
            if node.left.exists:
                stack.append(node.left)
            if not node.is_leaf():
                continue
            node_depth = depth(node)
            if node_depth == max_depth:
                leaves.append(node)
            elif node_depth > max_depth:
                max_depth = node_depth
                leaves = [node]

        return Deepest([leaf.key for leaf in leaves], max_depth)

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def _shift_nodes(self, u: Node, v: Node) -> None:
        """Put *v* where *u* hangs from its parent (or at the root)."""
        if not u.parent.exists:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        # Set even when v is absent.
        v.parent = u.parent

    def remove(self, node: Node) -> None:
        """
        Unlink *node* from the tree and destroy it.

        *node* must belong to this tree; that is not checked.  An absent
        or already destroyed node raises ``InvalidKey``.
        """
        if not isinstance(node, Node) or not node.is_linked():
            raise InvalidKey("cannot remove an absent node")

        if not node.left.exists:
            logger.debug("remove %r: no left child", node.key)
            self._shift_nodes(node, node.right)
        elif not node.right.exists:
            logger.debug("remove %r: no right child", node.key)
            self._shift_nodes(node, node.left)
        else:
            succ = successor(node)
            logger.debug("remove %r: two children, successor %r", node.key, succ.key)
            if succ.parent is not node:
                # Lift succ out of node's right subtree first.
                self._shift_nodes(succ, succ.right)
                succ.right = node.right
                succ.right.parent = succ
            self._shift_nodes(node, succ)
            succ.left = node.left
            succ.left.parent = succ

        node.destroy()

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify ordering and parent links for the whole tree.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        if self.root.exists:
            assert not self.root.parent.exists, "Root has a parent"

        # (node, lower bound inclusive, upper bound exclusive)
        stack = [(self.root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if not node.exists:
                continue
            assert node.left is not None, "Destroyed node still linked"
            if low is not None:
                assert node.key >= low, "BST property violated (right subtree smaller)"
            if high is not None:
                assert node.key < high, "BST property violated (left subtree larger)"
            for child in (node.left, node.right):
                if child.exists:
                    assert child.parent is node, "Child does not point back to parent"
            stack.append((node.left, low, node.key))
            stack.append((node.right, node.key, high))
