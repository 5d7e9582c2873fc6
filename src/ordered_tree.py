from enum import Enum
from typing import TypeVar, Generic, List, Optional, Tuple

T = TypeVar('T')


class Order(Enum):
    INORDER = "inorder"
    PREORDER = "preorder"
    POSTORDER = "postorder"


class OrderedTree(Generic[T]):
    """Unbalanced binary search tree with deep-copy semantics.

    Every node exclusively owns its two subtrees, so copying a tree always
    duplicates the whole node graph and two trees never share a node.
    Keys are compared with ``<`` and ``==`` only; duplicates are rejected.
    """

    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

        def children(self) -> int:
            return int(self.left is not None) + int(self.right is not None)

        def copy(self) -> 'OrderedTree.Node':
            """Return a structurally identical subtree built from fresh nodes."""
            clone = OrderedTree.Node(self.key)
            stack: List[Tuple[OrderedTree.Node, OrderedTree.Node]] = [(self, clone)]
            while stack:
                source, target = stack.pop()
                if source.left is not None:
                    target.left = OrderedTree.Node(source.left.key)
                    stack.append((source.left, target.left))
                if source.right is not None:
                    target.right = OrderedTree.Node(source.right.key)
                    stack.append((source.right, target.right))
            return clone

        def clear(self) -> None:
            """Release both subtrees, unlinking every node below this one."""
            stack: List[OrderedTree.Node] = [self]
            while stack:
                node = stack.pop()
                if node.left is not None:
                    stack.append(node.left)
                if node.right is not None:
                    stack.append(node.right)
                node.left = None
                node.right = None

        def __repr__(self) -> str:
            return f"Node({self.key!r})"

    def __init__(self, other: Optional['OrderedTree[T]'] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        if other is not None:
            self.assign(other)

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def empty(self) -> bool:
        return self._root is None

    def find(self, key: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            if key < node.key:
                node = node.left
            else:
                node = node.right
        return None

    def insert(self, key: T) -> bool:
        if self._root is None:
            self._root = OrderedTree.Node(key)
            self._size += 1
            return True

        node = self._root
        while True:
            if key == node.key:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = OrderedTree.Node(key)
                    self._size += 1
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = OrderedTree.Node(key)
                    self._size += 1
                    return True
                node = node.right

    def erase(self, key: T) -> bool:
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and not key == node.key:
            parent = node
            if key < node.key:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            return False

        replacement: Optional[OrderedTree.Node]
        if node.is_leaf():
            replacement = None
        elif node.children() == 1:
            replacement = node.left if node.right is None else node.right
        else:
            replacement = self._detach_successor(node)
            replacement.left = node.left

        # detach before release, the children have been rehomed
        node.left = None
        node.right = None

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def clear(self) -> None:
        if self._root is not None:
            self._root.clear()
        self._root = None
        self._size = 0

    def traverse(self, order: Order = Order.INORDER) -> List[T]:
        if order is Order.PREORDER:
            return self._pre_order()
        if order is Order.INORDER:
            return self._in_order()
        if order is Order.POSTORDER:
            return self._post_order()
        raise ValueError(f"order not supported: {order!r}")

    def debuginfo(self) -> str:
        """Dump one line per node in pre-order: identity, key and child links."""
        lines: List[str] = []
        stack: List[OrderedTree.Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            lines.append(
                f"@{id(node):#x}: key={node.key} "
                f"{self._describe_link('left', node.left)} "
                f"{self._describe_link('right', node.right)}\n"
            )
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return "".join(lines)

    def assign(self, other: 'OrderedTree[T]') -> 'OrderedTree[T]':
        if not isinstance(other, OrderedTree):
            raise TypeError(f"cannot assign {type(other).__name__} to OrderedTree")
        if other is self:
            return self
        self.clear()
        if other._root is not None:
            self._root = other._root.copy()
            self._size = other._size
        return self

    def copy(self) -> 'OrderedTree[T]':
        return OrderedTree(self)

    def swap(self, other: 'OrderedTree[T]') -> None:
        if not isinstance(other, OrderedTree):
            raise TypeError(f"cannot swap OrderedTree with {type(other).__name__}")
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size

    def _detach_successor(self, node: Node) -> Node:
        # minimum of the right subtree, never the maximum of the left one
        assert node.right is not None
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        if successor is not node.right:
            successor_parent.left = successor.right
            successor.right = node.right
        return successor

    @staticmethod
    def _describe_link(name: str, child: Optional[Node]) -> str:
        if child is None:
            return f"{name}->null"
        return f"{name}->{child.key} @{id(child):#x}"

    def _in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def _pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def _post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __copy__(self) -> 'OrderedTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'OrderedTree[T]':
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        stack: List[Tuple[Optional[OrderedTree.Node], Optional[OrderedTree.Node]]] = [
            (self._root, other._root)
        ]
        while stack:
            mine, theirs = stack.pop()
            if mine is None or theirs is None:
                if mine is not theirs:
                    return False
                continue
            if not mine.key == theirs.key:
                return False
            stack.append((mine.left, theirs.left))
            stack.append((mine.right, theirs.right))
        return True

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        return f"OrderedTree({self._in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"


def swap(lhs: OrderedTree[T], rhs: OrderedTree[T]) -> None:
    lhs.swap(rhs)
