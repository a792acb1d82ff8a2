from typing import Any, Generic, Iterator, Optional, TypeVar

# T represents the totally ordered coordinate type (hour fractions, timestamps)
T = TypeVar('T')


class IntervalHandle(Generic[T]):
    """Stored interval [start, end) with its payload and augmented subtree data."""
    __slots__ = ['start', 'end', 'data', 'left', 'right', 'max_end', 'height']

    def __init__(self, start: T, end: T, data: Any):
        self.start: T = start
        self.end: T = end
        self.data: Any = data
        self.left: Optional['IntervalHandle[T]'] = None
        self.right: Optional['IntervalHandle[T]'] = None
        self.max_end: T = end
        self.height: int = 1

    def __repr__(self):
        return f"IntervalHandle({self.start!r}, {self.end!r}, {self.data!r})"


class IntervalTree(Generic[T]):
    """
    AVL tree keyed on interval start, augmented with the subtree's max end.

    Intervals are half-open: [9, 10) and [10, 11) do not overlap.
    Equal starts keep insertion order in an in-order walk.
    """

    def __init__(self):
        self.root: Optional[IntervalHandle[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[IntervalHandle[T]]:
        """In-order walk (by start, then insertion order)."""
        stack: list[IntervalHandle[T]] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    # --- Balancing ---

    @staticmethod
    def _height(node: Optional[IntervalHandle[T]]) -> int:
        return node.height if node else 0

    def _refresh(self, node: IntervalHandle[T]):
        node.height = 1 + max(self._height(node.left), self._height(node.right))
        m = node.end
        if node.left and node.left.max_end > m:
            m = node.left.max_end
        if node.right and node.right.max_end > m:
            m = node.right.max_end
        node.max_end = m

    def _rotate_left(self, x: IntervalHandle[T]) -> IntervalHandle[T]:
        y = x.right
        x.right = y.left
        y.left = x
        self._refresh(x)
        self._refresh(y)
        return y

    def _rotate_right(self, y: IntervalHandle[T]) -> IntervalHandle[T]:
        x = y.left
        y.left = x.right
        x.right = y
        self._refresh(y)
        self._refresh(x)
        return x

    def _balance(self, node: IntervalHandle[T]) -> IntervalHandle[T]:
        self._refresh(node)
        skew = self._height(node.left) - self._height(node.right)
        if skew > 1:
            if self._height(node.left.left) < self._height(node.left.right):
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)
        if skew < -1:
            if self._height(node.right.right) < self._height(node.right.left):
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)
        return node

    def _insert(self, node: Optional[IntervalHandle[T]], new: IntervalHandle[T]) -> IntervalHandle[T]:
        if node is None:
            return new
        if new.start < node.start:
            node.left = self._insert(node.left, new)
        else:
            node.right = self._insert(node.right, new)
        return self._balance(node)

    # --- Public API ---

    def insert(self, start: T, end: T, data: Any = None) -> IntervalHandle[T]:
        handle = IntervalHandle(start, end, data)
        self.root = self._insert(self.root, handle)
        self._size += 1
        return handle

    def overlapping(self, start: T, end: T) -> list[IntervalHandle[T]]:
        """All stored intervals overlapping [start, end), ordered by start."""
        found: list[IntervalHandle[T]] = []

        def _search(node):
            # Nothing in this subtree ends after start
            if not node or node.max_end <= start:
                return
            _search(node.left)
            if node.start < end and node.end > start:
                found.append(node)
            # Right subtree starts at or after node.start
            if node.start < end:
                _search(node.right)

        _search(self.root)
        return found

    def any_overlapping(self, start: T, end: T) -> bool:
        node = self.root
        while node:
            if node.max_end <= start:
                return False
            if node.start < end and node.end > start:
                return True
            if node.left and node.left.max_end > start:
                node = node.left
            elif node.start < end:
                node = node.right
            else:
                return False
        return False

    # --- Debug Tool ---

    def verify_integrity(self):
        """Raise RuntimeError if AVL height or max_end properties are violated."""
        def _walk(node):
            if not node:
                return 0, None

            left_h, left_max = _walk(node.left)
            right_h, right_max = _walk(node.right)

            if abs(left_h - right_h) > 1:
                raise RuntimeError(f"AVL violation at {node.start!r}")

            expected_max = max(m for m in (node.end, left_max, right_max) if m is not None)
            if node.max_end != expected_max:
                raise RuntimeError(f"max_end violation at {node.start!r}")

            return 1 + max(left_h, right_h), expected_max

        _walk(self.root)
