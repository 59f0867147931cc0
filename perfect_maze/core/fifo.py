from typing import Optional

class _Node:
    __slots__ = ('value', 'next')

    def __init__(self, value: int):
        self.value = value
        self.next: Optional['_Node'] = None

class FifoQueue:
    """
    Singly linked FIFO of cell indices. The queue owns the head node,
    every node owns its successor.
    """
    __slots__ = ('head', 'tail', 'size')

    def __init__(self):
        self.head: Optional[_Node] = None
        self.tail: Optional[_Node] = None
        self.size = 0

    def enqueue(self, value: int):
        node = _Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self.size += 1

    def dequeue(self) -> int:
        if self.head is None:
            raise IndexError("dequeue from empty queue")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        self.size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self.size == 0

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size != 0
