import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.fifo import FifoQueue

class TestFifoQueue(unittest.TestCase):
    def test_fifo_order(self):
        q = FifoQueue()
        items = [5, 3, 9, 0, 12, 7]
        for item in items:
            q.enqueue(item)
        self.assertEqual(len(q), len(items))
        self.assertEqual([q.dequeue() for _ in items], items)
        self.assertTrue(q.is_empty())

    def test_interleaved(self):
        q = FifoQueue()
        q.enqueue(1)
        q.enqueue(2)
        self.assertEqual(q.dequeue(), 1)
        q.enqueue(3)
        self.assertEqual(q.dequeue(), 2)
        self.assertEqual(q.dequeue(), 3)
        self.assertFalse(q)

    def test_reuse_after_drain(self):
        q = FifoQueue()
        q.enqueue(1)
        q.dequeue()
        self.assertIsNone(q.head)
        self.assertIsNone(q.tail)
        q.enqueue(4)
        self.assertTrue(q)
        self.assertEqual(q.dequeue(), 4)

    def test_empty_dequeue(self):
        q = FifoQueue()
        with self.assertRaises(IndexError):
            q.dequeue()
        q.enqueue(1)
        q.dequeue()
        with self.assertRaises(IndexError):
            q.dequeue()

if __name__ == '__main__':
    unittest.main()
