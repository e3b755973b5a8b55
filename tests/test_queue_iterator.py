import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from aggregate import Aggregate, AggregateIterator
from fifo_queue import Queue
from queue_iterator import QueueIterator


class TestQueueIterator(unittest.TestCase):
    def test_empty_queue_has_no_next(self):
        it = Queue().get_iterator()
        self.assertFalse(it.has_next())
        self.assertIsNone(it.next())
        self.assertIsNone(it.current())

    def test_traverses_head_to_tail(self):
        it = Queue(1, 2, 3).get_iterator()
        values = []
        while it.has_next():
            values.append(it.next())
        self.assertEqual(values, [1, 2, 3])
        self.assertIsNone(it.next())

    def test_current_tracks_last_returned(self):
        it = Queue("a", "b").get_iterator()
        self.assertIsNone(it.current())
        it.next()
        self.assertEqual(it.current(), "a")
        it.next()
        self.assertEqual(it.current(), "b")

    def test_first_rewinds(self):
        it = Queue(1, 2).get_iterator()
        it.next()
        it.next()
        it.first()
        self.assertTrue(it.has_next())
        self.assertIsNone(it.current())
        self.assertEqual(it.next(), 1)

    def test_does_not_mutate_queue(self):
        q = Queue(1, 2, 3)
        list(q.get_iterator())
        self.assertEqual(list(q), [1, 2, 3])

    def test_snapshot_ignores_later_mutation(self):
        q = Queue(1, 2, 3)
        it = q.get_iterator()
        self.assertEqual(it.next(), 1)
        q.dequeue()
        q.enqueue(4)
        q.execute(lambda x: x * 100)
        self.assertEqual(list(it), [2, 3])

    def test_iterator_over_wrapped_buffer(self):
        q = Queue(1, 2, 3, 4)
        q.dequeue()
        q.enqueue(5)
        self.assertEqual(list(q.get_iterator()), [2, 3, 4, 5])

    def test_for_loop_consumes_cursor(self):
        it = Queue(1, 2).get_iterator()
        self.assertIs(iter(it), it)
        self.assertEqual([x for x in it], [1, 2])
        self.assertFalse(it.has_next())
        with self.assertRaises(StopIteration):
            next(it)

    def test_built_from_any_iterable(self):
        self.assertEqual(list(QueueIterator([7, 8])), [7, 8])

    def test_abstract_bases(self):
        self.assertIsInstance(Queue(), Aggregate)
        self.assertIsInstance(Queue().get_iterator(), AggregateIterator)
        with self.assertRaises(TypeError):
            AggregateIterator()


if __name__ == "__main__":
    unittest.main()
