import logging
import unittest
import doctest

from numberrange import store
from numberrange.store import MemberStore, IntervalStore


class TestMemberStore(unittest.TestCase):

    def test_add_is_idempotent(self):
        members = MemberStore()
        members.add([1, 2, 2, 3])
        members.add([3])
        self.assertEqual(3, len(members))
        self.assertEqual([1, 2, 3], sorted(members))

    def test_discard(self):
        members = MemberStore()
        members.add(range(-5, 6))
        members.discard(range(-2, 3))
        members.discard([1000])
        self.assertEqual([-5, -4, -3, 3, 4, 5], sorted(members))
        self.assertNotIn(0, members)
        self.assertIn(-5, members)


class TestIntervalStore(unittest.TestCase):

    def test_add_same_bounds_once(self):
        intervals = IntervalStore()
        intervals.add(1, 9999)
        intervals.add(1, 9999)
        self.assertEqual(1, len(intervals))
        self.assertEqual("1..9999", IntervalStore.interval_id(1, 9999))

    def test_add_rejects_reversed(self):
        intervals = IntervalStore()
        with self.assertRaises(AssertionError):
            intervals.add(10, 1)

    def test_covers_inclusive(self):
        intervals = IntervalStore()
        intervals.add(-3000, -1000)
        self.assertTrue(intervals.covers(-3000))
        self.assertTrue(intervals.covers(-1000))
        self.assertFalse(intervals.covers(-999))
        self.assertFalse(intervals.covers(-3001))

    def test_discard_needs_exact_bounds(self):
        intervals = IntervalStore()
        intervals.add(1, 5000)
        intervals.discard(1, 4000)
        self.assertTrue(intervals.covers(4500))
        intervals.discard(1, 5000)
        self.assertFalse(intervals.covers(4500))
        self.assertEqual(0, len(intervals))

    def test_iter_sorted(self):
        intervals = IntervalStore()
        intervals.add(5000, 9000)
        intervals.add(-9000, -5000)
        self.assertEqual([(-9000, -5000), (5000, 9000)], list(intervals))

    def test_merged_and_width(self):
        intervals = IntervalStore()
        intervals.add(1, 2000)
        intervals.add(2001, 4000)
        intervals.add(1500, 1800)
        intervals.add(10000, 12000)
        self.assertEqual([(1, 4000), (10000, 12000)], intervals.merged())
        self.assertEqual(4000 + 2001, intervals.width())

    def test_count_uncovered(self):
        intervals = IntervalStore()
        self.assertEqual(3, intervals.count_uncovered([1, 2, 3]))
        intervals.add(0, 2000)
        intervals.add(5000, 7000)
        self.assertEqual(3, intervals.count_uncovered([-1, 0, 2000, 2001, 4999, 5000, 7000]))

    def test_doc(self):
        result = doctest.testmod(store)
        assert result.failed == 0, "failed doc test: " + __file__


def getTestSuite():
    suite1 = unittest.TestLoader().loadTestsFromTestCase(TestMemberStore)
    suite2 = unittest.TestLoader().loadTestsFromTestCase(TestIntervalStore)
    return unittest.TestSuite([suite1, suite2])


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    r = unittest.TextTestRunner(failfast=False)
    r.run(getTestSuite())
