"""Tests for the self-organizing linked list"""
# pylint: skip-file

import unittest

from dsviz.linked_list import (
    MISS,
    ListNode,
    LinkedList,
    SearchResult,
    compute_prefix_table,
    pattern_digits,
)
from tests.test_base import BaseTestCase


class TestLinkedListBase(BaseTestCase):

    def setUp(self):
        self.lst = LinkedList()

    def tearDown(self):
        # Verify invariants after each test
        self.validate_linked_list(self.lst)

    def fill(self, values):
        for v in values:
            self.lst.insert(v)


class TestInsertRemove(TestLinkedListBase):

    def test_empty(self):
        self.assertEqual(len(self.lst), 0)
        self.assertFalse(self.lst)
        self.assertEqual(self.lst.to_list(), [])

    def test_insert_appends_at_tail(self):
        self.fill([3, 1, 4])
        self.validate_linked_list(self.lst, [3, 1, 4])

    def test_duplicate_insert_is_rejected(self):
        self.fill([1, 2])
        self.assertFalse(self.lst.insert(1))
        self.validate_linked_list(self.lst, [1, 2])

    def test_remove_head_middle_tail(self):
        self.fill([1, 2, 3, 4])
        self.assertTrue(self.lst.remove(1))
        self.assertTrue(self.lst.remove(3))
        self.assertTrue(self.lst.remove(4))
        self.validate_linked_list(self.lst, [2])

    def test_remove_missing(self):
        self.assertFalse(self.lst.remove(7))
        self.fill([1])
        self.assertFalse(self.lst.remove(7))
        self.validate_linked_list(self.lst, [1])

    def test_contains_and_clear(self):
        self.fill([5, 6])
        self.assertIn(5, self.lst)
        self.assertNotIn(7, self.lst)
        self.lst.clear()
        self.validate_linked_list(self.lst, [])


class TestSearch(TestLinkedListBase):

    def setUp(self):
        super().setUp()
        self.fill([1, 2, 3])

    def test_plain_search_reports_neighbours(self):
        result = self.lst.search(2)
        self.assertEqual(result, SearchResult(index=1, prev=1, current=2, next=3))
        self.assertTrue(result.found)
        self.validate_linked_list(self.lst, [1, 2, 3])

    def test_miss(self):
        result = self.lst.search(9, move_to_front=True)
        self.assertEqual(result, MISS)
        self.assertFalse(result.found)
        self.validate_linked_list(self.lst, [1, 2, 3])

    def test_search_empty_list(self):
        self.lst.clear()
        self.assertEqual(self.lst.search(1), MISS)

    def test_move_to_front(self):
        result = self.lst.search(3, move_to_front=True)
        self.assertEqual(result.current, 3)
        self.assertEqual(result.index, 2)
        self.assertEqual(result.prev, 2)
        self.assertIsNone(result.next)
        self.validate_linked_list(self.lst, [3, 1, 2])

    def test_transpose(self):
        result = self.lst.search(3, transpose=True)
        self.assertEqual(result, SearchResult(index=2, prev=3, current=2, next=None))
        self.validate_linked_list(self.lst, [1, 3, 2])

    def test_transpose_in_middle_reports_swapped_slots(self):
        result = self.lst.search(2, transpose=True)
        self.assertEqual(result, SearchResult(index=1, prev=2, current=1, next=3))
        self.validate_linked_list(self.lst, [2, 1, 3])

    def test_move_to_front_wins_over_transpose(self):
        self.lst.search(3, move_to_front=True, transpose=True)
        self.validate_linked_list(self.lst, [3, 1, 2])

    def test_hit_at_head_changes_nothing(self):
        result = self.lst.search(1, move_to_front=True)
        self.assertEqual(result, SearchResult(index=0, prev=None, current=1, next=2))
        self.lst.search(1, transpose=True)
        self.validate_linked_list(self.lst, [1, 2, 3])

    def test_repeated_transpose_bubbles_to_front(self):
        for _ in range(2):
            self.lst.search(3, transpose=True)
        self.validate_linked_list(self.lst, [3, 1, 2])


class TestKMPSearch(TestLinkedListBase):

    def test_pattern_found(self):
        self.fill([3, 1, 4, 5, 9, 2, 6])
        self.assertEqual(self.lst.kmp_search("45"), 2)
        self.assertEqual(self.lst.kmp_search("3"), 0)
        self.assertEqual(self.lst.kmp_search("926"), 4)
        self.assertEqual(self.lst.kmp_search("14"), 1)

    def test_repeated_insert_does_not_create_run(self):
        self.fill([3, 1, 4, 1, 5, 9])
        self.validate_linked_list(self.lst, [3, 1, 4, 5, 9])
        self.assertEqual(self.lst.kmp_search("41"), -1)

    def test_pattern_absent(self):
        self.fill([3, 1, 4])
        self.assertEqual(self.lst.kmp_search("14 "), -1)
        self.assertEqual(self.lst.kmp_search("43"), -1)
        self.assertEqual(self.lst.kmp_search("3141"), -1)

    def test_empty_inputs(self):
        self.assertEqual(self.lst.kmp_search("1"), -1)
        self.fill([1])
        self.assertEqual(self.lst.kmp_search(""), -1)

    def test_pattern_starting_with_zero(self):
        self.fill([1, 2, 0, 3, 4])
        self.assertEqual(self.lst.kmp_search("034"), 2)

    def test_partial_match_falls_back(self):
        self.fill([5, 1, 2, 3])
        self.assertEqual(self.lst.kmp_search("124"), -1)
        self.assertEqual(self.lst.kmp_search("123"), 1)

    def test_non_digit_never_matches(self):
        self.fill([1, 2])
        self.assertEqual(self.lst.kmp_search("1a"), -1)

    def test_multi_digit_values_do_not_match_single_digits(self):
        self.fill([12, 1, 2])
        self.assertEqual(self.lst.kmp_search("12"), 1)


class TestKMPOnRawNodes(unittest.TestCase):
    """Lists with repeated values can only be linked by hand."""

    def test_first_occurrence_index(self):
        lst = LinkedList()
        tail = None
        for v in [3, 1, 4, 1, 5, 9]:
            node = ListNode(v)
            if tail is None:
                lst.head = node
            else:
                tail.next = node
            tail = node
            lst.size += 1
        self.assertEqual(lst.kmp_search("41"), 2)
        self.assertEqual(lst.kmp_search("15"), 3)
        self.assertEqual(lst.kmp_search("1"), 1)


class TestPrefixTable(unittest.TestCase):

    def test_prefix_table(self):
        self.assertEqual(compute_prefix_table([1, 2, 1, 2, 3]), [0, 0, 1, 2, 0])
        self.assertEqual(compute_prefix_table([1, 1, 1]), [0, 1, 2])
        self.assertEqual(compute_prefix_table([]), [])

    def test_pattern_digits(self):
        self.assertEqual(pattern_digits("409"), [4, 0, 9])
        self.assertEqual(pattern_digits("4x"), [4, None])


if __name__ == "__main__":
    unittest.main()
