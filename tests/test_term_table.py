# ======================================================
# tests/test_term_table.py
# ======================================================
# Here, we are testing the TermTable to ensure:
#   - the BKDR hash is deterministic and lands inside the table
#   - colliding terms share a chain but stay distinct
#   - find_term never raises for missing terms
#   - optional growth rehashes without losing entries
# ======================================================

import unittest

from termindex.TermTable import TABLE_SIZE, TermTable, bkdr_hash


class TestTermTable(unittest.TestCase):

    def setUp(self):
        self.table = TermTable()

    def test_default_capacity(self):
        self.assertEqual(self.table.capacity, TABLE_SIZE)
        self.assertEqual(len(self.table), 0)

    def test_bkdr_hash_known_values(self):
        # here, we are checking the hash against hand-computed values
        self.assertEqual(bkdr_hash(""), 0)
        self.assertEqual(bkdr_hash("a"), 97)
        self.assertEqual(bkdr_hash("ab"), 97 * 131 + 98)

    def test_bkdr_hash_wraps_to_32_bits(self):
        h = bkdr_hash("a" * 40)
        self.assertGreaterEqual(h, 0)
        self.assertLess(h, 2 ** 32)

    def test_bucket_index_in_range(self):
        for term in ["apple", "banana", "x" * 49, "über"]:
            idx = self.table.bucket_index(term)
            self.assertTrue(0 <= idx < TABLE_SIZE)
            self.assertEqual(idx, self.table.bucket_index(term))

    def test_find_or_create_returns_same_entry(self):
        first = self.table.find_or_create_term("apple")
        second = self.table.find_or_create_term("apple")
        self.assertIs(first, second)
        self.assertEqual(len(self.table), 1)
        self.assertEqual(first.occurrences, {})

    def test_find_term_missing(self):
        # here, we are verifying that a missing term is None, not an exception
        self.assertIsNone(self.table.find_term("missing"))
        self.assertNotIn("missing", self.table)

    def test_collisions_share_chain(self):
        # here, we are forcing every term into bucket 0
        table = TermTable(capacity=7, hash_func=lambda term: 0)
        for term in ["a", "b", "c"]:
            table.find_or_create_term(term)
        self.assertEqual([e.term for e in table.chain(0)], ["a", "b", "c"])
        self.assertEqual(table.find_term("b").term, "b")
        self.assertIsNone(table.find_term("d"))

    def test_chain_lengths_and_stats(self):
        table = TermTable(capacity=3, hash_func=len)
        for term in ["a", "b", "cc", "ddd"]:
            table.find_or_create_term(term)
        self.assertEqual(table.chain_lengths().tolist(), [1, 2, 1])
        stats = table.stats()
        self.assertEqual(stats["terms"], 4)
        self.assertEqual(stats["used_buckets"], 3)
        self.assertEqual(stats["longest_chain"], 2)
        self.assertAlmostEqual(stats["load_factor"], 4 / 3)

    def test_growth_keeps_every_term(self):
        table = TermTable(capacity=3, max_load=1.0)
        words = [f"word{i}" for i in range(50)]
        for w in words:
            table.find_or_create_term(w)
        self.assertGreater(table.capacity, 3)
        self.assertLessEqual(len(table) / table.capacity, 1.0)
        for w in words:
            self.assertIsNotNone(table.find_term(w))
        self.assertEqual(sorted(e.term for e in table.terms()), sorted(words))

    def test_fixed_capacity_without_max_load(self):
        table = TermTable(capacity=3)
        for i in range(20):
            table.find_or_create_term(f"w{i}")
        self.assertEqual(table.capacity, 3)

    def test_invalid_arguments(self):
        self.assertRaises(ValueError, TermTable, 0)
        self.assertRaises(ValueError, TermTable, 10, bkdr_hash, 0)

    def test_stats_value_types(self):
        table = TermTable(capacity=5)
        table.find_or_create_term("alpha")
        stats = table.stats()
        for key in ("capacity", "terms", "used_buckets", "longest_chain"):
            self.assertIsInstance(stats[key], int)
        for key in ("load_factor", "mean_chain"):
            self.assertIsInstance(stats[key], float)


if __name__ == "__main__":
    unittest.main()
