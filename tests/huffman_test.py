import unittest

from huffcodec.exceptions import EmptyInputError
from huffcodec.huffman import (
    HuffmanTreeSettings,
    count_frequencies,
    merge_frequencies,
    build_tree,
    build_tree_from_frequencies,
    build_code_table,
)
from huffcodec.logger import Logger, TreeMergeLog, ForcedPairLog
from huffcodec.models import FrequencyTable, LeafNode, InternalNode, Symbol
from huffcodec.settings import LEGACY_FORCED_PAIR


def check_weights(test, node, frequencies):
    """Recursively assert the weight invariant and return the subtree weight."""
    if node.is_leaf():
        test.assertEqual(node.weight, frequencies[node.symbol])
        return node.weight
    total = check_weights(test, node.left, frequencies) + check_weights(test, node.right, frequencies)
    test.assertEqual(node.weight, total)
    return total


class TestCountFrequencies(unittest.TestCase):
    def test_counts_distinct_symbols(self):
        table = count_frequencies("abracadabra")
        self.assertEqual(table, {'a': 5, 'b': 2, 'r': 2, 'c': 1, 'd': 1})
        self.assertIsInstance(table, FrequencyTable)

    def test_counts_symbol_objects(self):
        table = count_frequencies([Symbol(b'x'), Symbol(b'y'), Symbol(b'x')])
        self.assertEqual(table[Symbol(b'x')], 2)
        self.assertEqual(table[Symbol(b'y')], 1)

    def test_empty_input(self):
        self.assertEqual(len(count_frequencies("")), 0)

    def test_merge_shards(self):
        text = "mississippi"
        shards = [count_frequencies(text[:4]), count_frequencies(text[4:8]), count_frequencies(text[8:])]
        self.assertEqual(merge_frequencies(*shards), count_frequencies(text))


class TestBuildTree(unittest.TestCase):
    def test_abracadabra_tree(self):
        root = build_tree("abracadabra")
        self.assertEqual(root.weight, 11)
        self.assertEqual(root.left.symbol, 'a')
        self.assertEqual(root.leaf_count(), 5)
        self.assertEqual(root.internal_count(), 4)
        check_weights(self, root, count_frequencies("abracadabra"))

    def test_single_symbol_is_leaf(self):
        root = build_tree("aaaa")
        self.assertIsInstance(root, LeafNode)
        self.assertEqual(root.symbol, 'a')
        self.assertEqual(root.weight, 4)

    def test_empty_input_raises(self):
        with self.assertRaises(EmptyInputError):
            build_tree("")
        with self.assertRaises(ValueError):
            build_tree_from_frequencies({})

    def test_equal_leaves_ordered_by_symbol(self):
        for frequencies in ({'a': 2, 'b': 2}, {'b': 2, 'a': 2}):
            root = build_tree_from_frequencies(frequencies)
            self.assertEqual(root.left.symbol, 'a')
            self.assertEqual(root.right.symbol, 'b')

    def test_lighter_node_goes_left(self):
        root = build_tree("ddc")
        self.assertEqual(root.left.symbol, 'c')
        self.assertEqual(root.right.symbol, 'd')

    def test_leaf_before_internal_of_equal_weight(self):
        root = build_tree_from_frequencies({'a': 1, 'b': 1, 'c': 2})
        self.assertIsInstance(root.left, LeafNode)
        self.assertEqual(root.left.symbol, 'c')
        self.assertIsInstance(root.right, InternalNode)

    def test_equal_internal_nodes_by_creation_order(self):
        root = build_tree_from_frequencies({'d': 1, 'c': 1, 'b': 1, 'a': 1})
        self.assertEqual(build_code_table(root), {'a': '00', 'b': '01', 'c': '10', 'd': '11'})

    def test_deterministic(self):
        text = "the quick brown fox jumps over the lazy dog"
        first = build_code_table(build_tree(text))
        for _ in range(5):
            self.assertEqual(build_code_table(build_tree(text)), first)

    def test_weight_invariant(self):
        text = "she sells sea shells by the sea shore"
        check_weights(self, build_tree(text), count_frequencies(text))

    def test_merge_logging(self):
        logger = Logger()
        build_tree("abracadabra", logger=logger)
        merges = logger.get_logs(TreeMergeLog)
        self.assertEqual([log.merged_weight for log in merges], [2, 4, 6, 11])


class TestForcedPair(unittest.TestCase):
    def test_legacy_settings(self):
        self.assertEqual(HuffmanTreeSettings.legacy().forced_pair, LEGACY_FORCED_PAIR)
        self.assertIsNone(HuffmanTreeSettings().forced_pair)

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            HuffmanTreeSettings(forced_pair=('C',))
        with self.assertRaises(ValueError):
            HuffmanTreeSettings(forced_pair=('C', 'C'))

    def test_pair_merged_first(self):
        frequencies = {'A': 1, 'B': 1, 'C': 4, 'D': 4}
        plain = build_code_table(build_tree_from_frequencies(frequencies))
        self.assertEqual(plain, {'D': '0', 'A': '100', 'B': '101', 'C': '11'})

        legacy = build_code_table(build_tree_from_frequencies(frequencies, HuffmanTreeSettings.legacy()))
        self.assertEqual(legacy, {'A': '00', 'B': '01', 'C': '10', 'D': '11'})

    def test_pair_order_overrides_weight(self):
        plain = build_code_table(build_tree("CCD"))
        self.assertEqual(plain, {'D': '0', 'C': '1'})
        legacy = build_code_table(build_tree("CCD", HuffmanTreeSettings.legacy()))
        self.assertEqual(legacy, {'C': '0', 'D': '1'})

    def test_pair_needs_both_symbols(self):
        text = "CCCAAB"
        self.assertEqual(build_code_table(build_tree(text, HuffmanTreeSettings.legacy())),
                         build_code_table(build_tree(text)))

    def test_pair_matches_symbol_objects(self):
        symbols = [Symbol(c) for c in "ABCCCCDDDD"]
        table = build_code_table(build_tree(symbols, HuffmanTreeSettings.legacy()))
        self.assertEqual(table[Symbol('C')], '10')
        self.assertEqual(table[Symbol('D')], '11')

    def test_pair_is_logged(self):
        logger = Logger()
        logger.display_warning = False
        build_tree("ABCD", HuffmanTreeSettings.legacy(), logger)
        self.assertEqual(len(logger.get_logs(ForcedPairLog)), 1)
        check_weights(self, build_tree("ABCD", HuffmanTreeSettings.legacy()), count_frequencies("ABCD"))


class TestBuildCodeTable(unittest.TestCase):
    def test_abracadabra_codes(self):
        table = build_code_table(build_tree("abracadabra"))
        self.assertEqual(table, {'a': '0', 'c': '100', 'd': '101', 'b': '110', 'r': '111'})

    def test_single_symbol_code(self):
        self.assertEqual(build_code_table(build_tree("aaaa")), {'a': '0'})

    def test_prefix_free(self):
        for text in ("abracadabra", "mississippi river", "aab", "0123456789" * 3 + "000"):
            self.assertTrue(build_code_table(build_tree(text)).is_prefix_free())

    def test_optimal_length(self):
        frequencies = count_frequencies("abracadabra")
        table = build_code_table(build_tree_from_frequencies(frequencies))
        self.assertEqual(table.encoded_length(frequencies), 23)
        # a fixed length code for five symbols needs three bits each
        self.assertLess(table.encoded_length(frequencies), 3 * frequencies.total())

    def test_frequent_symbols_not_longer(self):
        frequencies = count_frequencies("aaaaaaaabbbbccd")
        lengths = build_code_table(build_tree_from_frequencies(frequencies)).code_lengths()
        self.assertLessEqual(lengths['a'], lengths['b'])
        self.assertLessEqual(lengths['b'], lengths['c'])
        self.assertLessEqual(lengths['c'], lengths['d'])

    def test_invalid_root(self):
        with self.assertRaises(ValueError):
            build_code_table(None)

if __name__ == '__main__':
    unittest.main()
