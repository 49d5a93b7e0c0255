import random
import string
from collections import Counter
from itertools import combinations

from huffcode.encoder.code_table import build_code_table, generate_codes, sorted_codes, weighted_length
from huffcode.encoder.tree import HuffmanTree, Internal, Leaf

FREQUENCIES = {"C": 32, "D": 42, "E": 120, "K": 7, "L": 42, "M": 24, "U": 37, "Z": 2}


def is_prefix_free(codes: dict[str, str]) -> bool:
    return all(
        not a.startswith(b) and not b.startswith(a)
        for a, b in combinations(codes.values(), 2)
    )


class TestCodeTable:
    def test_CDEKLMUZ(self) -> None:
        codes = build_code_table(HuffmanTree.build(FREQUENCIES))
        assert codes == {
            "E": "0",
            "L": "110",
            "U": "100",
            "D": "101",
            "C": "1110",
            "M": "11111",
            "K": "111101",
            "Z": "111100",
        }

    def test_abbcccdddd(self) -> None:
        frequencies = dict(Counter("abbcccdddd"))
        codes = build_code_table(HuffmanTree.build(frequencies))
        assert codes == {"d": "0", "c": "10", "a": "110", "b": "111"}
        assert weighted_length(codes, frequencies) == 19

    def test_hand_built_tree(self) -> None:
        root = Internal(Leaf("a", 3), Internal(Leaf("b", 1), Leaf("c", 2)))
        assert generate_codes(root) == {"a": "0", "b": "10", "c": "11"}

    def test_single_character(self) -> None:
        codes = build_code_table(HuffmanTree.build({"X": 5}))
        assert codes == {"X": "0"}

    def test_single_leaf(self) -> None:
        assert generate_codes(Leaf("\n", 1)) == {"\n": "0"}

    def test_prefix_free_random(self) -> None:
        text = "".join(random.choices(string.printable, k=10**4))
        codes = build_code_table(HuffmanTree.build(dict(Counter(text))))
        assert is_prefix_free(codes)
        assert all(code and set(code) <= {"0", "1"} for code in codes.values())

    def test_one_code_per_character(self) -> None:
        frequencies = dict(Counter("".join(random.choices(string.ascii_letters, k=2000))))
        codes = build_code_table(HuffmanTree.build(frequencies))
        assert codes.keys() == frequencies.keys()

    def test_code_length_matches_height(self) -> None:
        tree = HuffmanTree.build(FREQUENCIES)
        codes = build_code_table(tree)
        assert max(len(code) for code in codes.values()) == tree.height

    def test_deterministic(self) -> None:
        text = "".join(random.choices(string.ascii_letters + string.digits, k=10**4))
        frequencies = dict(Counter(text))
        expected = build_code_table(HuffmanTree.build(frequencies))
        for _ in range(5):
            items = list(frequencies.items())
            random.shuffle(items)
            assert build_code_table(HuffmanTree.build(dict(items))) == expected

    def test_optimal_length_uniform(self) -> None:
        # Eight equally likely characters need exactly three bits each.
        frequencies = {character: 10 for character in "abcdefgh"}
        codes = build_code_table(HuffmanTree.build(frequencies))
        assert {len(code) for code in codes.values()} == {3}
        assert weighted_length(codes, frequencies) == 240

    def test_sorted_codes(self) -> None:
        codes = build_code_table(HuffmanTree.build(FREQUENCIES))
        assert sorted_codes(codes) == [
            ("E", "0"),
            ("U", "100"),
            ("D", "101"),
            ("L", "110"),
            ("C", "1110"),
            ("M", "11111"),
            ("Z", "111100"),
            ("K", "111101"),
        ]
