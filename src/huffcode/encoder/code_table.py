from collections.abc import Mapping

from toolz import pipe

from .tree import HuffmanTree, Node

CodeTable = dict[str, str]  # {character: huffman_code}


def generate_codes(root: Node) -> CodeTable:
    """Walks the tree depth-first and returns the root-to-leaf path of every character.

    Descending left appends "0" and descending right appends "1". A tree made of a
    single leaf has no path at all, so its character is given the one-bit code "0".
    """
    if root.is_leaf():
        return {root.character: "0"}

    codes: CodeTable = {}

    def walk(node: Node, prefix: str) -> None:
        if node.is_leaf():
            codes[node.character] = prefix
            return
        walk(node.left, prefix + "0")
        walk(node.right, prefix + "1")

    walk(root, "")
    return codes


def build_code_table(tree: HuffmanTree) -> CodeTable:
    return generate_codes(tree.root)


# Shortest codes first, then by the code itself.
def sorted_codes(codes: Mapping[str, str]) -> list[tuple[str, str]]:
    return pipe(
        codes.items(),
        lambda arg: sorted(arg, key=lambda x: (len(x[1]), x[1])),
        list,
    )


# Number of bits the table spends on the counted text.
def weighted_length(codes: Mapping[str, str], frequencies: Mapping[str, int]) -> int:
    return sum(len(codes[character]) * frequency for character, frequency in frequencies.items())
