import heapq
from collections.abc import Iterator, Mapping
from typing import Self

from loguru import logger
from toolz import pipe

from ..utils.errors import EmptyInputError, InvalidFrequencyError


class Node:
    frequency: int

    def is_leaf(self) -> bool:
        raise NotImplementedError


class Leaf(Node):
    def __init__(self, character: str, frequency: int) -> None:
        self.character = character
        self.frequency = frequency

    def __str__(self) -> str:
        return f"character: {self.character!r}, frequency: {self.frequency}"

    def is_leaf(self) -> bool:
        return True


class Internal(Node):
    def __init__(self, left: Node, right: Node) -> None:
        self.left = left
        self.right = right
        self.frequency = left.frequency + right.frequency

    def __str__(self) -> str:
        return f"frequency: {self.frequency}, left: {self.left}, right: {self.right}"

    def is_leaf(self) -> bool:
        return False


class HuffmanTree:
    def __init__(self, root: Node) -> None:
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    @property
    def frequency(self) -> int:
        return self._root.frequency

    # Length of the longest code. The single leaf tree has height 0.
    @property
    def height(self) -> int:
        def depth(node: Node) -> int:
            if node.is_leaf():
                return 0
            return 1 + max(depth(node.left), depth(node.right))
        return depth(self._root)

    def leaves(self) -> Iterator[Leaf]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)

    def print(self) -> None:
        def print_tree(node: Node, start_depth: int) -> None:
            if node.is_leaf():
                print(f'{" " * 4 * start_depth} -> [{node.character!r}: {node.frequency}]')
                return
            print_tree(node.right, start_depth + 1)
            print(f'{" " * 4 * start_depth} -> ({node.frequency})')
            print_tree(node.left, start_depth + 1)
        print_tree(self._root, 0)

    # Builds the tree greedily by always merging the two lowest-priority nodes.
    #
    # The priority of a node is the tuple (frequency, order). Leaves get their order from
    # the ascending order of their characters, so among equal frequencies the smaller
    # character is extracted first. Internal nodes are numbered after all leaves in
    # creation order. The first node extracted in a merge becomes the left child.
    @classmethod
    def build(cls, frequencies: Mapping[str, int]) -> Self:
        if not frequencies:
            logger.error("Cannot build a Huffman tree from an empty frequency map")
            raise EmptyInputError("Cannot build a Huffman tree from an empty frequency map")

        for character, frequency in frequencies.items():
            # bool is a subclass of int, but True is not a count.
            if isinstance(frequency, bool) or not isinstance(frequency, int) or frequency <= 0:
                logger.error(f"Invalid frequency for {character!r}: {frequency!r}")
                raise InvalidFrequencyError(character, frequency)

        logger.info(f"Building a Huffman tree for {len(frequencies)} characters")

        # Sort by character so that the tree does not depend on the iteration order of the map.
        leaves: list[Leaf] = pipe(
            frequencies.items(),
            lambda arg: sorted(arg, key=lambda x: x[0]),
            lambda arg: map(lambda x: Leaf(*x), arg),
            list,
        )
        queue: list[tuple[int, int, Node]] = [
            (leaf.frequency, order, leaf) for order, leaf in enumerate(leaves)
        ]
        heapq.heapify(queue)

        next_order = len(queue)
        while len(queue) > 1:
            _, _, left = heapq.heappop(queue)
            _, _, right = heapq.heappop(queue)
            merged = Internal(left, right)
            logger.debug(f"Merged {left.frequency} and {right.frequency} into {merged.frequency}")
            heapq.heappush(queue, (merged.frequency, next_order, merged))
            next_order += 1

        _, _, root = queue[0]
        logger.info(f"Built a Huffman tree with total frequency {root.frequency}")
        return cls(root)
