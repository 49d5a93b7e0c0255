from .code_table import CodeTable, build_code_table, generate_codes, sorted_codes, weighted_length
from .tree import HuffmanTree, Internal, Leaf, Node
