from .counter import FrequencyCounter, FrequencyMap, aggregate_frequencies, count_characters
from .encoder import (
    CodeTable,
    HuffmanTree,
    Internal,
    Leaf,
    Node,
    build_code_table,
    generate_codes,
    sorted_codes,
    weighted_length,
)
from .utils import EmptyInputError, HuffcodeError, InvalidFrequencyError, ReadError, setup_logger
