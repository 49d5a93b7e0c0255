class HuffcodeError(Exception):
    """Base class for every failure raised by huffcode."""


# The input stream could not be read to completion.
class ReadError(HuffcodeError):
    pass


# Tree construction was attempted on zero characters.
class EmptyInputError(HuffcodeError):
    pass


# A zero, negative or non-integer frequency reached the tree builder.
class InvalidFrequencyError(HuffcodeError):
    def __init__(self, character: str, frequency: object) -> None:
        super().__init__(f"Invalid frequency for {character!r}: {frequency!r}")
        self.character = character
        self.frequency = frequency
