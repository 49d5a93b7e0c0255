from collections import Counter
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from loguru import logger

from ..utils.errors import ReadError

FrequencyMap = Mapping[str, int]


def count_characters(chunk: str) -> Counter[str]:
    return Counter(chunk)


class FrequencyCounter:
    """Accumulates character counts over a stream of text chunks.

    Chunk boundaries carry no meaning: feeding "abc\\ndef" once gives the same
    counts as feeding "abc\\n" and then "def".
    """

    def __init__(self) -> None:
        self._frequencies: Counter[str] = Counter()
        self._chunks = 0

    def feed(self, chunk: str) -> None:
        if not isinstance(chunk, str):
            logger.error(f"Expected a text chunk, but got {type(chunk).__name__}")
            raise ReadError(f"Expected a text chunk, but got {type(chunk).__name__}")
        self._frequencies.update(count_characters(chunk))
        self._chunks += 1

    # A text file object is a valid stream; it yields lines including their terminators.
    def consume(self, chunks: Iterable[str]) -> None:
        stream = iter(chunks)
        while True:
            try:
                chunk = next(stream)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read chunk {self._chunks + 1} of the input stream: {e}")
                raise ReadError(f"Failed to read the input stream: {e}") from e
            self.feed(chunk)

    @property
    def frequencies(self) -> FrequencyMap:
        # Snapshot, so later feeds never alter a map that was already handed out.
        return MappingProxyType(dict(self._frequencies))

    @property
    def total(self) -> int:
        return self._frequencies.total()


def aggregate_frequencies(chunks: Iterable[str]) -> FrequencyMap:
    logger.info("Counting character frequencies")
    counter = FrequencyCounter()
    counter.consume(chunks)
    frequencies = counter.frequencies
    logger.info(f"Counted {counter.total} characters, {len(frequencies)} distinct")
    return frequencies
