from .errors import EmptyInputError, HuffcodeError, InvalidFrequencyError, ReadError
from .log import setup_logger
