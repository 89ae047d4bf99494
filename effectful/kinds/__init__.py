from ._kind import Kind
from .option import OPTION
from .result import RESULT, VALIDATION, validation
from .writer import WRITER

__all__ = (
    # Contract
    "Kind",
    # Halting kinds
    "OPTION",
    "RESULT",
    # Accumulating kinds
    "VALIDATION",
    "WRITER",
    "validation",
)
