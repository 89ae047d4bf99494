from ._base import Builder, ClosingBuilder
from .fold import FoldBuilder, NoOpBuilder
from .mapping import DictEntryBuilder, DictMergeBuilder
from .sequence import ListAppendBuilder, ListConcatBuilder, ListIndexBuilder, ListPrependBuilder
from .sets import SetAddBuilder, SetUnionBuilder
from .text import StrAppendBuilder, StrPrependBuilder

__all__ = (
    # Protocol
    "Builder",
    "ClosingBuilder",
    # Lists
    "ListAppendBuilder",
    "ListPrependBuilder",
    "ListIndexBuilder",
    "ListConcatBuilder",
    # Mappings
    "DictEntryBuilder",
    "DictMergeBuilder",
    # Sets
    "SetAddBuilder",
    "SetUnionBuilder",
    # Strings
    "StrAppendBuilder",
    "StrPrependBuilder",
    # Folds
    "FoldBuilder",
    "NoOpBuilder",
)
