"""
Effectful: generic machinery for effect containers.

Core building blocks for composing and aggregating effect values
(kungfu Option/Result, validation, WriterResult) through one contract.

Architecture:
- Kind: explicit contract (terminal? payload? residue? policy?) for a container
- go / go_async: do-notation over any kind with generators
- Eval: stack-safe deferred evaluation
- collection: sequential reduce/traverse/sequence/for_each (sync + *_async)
- concurrency: concurrent traverse/sequence/for_each/lift (*_par)
- builder: pluggable output shape for aggregation

Logging goes through loguru and is disabled by default;
call `logger.enable("effectful")` to see it.
"""

from loguru import logger

# Core types
from ._types import AnyIterable, AsyncGo, AsyncStep, Combine, Go, IndexedStep, Policy, Semigroup, Step, Thunk

# Errors
from ._errors import BuilderFinishedError

# Internal helpers (for custom kinds)
from . import _helpers
from ._helpers import identity, semigroup_combine

# Builders
from . import builder
from .builder import (
    Builder,
    ClosingBuilder,
    DictEntryBuilder,
    DictMergeBuilder,
    FoldBuilder,
    ListAppendBuilder,
    ListConcatBuilder,
    ListIndexBuilder,
    ListPrependBuilder,
    NoOpBuilder,
    SetAddBuilder,
    SetUnionBuilder,
    StrAppendBuilder,
    StrPrependBuilder,
)

# Kinds
from .kinds import OPTION, RESULT, VALIDATION, WRITER, Kind, validation

# Writer
from .writer import Log, WriterResult

# Drivers
from .go import go, go_async, go_fn, go_fn_async, wrap_go_fn, wrap_go_fn_async

# Trampoline
from .trampoline import Eval

# Sequential aggregation
from .collection import (
    for_each,
    for_each_async,
    lift,
    reduce,
    reduce_async,
    sequence,
    sequence_async,
    sequence_into,
    sequence_into_async,
    sequence_props,
    traverse,
    traverse_async,
    traverse_into,
    traverse_into_async,
)

# Concurrent aggregation
from .concurrency import (
    for_each_par,
    lift_par,
    sequence_into_par,
    sequence_par,
    sequence_props_par,
    traverse_into_par,
    traverse_par,
)

logger.disable("effectful")

__all__ = (
    # Types
    "AnyIterable",
    "AsyncGo",
    "AsyncStep",
    "IndexedStep",
    "Combine",
    "Go",
    "Policy",
    "Semigroup",
    "Step",
    "Thunk",
    # Errors
    "BuilderFinishedError",
    # Helpers
    "identity",
    "semigroup_combine",
    # Builders
    "builder",
    "Builder",
    "ClosingBuilder",
    "DictEntryBuilder",
    "DictMergeBuilder",
    "FoldBuilder",
    "ListAppendBuilder",
    "ListConcatBuilder",
    "ListIndexBuilder",
    "ListPrependBuilder",
    "NoOpBuilder",
    "SetAddBuilder",
    "SetUnionBuilder",
    "StrAppendBuilder",
    "StrPrependBuilder",
    # Kinds
    "Kind",
    "OPTION",
    "RESULT",
    "VALIDATION",
    "WRITER",
    "validation",
    # Writer
    "Log",
    "WriterResult",
    # Drivers
    "go",
    "go_fn",
    "wrap_go_fn",
    "go_async",
    "go_fn_async",
    "wrap_go_fn_async",
    # Trampoline
    "Eval",
    # Sequential
    "reduce",
    "reduce_async",
    "traverse_into",
    "traverse_into_async",
    "traverse",
    "traverse_async",
    "sequence_into",
    "sequence_into_async",
    "sequence",
    "sequence_async",
    "sequence_props",
    "for_each",
    "for_each_async",
    "lift",
    # Concurrent
    "traverse_into_par",
    "traverse_par",
    "sequence_into_par",
    "sequence_par",
    "sequence_props_par",
    "for_each_par",
    "lift_par",
)
