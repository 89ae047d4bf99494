from ._state import Tally
from .coroutine import go_async, go_fn_async, wrap_go_fn_async
from .generator import go, go_fn, wrap_go_fn

__all__ = (
    # Sync
    "go",
    "go_fn",
    "wrap_go_fn",
    # Async
    "go_async",
    "go_fn_async",
    "wrap_go_fn_async",
    # Bookkeeping
    "Tally",
)
