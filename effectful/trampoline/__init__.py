from .eval import Eval

__all__ = ("Eval",)
