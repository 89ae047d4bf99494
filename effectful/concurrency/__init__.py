from ._settle import traverse_into_par
from .lift import lift_par
from .sequence import sequence_into_par, sequence_par, sequence_props_par
from .traverse import for_each_par, traverse_par

__all__ = (
    "traverse_into_par",
    "traverse_par",
    "for_each_par",
    "sequence_into_par",
    "sequence_par",
    "sequence_props_par",
    "lift_par",
)
