from .config import PMFConfig
from .base_types import NOT_FOUND, BuildStats, InvalidInput, OutOfRange, PMFError
from .algorithm import CoarsenessSampler, RodAllocator
from .tree import CompactTree
from .mass_function import ConcretePMF, ProbabilityMassFunction, UniformPMF

__all__ = [
    "PMFConfig",
    "NOT_FOUND",
    "BuildStats",
    "InvalidInput",
    "OutOfRange",
    "PMFError",
    "CoarsenessSampler",
    "RodAllocator",
    "CompactTree",
    "ConcretePMF",
    "ProbabilityMassFunction",
    "UniformPMF",
]

__version__ = "0.1.dev0"
