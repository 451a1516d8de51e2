from __future__ import annotations

from dataclasses import dataclass

from loopless.domain.call_tree import CallTree
from loopless.domain.solution import SolutionInfo
from loopless.services.catalog import SolutionCatalog


# Step-to-step messages, in pipeline order.
@dataclass(frozen=True, slots=True)
class GenerationRequest:
    max_n: int
    offset: int = 1


@dataclass(frozen=True, slots=True)
class SieveReady:
    request: GenerationRequest
    primes: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class CatalogReady:
    request: GenerationRequest
    local: SolutionCatalog


@dataclass(frozen=True, slots=True)
class OptimizedCatalog:
    request: GenerationRequest
    local: SolutionCatalog
    optimized: SolutionCatalog


@dataclass(frozen=True, slots=True)
class TargetSolution:
    # One number selected for emission, with its exact solution kept for reporting.
    solution: SolutionInfo
    local: SolutionInfo
    offset: int


@dataclass(frozen=True, slots=True)
class EmittedUnit:
    target: TargetSolution
    tree: CallTree


@dataclass(frozen=True, slots=True)
class OutputLine:
    number: int
    text: str
