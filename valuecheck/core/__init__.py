"""Core domain logic for the valuecheck library.

This package contains zero external dependencies and represents
the pure logic of the library: strategies, the contract checker,
containers and the defensive-copy holder. Reporting and the
command line live in the adapters package.
"""

from .container import HashContainer, HashMapping, OrderedContainer
from .contract import ContractChecker
from .defensive import DefensiveCopy
from .errors import (
    ContractViolationError,
    InvalidArgumentError,
    OutOfRangeError,
    ValueCheckError,
)
from .models import (
    ContainerSlot,
    ContractReport,
    ScenarioResult,
    Violation,
    ViolationKind,
)
from .ports import EqualityStrategy, OrderingStrategy, ReportPort
from .strategies import (
    IdentityStrategy,
    KeyOrdering,
    KeyStrategy,
    NaturalOrdering,
    NaturalStrategy,
    PairedStrategy,
    StrategyRegistry,
    default_registry,
)

__all__ = [
    "ContainerSlot",
    "ContractChecker",
    "ContractReport",
    "ContractViolationError",
    "DefensiveCopy",
    "EqualityStrategy",
    "HashContainer",
    "HashMapping",
    "IdentityStrategy",
    "InvalidArgumentError",
    "KeyOrdering",
    "KeyStrategy",
    "NaturalOrdering",
    "NaturalStrategy",
    "OrderedContainer",
    "OrderingStrategy",
    "OutOfRangeError",
    "PairedStrategy",
    "ReportPort",
    "ScenarioResult",
    "StrategyRegistry",
    "ValueCheckError",
    "Violation",
    "ViolationKind",
    "default_registry",
]
