"""Documented teaching scenarios, runnable as checks.

Each scenario states the outcome the write-up predicts and records what
actually happened, so a mismatch shows up as an unmatched
ScenarioResult instead of a prose claim nobody re-verifies.
"""

import logging

from .container import HashContainer
from .defensive import DefensiveCopy
from .models import ScenarioResult
from .ports import EqualityStrategy
from .specimens import BY_NAME, EQUALS_ONLY, PlainStudent, Student
from .strategies import IdentityStrategy, NaturalStrategy

logger = logging.getLogger(__name__)


def aden_lookup(strategy: EqualityStrategy, expected: bool) -> ScenarioResult:
    """Insert Student("Aden"), then probe with a new, equal instance."""
    factory = Student if isinstance(strategy, NaturalStrategy) else PlainStudent
    box = HashContainer(strategy)
    box.insert(factory("Aden"))
    found = box.contains(factory("Aden"))
    return ScenarioResult(
        name="aden_lookup",
        strategy=strategy.name,
        expected=expected,
        observed=found,
        description="contains(new Student('Aden')) after inserting an equal instance",
    )


def defensive_copy_roundtrip(
    copy_on_construct: bool = True, copy_on_get: bool = True
) -> list[ScenarioResult]:
    """Build from [1, 2, 3, 4, 5], then mutate the source and a snapshot."""
    source = [1, 2, 3, 4, 5]
    holder = DefensiveCopy(
        source, copy_on_construct=copy_on_construct, copy_on_get=copy_on_get
    )
    label = f"construct={copy_on_construct},get={copy_on_get}"

    source[0] = 10
    after_source = holder.get()[0]

    snapshot = holder.get()
    snapshot[1] = 20
    after_snapshot = holder.get()[1]

    return [
        ScenarioResult(
            name="defensive_copy_source_mutation",
            strategy=label,
            expected=1 if copy_on_construct else 10,
            observed=after_source,
            description="get()[0] after source[0] = 10",
        ),
        ScenarioResult(
            name="defensive_copy_snapshot_mutation",
            strategy=label,
            expected=2 if copy_on_get else 20,
            observed=after_snapshot,
            description="get()[1] after mutating a returned snapshot",
        ),
    ]


def run_all() -> list[ScenarioResult]:
    """Run every documented scenario with its predicted outcome."""
    results = [
        aden_lookup(NaturalStrategy(), expected=True),
        aden_lookup(BY_NAME, expected=True),
        aden_lookup(EQUALS_ONLY, expected=False),
        aden_lookup(IdentityStrategy(), expected=False),
    ]
    results.extend(defensive_copy_roundtrip())
    results.extend(defensive_copy_roundtrip(copy_on_construct=False))
    results.extend(defensive_copy_roundtrip(copy_on_get=False))

    mismatched = [r for r in results if not r.matched]
    if mismatched:
        logger.warning(f"{len(mismatched)} scenario(s) did not match their predicted outcome")
    else:
        logger.info(f"All {len(results)} scenarios matched their predicted outcome")
    return results
