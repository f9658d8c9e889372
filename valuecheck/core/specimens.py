"""Sample value types used by the built-in checks and scenarios.

Each Student variant opts into (or out of) value semantics differently:

- PlainStudent: no __eq__ / __hash__, identity only
- Student: frozen dataclass, __eq__ and __hash__ both derived from name
- MutableStudent: dataclass with __eq__ but no __hash__ (unhashable)
- EQUALS_ONLY: equals by name paired with an identity hash, the
  "only equals overridden" bug
"""

from dataclasses import dataclass

from .strategies import KeyOrdering, KeyStrategy, PairedStrategy


class PlainStudent:
    """A student with no notion of value equality."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"PlainStudent({self.name!r})"


@dataclass(frozen=True)
class Student:
    """A student whose identity is its name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")


@dataclass
class MutableStudent:
    """Equality by content but unhashable, since its state can change."""

    name: str


def _same_name(a: object, b: object) -> bool:
    return getattr(a, "name", None) == getattr(b, "name", None)


def _student_name(student: object) -> str:
    return getattr(student, "name")


BY_NAME = KeyStrategy(_student_name, name="by-name")
EQUALS_ONLY = PairedStrategy(equals=_same_name, hash=id, name="equals-only")
NAME_ORDER = KeyOrdering(_student_name, name="by-name")

STUDENT_NAMES = ("Aden", "Bela", "Cyrus", "Aden", "Dana", "Bela")


def student_samples(factory: type = Student, names: tuple[str, ...] = STUDENT_NAMES) -> list:
    """Build one instance per name; repeated names give equal-but-distinct pairs."""
    return [factory(name) for name in names]
