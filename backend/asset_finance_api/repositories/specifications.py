"""
Composable WHERE conditions.

List requests become a tree of specifications (parent scope, equality
filters, range filters) joined with ``&``; ``|`` and ``~`` are available
for ad hoc queries:

    active_leases = FieldEquals(Agreement.finance_type, "LEASE") & ~FieldEquals(Agreement.agreement_status, "CLOSED")
    repo.count_by_spec(active_leases)
"""

from typing import Any

from sqlalchemy import and_, not_, or_, true


class Specification:
    """A condition that renders to a SQLAlchemy boolean expression."""

    def to_expression(self) -> Any:
        raise NotImplementedError

    def __and__(self, other: "Specification") -> "Specification":
        return AllOf.of(self, other)

    def __or__(self, other: "Specification") -> "Specification":
        return AnyOf.of(self, other)

    def __invert__(self) -> "Specification":
        return Not(self)


class AllOf(Specification):
    """Conjunction of any number of specifications."""

    def __init__(self, *parts: Specification):
        self.parts = parts

    @classmethod
    def of(cls, *specs: Specification) -> Specification:
        # Flatten nested conjunctions and drop MatchAll terms
        parts: list[Specification] = []
        for spec in specs:
            if isinstance(spec, MatchAll):
                continue
            parts.extend(spec.parts if isinstance(spec, cls) else (spec,))
        if not parts:
            return MatchAll()
        return parts[0] if len(parts) == 1 else cls(*parts)

    def to_expression(self) -> Any:
        return and_(*(part.to_expression() for part in self.parts))


class AnyOf(Specification):
    """Disjunction of any number of specifications."""

    def __init__(self, *parts: Specification):
        self.parts = parts

    @classmethod
    def of(cls, *specs: Specification) -> Specification:
        parts: list[Specification] = []
        for spec in specs:
            parts.extend(spec.parts if isinstance(spec, cls) else (spec,))
        return cls(*parts)

    def to_expression(self) -> Any:
        return or_(*(part.to_expression() for part in self.parts))


class Not(Specification):
    def __init__(self, spec: Specification):
        self.spec = spec

    def to_expression(self) -> Any:
        return not_(self.spec.to_expression())


class MatchAll(Specification):
    """No condition at all; the starting point when building filters."""

    def to_expression(self) -> Any:
        return true()


class FieldEquals(Specification):
    """``column = value``; a None value matches NULL."""

    def __init__(self, column: Any, value: Any):
        self.column = column
        self.value = value

    def to_expression(self) -> Any:
        return self.column.is_(None) if self.value is None else self.column == self.value


class FieldInRange(Specification):
    """``lower <= column <= upper``; either bound may be None (open side)."""

    def __init__(self, column: Any, lower: Any = None, upper: Any = None):
        self.column = column
        self.lower = lower
        self.upper = upper

    def to_expression(self) -> Any:
        bounds = []
        if self.lower is not None:
            bounds.append(self.column >= self.lower)
        if self.upper is not None:
            bounds.append(self.column <= self.upper)
        return and_(*bounds) if bounds else true()
