# ============================================================================
# QUERY OPERATION CATALOG
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Service - Comparison operations per column
# PURPOSE: Decide which query-builder operations a field supports
# CREATED: 19 OCT 2026
# ============================================================================
"""
Query Operation Catalog

For each field, the ordered list of legal comparison operations and the
metadata a query-builder generator needs to emit them:

    operator      - wire-level operator name (Like, NotLike, NotEquals, ...)
    value_rule    - how the bound value is rendered (%v%, v%, %v, raw, null)
    capabilities  - auxiliary support the emitted code must import

Base operations by category (fixed order):

    temporal  Equals Not Before After BeforeOrEqual AfterOrEqual
    numeric   Equals Not GreaterThan LessThan GreaterOrEqual LessOrEqual
    string    Equals Not Contains ContainsNot StartsWith StartsWithNot
              EndsWith EndsWithNot
    binary    Equals Not

Nullable fields get IsNull and IsNotNull appended, whatever the category.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from core.contracts import Category, Datatype


class Operation(str, Enum):
    """Comparison operations a generated query builder can offer."""
    EQUALS = "Equals"
    NOT = "Not"
    CONTAINS = "Contains"
    CONTAINS_NOT = "ContainsNot"
    STARTS_WITH = "StartsWith"
    STARTS_WITH_NOT = "StartsWithNot"
    ENDS_WITH = "EndsWith"
    ENDS_WITH_NOT = "EndsWithNot"
    GREATER_THAN = "GreaterThan"
    GREATER_OR_EQUAL = "GreaterOrEqual"
    LESS_THAN = "LessThan"
    LESS_OR_EQUAL = "LessOrEqual"
    BEFORE = "Before"
    BEFORE_OR_EQUAL = "BeforeOrEqual"
    AFTER = "After"
    AFTER_OR_EQUAL = "AfterOrEqual"
    IS_NULL = "IsNull"
    IS_NOT_NULL = "IsNotNull"


class ValueRule(str, Enum):
    """How an operation renders its bound value."""
    RAW = "raw"              # value as given
    CONTAINS = "contains"    # %value%
    PREFIX = "prefix"        # value%
    SUFFIX = "suffix"        # %value
    NULL = "null"            # no value bound


class Capability(str, Enum):
    """Auxiliary support emitted code needs for an operation."""
    STRING_FORMATTING = "string_formatting"
    TEMPORAL_COMPARISON = "temporal_comparison"


# ============================================================================
# OPERATION TABLES
# ============================================================================

BASE_OPERATIONS = {
    Category.TEMPORAL: (
        Operation.EQUALS,
        Operation.NOT,
        Operation.BEFORE,
        Operation.AFTER,
        Operation.BEFORE_OR_EQUAL,
        Operation.AFTER_OR_EQUAL,
    ),
    Category.NUMERIC: (
        Operation.EQUALS,
        Operation.NOT,
        Operation.GREATER_THAN,
        Operation.LESS_THAN,
        Operation.GREATER_OR_EQUAL,
        Operation.LESS_OR_EQUAL,
    ),
    Category.STRING: (
        Operation.EQUALS,
        Operation.NOT,
        Operation.CONTAINS,
        Operation.CONTAINS_NOT,
        Operation.STARTS_WITH,
        Operation.STARTS_WITH_NOT,
        Operation.ENDS_WITH,
        Operation.ENDS_WITH_NOT,
    ),
    Category.BINARY: (
        Operation.EQUALS,
        Operation.NOT,
    ),
    Category.UNCLASSIFIED: (),
}

NULL_OPERATIONS = (Operation.IS_NULL, Operation.IS_NOT_NULL)

_OPERATORS = {
    Operation.CONTAINS: "Like",
    Operation.STARTS_WITH: "Like",
    Operation.ENDS_WITH: "Like",
    Operation.CONTAINS_NOT: "NotLike",
    Operation.STARTS_WITH_NOT: "NotLike",
    Operation.ENDS_WITH_NOT: "NotLike",
    Operation.NOT: "NotEquals",
}

_VALUE_RULES = {
    Operation.CONTAINS: ValueRule.CONTAINS,
    Operation.CONTAINS_NOT: ValueRule.CONTAINS,
    Operation.STARTS_WITH: ValueRule.PREFIX,
    Operation.STARTS_WITH_NOT: ValueRule.PREFIX,
    Operation.ENDS_WITH: ValueRule.SUFFIX,
    Operation.ENDS_WITH_NOT: ValueRule.SUFFIX,
    Operation.IS_NULL: ValueRule.NULL,
    Operation.IS_NOT_NULL: ValueRule.NULL,
}

_CAPABILITIES = {
    Operation.CONTAINS: (Capability.STRING_FORMATTING,),
    Operation.CONTAINS_NOT: (Capability.STRING_FORMATTING,),
    Operation.STARTS_WITH: (Capability.STRING_FORMATTING,),
    Operation.STARTS_WITH_NOT: (Capability.STRING_FORMATTING,),
    Operation.ENDS_WITH: (Capability.STRING_FORMATTING,),
    Operation.ENDS_WITH_NOT: (Capability.STRING_FORMATTING,),
    Operation.BEFORE: (Capability.TEMPORAL_COMPARISON,),
    Operation.AFTER: (Capability.TEMPORAL_COMPARISON,),
    Operation.BEFORE_OR_EQUAL: (Capability.TEMPORAL_COMPARISON,),
    Operation.AFTER_OR_EQUAL: (Capability.TEMPORAL_COMPARISON,),
}


# ============================================================================
# OPERATION SPEC
# ============================================================================

@dataclass(frozen=True)
class OperationSpec:
    """One legal operation for a field, with its rendering metadata."""
    operation: Operation
    operator: str
    value_rule: ValueRule
    capabilities: Tuple[Capability, ...] = ()

    @classmethod
    def for_operation(cls, operation: Operation) -> "OperationSpec":
        return cls(
            operation=operation,
            operator=_OPERATORS.get(operation, operation.value),
            value_rule=_VALUE_RULES.get(operation, ValueRule.RAW),
            capabilities=_CAPABILITIES.get(operation, ()),
        )

    @property
    def null_check(self) -> bool:
        return self.value_rule == ValueRule.NULL

    def render_value(self, value: Any) -> Optional[Any]:
        """Value bound for this operation; None for null checks."""
        if self.value_rule == ValueRule.CONTAINS:
            return f"%{value}%"
        if self.value_rule == ValueRule.PREFIX:
            return f"{value}%"
        if self.value_rule == ValueRule.SUFFIX:
            return f"%{value}"
        if self.value_rule == ValueRule.NULL:
            return None
        return value

    def method_name(self, field_name: str) -> str:
        """Generated method name: the field itself for Equals, field + operation otherwise."""
        if self.operation == Operation.EQUALS:
            return field_name
        return f"{field_name}{self.operation.value}"


# ============================================================================
# CATALOG
# ============================================================================

def build_operations(datatype: Datatype, nullable: bool = False) -> List[OperationSpec]:
    """
    Ordered legal operations for a column of `datatype`.

    Args:
        datatype: Abstract datatype of the column
        nullable: Whether the column accepts NULL

    Returns:
        List of OperationSpec (empty for non-nullable unclassified columns)
    """
    operations = list(BASE_OPERATIONS[Datatype(datatype).category])
    if nullable:
        operations.extend(NULL_OPERATIONS)
    return [OperationSpec.for_operation(op) for op in operations]


def operations_for_field(field) -> List[OperationSpec]:
    """Operations for anything with `datatype` and `nullable` (Column, FlattenedField)."""
    return build_operations(field.datatype, field.nullable)


def required_capabilities(specs: Iterable[OperationSpec]) -> List[Capability]:
    """Capabilities needed by a set of operations, deduplicated and sorted."""
    found = {capability for spec in specs for capability in spec.capabilities}
    return sorted(found, key=lambda c: c.value)


__all__ = [
    "Operation",
    "ValueRule",
    "Capability",
    "OperationSpec",
    "BASE_OPERATIONS",
    "NULL_OPERATIONS",
    "build_operations",
    "operations_for_field",
    "required_capabilities",
]
