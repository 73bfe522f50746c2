"""
    Type support for console variables: bool, int, float and str,
    with the console's parse / format rules.
"""
import re
from enum import Enum
from typing import Any, Union

VariableValue = Union[bool, int, float, str]

# C atoi / atof accept the longest valid prefix and yield zero when there is none.
# ASCII digits only; atof also takes inf, infinity and nan in any case.
_INT_PREFIX = re.compile(r'\s*([+-]?\d+)', re.ASCII)
_FLOAT_PREFIX = re.compile(
    r'\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan))',
    re.ASCII | re.IGNORECASE,
)

_FALSE_TOKENS = ("0", "false")


class VariableType(Enum):
    BOOLEAN = "bool"
    INTEGER = "int"
    FLOAT = "float"
    STRING = "str"


class TypeCoercer:
    """Parsing, formatting and validation of console variable values"""

    @staticmethod
    def default(var_type: VariableType) -> VariableValue:
        """Zero value of the given type"""
        if var_type is VariableType.BOOLEAN:
            return False
        elif var_type is VariableType.INTEGER:
            return 0
        elif var_type is VariableType.FLOAT:
            return 0.0
        elif var_type is VariableType.STRING:
            return ""
        raise ValueError(f"Unknown variable type: {var_type}")

    @staticmethod
    def parse(raw: str, var_type: VariableType) -> VariableValue:
        """
        Convert console text to a value of the given type.

        Never fails on malformed text: numbers fall back to the parsed
        prefix, or zero when there is none.
        """
        if var_type is VariableType.BOOLEAN:
            return raw not in _FALSE_TOKENS
        elif var_type is VariableType.INTEGER:
            match = _INT_PREFIX.match(raw)
            return int(match.group(1)) if match else 0
        elif var_type is VariableType.FLOAT:
            match = _FLOAT_PREFIX.match(raw)
            return float(match.group(1)) if match else 0.0
        elif var_type is VariableType.STRING:
            return raw
        raise ValueError(f"Unknown variable type: {var_type}")

    @staticmethod
    def is_well_formed(raw: str, var_type: VariableType) -> bool:
        """Whether the whole of ``raw`` is a valid literal of the type"""
        if var_type is VariableType.INTEGER:
            return _INT_PREFIX.fullmatch(raw.rstrip()) is not None
        elif var_type is VariableType.FLOAT:
            return _FLOAT_PREFIX.fullmatch(raw.rstrip()) is not None
        return True

    @staticmethod
    def format(value: VariableValue, var_type: VariableType, float_precision: int = 4) -> str:
        """Render a value for display in the console"""
        if var_type is VariableType.BOOLEAN:
            return "true" if value else "false"
        elif var_type is VariableType.INTEGER:
            return str(value)
        elif var_type is VariableType.FLOAT:
            return f"{value:.{float_precision}f}"
        elif var_type is VariableType.STRING:
            return value
        raise ValueError(f"Unknown variable type: {var_type}")

    @staticmethod
    def validate(value: Any, var_type: VariableType) -> VariableValue:
        """
        Check that a host-supplied value matches the type tag.

        Ints are widened for FLOAT variables; bools are never accepted
        as numbers.

        Raises:
            TypeError: If the value does not fit the type.
        """
        if var_type is VariableType.BOOLEAN:
            if isinstance(value, bool):
                return value
        elif var_type is VariableType.INTEGER:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif var_type is VariableType.FLOAT:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
        elif var_type is VariableType.STRING:
            if isinstance(value, str):
                return value
        else:
            raise ValueError(f"Unknown variable type: {var_type}")
        raise TypeError(
            f"Cannot store {type(value).__name__} in a {var_type.value} variable"
        )
