"""
    Variable model - a named, typed, mutable console setting (cvar)
"""
from enum import IntFlag
from typing import Any, Optional

from ..types import TypeCoercer, VariableType, VariableValue


class VariableFlags(IntFlag):
    NONE = 0
    READ_ONLY = 1
    NO_SAVE = 2


class Variable:
    """
    A console variable.

    The type tag is fixed at creation and the stored value always
    matches it.
    """

    def __init__(
        self,
        name: str,
        var_type: VariableType,
        value: Optional[Any] = None,
        flags: VariableFlags = VariableFlags.NONE,
    ):
        """
        Initialize a variable.

        Args:
            name:     Unique, case-sensitive name.
            var_type: Type tag of the variable.
            value:    Initial value; ``None`` means the zero value of the type.
            flags:    ``VariableFlags`` combination.
        """
        if not name or any(ch.isspace() for ch in name):
            raise ValueError(f"Invalid variable name: '{name}'")
        if not isinstance(var_type, VariableType):
            raise TypeError(f"Unknown variable type: {var_type!r}")

        self._name = name
        self._type = var_type
        self.flags = VariableFlags(flags)
        self._value: VariableValue = TypeCoercer.default(var_type)
        if value is not None:
            self.value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> VariableType:
        return self._type

    @property
    def value(self) -> VariableValue:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        # Host-side assignment; READ_ONLY only restricts the console
        self._value = TypeCoercer.validate(new_value, self._type)

    @property
    def is_read_only(self) -> bool:
        return bool(self.flags & VariableFlags.READ_ONLY)

    @property
    def is_saved(self) -> bool:
        """Whether a persistence collaborator should save this variable."""
        return not self.flags & VariableFlags.NO_SAVE

    def set_from_string(self, raw: str) -> bool:
        """
        Parse console text into the variable.

        Returns:
            False if the variable is read-only (value unchanged), else True.
        """
        if self.is_read_only:
            return False
        self._value = TypeCoercer.parse(raw, self._type)
        return True

    def format(self, float_precision: int = 4) -> str:
        return TypeCoercer.format(self._value, self._type, float_precision)

    def __repr__(self) -> str:
        return (
            f"Variable(name='{self._name}', type={self._type.value}, "
            f"value={self._value!r}, flags={int(self.flags)})"
        )
