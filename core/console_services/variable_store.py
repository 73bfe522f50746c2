"""
    VariableStore — registry of typed console variables (cvars).

    Design Pattern: Repository
    ──────────────────────────
    Hides how variables are kept and gives the console, the host and an
    external persistence collaborator one place to declare, look up,
    parse and format them.

    The store is not a module-level global: the platform constructs one
    and hands it to whoever needs it.
"""
import logging
from typing import Any, Dict, Iterator, List, Optional

from console_api.models.variable import Variable, VariableFlags
from console_api.types import TypeCoercer, VariableType

from .exceptions import DuplicateVariableError

logger = logging.getLogger(__name__)


class VariableStore:
    """
    Name → ``Variable`` mapping.

    Usage:
        store = VariableStore()
        fullscreen = store.declare("vid_fullscreen", VariableType.BOOLEAN)
        store.set_from_string(fullscreen, "1")
        store.format_to_string(fullscreen)     # "true"
    """

    def __init__(self, float_precision: int = 4):
        """
        Args:
            float_precision: Decimal places used when formatting FLOAT variables.
        """
        self._variables: Dict[str, Variable] = {}
        self._float_precision = float_precision

    # ── Declaration / lookup ─────────────────────────────────────

    def declare(
        self,
        name: str,
        var_type: VariableType,
        initial_value: Optional[Any] = None,
        flags: VariableFlags = VariableFlags.NONE,
    ) -> Variable:
        """
        Register a new variable.

        Raises:
            DuplicateVariableError: If a variable with this name exists.
        """
        if name in self._variables:
            raise DuplicateVariableError(f"Variable '{name}' is already declared.")

        variable = Variable(name, var_type, initial_value, flags)
        self._variables[name] = variable
        logger.debug("Declared variable %s (%s)", name, var_type.value)
        return variable

    def lookup(self, name: str) -> Optional[Variable]:
        """Return the variable called ``name``, or None."""
        return self._variables.get(name)

    # ── Text conversion ──────────────────────────────────────────

    def set_from_string(self, variable: Variable, raw: str) -> bool:
        """
        Parse ``raw`` into the variable according to its type.

        Malformed numbers degrade to their parsed prefix (or zero)
        instead of failing.

        Returns:
            False if the variable is read-only and was left unchanged.
        """
        if variable.is_read_only:
            logger.warning("Refused to set read-only variable %s", variable.name)
            return False

        if not TypeCoercer.is_well_formed(raw, variable.type):
            logger.warning("Malformed %s value for %s: '%s'",
                           variable.type.value, variable.name, raw)

        return variable.set_from_string(raw)

    def format_to_string(self, variable: Variable) -> str:
        """Render the variable's current value for display."""
        return variable.format(self._float_precision)

    # ── Enumeration ──────────────────────────────────────────────

    def names(self) -> List[str]:
        """Sorted list of all variable names."""
        return sorted(self._variables)

    def saved_variables(self) -> List[Variable]:
        """Variables a persistence collaborator should write (no NO_SAVE flag)."""
        return [v for v in self if v.is_saved]

    def __iter__(self) -> Iterator[Variable]:
        return iter([self._variables[name] for name in self.names()])

    def __len__(self) -> int:
        return len(self._variables)

    def __contains__(self, name: str) -> bool:
        return name in self._variables

    def __repr__(self) -> str:
        return f"VariableStore(variables={len(self._variables)})"
