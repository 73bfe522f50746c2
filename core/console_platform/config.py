"""
    Console configuration — history, formatting and plugin settings.
"""
from dataclasses import dataclass
from typing import Optional

COMMAND_PACK_EP_GROUP = 'command_console.command_pack'


@dataclass
class ConsoleConfig:
    """
    Top-level configuration for the Command Console.

    Attributes:
        input_prefix:    Prefix of the audit log record and of the transcript
                         echo written for every executed line (``"> echo hi"``).
        max_history:     How many raw input lines the console remembers.
                         ``None`` means unbounded.
        float_precision: Decimal places used when formatting FLOAT variables.
        load_plugins:    Whether ``create_platform`` registers every
                         installed command pack plugin.
        plugin_group:    Entry-point group scanned for command packs.
    """
    input_prefix: str = "> "
    max_history: Optional[int] = None
    float_precision: int = 4
    load_plugins: bool = True
    plugin_group: str = COMMAND_PACK_EP_GROUP

    def __post_init__(self):
        if self.max_history is not None and self.max_history < 1:
            raise ValueError(f"max_history must be positive or None, got {self.max_history}")
        if self.float_precision < 0:
            raise ValueError(f"float_precision must be non-negative, got {self.float_precision}")
