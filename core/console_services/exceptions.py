# core/console_services/exceptions.py

class ConsoleError(Exception):
    """Base class for console errors raised to host code."""
    pass

class DuplicateCommandError(ConsoleError):
    """Raised when a command name is registered twice."""
    pass

class DuplicateVariableError(ConsoleError):
    """Raised when a variable name is declared twice."""
    pass

class CommandIndexError(ConsoleError, IndexError):
    """Raised when a command is requested at an index outside the registry."""
    pass
