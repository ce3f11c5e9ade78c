from .compactor import TextCompactor
from .printer import Printer, ends_statement, needs_space

__all__ = ["Printer", "TextCompactor", "ends_statement", "needs_space"]
