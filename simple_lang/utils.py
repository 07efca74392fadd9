import enum
import sys
from typing import Optional, TextIO


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(value: float) -> str:
    """Format a result the way a C++ output stream prints a double: 14.0 -> '14', 1/3 -> '0.333333'"""
    return f"{value:g}"


def error_channel(errors: Optional[TextIO]) -> TextIO:
    return errors if errors is not None else sys.stderr
