"""
Camarim Shell — Public API
============================
Interactive front end and operator input parsing.
"""

from camarim.shell.menu import Shell, main
from camarim.shell.parsing import parse_decimal, parse_int

__all__ = [
    "Shell",
    "main",
    "parse_decimal",
    "parse_int",
]
