"""
Chromix Color Values
====================

``Color`` is an 8-bit RGBA value with arithmetic, comparison and HSV
conversion.

Features
--------
- Channels are integers in [0, 255]; construction clamps and rounds half up
- Omitted channels default to 255 (``Color()`` is opaque white)
- ``+ - * /`` between Colors and real numbers, channel-wise, alpha included
- Division by a zero channel yields 0 for that channel
- ``==`` is exact over r, g, b and a; a Color never equals a non-Color
- ``< <= > >=`` compare HSV brightness (V) only
- Chainable in-place mutators: ``set_r``, ``add_g``, ``sub_b``, ``mul_a``, ``div_r``, ...

Usage
-----
>>> from chromix import Color
>>> c = Color(100, 100, 100)
>>> print(c + 5)
(105,	105,	105,	255)
>>> print(2 - Color(5, 5, 5))
(0,	0,	0,	0)
>>> Color(254, 254, 254) < Color()
True
>>> Color(255, 0, 0) < Color()
False
>>> c.add_r(50).set_a(128) is c
True

Notes
-----
- Operators bind in ``arithmetic``, ``comparison`` and ``mutators``; importing
  this package binds all of them.
- Ordering against a non-Color raises TypeError.
"""

from .color import Color, default
from . import arithmetic, comparison, mutators  # noqa: F401  (bind operators)
from .arithmetic import add, sub, mul, div
from .comparison import equals, less_than, less_or_equal, greater_than, greater_or_equal
from .formatting import format_color
from .operands import ColorOperand, ScalarOperand, as_operand

__all__ = [
    'Color',
    'default',
    'add',
    'sub',
    'mul',
    'div',
    'equals',
    'less_than',
    'less_or_equal',
    'greater_than',
    'greater_or_equal',
    'format_color',
    'ColorOperand',
    'ScalarOperand',
    'as_operand',
]
