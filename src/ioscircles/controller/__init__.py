"""
Interaction Controllers
=======================
The state machines behind the three scale types.

Why is this package needed?
---------------------------
1. Input: It turns drags, step commands and clicks into circle geometry.
2. Measurement: It re-reads distance and overlap after every change.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
