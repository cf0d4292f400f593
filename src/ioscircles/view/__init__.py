"""
The VIEW layer: PySide6 widgets drawing the circle pairs.
It reads geometry from the model and forwards input to ``Ios``; it holds no
scale logic of its own.
"""
