from .color import Color, ColorInput, WHITE, BLACK, TRANSPARENT

__all__ = [
    "Color",
    "ColorInput",
    "WHITE",
    "BLACK",
    "TRANSPARENT",
]
