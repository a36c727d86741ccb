__all__ = [
    "models",
    "factorial",
    "multiples",
    "logging",
]
