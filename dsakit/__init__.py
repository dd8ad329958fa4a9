"""Array, counting, sorting, search, number-theory, text, pattern and scheduling exercises."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "counting",
    "numtheory",
    "patterns",
    "scheduling",
    "search",
    "sorting",
    "textutil",
]