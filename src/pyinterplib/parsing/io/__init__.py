from .data_handler import load_point_rows

__all__ = [
    "load_point_rows"
]
