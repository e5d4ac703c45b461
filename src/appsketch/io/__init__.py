"""JSON input/output for generation results and classifications."""

from appsketch.io.result_reader import (
    load_classification,
    load_generation_result,
    save_classification,
)

__all__ = [
    "load_classification",
    "load_generation_result",
    "save_classification",
]
