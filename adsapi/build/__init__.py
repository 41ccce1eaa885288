"""
Wrapper code generation.
"""

from .generator import WrapperGenerator, load_wrapper_class

__all__ = [
    "WrapperGenerator",
    "load_wrapper_class",
]
