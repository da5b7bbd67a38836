from typing import Any
from collections.abc import Sized

def get_dimension(element: Any) -> int:
    """Number of channels in a color element; bare scalars count as one."""
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1
