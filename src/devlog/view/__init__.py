"""List view model, host protocol and the controller that wires them to the store."""

from .controller import CONFIRM_DELETE, ViewController
from .host import Host
from .models import ListView, Row, count_label

__all__ = [
    "CONFIRM_DELETE",
    "Host",
    "ListView",
    "Row",
    "ViewController",
    "count_label",
]
