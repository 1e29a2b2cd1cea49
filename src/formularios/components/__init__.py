from .base import TERMINATOR, BaseComponent, Terminator
from .label import LabelComponent, ResolvedLabel

__all__ = ["TERMINATOR", "BaseComponent", "LabelComponent", "ResolvedLabel", "Terminator"]
