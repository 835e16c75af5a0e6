"""Domain enums"""
from split_engine.models.split_mode import SplitMode

__all__ = ["SplitMode"]
