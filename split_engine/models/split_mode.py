"""Split mode enum"""
import enum


class SplitMode(str, enum.Enum):
    """Enum for split policy modes"""
    EVEN = "even"
    INCOME_WEIGHTED = "incomeWeighted"
    CUSTOM = "custom"
