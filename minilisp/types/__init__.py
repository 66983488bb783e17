from minilisp.types.function import Function
from minilisp.types.environment import Environment

__all__ = ["Environment", "Function"]
