from .money import Money
from .update_result import UpdateResult

__all__ = ["Money", "UpdateResult"]
