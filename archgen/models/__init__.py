from .schemas import RequirementsRecord

__all__ = ["RequirementsRecord"]
