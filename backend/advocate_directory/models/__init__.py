from advocate_directory.models.advocate import Advocate

__all__ = ["Advocate"]
