from roster.models.student import Student

__all__ = ["Student"]
