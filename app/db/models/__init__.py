from app.db.models.questions import Question

__all__ = [
    "Question",
]
