from app.db.repo.questions_repo import QuestionsRepo

__all__ = [
    "QuestionsRepo",
]
