class QuizSessionError(Exception):
    pass


class QuestionIndexOutOfRangeError(QuizSessionError):
    pass


class QuestionAlreadyAnsweredError(QuizSessionError):
    pass


class NoQuestionsAvailableError(QuizSessionError):
    pass
