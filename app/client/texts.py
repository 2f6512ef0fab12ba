TEXTS_EN: dict[str, str] = {
    "msg.app.title": "Quiz App",
    "msg.app.loading": "Loading questions...",
    "msg.setup.heading.add": "Add a Question",
    "msg.setup.heading.available": "Available Questions ({total})",
    "msg.setup.heading.start": "Start Quiz",
    "msg.setup.quiz_size": "Number of questions: {size}",
    "msg.setup.empty": "No questions yet.",
    "msg.setup.question_line": "#{id} {question}",
    "msg.setup.menu": (
        "[l] list  [a] add question  [d] delete question  "
        "[n] set quiz size  [s] start quiz  [q] quit"
    ),
    "msg.draft.prompt": "Enter your question: ",
    "msg.draft.answer": "Answer {label}: ",
    "msg.draft.correct": "Correct labels (e.g. {example}): ",
    "msg.delete.prompt": "Question id to delete: ",
    "msg.delete.confirm": "Delete question #{id} \"{question}\"? [y/N] ",
    "msg.size.prompt": "Number of questions: ",
    "msg.size.invalid": "Please enter a whole number.",
    "msg.input.invalid_choice": "Unknown choice: {choice}",
    "msg.input.invalid_id": "Please enter a numeric question id.",
    "msg.quiz.question": "{number}. {question}",
    "msg.quiz.option": "   {label}: {text}",
    "msg.quiz.pick": "Answer for question {number} ({labels}), or [r] restart: ",
    "msg.quiz.invalid_label": "Choose one of: {labels}",
    "msg.quiz.correct": "Correct!",
    "msg.quiz.incorrect": "Incorrect! The correct answers are: {labels}",
    "msg.quiz.completed": "Quiz Completed!",
    "msg.quiz.score": "You got {correct} out of {total} correct ({percentage:.2f}%)",
    "msg.quiz.restart": "Start New Quiz",
    "toast.question.added": "Question added successfully",
    "toast.question.add_failed": "Failed to add question",
    "toast.question.deleted": "Question deleted successfully",
    "toast.question.delete_failed": "Failed to delete question",
    "toast.questions.load_failed": "Failed to load questions",
    "toast.validation.question_required": "Please enter a question",
    "toast.validation.answer_required": "Please enter at least one answer",
    "toast.validation.correct_required": "Please mark at least one correct answer",
    "toast.quiz.no_questions": "No questions available",
}
