from __future__ import annotations

from collections.abc import Sequence

from app.client.notifications import Toast
from app.client.texts import TEXTS_EN
from app.game.questions.types import QuizQuestion
from app.game.sessions.quiz_session import AnswerRecord, QuizResult, QuizSession


def render_toast(toast: Toast) -> str:
    marker = "!" if toast.is_destructive else "*"
    if toast.description:
        return f"[{marker}] {toast.title}: {toast.description}"
    return f"[{marker}] {toast.title}"


def render_question_list(questions: Sequence[QuizQuestion]) -> str:
    lines = [TEXTS_EN["msg.setup.heading.available"].format(total=len(questions))]
    if not questions:
        lines.append(TEXTS_EN["msg.setup.empty"])
    for question in questions:
        lines.append(TEXTS_EN["msg.setup.question_line"].format(id=question.id, question=question.question))
    return "\n".join(lines)


def render_feedback(question: QuizQuestion, record: AnswerRecord) -> str:
    if record.is_correct:
        return TEXTS_EN["msg.quiz.correct"]
    return TEXTS_EN["msg.quiz.incorrect"].format(labels=", ".join(question.correct_labels()))


def render_quiz_question(session: QuizSession, index: int) -> str:
    question = session.question_at(index)
    lines = [TEXTS_EN["msg.quiz.question"].format(number=index + 1, question=question.question)]
    record = session.answer_for(index)
    if record is not None:
        lines.append(f"   {render_feedback(question, record)}")
        return "\n".join(lines)

    for label, text in question.offered_answers():
        lines.append(TEXTS_EN["msg.quiz.option"].format(label=label, text=text))
    return "\n".join(lines)


def render_result(result: QuizResult) -> str:
    score = TEXTS_EN["msg.quiz.score"].format(
        correct=result.correct_count,
        total=result.total,
        percentage=result.ratio * 100,
    )
    return "\n".join([TEXTS_EN["msg.quiz.completed"], score])


def render_session(session: QuizSession) -> str:
    blocks = [render_quiz_question(session, index) for index in range(session.total)]
    if session.is_complete:
        blocks.append(render_result(session.result()))
    return "\n\n".join(blocks)
