"""Interactive terminal front-end for authoring questions and taking quizzes."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Callable, Sequence

from app.client.api import QuestionsApiClient
from app.client.controller import MODE_SETUP, QuizClient
from app.client.notifications import Notifier
from app.client.texts import TEXTS_EN
from app.client.views import (
    render_feedback,
    render_question_list,
    render_quiz_question,
    render_result,
    render_toast,
)
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.game.labels import LabelSet

RESTART_CHOICE = "r"
CONFIRM_CHOICES = {"y", "yes"}


def parse_label_choices(raw: str, labels: LabelSet) -> list[str]:
    chosen: list[str] = []
    for part in raw.replace(",", " ").split():
        label = labels.normalize(part)
        if label is not None and label not in chosen:
            chosen.append(label)
    return chosen


def parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


class QuizTerminal:
    def __init__(
        self,
        client: QuizClient,
        *,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._read_line = read_line
        self._write = write

    async def _ask(self, prompt: str) -> str:
        return await asyncio.to_thread(self._read_line, prompt)

    async def run(self) -> None:
        self._write(TEXTS_EN["msg.app.title"])
        self._write(TEXTS_EN["msg.app.loading"])
        await self._client.load_questions()
        try:
            while True:
                if self._client.mode == MODE_SETUP:
                    if not await self._setup_step():
                        return
                else:
                    await self._quiz_step()
        except EOFError:
            return

    async def _setup_step(self) -> bool:
        self._write("")
        self._write(TEXTS_EN["msg.setup.quiz_size"].format(size=self._client.quiz_size))
        self._write(TEXTS_EN["msg.setup.menu"])
        choice = (await self._ask("> ")).strip().lower()
        if choice == "q":
            return False
        if choice == "l":
            self._write(render_question_list(self._client.questions))
        elif choice == "a":
            await self._add_question()
        elif choice == "d":
            await self._delete_question()
        elif choice == "n":
            await self._set_quiz_size()
        elif choice == "s":
            self._client.start_quiz()
        else:
            self._write(TEXTS_EN["msg.input.invalid_choice"].format(choice=choice))
        return True

    async def _add_question(self) -> None:
        self._write(TEXTS_EN["msg.setup.heading.add"])
        draft = self._client.draft
        draft.question = await self._ask(TEXTS_EN["msg.draft.prompt"])
        for label in self._client.labels:
            draft.set_answer(label, await self._ask(TEXTS_EN["msg.draft.answer"].format(label=label)))
        example = ",".join(self._client.labels.labels[:2])
        raw_correct = await self._ask(TEXTS_EN["msg.draft.correct"].format(example=example))
        chosen = parse_label_choices(raw_correct, self._client.labels)
        for label in self._client.labels:
            draft.set_correct(label, label in chosen)
        await self._client.submit_question()

    async def _confirm_delete(self, question_id: int) -> bool:
        question = self._client.find_question(question_id)
        prompt = TEXTS_EN["msg.delete.confirm"].format(
            id=question_id,
            question=question.question if question is not None else "",
        )
        return (await self._ask(prompt)).strip().lower() in CONFIRM_CHOICES

    async def _delete_question(self) -> None:
        question_id = parse_int(await self._ask(TEXTS_EN["msg.delete.prompt"]))
        if question_id is None:
            self._write(TEXTS_EN["msg.input.invalid_id"])
            return
        await self._client.delete_question(question_id, confirm=self._confirm_delete)

    async def _set_quiz_size(self) -> None:
        size = parse_int(await self._ask(TEXTS_EN["msg.size.prompt"]))
        if size is None:
            self._write(TEXTS_EN["msg.size.invalid"])
            return
        self._client.set_quiz_size(size)

    async def _quiz_step(self) -> None:
        session = self._client.session
        if session is None:
            return

        if session.is_complete:
            self._write("")
            self._write(render_result(session.result()))
            await self._ask(f"{TEXTS_EN['msg.quiz.restart']} [Enter] ")
            self._client.restart_quiz()
            return

        index = session.unanswered_indexes()[0]
        question = session.question_at(index)
        offered = [label for label, _ in question.offered_answers()]
        self._write("")
        self._write(render_quiz_question(session, index))
        raw = await self._ask(
            TEXTS_EN["msg.quiz.pick"].format(number=index + 1, labels="/".join(offered))
        )
        if raw.strip().lower() == RESTART_CHOICE:
            self._client.restart_quiz()
            return

        label = raw.strip().upper()
        if label not in offered:
            self._write(TEXTS_EN["msg.quiz.invalid_label"].format(labels=", ".join(offered)))
            return
        record = self._client.answer(index, label)
        self._write(render_feedback(question, record))


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Author questions and take quizzes from the terminal.")
    parser.add_argument("--base-url", default=settings.quiz_api_base_url, help="Quiz API base URL")
    parser.add_argument("--labels", type=int, default=settings.quiz_label_count, help="Answer labels per question")
    parser.add_argument("--size", type=int, default=settings.quiz_default_size, help="Initial quiz size")
    parser.add_argument("--log-level", default="WARNING")
    return parser


async def _run(args: argparse.Namespace) -> None:
    notifier = Notifier(listener=lambda toast: print(render_toast(toast)))  # noqa: T201
    async with QuestionsApiClient(args.base_url) as api:
        client = QuizClient(
            api,
            labels=LabelSet.of_size(args.labels),
            quiz_size=args.size,
            notifier=notifier,
        )
        await QuizTerminal(client).run()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level, json_output=False)
    try:
        asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
