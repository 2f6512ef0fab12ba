from __future__ import annotations

import random
from collections import deque

import pytest

from app.client.api import QuestionsApiClient
from app.client.cli import QuizTerminal, parse_int, parse_label_choices
from app.client.controller import MODE_SETUP, QuizClient
from app.game.labels import LabelSet
from tests.client.fake_questions_api import BASE_URL, FakeQuestionsApi


class _Console:
    def __init__(self, *answers: str) -> None:
        self._answers = deque(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.popleft()

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def _terminal(fake: FakeQuestionsApi, console: _Console) -> tuple[QuizTerminal, QuizClient]:
    api = QuestionsApiClient(BASE_URL, transport=fake.transport())
    client = QuizClient(api, rng=random.Random(1))
    return QuizTerminal(client, read_line=console.read_line, write=console.write), client


def test_parse_label_choices_accepts_commas_and_case() -> None:
    assert parse_label_choices("b, a b z", LabelSet.of_size()) == ["B", "A"]


def test_parse_int_rejects_non_numeric() -> None:
    assert parse_int(" 7 ") == 7
    assert parse_int("seven") is None


@pytest.mark.asyncio
async def test_terminal_runs_a_quiz_and_returns_to_setup() -> None:
    fake = FakeQuestionsApi()
    fake.seed("2+2?", {"A": "3", "B": "4"}, {"A": False, "B": True})
    console = _Console("n", "1", "s", "A", "", "q")
    terminal, client = _terminal(fake, console)

    await terminal.run()

    assert "1. 2+2?" in console.text
    assert "Incorrect! The correct answers are: B" in console.text
    assert "You got 0 out of 1 correct (0.00%)" in console.text
    assert client.mode == MODE_SETUP
    assert client.quiz_size == 1


@pytest.mark.asyncio
async def test_terminal_adds_question_from_prompts() -> None:
    fake = FakeQuestionsApi()
    console = _Console("a", "Capital of France?", "Paris", "Rome", "", "", "a", "q")
    terminal, client = _terminal(fake, console)

    await terminal.run()

    stored = list(fake.questions.values())
    assert len(stored) == 1
    assert stored[0]["question"] == "Capital of France?"
    assert stored[0]["answers"] == {"A": "Paris", "B": "Rome", "C": "", "D": ""}
    assert stored[0]["correct"] == {"A": True, "B": False, "C": False, "D": False}
    assert len(client.questions) == 1


@pytest.mark.asyncio
async def test_terminal_deletes_only_after_confirmation() -> None:
    fake = FakeQuestionsApi()
    question_id = fake.seed("2+2?", {"A": "3", "B": "4"}, {"A": False, "B": True})
    console = _Console("d", str(question_id), "n", "d", str(question_id), "y", "q")
    terminal, client = _terminal(fake, console)

    await terminal.run()

    assert fake.count("DELETE") == 1
    assert fake.questions == {}
    assert client.questions == ()
    assert any("Delete question #1" in prompt for prompt in console.prompts)


@pytest.mark.asyncio
async def test_terminal_rejects_non_numeric_quiz_size() -> None:
    fake = FakeQuestionsApi()
    console = _Console("n", "lots", "q")
    terminal, client = _terminal(fake, console)

    await terminal.run()

    assert "Please enter a whole number." in console.text
    assert client.quiz_size == 5


@pytest.mark.asyncio
async def test_terminal_stops_on_end_of_input() -> None:
    fake = FakeQuestionsApi()
    console = _Console()
    terminal, _ = _terminal(fake, console)

    await terminal.run()

    assert console.output[0] == "Quiz App"
