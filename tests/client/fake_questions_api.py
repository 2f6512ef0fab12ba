from __future__ import annotations

import json
from typing import Any

import httpx

BASE_URL = "http://quiz.test"


class FakeQuestionsApi:
    """In-memory stand-in for the questions endpoints, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.questions: dict[int, dict[str, Any]] = {}
        self.requests: list[tuple[str, str]] = []
        self.failures: dict[str, httpx.Response] = {}
        self._next_id = 1

    def seed(self, question: str, answers: dict[str, str], correct: dict[str, bool]) -> int:
        question_id = self._next_id
        self._next_id += 1
        self.questions[question_id] = {
            "id": question_id,
            "question": question,
            "answers": answers,
            "correct": correct,
        }
        return question_id

    def fail(self, method: str, response: httpx.Response) -> None:
        self.failures[method] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        failure = self.failures.get(request.method)
        if failure is not None:
            return failure

        if request.method == "GET":
            return httpx.Response(200, json=list(self.questions.values()))
        if request.method == "POST":
            body = json.loads(request.content)
            question_id = self.seed(body["question"], body["answers"], body["correct"])
            return httpx.Response(201, json=self.questions[question_id])
        if request.method == "DELETE":
            question_id = int(request.url.path.rsplit("/", 1)[1])
            self.questions.pop(question_id, None)
            return httpx.Response(200, json={"message": "Question deleted successfully"})
        return httpx.Response(405, json={"error": "Method not allowed"})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def count(self, method: str) -> int:
        return sum(1 for seen_method, _ in self.requests if seen_method == method)
