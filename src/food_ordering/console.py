"""
Console I/O collaborators used by `OrderSession`.

`ConsoleIO` talks to a real terminal. `ScriptedIO` answers prompts from a
prepared list and captures everything shown; the CLI uses it for
non-interactive runs and the tests use it to drive whole sessions.
"""

from collections import deque
from typing import Iterable, Protocol


class OrderingIO(Protocol):
    """Supplies raw answers and receives text to display."""

    def ask(self, prompt: str) -> str: ...

    def show(self, text: str) -> None: ...


class ConsoleIO:
    def ask(self, prompt: str) -> str:
        return input(prompt)

    def show(self, text: str) -> None:
        print(text)


class ScriptedIO:
    """Replays canned answers in order.

    Running out of answers raises EOFError, the same as `input()` at the
    end of stdin.
    """

    def __init__(self, answers: Iterable[str], echo: bool = False) -> None:
        self._answers = deque(answers)
        self.echo = echo
        self.prompts: list[str] = []
        self.output: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError(f"no scripted answer for prompt {prompt!r}")
        answer = self._answers.popleft()
        if self.echo:
            print(f"{prompt}{answer}")
        return answer

    def show(self, text: str) -> None:
        self.output.append(text)
        if self.echo:
            print(text)
