from abc import ABC, abstractmethod
from typing import override


class Prompter(ABC):
    """Source of operator answers and sink for operator-facing messages."""

    closed: bool = False

    @abstractmethod
    def ask(self, question: str) -> str:
        ...

    @abstractmethod
    def show(self, message: str = "") -> None:
        ...

    def confirm(self, question: str) -> bool:
        return self.ask(f"{question} (y: Yes, [n: No]: default): ") == "y"


class TerminalPrompter(Prompter):
    @override
    def ask(self, question: str) -> str:
        # a closed stdin counts as an empty answer
        try:
            return input(question).strip()
        except EOFError:
            self.closed = True
            print()
            return ""

    @override
    def show(self, message: str = "") -> None:
        print(message)
