"""Undoable commands and a manager that keeps undo and redo history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

DEFAULT_MAX_HISTORY = 50


class Command(ABC):
    """An action that can be executed and, usually, undone.

    Subclasses set ``self._executed`` to reflect whether the action is in effect.
    """

    _executed: bool = False

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the action."""

    def can_undo(self) -> bool:
        return True

    def description(self) -> str:
        return "Command"

    def was_executed(self) -> bool:
        return self._executed


class CommandManager:
    """Executes commands and keeps a bounded undo history and a redo history."""

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        self._undo_stack: deque[Command] = deque()
        self._redo_stack: list[Command] = []
        self._max_history = DEFAULT_MAX_HISTORY
        self.set_max_history(max_history)

    def execute(self, command: Command) -> None:
        """Execute a command and remember it for undo if it can be undone."""
        command.execute()
        self._redo_stack.clear()
        if command.can_undo():
            self._push_undo(command)

    def undo(self) -> Command | None:
        """Undo the most recent command; return it, or None if nothing was undone."""
        if not self._undo_stack:
            return None
        command = self._undo_stack.pop()
        if not command.can_undo():
            return None
        command.undo()
        self._redo_stack.append(command)
        return command

    def redo(self) -> Command | None:
        """Re-execute the most recently undone command; return it, or None."""
        if not self._redo_stack:
            return None
        command = self._redo_stack.pop()
        command.execute()
        if command.can_undo():
            self._push_undo(command)
        return command

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    def undo_count(self) -> int:
        return len(self._undo_stack)

    def redo_count(self) -> int:
        return len(self._redo_stack)

    def next_undo_description(self) -> str | None:
        return self._undo_stack[-1].description() if self._undo_stack else None

    def next_redo_description(self) -> str | None:
        return self._redo_stack[-1].description() if self._redo_stack else None

    def set_max_history(self, max_history: int) -> None:
        """Limit the undo history, discarding the oldest commands beyond it."""
        if max_history < 0:
            raise ValueError("max_history must not be negative")
        self._max_history = max_history
        self._trim()

    @property
    def max_history(self) -> int:
        return self._max_history

    def _push_undo(self, command: Command) -> None:
        self._undo_stack.append(command)
        self._trim()

    def _trim(self) -> None:
        while len(self._undo_stack) > self._max_history:
            self._undo_stack.popleft()