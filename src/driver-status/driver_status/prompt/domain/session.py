"""StatusPromptSession — the yes/no then new-status question cycle as a state machine.

The session never reads input itself. The caller asks for ``prompt``, reads a
line, and passes it to ``handle``; everything the user should see is written
through the injected writer.
"""

from collections.abc import Callable

from driver_status.driver.domain.driver import Driver
from driver_status.driver.domain.errors import (
    InvalidStatusError,
    ListenerNotificationError,
)
from driver_status.driver.domain.status import available_statuses, parse_status
from driver_status.prompt.domain.choices import format_choices
from driver_status.prompt.domain.state import PromptState

CONTINUE_PROMPT = "Question: Has the driver status changed? (yes/no): "
NEW_STATUS_PROMPT = "Enter new status: "

_YES = frozenset({"yes", "y"})
_NO = frozenset({"no", "n"})


class StatusPromptSession:
    """Drives one driver through repeated "has the status changed?" questions."""

    def __init__(self, driver: Driver, write: Callable[[str], None]) -> None:
        self._driver = driver
        self._write = write
        self._state = PromptState.AWAITING_CONTINUE

    @property
    def state(self) -> PromptState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state is PromptState.FINISHED

    def prompt(self) -> str:
        """Return the text to show before reading the next line.

        In AWAITING_CONTINUE this also writes the current-status header.
        """
        if self._state is PromptState.AWAITING_CONTINUE:
            self._write(f"------ Current driver status: {self._driver.status} ------ \n")
            return CONTINUE_PROMPT
        if self._state is PromptState.AWAITING_NEW_STATUS:
            return NEW_STATUS_PROMPT
        raise RuntimeError("Session is finished; no further prompts.")

    def handle(self, line: str) -> None:
        """Consume one line of user input and advance the state machine."""
        if self._state is PromptState.AWAITING_CONTINUE:
            self._handle_continue(answer=line)
        elif self._state is PromptState.AWAITING_NEW_STATUS:
            self._handle_new_status(text=line)
        else:
            raise RuntimeError("Session is finished; no further input accepted.")

    def close(self) -> None:
        """End the session without a goodbye, e.g. when input is closed."""
        self._state = PromptState.FINISHED

    def _handle_continue(self, answer: str) -> None:
        normalized = answer.strip().lower()
        if normalized in _YES:
            choices = format_choices(available_statuses(current=self._driver.status))
            self._write(f"\nQuestion: What is the new status? ({choices})")
            self._state = PromptState.AWAITING_NEW_STATUS
        elif normalized in _NO:
            self._write(
                "\nThank you for confirming this driver's status. Goodbye. \n"
            )
            self._state = PromptState.FINISHED
        else:
            self._write("Please answer yes or no.\n")

    def _handle_new_status(self, text: str) -> None:
        # Either way the next question is the yes/no one again.
        self._state = PromptState.AWAITING_CONTINUE
        try:
            new_status = parse_status(text=text, current=self._driver.status)
        except InvalidStatusError:
            self._write("Invalid status. Please try again.\n")
            return

        self._write("")
        self._write("UPDATE: Status has been changed.")
        self._write("Notify Observers:")
        try:
            self._driver.change_status(new_status=new_status)
        except ListenerNotificationError as exc:
            self._write(
                f"Warning: {len(exc.failures)} listener(s) failed to receive the update."
            )
        self._write("")
