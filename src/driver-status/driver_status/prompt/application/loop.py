"""run_prompt_loop — feeds lines from a reader into a StatusPromptSession."""

from collections.abc import Callable

from driver_status.prompt.domain.session import StatusPromptSession


def run_prompt_loop(
    session: StatusPromptSession, read_line: Callable[[str], str]
) -> None:
    """Ask, read, handle, until the session finishes or input is closed.

    *read_line* receives the prompt text and returns one line without its
    newline; it signals closed input by raising EOFError (as ``input`` does).
    """
    while not session.finished:
        prompt = session.prompt()
        try:
            line = read_line(prompt)
        except EOFError:
            session.close()
            return
        session.handle(line)
