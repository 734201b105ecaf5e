"""Yes/no prompt with an explicit default."""

from __future__ import annotations

from ytmp3_setup.errors import InvalidAnswerError
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.types import Answer

_YES = {"y", "yes"}
_NO = {"n", "no"}


def parse_answer(raw: str, default: Answer = Answer.YES) -> Answer:
    """Map an operator reply to :class:`Answer`.

    Empty input takes *default*; anything other than y/yes/n/no (any case)
    raises :class:`InvalidAnswerError`.
    """
    value = raw.strip()
    if not value:
        return default
    if value.lower() in _YES:
        return Answer.YES
    if value.lower() in _NO:
        return Answer.NO
    raise InvalidAnswerError(value)


def ask_yes_no(reporter: Reporter, question: str, default: Answer = Answer.YES) -> Answer:
    choices = "Y/n" if default is Answer.YES else "y/N"
    return parse_answer(reporter.ask(question, choices), default)
