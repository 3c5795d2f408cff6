"""PromptState — where the interactive session is in its question cycle."""

from enum import StrEnum


class PromptState(StrEnum):
    AWAITING_CONTINUE = "awaiting_continue"
    AWAITING_NEW_STATUS = "awaiting_new_status"
    FINISHED = "finished"
