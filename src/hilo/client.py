"""Judge client abstractions."""

from __future__ import annotations

from typing import Protocol


class ChatClient(Protocol):
    """Minimal protocol for chat-completions backends used as the answer judge."""

    def generate(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        ...


class RecordedReplyClient:
    """Returns a fixed, previously captured judge reply."""

    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.calls = 0

    def generate(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls += 1
        return self.reply
