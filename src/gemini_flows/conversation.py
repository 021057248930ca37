"""Conversation threading over an immutable log.

The log is the only state. ``advance`` never mutates the log it is given;
it returns a new one with the user turn and the agent turn appended, even
when generation fails (the agent turn then carries the fallback reply).
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from gemini_flows.constants import (
    AGENT_LABEL,
    EMPTY_PROMPT_MESSAGE,
    FALLBACK_CHAT_REPLY,
    USER_LABEL,
)
from gemini_flows.core.types import (
    ConversationLog,
    ConversationTurn,
    ErrorKind,
    Failure,
    GenerationRequest,
    GenerationResult,
)
from gemini_flows.exceptions import MissingFieldError
from gemini_flows.prompts import TemplateId, build_prompt
from gemini_flows.telemetry import TelemetryContext

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient
    from gemini_flows.telemetry import TelemetryContextProtocol

_LABELS = {"user": USER_LABEL, "agent": AGENT_LABEL}
_PREFIXES = {f"{label}: ": speaker for speaker, label in _LABELS.items()}


@dataclasses.dataclass(frozen=True, slots=True)
class ConversationAdvance:
    """Outcome of one conversational step."""

    reply: str
    new_log: ConversationLog
    result: GenerationResult


_CONTINUATION_INDENT = "  "


def render_transcript(log: ConversationLog) -> str:
    """Format a log as ``User: ...`` / ``AI: ...`` lines joined by newlines.

    Continuation lines of a multi-line turn are indented, so a turn whose
    text contains ``"\\nAI: "`` cannot be read back as an extra turn.
    """
    return "\n".join(
        f"{_LABELS[turn.speaker]}: "
        + f"\n{_CONTINUATION_INDENT}".join(turn.text.split("\n"))
        for turn in log
    )


def parse_transcript(text: str) -> ConversationLog:
    """Rebuild a log from a rendered (or legacy flat-string) transcript.

    Lines without a known speaker prefix continue the previous turn, so
    multi-line replies survive the round trip; one level of continuation
    indent is removed. Leading unprefixed lines are attributed to the user.
    """
    turns: list[ConversationTurn] = []
    for line in text.splitlines():
        speaker, body = _split_prefix(line)
        if speaker is not None:
            turns.append(ConversationTurn(speaker, body))
        elif turns:
            prev = turns[-1]
            line = line.removeprefix(_CONTINUATION_INDENT)
            turns[-1] = ConversationTurn(prev.speaker, f"{prev.text}\n{line}")
        elif line.strip():
            turns.append(ConversationTurn("user", line))
    return tuple(turns)


def _split_prefix(line: str) -> tuple[str | None, str]:
    for prefix, speaker in _PREFIXES.items():
        if line.startswith(prefix):
            return speaker, line[len(prefix) :]
    return None, line


def append_exchange(
    log: ConversationLog, user_utterance: str, reply: str
) -> ConversationLog:
    """Return ``log`` extended by one user turn and one agent turn."""
    return (
        *log,
        ConversationTurn("user", user_utterance),
        ConversationTurn("agent", reply),
    )


class ConversationThreader:
    """Drive a chat by rendering the log into a prompt template."""

    def __init__(
        self,
        client: GenerationClient,
        *,
        template: TemplateId = TemplateId.SMART_CHAT,
        fallback_reply: str = FALLBACK_CHAT_REPLY,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self.client = client
        self.template = template
        self.fallback_reply = fallback_reply
        self.tele = telemetry or TelemetryContext()

    async def advance(
        self, log: ConversationLog, user_utterance: str
    ) -> ConversationAdvance:
        with self.tele("conversation.advance", turns=len(log)):
            result = await self._generate(log, user_utterance)

        if result.kind == "success" and isinstance(result.payload, str):
            reply = result.payload
        else:
            reply = self.fallback_reply
        return ConversationAdvance(
            reply=reply,
            new_log=append_exchange(log, user_utterance, reply),
            result=result,
        )

    async def _generate(
        self, log: ConversationLog, user_utterance: str
    ) -> GenerationResult:
        if not user_utterance.strip():
            return Failure(reason=ErrorKind.EMPTY_PROMPT, message=EMPTY_PROMPT_MESSAGE)
        try:
            prompt = build_prompt(
                self.template,
                {"transcript": render_transcript(log), "user_input": user_utterance},
            )
        except MissingFieldError as e:
            return Failure(reason=ErrorKind.MISSING_FIELD, message=str(e))
        return await self.client.generate(GenerationRequest(prompt=prompt))
