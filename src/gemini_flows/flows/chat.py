"""Chat flows: the threaded chats and the one-shot humorous reply."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.constants import FALLBACK_CHAT_REPLY
from gemini_flows.conversation import (
    ConversationAdvance,
    ConversationThreader,
    parse_transcript,
    render_transcript,
)
from gemini_flows.core.types import GenerationRequest, Success
from gemini_flows.prompts import TemplateId, build_prompt

from .schemas import (
    HumorousChatInput,
    HumorousChatOutput,
    PersistentMemoryChatInput,
    PersistentMemoryChatOutput,
    SmartChatInput,
    SmartChatOutput,
)

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)


async def _threaded_turn(
    client: GenerationClient, template: TemplateId, user_input: str, chat_history: str
) -> ConversationAdvance:
    history = parse_transcript(chat_history or "")
    step = await ConversationThreader(client, template=template).advance(
        history, user_input
    )
    if step.result.kind == "failure":
        log.warning("%s fell back: %s", template.value, step.result.message)
    return step


async def smart_chat(client: GenerationClient, data: SmartChatInput) -> SmartChatOutput:
    """Continue a chat whose history is a flat ``User:``/``AI:`` transcript.

    The user's message is kept in the updated history even when the model
    fails; the reply is then the fallback text.
    """
    step = await _threaded_turn(
        client, TemplateId.SMART_CHAT, data.user_input, data.chat_history
    )
    return SmartChatOutput(
        chatbot_response=step.reply,
        updated_chat_history=render_transcript(step.new_log),
    )


async def persistent_memory_chat(
    client: GenerationClient, data: PersistentMemoryChatInput
) -> PersistentMemoryChatOutput:
    """Chat that recalls earlier turns; the history is rebuilt locally, not by the model."""
    step = await _threaded_turn(
        client, TemplateId.PERSISTENT_MEMORY_CHAT, data.user_input, data.chat_history
    )
    return PersistentMemoryChatOutput(
        chatbot_response=step.reply,
        updated_chat_history=render_transcript(step.new_log),
    )


async def humorous_chat(
    client: GenerationClient, data: HumorousChatInput
) -> HumorousChatOutput:
    if not data.message.strip():
        return HumorousChatOutput(response=FALLBACK_CHAT_REPLY)
    prompt = build_prompt(TemplateId.HUMOROUS_CHAT, {"message": data.message})

    result = await client.generate(GenerationRequest(prompt=prompt))
    if isinstance(result, Success) and isinstance(result.payload, str):
        return HumorousChatOutput(response=result.payload)
    log.warning("Humorous chat produced no reply; using fallback")
    return HumorousChatOutput(response=FALLBACK_CHAT_REPLY)
