"""ADK Agent for the Telegraph Operator

The agent plays a Western Union operator answering decoded telegrams.
The flow is: decoded telegram → InMemoryRunner → LlmAgent → persona transforms
"""

import logging
from functools import lru_cache

from google.adk.agents import LlmAgent
from google.adk.runners import InMemoryRunner
from google.genai import types

from telegraph_line import config
from telegraph_line.operator.persona import (
    apply_operator_persona,
    fallback_reply,
    truncate_words,
)

logger = logging.getLogger(__name__)

APP_NAME = "telegraph_line"
USER_ID = "telegraph_line_user"

root_agent = LlmAgent(
    model=config.OPERATOR_MODEL,
    name='telegraph_operator',
    description='Western Union telegraph operator who answers incoming telegrams',
    instruction='''You are a Western Union Telegraph Operator from 1865. Follow these rules strictly:
1. Use ONLY UPPERCASE letters
2. Replace periods with "STOP"
3. Maximum 20 words per response
4. Be concise - charge by the word
5. If users mention modern concepts (internet, email, computer, phone), express confusion in character
6. Use 1860s language and professional telegraph operator tone
7. Use abbreviations: REC'D, MSG, XMIT
8. Acknowledge receipt: "RECEIVED STOP [response] STOP"

Examples:
- User: "Hello" → "RECEIVED STOP HELLO STOP OPERATOR STANDING BY STOP"
- User: "What time is it?" → "RECEIVED STOP TIME IS [current time] STOP"
- User: "Email me" → "WHAT IN TARNATION IS EMAIL STOP SEND TELEGRAM STOP"''',
    generate_content_config=types.GenerateContentConfig(
        temperature=0.7,
        max_output_tokens=100,
        top_p=0.9,
        top_k=20,
    ),
)


@lru_cache(maxsize=1)
def _runner() -> InMemoryRunner:
    return InMemoryRunner(agent=root_agent, app_name=APP_NAME)


async def _ask_agent(message: str) -> str:
    runner = _runner()
    session = await runner.session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
    content = types.Content(role="user", parts=[types.Part(text=message)])

    reply = ""
    try:
        async for event in runner.run_async(user_id=USER_ID, session_id=session.id, new_message=content):
            if event.is_final_response() and event.content and event.content.parts:
                reply = "".join(part.text or "" for part in event.content.parts).strip()
    finally:
        # Each telegram is answered in a fresh session; drop its history
        await runner.session_service.delete_session(
            app_name=APP_NAME, user_id=USER_ID, session_id=session.id
        )

    if not reply:
        raise RuntimeError("Operator agent returned no text")
    return reply


async def invoke_operator(message: str) -> str:
    """Answer a decoded telegram in the operator persona

    Falls back to a plain acknowledgement when no API key is configured or
    the model call fails.
    """
    if not isinstance(message, str) or not message.strip():
        raise ValueError("Invalid user message")

    if not config.api_key():
        logger.info("No API key configured, operator answering in echo mode")
        return fallback_reply(message)

    try:
        reply = await _ask_agent(message)
    except Exception:
        logger.exception("Operator agent failed, answering in echo mode")
        return fallback_reply(message)

    return truncate_words(apply_operator_persona(reply))
