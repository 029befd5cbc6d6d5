"""Telegraph Line MCP Server

Lets AI agents transmit and receive messages as Morse code over the
virtual telegraph line.
"""

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from telegraph_line.config import configure_logging
from telegraph_line.keyer import TelegraphKey
from telegraph_line.morse import (
    CHAR_GAP_MS,
    DASH_MS,
    DOT_MS,
    ELEMENT_GAP_MS,
    ERROR_MARKER,
    MORSE_CODE,
    UNIT_MS,
    WORD_GAP_MS,
    WORD_SEPARATOR,
    invalid_tokens,
    morse_to_text,
    morse_to_timing,
    text_to_morse,
    total_duration_ms,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("Telegraph Line 📡")


def transmit(message) -> dict[str, str | list[int]]:
    """Encode a message for the telegraph line

    Raises:
        ToolError: if the message is not a string
    """
    if not isinstance(message, str):
        raise ToolError("Telegraph transmission failed: Message must be a string")

    morse = text_to_morse(message)
    return {
        "morse": morse,
        "text": message.upper(),
        "timing": morse_to_timing(morse),
    }


@mcp.tool
def transmit_telegram(message: str) -> dict[str, str | list[int]]:
    """Converts operator text to Morse code for transmission over the telegraph line

    Args:
        message: The message to transmit in Morse code

    Returns:
        Dictionary with the Morse code, the uppercased text and the playback timing in milliseconds
    """
    logger.debug("Transmitting %d characters", len(message))
    return transmit(message)


@mcp.tool
def receive_telegram(morse: str) -> dict[str, str | bool | list[str]]:
    """Decode a Morse transmission received on the telegraph line

    Args:
        morse: Morse code with single spaces between characters and "/" between words

    Returns:
        Dictionary with the decoded text and any tokens that could not be decoded
    """
    text = morse_to_text(morse)
    bad_tokens = invalid_tokens(morse)
    return {
        "morse": morse,
        "text": text,
        "valid": bool(text) and not bad_tokens,
        "invalid_tokens": bad_tokens,
        "error_marker": ERROR_MARKER,
    }


@mcp.tool
def telegraph_timing(morse: str) -> dict[str, str | int | list[int]]:
    """Calculate playback timing for a Morse transmission

    Args:
        morse: Morse code to time

    Returns:
        Dictionary with the timing sequence and total duration in milliseconds
    """
    timing = morse_to_timing(morse)
    return {
        "morse": morse,
        "timing": timing,
        "total_duration_ms": total_duration_ms(timing),
        "unit_ms": UNIT_MS,
    }


def key_in(durations) -> dict[str, str | list[str]]:
    """Replay straight-key activity and decode it

    durations alternates press and idle times in milliseconds, starting
    with a press, the same layout as a playback timing sequence.

    Raises:
        ToolError: if a duration is negative
    """
    key = TelegraphKey()
    try:
        for i, duration in enumerate(durations):
            if i % 2 == 0:
                key.press(duration)
            else:
                key.idle(duration)
    except ValueError as e:
        raise ToolError(f"Keying failed: {e}") from e
    key.flush()

    return {
        "morse": key.morse,
        "text": key.text,
        "characters": key.characters,
    }


@mcp.tool
def key_telegram(durations: list[float]) -> dict[str, str | list[str]]:
    """Decode a message keyed by hand on a straight key

    Args:
        durations: Alternating press and idle times in milliseconds, starting with a press.
            Presses under 200ms are dots, longer presses dashes; idle gaps over 800ms end a character.

    Returns:
        Dictionary with the keyed Morse code, the decoded text and each keyed character
    """
    return key_in(durations)


@mcp.tool
def telegraph_info() -> dict[str, str | int | dict[str, str | int]]:
    """Get reference information about the telegraph line

    Returns:
        Dictionary with Morse symbols, ITU timing and sample mappings
    """
    return {
        "description": "ITU Morse code over a virtual telegraph line",
        "dot_symbol": ".",
        "dash_symbol": "-",
        "space_between_letters": "space",
        "space_between_words": WORD_SEPARATOR,
        "supported_characters": len(MORSE_CODE),
        "timing_ms": {
            "dot": DOT_MS,
            "dash": DASH_MS,
            "element_gap": ELEMENT_GAP_MS,
            "character_gap": CHAR_GAP_MS,
            "word_gap": WORD_GAP_MS,
        },
        "sample_mappings": {
            "SOS": "... --- ...",
            "HELLO": ".... . .-.. .-.. ---",
            "WORLD": ".-- --- .-. .-.. -..",
        },
    }


def main() -> None:
    """Run the telegraph line MCP server"""
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
