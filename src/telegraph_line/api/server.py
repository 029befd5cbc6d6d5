"""Telegraph Line HTTP API

Receives Morse transmissions, hands the decoded telegram to the operator
and sends the reply back as text, Morse code and playback timing.
"""

import logging
import time
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from telegraph_line import config
from telegraph_line.morse import ERROR_MARKER, morse_to_text, morse_to_timing, text_to_morse
from telegraph_line.operator.agent import invoke_operator

logger = logging.getLogger(__name__)

OPERATOR_UNAVAILABLE = "OPERATOR UNAVAILABLE STOP TRY AGAIN STOP"

app = FastAPI(title="Telegraph Line", description="Morse code telegraph line with an 1865 operator")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


class TelegramReply(BaseModel):
    decoded_text: str
    reply_text: str
    reply_morse: str
    timing_array: List[int]


class HealthStatus(BaseModel):
    status: str


class TelegraphError(Exception):
    """A rejected transmission, reported to the client as JSON"""

    def __init__(self, status_code: int, message: str, **extra):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.extra = extra


@app.exception_handler(TelegraphError)
async def telegraph_error_handler(request: Request, exc: TelegraphError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message, **exc.extra})


class RateLimiter:
    """Fixed-window request counter keyed by client address"""

    def __init__(self, max_requests: int, window_seconds: float):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_sweep: float | None = None

    def hit(self, key: str, now: float | None = None) -> bool:
        """Count a request; False once the window's allowance is spent"""
        now = time.monotonic() if now is None else now
        self._sweep(now)
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            started, count = now, 0
        count += 1
        self._windows[key] = (started, count)
        return count <= self.max_requests

    def _sweep(self, now: float) -> None:
        """Forget expired windows, at most once per window length"""
        if self._last_sweep is not None and now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        expired = [key for key, (started, _) in self._windows.items()
                   if now - started >= self.window_seconds]
        for key in expired:
            del self._windows[key]

    def __len__(self) -> int:
        return len(self._windows)


limiter = RateLimiter(config.RATE_LIMIT_MAX, config.RATE_LIMIT_WINDOW_SECONDS)


async def rate_limit(request: Request) -> None:
    if not config.rate_limit_enabled():
        return
    client = request.client.host if request.client else "unknown"
    if not limiter.hit(client):
        logger.warning("Rate limit exceeded for %s", client)
        raise TelegraphError(429, "TELEGRAPH LINE BUSY STOP TRY AGAIN STOP")


def validate_morse_sequence(body) -> str:
    """Pull the Morse sequence out of a request body or reject it"""
    if not isinstance(body, dict):
        raise TelegraphError(400, "INVALID TRANSMISSION STOP NO DATA RECEIVED STOP")

    morse_sequence = body.get("morse_sequence")
    if morse_sequence is None or morse_sequence == "":
        raise TelegraphError(400, "INVALID TRANSMISSION STOP MORSE SEQUENCE REQUIRED STOP")
    if not isinstance(morse_sequence, str):
        raise TelegraphError(400, "INVALID TRANSMISSION STOP MORSE SEQUENCE MUST BE TEXT STOP")
    if len(morse_sequence) > config.MAX_MORSE_LENGTH:
        raise TelegraphError(
            400, f"TRANSMISSION TOO LONG STOP MAX {config.MAX_MORSE_LENGTH} CHARACTERS STOP"
        )
    return morse_sequence


@app.get("/health", response_model=HealthStatus)
async def health_check():
    """Health check endpoint"""
    return HealthStatus(status="ok")


@app.post("/api/send-telegram", response_model=TelegramReply, dependencies=[Depends(rate_limit)])
async def send_telegram(request: Request):
    """Decode an incoming transmission and return the operator's reply"""
    try:
        try:
            body = await request.json()
        except ValueError:
            body = None

        morse_sequence = validate_morse_sequence(body)
        decoded_text = morse_to_text(morse_sequence)

        if ERROR_MARKER in decoded_text:
            raise TelegraphError(
                400,
                "INVALID MORSE SEQUENCE STOP CONTAINS UNKNOWN PATTERNS STOP",
                partial_decode=decoded_text,
            )

        try:
            reply_text = await invoke_operator(decoded_text)
        except Exception:
            logger.exception("Operator invocation failed")
            reply_text = OPERATOR_UNAVAILABLE

        reply_morse = text_to_morse(reply_text)
        return TelegramReply(
            decoded_text=decoded_text,
            reply_text=reply_text,
            reply_morse=reply_morse,
            timing_array=morse_to_timing(reply_morse),
        )
    except TelegraphError:
        raise
    except Exception:
        logger.exception("Error processing transmission")
        raise TelegraphError(500, "TELEGRAPH LINE FAILURE STOP TRY AGAIN STOP")


def main() -> None:
    """Run the telegraph line HTTP API"""
    import uvicorn

    config.configure_logging()
    logger.info("Telegraph server running on port %d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
