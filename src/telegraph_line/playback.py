"""Tone playback for Morse timing sequences

A timing sequence alternates tone and silence by position, starting with
a tone. Zero-length entries are skipped but still flip the alternation.
"""

import math
import wave
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from telegraph_line.morse import morse_to_timing, text_to_morse

TONE_FREQUENCY_HZ = 600.0
SAMPLE_RATE = 48000
VOLUME = 0.3

# Soft edges so tones don't click
ATTACK_MS = 3.0
RELEASE_MS = 6.0


@dataclass(frozen=True)
class Segment:
    tone: bool
    duration_ms: int
    frequency: float = TONE_FREQUENCY_HZ


def schedule(timing: Sequence[int], frequency: float = TONE_FREQUENCY_HZ) -> List[Segment]:
    """Map a timing sequence onto tone/silence segments"""
    segments = []
    is_tone = True
    for duration in timing:
        if duration > 0:
            segments.append(Segment(tone=is_tone, duration_ms=duration, frequency=frequency))
        is_tone = not is_tone
    return segments


def _envelope(n: int, sample_rate: int) -> np.ndarray:
    env = np.ones(n, dtype=np.float32)
    attack = min(n, int(sample_rate * ATTACK_MS / 1000))
    release = min(n - attack, int(sample_rate * RELEASE_MS / 1000))
    if attack:
        env[:attack] = np.linspace(0.0, 1.0, attack, endpoint=False)
    if release:
        env[n - release:] = np.linspace(1.0, 0.0, release)
    return env


def render(segments: Sequence[Segment], sample_rate: int = SAMPLE_RATE, volume: float = VOLUME) -> np.ndarray:
    """Render segments to mono float32 samples"""
    chunks = []
    for segment in segments:
        n = int(round(sample_rate * segment.duration_ms / 1000))
        if not segment.tone:
            chunks.append(np.zeros(n, dtype=np.float32))
            continue
        t = np.arange(n, dtype=np.float32) / sample_rate
        tone = np.sin(2.0 * math.pi * segment.frequency * t).astype(np.float32)
        chunks.append(volume * tone * _envelope(n, sample_rate))

    if not chunks:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(chunks).astype(np.float32)


def write_wav(path, samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> None:
    """Write float samples in [-1, 1] as 16-bit PCM"""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype('<i2')
    with wave.open(str(path), 'wb') as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(pcm.tobytes())


def main(argv=None) -> None:
    """Render a message as a Morse WAV file"""
    import argparse

    parser = argparse.ArgumentParser(description="Render text as Morse code audio")
    parser.add_argument("text", help="Message to send")
    parser.add_argument("output", help="Output WAV file")
    parser.add_argument("--tone-hz", type=float, default=TONE_FREQUENCY_HZ)
    parser.add_argument("--sample-rate", type=int, default=SAMPLE_RATE)
    parser.add_argument("--volume", type=float, default=VOLUME)
    args = parser.parse_args(argv)

    morse = text_to_morse(args.text)
    segments = schedule(morse_to_timing(morse), frequency=args.tone_hz)
    samples = render(segments, sample_rate=args.sample_rate, volume=args.volume)
    write_wav(args.output, samples, sample_rate=args.sample_rate)
    print(f"{morse}  ->  {args.output} ({len(samples) / args.sample_rate:.2f}s)")


if __name__ == "__main__":
    main()
