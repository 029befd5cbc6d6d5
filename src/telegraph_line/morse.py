"""ITU Morse Code engine: text/Morse transcoding and playback timing"""

from types import MappingProxyType

# Stand-in for any Morse token with no ITU mapping
ERROR_MARKER = '�'

WORD_SEPARATOR = '/'

# Timing in milliseconds, all multiples of one unit
UNIT_MS = 100
DOT_MS = UNIT_MS
DASH_MS = 3 * UNIT_MS
ELEMENT_GAP_MS = UNIT_MS
CHAR_GAP_MS = 3 * UNIT_MS
WORD_GAP_MS = 7 * UNIT_MS

SYMBOL_DURATIONS = {'.': DOT_MS, '-': DASH_MS}

MORSE_CODE = MappingProxyType({
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..', '1': '.----', '2': '..---', '3': '...--',
    '4': '....-', '5': '.....', '6': '-....', '7': '--...', '8': '---..',
    '9': '----.', '0': '-----', ' ': WORD_SEPARATOR, '.': '.-.-.-',
    ',': '--..--', '?': '..--..', "'": '.----.', '!': '-.-.--', '/': '-..-.',
    '(': '-.--.', ')': '-.--.-', '&': '.-...', ':': '---...', ';': '-.-.-.',
    '=': '-...-', '+': '.-.-.', '-': '-....-', '_': '..--.-', '"': '.-..-.',
    '$': '...-..-', '@': '.--.-.'
})

# Reverse mapping for decoding
REVERSE_MORSE_CODE = MappingProxyType({v: k for k, v in MORSE_CODE.items()})


def text_to_morse(text) -> str:
    """Convert text to Morse code

    Characters outside the ITU table are dropped without a placeholder.
    Anything that is not a string encodes to an empty string.
    """
    if not isinstance(text, str):
        return ''

    return ' '.join(MORSE_CODE[char] for char in text.upper() if char in MORSE_CODE)


def morse_to_text(morse) -> str:
    """Convert Morse code to uppercase text

    Each token with no ITU mapping becomes ERROR_MARKER; decoding carries on
    with the remaining tokens.
    """
    if not isinstance(morse, str) or not morse.strip():
        return ''

    decoded_chars = []
    for token in morse.split(' '):
        if token == '':
            continue  # Skip empty strings from multiple spaces
        decoded_chars.append(REVERSE_MORSE_CODE.get(token, ERROR_MARKER))

    return ''.join(decoded_chars)


def invalid_tokens(morse) -> list[str]:
    """Return the tokens of a Morse string that cannot be decoded, in order"""
    if not isinstance(morse, str):
        return []
    return [token for token in morse.split(' ') if token and token not in REVERSE_MORSE_CODE]


def is_valid_morse(morse) -> bool:
    """Check whether every token of a non-blank Morse string decodes"""
    if not isinstance(morse, str) or not morse.strip():
        return False
    return not invalid_tokens(morse)


def morse_to_timing(morse) -> list[int]:
    """Convert Morse code to a playback timing sequence in milliseconds

    Durations follow ITU spacing: dot 1 unit, dash 3, element gap 1,
    character gap 3, word gap 7. A word separator emits a zero-length
    "off" entry before the word gap so tone/silence positions keep
    alternating. No gap is emitted at either end of the sequence.
    Symbols other than '.' and '-' contribute no duration.
    """
    if not isinstance(morse, str) or not morse.strip():
        return []

    timing = []
    tokens = morse.split(' ')
    last = len(tokens) - 1

    for i, token in enumerate(tokens):
        if token == '':
            continue

        if token == WORD_SEPARATOR:
            if i < last:
                timing.extend((0, WORD_GAP_MS))
            continue

        for j, symbol in enumerate(token):
            if symbol in SYMBOL_DURATIONS:
                timing.append(SYMBOL_DURATIONS[symbol])
            if j < len(token) - 1:
                timing.append(ELEMENT_GAP_MS)

        if i < last and tokens[i + 1] not in (WORD_SEPARATOR, ''):
            timing.append(CHAR_GAP_MS)

    return timing


def total_duration_ms(timing) -> int:
    """Total playback time of a timing sequence"""
    return sum(timing)
