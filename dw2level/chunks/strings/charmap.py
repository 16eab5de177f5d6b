"""Game text encoding.

Each character is a single byte, except that the lead byte ``0xF0``
introduces a two-byte word code (``0xF0nn``) standing for a whole word.
``0xFF`` terminates a string.
"""
import re
import string
from typing import Dict, List, Sequence

TERMINATOR = 0xFF
WORD_PREFIX = 0xF0

# 0x00-0x3D: digits, upper case, lower case
_ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase

CHARACTER_MAP: Dict[int, str] = {code: char for code, char in enumerate(_ALPHANUMERIC)}

CHARACTER_MAP.update({
    0x41: '<SQUARE>',
    0x44: '?',
    0x45: '!',
    0x46: '/',
    0x49: '-',
    0x54: ',',
    0x55: '.',
    0x56: '',
    0x5B: '+',  # named PLUS SIGN in the game's glyph table
    0xFB: '<X>',
    0xFC: '<NEW BOX>',
    0xFD: ' ',
    0xFE: '<ENTER>',
})

WORD_MAP: Dict[int, str] = {
    0xF000: 'Akira',
    0xF006: 'Digimon',
    0xF007: 'you',
    0xF008: 'the',
    0xF009: 'Digi-Beetle',
    0xF00A: 'Domain',
    0xF00B: 'Guard',
    0xF00C: 'Tamer',
    0xF00D: 'here',
    0xF00E: 'have',
    0xF00F: 'Knights',
    0xF010: 'and',
    0xF011: 'thing',
    0xF012: 'Security',
    0xF013: 'that',
    0xF014: 'Bertran',
    0xF015: 'Tournament',
    0xF016: 'Crimson',
    0xF018: 'something',
    0xF019: 'Item',
    0xF01A: 'Falcon',
    0xF01B: 'for',
    0xF01C: "That's",
    0xF01D: 'Commander',
    0xF01E: 'Blood',
    0xF01F: 'Leader',
    0xF020: 'Attendant',
    0xF021: 'Cecilia',
    0xF022: 'all',
    0xF023: 'mission',
    0xF024: 'this',
    0xF026: 'Archive',
    0xF027: 'Black',
    0xF028: "I'll",
    0xF029: 'are',
    0xF02A: 'Sword',
    0xF02B: 'right',
    0xF02C: 'Digivolve',
    0xF02D: 'enter',
    0xF02E: 'What',
    0xF02F: 'will',
    0xF030: 'come',
    0xF031: 'You',
    0xF032: 'Coliseum',
    0xF033: 'about',
    0xF034: "don't",
    0xF035: 'anything',
    0xF037: 'Parts',
    0xF038: 'where',
    0xF039: 'The',
    0xF03A: 'know',
    0xF03B: 'Leomon',
    0xF03C: 'want',
    0xF03D: 'Oldman',
    0xF03E: 'like',
    0xF03F: 'need',
    0xF040: 'Chief',
    0xF041: 'with',
    0xF042: 'Thank',
    0xF044: 'Island',
    0xF045: 'can',
    0xF046: 'really',
    0xF047: 'Blue',
    0xF048: 'time',
}

GLYPHS: Dict[int, str] = {**CHARACTER_MAP, **WORD_MAP}

# Text -> code for encoding. Word codes are never produced and the
# empty glyph 0x56 cannot be written from text.
_SINGLE_CODES: Dict[str, int] = {
    glyph: code for code, glyph in CHARACTER_MAP.items() if glyph
}
_TOKEN_RE = re.compile(r'<[A-Z ]+>|.', re.DOTALL)


def is_known(code: int) -> bool:
    return code in GLYPHS


def code_width(code: int) -> int:
    """Number of bytes a code occupies on disk."""
    return 2 if code > 0xFF else 1


def render(codes: Sequence[int]) -> str:
    """Render a code sequence as text."""
    return ''.join(GLYPHS[code] for code in codes)


def encode_text(text: str) -> List[int]:
    """Convert text to single-byte codes.

    Bracketed control tokens such as ``<ENTER>`` map to their code.

    Raises:
        ValueError: If the text contains a character with no code
    """
    codes = []
    for match in _TOKEN_RE.finditer(text):
        token = match.group(0)
        code = _SINGLE_CODES.get(token)
        if code is None:
            raise ValueError(
                f"Character {token!r} at position {match.start()} has no game text code"
            )
        codes.append(code)
    return codes
