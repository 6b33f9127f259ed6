"""
Hex codec utilities: convert raw digest bytes to hex text and parse user-supplied
hex digests back into bytes.
"""
import logging
from typing import Optional, Union
from models.algorithm import CaseMode

logger = logging.getLogger(__name__)

_HEX_ALPHABETS = {
    CaseMode.UPPERCASE: "0123456789ABCDEF",
    CaseMode.LOWERCASE: "0123456789abcdef",
}

# Nibble value for every accepted hex digit, both cases
_NIBBLES = {c: i for i, c in enumerate("0123456789abcdef")}
_NIBBLES.update({c: i for i, c in enumerate("0123456789ABCDEF")})


def byte_to_hex(data: Union[bytes, bytearray, memoryview], case_mode: CaseMode = CaseMode.UPPERCASE) -> str:
    """
    Render bytes as hex digits, high nibble first.

    Args:
        data: Bytes to render.
        case_mode (CaseMode): Selects the 0-9A-F or 0-9a-f alphabet.

    Returns:
        str: Exactly 2 * len(data) hex characters.
    """
    alphabet = _HEX_ALPHABETS[CaseMode(case_mode)]
    return "".join(alphabet[b >> 4] + alphabet[b & 0x0F] for b in bytes(data))


def hex_to_byte(text: str, byte_count: Optional[int] = None) -> Optional[bytes]:
    """
    Parse hex text into bytes, case-insensitively.

    Exactly 2 * byte_count characters are read from the start of ``text``;
    anything after them is not examined. When byte_count is None the whole text
    is parsed and must have an even length.

    Args:
        text (str): Hex digits, e.g. a reference digest typed by a user.
        byte_count (Optional[int]): Number of bytes to decode.

    Returns:
        Optional[bytes]: Decoded bytes, or None if the text is too short or any
        required character is not a hex digit.
    """
    if text is None:
        return None

    if byte_count is None:
        if len(text) % 2:
            logger.debug(f"Rejecting hex text with odd length {len(text)}")
            return None
        byte_count = len(text) // 2

    if byte_count < 0 or len(text) < byte_count * 2:
        logger.debug(f"Hex text too short: need {byte_count * 2} characters, got {len(text)}")
        return None

    result = bytearray(byte_count)
    for i in range(byte_count):
        high = _NIBBLES.get(text[2 * i])
        low = _NIBBLES.get(text[2 * i + 1])
        if high is None or low is None:
            logger.debug(f"Invalid hex digit near position {2 * i}")
            return None
        result[i] = (high << 4) | low
    return bytes(result)
