"""Base64 codec for binary payloads embedded in VTK XML documents.

Each call encodes the full byte range as one unit. Splitting one logical block over two
calls changes how bytes are grouped into 4-character blocks and produces padding in the
middle of the stream, so callers must concatenate header and payload first.
"""

import base64


def base64_encode(data: bytes | bytearray | memoryview) -> bytes:
    """Encode a byte range with the standard base64 alphabet and ``=`` padding.

    Args:
        data: Bytes to encode.

    Returns:
        bytes: ASCII text, 4 characters per started group of 3 input bytes.
    """
    return base64.b64encode(bytes(data))


def encoded_number_of_bytes(number_of_bytes: int) -> int:
    """Number of characters ``base64_encode`` produces for ``number_of_bytes`` input bytes."""

    if number_of_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {number_of_bytes}")
    return 4 * ((number_of_bytes + 2) // 3)
