"""Deflate compression stage."""

import logging
import zlib

from fieldseal.crypto.errors import CompressionError, DecompressionError

logger = logging.getLogger(__name__)


def compress(data: bytes) -> bytes:
    """
    Compress data into a zlib stream (deflate with header and adler32 trailer).

    Raises:
        CompressionError: If the compressor fails
    """
    try:
        return zlib.compress(data)
    except (zlib.error, TypeError) as e:
        raise CompressionError(f"zlib compression failed: {e}") from e


def decompress(data: bytes, tolerate_truncation: bool = True) -> bytes:
    """
    Inflate a zlib stream until it reports end-of-stream.

    A stream can stop short of its end-of-stream marker even though every
    output byte was already produced: the legacy padding trim in the cipher
    stage strips trailing whitespace, and the adler32 trailer may end in a
    whitespace byte. With tolerate_truncation the bytes produced so far are
    returned.

    Args:
        data: zlib stream
        tolerate_truncation: Accept a stream that ends before end-of-stream

    Returns:
        Inflated bytes, never empty

    Raises:
        DecompressionError: On a corrupt stream, a truncated stream when not
            tolerated, or an empty result
    """
    inflater = zlib.decompressobj()
    try:
        output = inflater.decompress(data)
        output += inflater.flush()
    except zlib.error as e:
        raise DecompressionError(f"error decompressing zlib data: {e}") from e

    if not inflater.eof:
        # HACK: trailer bytes lost to the padding trim in the cipher stage
        if not tolerate_truncation:
            raise DecompressionError("zlib stream ended before end-of-stream marker")
        logger.debug(f"zlib returned unexpected end of stream, keeping {len(output)} bytes")

    if not output:
        raise DecompressionError("decompressed value is empty")

    return output
