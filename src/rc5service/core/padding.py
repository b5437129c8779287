__all__ = ["pad", "unpad"]


def pad(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` up to the next block boundary.

    Each padding byte holds the number of bytes appended. Data that is
    already aligned is returned unchanged rather than gaining a whole block.
    """
    count = block_size - len(data) % block_size
    if count == block_size:
        count = 0

    return bytes(data) + bytes([count]) * count


def unpad(data: bytes, block_size: int) -> bytes:
    """Strip padding written by :func:`pad`.

    A trailing byte outside ``[1, block_size]`` means there is nothing to
    strip, and the data is returned as is.
    """
    if not data:
        return bytes(data)

    count = data[-1]
    if count < 1 or count > block_size or count > len(data):
        return bytes(data)

    return bytes(data[:-count])
