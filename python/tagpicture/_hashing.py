"""FNV-1a 32-bit hashing for picture payloads and identity keys."""

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193


def fnv1a_32(data):
    """Return the 32-bit FNV-1a hash of ``data`` as an unsigned int."""
    h = FNV32_OFFSET_BASIS
    for byte in bytes(data):
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return h
