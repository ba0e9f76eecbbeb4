"""
Jenkins hash (jhash) as used by the Linux kernel for hash table lookups.

Bob Jenkins' lookup3, May 2006, public domain; kernel variant by
Jozsef Kadlecsik. Not a cryptographic hash.

Python integers are unbounded, so every addition, subtraction and rotation
is masked back to 32 bits. Words are decoded explicitly as little-endian
with struct instead of reading native memory, which keeps digests identical
to the reference on any host byte order.
"""
import struct

JHASH_INITVAL = 0xdeadbeef
MASK32 = 0xFFFFFFFF

_WORDS = struct.Struct("<3I")


def jhash_size(n):
    """Bucket count of a power-of-two table with n index bits"""
    if not 0 <= n <= 32:
        raise ValueError(f"bit count must be between 0 and 32, got {n}")
    return 1 << n


def jhash_mask(n):
    """Mask the hash value, i.e. (value & jhash_mask(n)) instead of (value % n)"""
    return jhash_size(n) - 1


def rol32(x, r):
    return ((x << r) | (x >> (32 - r))) & MASK32


def jhash_mix(a, b, c):
    """Mix 3 32-bit values reversibly"""
    a = (a - c) & MASK32; a ^= rol32(c, 4);  c = (c + b) & MASK32
    b = (b - a) & MASK32; b ^= rol32(a, 6);  a = (a + c) & MASK32
    c = (c - b) & MASK32; c ^= rol32(b, 8);  b = (b + a) & MASK32
    a = (a - c) & MASK32; a ^= rol32(c, 16); c = (c + b) & MASK32
    b = (b - a) & MASK32; b ^= rol32(a, 19); a = (a + c) & MASK32
    c = (c - b) & MASK32; c ^= rol32(b, 4);  b = (b + a) & MASK32
    return a, b, c


def jhash_final(a, b, c):
    """Final mixing of 3 32-bit values (a, b, c) into c"""
    c ^= b; c = (c - rol32(b, 14)) & MASK32
    a ^= c; a = (a - rol32(c, 11)) & MASK32
    b ^= a; b = (b - rol32(a, 25)) & MASK32
    c ^= b; c = (c - rol32(b, 16)) & MASK32
    a ^= c; a = (a - rol32(c, 4)) & MASK32
    b ^= a; b = (b - rol32(a, 14)) & MASK32
    c ^= b; c = (c - rol32(b, 24)) & MASK32
    return a, b, c


def jhash(key, initval=0):
    """
    Hash an arbitrary sequence of bytes.

    key may be any bytes-like object (bytes, bytearray, memoryview, ...).
    initval is the previous hash or an arbitrary value; it is taken modulo
    2**32. Returns the 32-bit digest as an int.
    """
    k = memoryview(key).cast("B")
    length = len(k)

    # Set up the internal state
    a = b = c = (JHASH_INITVAL + length + initval) & MASK32

    # All but the last block: affect some 32 bits of (a, b, c)
    i = 0
    while length > 12:
        w0, w1, w2 = _WORDS.unpack_from(k, i)
        a = (a + w0) & MASK32
        b = (b + w1) & MASK32
        c = (c + w2) & MASK32
        a, b, c = jhash_mix(a, b, c)
        length -= 12
        i += 12

    # Last block: affect all 32 bits of (c). Each length includes every
    # shorter length's contribution.
    if length == 0:
        return c
    if length >= 12: c += k[i + 11] << 24
    if length >= 11: c += k[i + 10] << 16
    if length >= 10: c += k[i + 9] << 8
    if length >= 9:  c += k[i + 8]
    if length >= 8:  b += k[i + 7] << 24
    if length >= 7:  b += k[i + 6] << 16
    if length >= 6:  b += k[i + 5] << 8
    if length >= 5:  b += k[i + 4]
    if length >= 4:  a += k[i + 3] << 24
    if length >= 3:  a += k[i + 2] << 16
    if length >= 2:  a += k[i + 1] << 8
    a += k[i]

    a, b, c = jhash_final(a & MASK32, b & MASK32, c & MASK32)
    return c
