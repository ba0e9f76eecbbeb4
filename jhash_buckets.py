"""
Batch hashing and bucket placement on top of jhash, using numpy arrays.

Tables are sized in powers of two and indexed with hash & mask.
"""
import numpy as np

from jhash import jhash, jhash_mask, jhash_size

# Seeds for multi-hash tables (one table per seed)
MAP_SEEDS = [17, 53, 97, 193, 389]
DEFAULT_BITS = 10


def jhash_many(keys, initval=0):
    """Hash every key with the same initval, returns a uint32 array"""
    return np.fromiter((jhash(key, initval) for key in keys), dtype=np.uint32)


def bucket_index(key, bits=DEFAULT_BITS, initval=0):
    return jhash(key, initval) & jhash_mask(bits)


def bucket_counts(keys, bits=DEFAULT_BITS, initval=0):
    """
    Count how many keys land in each bucket of a 2**bits table.

    Returns an int64 array of length jhash_size(bits).
    """
    size = jhash_size(bits)
    hashes = jhash_many(keys, initval)
    idx = (hashes & np.uint32(jhash_mask(bits))).astype(np.int64)
    return np.bincount(idx, minlength=size)


def multi_seed_buckets(key, seeds=MAP_SEEDS, bits=DEFAULT_BITS):
    """Bucket index of key in each seed's table, in seed order"""
    mask = jhash_mask(bits)
    return np.array([jhash(key, seed) & mask for seed in seeds], dtype=np.uint32)


def _popcount32(values):
    bits = np.unpackbits(values.astype("<u4").view(np.uint8))
    return bits.reshape(-1, 32).sum(axis=1)


def avalanche(key_len, trials=100, initval=0, rng=None):
    """
    Mean number of output bits flipped by a single input bit flip.

    For each of `trials` random keys of key_len bytes, every input bit is
    flipped once and the changed output bits are counted. A well mixed 32-bit
    hash sits close to 16.
    """
    if key_len < 1:
        raise ValueError("key_len must be at least 1")
    if rng is None:
        rng = np.random.default_rng()

    flips = []
    for _ in range(trials):
        key = rng.integers(0, 256, size=key_len, dtype=np.uint8)
        base = jhash(key.tobytes(), initval)
        flipped = np.empty(key_len * 8, dtype=np.uint32)
        for bit in range(key_len * 8):
            mutated = key.copy()
            mutated[bit // 8] ^= np.uint8(1 << (bit % 8))
            flipped[bit] = jhash(mutated.tobytes(), initval) ^ base
        flips.append(_popcount32(flipped))

    return float(np.concatenate(flips).mean())
