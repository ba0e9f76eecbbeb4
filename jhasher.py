"""
Seeded jhash hasher and hasher factories.

A JHasher keeps one 32-bit state. Every update() hashes the new buffer with
the current state as initval, so feeding "ab" then "cd" is a chain of two
jhash calls and differs from hashing "abcd" in one go.
"""
import secrets
import struct

from jhash import MASK32, jhash


def chain(items, initval=0):
    """Fold jhash over items, each digest seeding the next call"""
    h = initval & MASK32
    for item in items:
        h = jhash(item, h)
    return h


class JHasher:
    def __init__(self, seed=0):
        self.state = seed & MASK32

    def update(self, data):
        self.state = jhash(data, self.state)
        return self

    def intdigest(self):
        return self.state

    def digest(self):
        return struct.pack("<I", self.state)

    def hexdigest(self):
        return f"{self.state:08x}"

    def copy(self):
        return JHasher(self.state)

    def __repr__(self):
        return f"JHasher(state=0x{self.state:08x})"


class JHashState:
    """Builds hashers that all start from the same fixed seed"""

    def __init__(self, seed=0):
        self.seed = seed & MASK32

    def build_hasher(self):
        return JHasher(self.seed)

    def hash_one(self, data):
        return self.build_hasher().update(data).intdigest()


class RandomJHashState(JHashState):
    """Like JHashState, but the seed is drawn once from the OS random source"""

    def __init__(self):
        super().__init__(secrets.randbits(32))
