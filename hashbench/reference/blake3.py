"""Pure Python BLAKE3.

This is the harness's baseline implementation. It trades speed for having no
dependencies beyond the standard library, which makes it the digest every
other implementation is verified against.

Usage:
    from hashbench.reference.blake3 import Hasher, digest

    digest(b"hello world").hex()
    Hasher().update(b"hello ").update(b"world").finalize()
"""

from __future__ import annotations

import struct

OUT_LEN = 32
BLOCK_LEN = 64
CHUNK_LEN = 1024

# Domain flags
CHUNK_START = 1 << 0
CHUNK_END = 1 << 1
PARENT = 1 << 2
ROOT = 1 << 3

IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

MSG_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)

_MASK = 0xFFFFFFFF
_NUM_ROUNDS = 7

# (a, b, c, d) state indices for the column step then the diagonal step
_QUARTER_ROUNDS = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)

_BLOCK_STRUCT = struct.Struct("<16I")


def _build_rounds() -> tuple[tuple[tuple[int, int, int, int, int, int], ...], ...]:
    """Fold the message permutation into per-round word indices."""
    schedule = list(range(16))
    rounds = []
    for _ in range(_NUM_ROUNDS):
        rounds.append(
            tuple(
                (a, b, c, d, schedule[2 * i], schedule[2 * i + 1])
                for i, (a, b, c, d) in enumerate(_QUARTER_ROUNDS)
            )
        )
        schedule = [schedule[MSG_PERMUTATION[i]] for i in range(16)]
    return tuple(rounds)


_ROUNDS = _build_rounds()


def compress(
    chaining_value: list[int] | tuple[int, ...],
    block_words: list[int] | tuple[int, ...],
    counter: int,
    block_len: int,
    flags: int,
) -> list[int]:
    """Run the BLAKE3 compression function and return all 16 state words."""
    s = [
        *chaining_value[:8],
        IV[0],
        IV[1],
        IV[2],
        IV[3],
        counter & _MASK,
        (counter >> 32) & _MASK,
        block_len,
        flags,
    ]
    m = block_words
    for quarter_rounds in _ROUNDS:
        for a, b, c, d, x, y in quarter_rounds:
            va = (s[a] + s[b] + m[x]) & _MASK
            vd = s[d] ^ va
            vd = ((vd >> 16) | (vd << 16)) & _MASK
            vc = (s[c] + vd) & _MASK
            vb = s[b] ^ vc
            vb = ((vb >> 12) | (vb << 20)) & _MASK
            va = (va + vb + m[y]) & _MASK
            vd ^= va
            vd = ((vd >> 8) | (vd << 24)) & _MASK
            vc = (vc + vd) & _MASK
            vb ^= vc
            vb = ((vb >> 7) | (vb << 25)) & _MASK
            s[a] = va
            s[b] = vb
            s[c] = vc
            s[d] = vd
    for i in range(8):
        s[i] ^= s[i + 8]
        s[i + 8] ^= chaining_value[i]
    return s


class _Output:
    """State needed to produce either a chaining value or root output bytes."""

    def __init__(
        self,
        input_chaining_value: list[int] | tuple[int, ...],
        block_words: list[int] | tuple[int, ...],
        counter: int,
        block_len: int,
        flags: int,
    ) -> None:
        self.input_chaining_value = input_chaining_value
        self.block_words = block_words
        self.counter = counter
        self.block_len = block_len
        self.flags = flags

    def chaining_value(self) -> list[int]:
        return compress(
            self.input_chaining_value,
            self.block_words,
            self.counter,
            self.block_len,
            self.flags,
        )[:8]

    def root_output_bytes(self, length: int) -> bytes:
        out = bytearray()
        output_block_counter = 0
        while len(out) < length:
            words = compress(
                self.input_chaining_value,
                self.block_words,
                output_block_counter,
                self.block_len,
                self.flags | ROOT,
            )
            out += _BLOCK_STRUCT.pack(*words)
            output_block_counter += 1
        return bytes(out[:length])


class _ChunkState:
    """Accumulates up to CHUNK_LEN bytes of one leaf chunk."""

    def __init__(
        self, key_words: tuple[int, ...], chunk_counter: int, flags: int
    ) -> None:
        self.chaining_value: list[int] | tuple[int, ...] = key_words
        self.chunk_counter = chunk_counter
        self.block = bytearray(BLOCK_LEN)
        self.block_len = 0
        self.blocks_compressed = 0
        self.flags = flags

    def __len__(self) -> int:
        return BLOCK_LEN * self.blocks_compressed + self.block_len

    def _start_flag(self) -> int:
        return CHUNK_START if self.blocks_compressed == 0 else 0

    def update(self, data: memoryview) -> None:
        while data:
            # The last block of a chunk is only compressed by output()
            if self.block_len == BLOCK_LEN:
                self.chaining_value = compress(
                    self.chaining_value,
                    _BLOCK_STRUCT.unpack(self.block),
                    self.chunk_counter,
                    BLOCK_LEN,
                    self.flags | self._start_flag(),
                )[:8]
                self.blocks_compressed += 1
                self.block = bytearray(BLOCK_LEN)
                self.block_len = 0

            take = min(BLOCK_LEN - self.block_len, len(data))
            self.block[self.block_len : self.block_len + take] = data[:take]
            self.block_len += take
            data = data[take:]

    def output(self) -> _Output:
        return _Output(
            self.chaining_value,
            _BLOCK_STRUCT.unpack(self.block),
            self.chunk_counter,
            self.block_len,
            self.flags | self._start_flag() | CHUNK_END,
        )


def _parent_output(
    left_child_cv: list[int],
    right_child_cv: list[int],
    key_words: tuple[int, ...],
    flags: int,
) -> _Output:
    return _Output(key_words, left_child_cv + right_child_cv, 0, BLOCK_LEN, PARENT | flags)


class Hasher:
    """Incremental BLAKE3 hasher.

    update() returns the hasher so calls can be chained; finalize() does not
    consume the state, so more input may follow.
    """

    def __init__(self, data: bytes | str | None = None) -> None:
        self._key_words = IV
        self._flags = 0
        self._chunk_state = _ChunkState(self._key_words, 0, self._flags)
        self._cv_stack: list[list[int]] = []
        if data is not None:
            self.update(data)

    def _push_chunk_chaining_value(self, new_cv: list[int], total_chunks: int) -> None:
        # Merge completed subtrees: one merge per trailing zero bit of the count
        while total_chunks & 1 == 0:
            new_cv = _parent_output(
                self._cv_stack.pop(), new_cv, self._key_words, self._flags
            ).chaining_value()
            total_chunks >>= 1
        self._cv_stack.append(new_cv)

    def update(self, data: bytes | bytearray | memoryview | str) -> Hasher:
        """Absorb more input. Text is encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        view = memoryview(data).cast("B")
        while view:
            if len(self._chunk_state) == CHUNK_LEN:
                chunk_cv = self._chunk_state.output().chaining_value()
                total_chunks = self._chunk_state.chunk_counter + 1
                self._push_chunk_chaining_value(chunk_cv, total_chunks)
                self._chunk_state = _ChunkState(self._key_words, total_chunks, self._flags)

            take = min(CHUNK_LEN - len(self._chunk_state), len(view))
            self._chunk_state.update(view[:take])
            view = view[take:]
        return self

    def finalize(self, length: int = OUT_LEN) -> bytes:
        """Return the digest of everything absorbed so far."""
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}")
        output = self._chunk_state.output()
        for parent_cv in reversed(self._cv_stack):
            output = _parent_output(
                parent_cv, output.chaining_value(), self._key_words, self._flags
            )
        return output.root_output_bytes(length)

    def hexdigest(self, length: int = OUT_LEN) -> str:
        """Lowercase hex of finalize()."""
        return self.finalize(length).hex()


def digest(data: bytes | bytearray | memoryview | str, length: int = OUT_LEN) -> bytes:
    """One-shot BLAKE3 digest."""
    return Hasher(data).finalize(length)
