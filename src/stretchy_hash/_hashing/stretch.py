# Copyright 2026 The Stretchy Hash Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The stretch transform.

Stretching with a factor `s` splits the bits of the input into chunks of
`w = 2**s` bits. Every chunk is read as a little endian integer `v` and is
replaced by a block of `2**w` bits where only bit `v` is set. The output is
thus `2**(2**s - s)` times larger than the input, and heavily biased towards
zero bits.

Example usage:
```python
>>> stretch(b"\\x1b", 1).hex()
'4812'
>>> unstretch(bytes.fromhex("4812"), 1).hex()
'1b'
>>> stretched_size(32, 3)
1024
```

The transform is injective, so `unstretch` recovers the input. It does NOT
preserve the collision resistance properties of the hash it is applied to.
"""

from stretchy_hash._hashing import bits as bits_lib


MIN_STRETCH = 1
MAX_STRETCH = 4


class UnsupportedStretchError(ValueError):
    """Raised when a stretch factor is outside the supported range."""

    def __init__(self, stretch: int, bound: str, limit: int) -> None:
        super().__init__(
            f"unsupported stretch factor: {stretch} ({bound}: {limit})"
        )
        self.stretch = stretch
        self.bound = bound
        self.limit = limit


def check_stretch(stretch: int) -> None:
    """Validates a stretch factor.

    Raises:
        UnsupportedStretchError: `stretch` is below `MIN_STRETCH` or above
          `MAX_STRETCH`.
    """
    if stretch < MIN_STRETCH:
        raise UnsupportedStretchError(stretch, "min", MIN_STRETCH)
    if stretch > MAX_STRETCH:
        raise UnsupportedStretchError(stretch, "max", MAX_STRETCH)


def chunk_width(stretch: int) -> int:
    """The number of input bits encoded by one one-hot block."""
    return 1 << stretch


def expansion_factor(stretch: int) -> int:
    """How many times larger the output is, compared to the input."""
    return 1 << (chunk_width(stretch) - stretch)


def stretched_size(size: int, stretch: int) -> int:
    """The size of the result of stretching `size` bytes."""
    return size * expansion_factor(stretch)


def stretch(data: bytes, stretch: int) -> bytes:
    """Stretches `data` into a sequence of one-hot blocks.

    Args:
        data: The bytes to stretch, usually a digest.
        stretch: The stretch factor. Callers validate it with `check_stretch`.

    Returns:
        The stretched bytes, `stretched_size(len(data), stretch)` of them.

    Raises:
        ValueError: The number of input bits is not a multiple of the chunk
          width.
    """
    width = chunk_width(stretch)
    block = 1 << width
    bits = bits_lib.bytes_to_bits(data)
    if len(bits) % width:
        raise ValueError(
            f"Cannot stretch {len(bits)} bits in chunks of {width} bits"
        )

    result = [False] * (len(bits) // width * block)
    for k in range(len(bits) // width):
        chunk = bits[k * width : (k + 1) * width]
        value = sum(1 << j for j, bit in enumerate(chunk) if bit)
        result[k * block + value] = True

    return bits_lib.bits_to_bytes(result)


def unstretch(data: bytes, stretch: int) -> bytes:
    """Recovers the input of `stretch` from its output.

    Args:
        data: The stretched bytes.
        stretch: The stretch factor used to produce `data`.

    Returns:
        The original bytes.

    Raises:
        ValueError: `data` is not made of one-hot blocks.
    """
    width = chunk_width(stretch)
    block = 1 << width
    bits = bits_lib.bytes_to_bits(data)
    if len(bits) % block:
        raise ValueError(
            f"Cannot split {len(bits)} bits in blocks of {block} bits"
        )

    result = []
    for k in range(len(bits) // block):
        positions = [
            j for j, bit in enumerate(bits[k * block : (k + 1) * block]) if bit
        ]
        if len(positions) != 1:
            raise ValueError(
                f"Block {k} has {len(positions)} bits set, expected exactly 1"
            )
        value = positions[0]
        result.extend(bool((value >> j) & 1) for j in range(width))

    return bits_lib.bits_to_bytes(result)
