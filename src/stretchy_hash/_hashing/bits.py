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

"""Conversion between bytes and sequences of bits.

Bits are ordered least significant first within each byte: bit `8 * i + j` is
bit `j` of byte `i`.
"""

from collections.abc import Sequence


def bytes_to_bits(data: bytes) -> list[bool]:
    """Unpacks `data` into a list of `8 * len(data)` bits."""
    return [bool((byte >> j) & 1) for byte in data for j in range(8)]


def bits_to_bytes(bits: Sequence[bool]) -> bytes:
    """Packs a sequence of bits back into bytes.

    Args:
        bits: The bits to pack. The length must be a multiple of 8.

    Returns:
        The packed bytes, `len(bits) // 8` of them.

    Raises:
        ValueError: The number of bits is not a multiple of 8.
    """
    if len(bits) % 8:
        raise ValueError(
            f"Cannot pack {len(bits)} bits into bytes: not a multiple of 8"
        )

    result = bytearray(len(bits) // 8)
    for i, bit in enumerate(bits):
        if bit:
            result[i // 8] |= 1 << (i % 8)
    return bytes(result)
