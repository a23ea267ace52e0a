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

import pytest

from stretchy_hash._hashing import bits
from stretchy_hash._hashing import memory
from stretchy_hash._hashing import stretch
from stretchy_hash._hashing import stretchy
from tests import test_support


class TestConstruction:
    @pytest.mark.parametrize(("value", "size"), test_support.sha256_sizes)
    def test_digest_size(self, value, size):
        hasher = stretchy.StretchyHash(memory.SHA256, value)
        assert hasher.digest_size == size

    @pytest.mark.parametrize(
        ("engine", "base_size"),
        [(memory.SHA256, 32), (memory.BLAKE2, 64), (memory.BLAKE3, 32)],
    )
    @pytest.mark.parametrize("value", [1, 2, 3, 4])
    def test_digest_size_law(self, engine, base_size, value):
        hasher = stretchy.StretchyHash(engine, value)
        assert hasher.digest_size == base_size * 2 ** (2**value - value)

    def test_stretch_zero_fails(self):
        with pytest.raises(stretch.UnsupportedStretchError, match="min: 1"):
            stretchy.StretchyHash(memory.SHA256, 0)

    def test_stretch_five_fails(self):
        with pytest.raises(stretch.UnsupportedStretchError, match="max: 4"):
            stretchy.StretchyHash(memory.SHA256, 5)

    def test_invalid_stretch_builds_no_engine(self):
        built = []

        def factory():
            built.append(True)
            return memory.SHA256()

        with pytest.raises(stretch.UnsupportedStretchError):
            stretchy.StretchyHash(factory, 5)
        assert not built

    @pytest.mark.parametrize(
        ("engine", "block_size"),
        [(memory.SHA256, 64), (memory.BLAKE2, 128), (memory.BLAKE3, 64)],
    )
    @pytest.mark.parametrize("value", [1, 4])
    def test_block_size_is_not_stretched(self, engine, block_size, value):
        hasher = stretchy.StretchyHash(engine, value)
        assert hasher.block_size == block_size

    def test_digest_name_records_parameters(self):
        hasher = stretchy.StretchyHash(memory.BLAKE2, 3)
        assert hasher.digest_name == "stretchy-3-blake2b"
        assert hasher.stretch == 3


class TestCompute:
    @pytest.mark.parametrize(("value", "size"), test_support.sha256_sizes)
    def test_digest_has_announced_size(self, value, size):
        hasher = stretchy.StretchyHash(memory.SHA256, value)
        hasher.update(test_support.KNOWN_TEXT)
        digest = hasher.compute()
        assert digest.digest_size == size
        assert digest.algorithm == f"stretchy-{value}-sha256"

    @pytest.mark.parametrize("value", [1, 2, 3, 4])
    def test_digest_is_stretched_base_digest(self, value):
        hasher = stretchy.StretchyHash(memory.SHA256, value)
        hasher.update(test_support.KNOWN_TEXT)
        digest = hasher.compute()
        base = stretch.unstretch(digest.digest_value, value)
        assert base.hex() == test_support.KNOWN_SHA256_HEX

    @pytest.mark.parametrize("value", [1, 2, 3])
    def test_one_bit_set_per_chunk(self, value):
        hasher = stretchy.StretchyHash(memory.SHA256, value)
        hasher.update(test_support.KNOWN_TEXT)
        digest = hasher.compute()
        set_bits = sum(bits.bytes_to_bits(digest.digest_value))
        assert set_bits == 256 // stretch.chunk_width(value)

    def test_compute_twice_is_the_same(self):
        hasher = stretchy.StretchyHash(memory.SHA256, 2)
        hasher.update(test_support.KNOWN_TEXT)
        assert hasher.compute() == hasher.compute()

    def test_two_engines_agree(self):
        hasher1 = stretchy.StretchyHash(memory.BLAKE3, 2)
        hasher1.update(test_support.KNOWN_TEXT)

        hasher2 = stretchy.StretchyHash(memory.BLAKE3, 2)
        hasher2.update(test_support.KNOWN_TEXT)

        assert hasher1.compute() == hasher2.compute()

    def test_update_twice_is_the_same_as_update_with_concatenation(self):
        hasher1 = stretchy.StretchyHash(memory.SHA256, 1)
        hasher1.update(b"Test ")
        hasher1.update(b"string")

        hasher2 = stretchy.StretchyHash(memory.SHA256, 1)
        hasher2.update(b"Test string")

        assert hasher1.compute() == hasher2.compute()

    def test_different_data_gives_different_digests(self):
        hasher1 = stretchy.StretchyHash(memory.SHA256, 1)
        hasher1.update(test_support.KNOWN_TEXT)

        hasher2 = stretchy.StretchyHash(memory.SHA256, 1)
        hasher2.update(test_support.ANOTHER_TEXT)

        assert hasher1.compute() != hasher2.compute()

    def test_update_after_reset(self):
        hasher = stretchy.StretchyHash(memory.SHA256, 2)
        hasher.update(test_support.KNOWN_TEXT)
        digest1 = hasher.compute()
        hasher.reset()
        hasher.update(test_support.KNOWN_TEXT)
        digest2 = hasher.compute()

        assert digest1 == digest2
        assert hasher.stretch == 2

    def test_reset_clears_data(self):
        hasher = stretchy.StretchyHash(memory.SHA256, 1)
        hasher.update(test_support.KNOWN_TEXT)
        hasher.reset()

        assert hasher.compute() == stretchy.StretchyHash(
            memory.SHA256, 1
        ).compute()

    def test_sum_appends_to_prefix(self):
        hasher = stretchy.StretchyHash(memory.SHA256, 1)
        hasher.update(test_support.KNOWN_TEXT)
        digest = hasher.compute()

        assert hasher.sum() == digest.digest_value
        assert hasher.sum(b"prefix") == b"prefix" + digest.digest_value


class TestBaseEngineErrors:
    def test_update_error_is_propagated(self):
        hasher = stretchy.StretchyHash(test_support.BrokenEngine, 1)
        with pytest.raises(OSError, match="cannot hash"):
            hasher.update(b"data")

    def test_reset_is_forwarded(self):
        base = test_support.BrokenEngine()
        hasher = stretchy.StretchyHash(lambda: base, 1)
        hasher.reset()
        assert base.reset_count == 1

    def test_small_digest(self):
        hasher = stretchy.StretchyHash(test_support.BrokenEngine, 1)
        assert hasher.digest_size == 8
        assert hasher.block_size == 16
        assert hasher.sum() == b"\x11" * 8


class TestNesting:
    def test_nested_sizes_multiply(self):
        hasher = stretchy.StretchyHash(
            lambda: stretchy.StretchyHash(memory.SHA256, 1), 2
        )
        assert hasher.digest_size == 256
        assert hasher.digest_name == "stretchy-2-stretchy-1-sha256"

    def test_nested_digest_unwraps(self):
        hasher = stretchy.StretchyHash(
            lambda: stretchy.StretchyHash(memory.SHA256, 1), 1
        )
        hasher.update(test_support.KNOWN_TEXT)
        digest = hasher.compute()
        assert digest.digest_size == hasher.digest_size

        inner = stretch.unstretch(digest.digest_value, 1)
        base = stretch.unstretch(inner, 1)
        assert base.hex() == test_support.KNOWN_SHA256_HEX
