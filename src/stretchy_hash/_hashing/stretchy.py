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

"""Hash engines with stretched digests.

A `StretchyHash` wraps another streaming engine. Data is passed to the wrapped
engine as is, and only the final digest is stretched, every time `compute()`
is called.

Example usage:
```python
>>> hasher = StretchyHash(memory.SHA256, 2)
>>> hasher.digest_size
128
>>> hasher.update(b"abcd")
>>> digest = hasher.compute()
>>> digest.algorithm
'stretchy-2-sha256'
>>> len(digest.digest_value)
128
```

Instances are not thread safe. Use one instance per thread.
"""

from collections.abc import Callable
import logging

from typing_extensions import override

from stretchy_hash._hashing import hashing
from stretchy_hash._hashing import stretch as stretch_lib


logger = logging.getLogger(__name__)


class StretchyHash(hashing.StreamingHashEngine):
    """A streaming engine whose digest is a stretched base digest."""

    def __init__(
        self,
        hasher_factory: Callable[[], hashing.StreamingHashEngine],
        stretch: int,
    ):
        """Initializes an instance of a stretched hash engine.

        Args:
            hasher_factory: A callable to build the wrapped engine. The engine
              it returns is owned by this instance and must not be shared.
            stretch: The stretch factor, between `MIN_STRETCH` and
              `MAX_STRETCH`, inclusive.

        Raises:
            UnsupportedStretchError: `stretch` is outside of the valid range.
        """
        stretch_lib.check_stretch(stretch)
        self._stretch = stretch
        self._hasher = hasher_factory()
        logger.debug(
            "Built %s, digest size %d bytes",
            self.digest_name,
            self.digest_size,
        )

    @property
    def stretch(self) -> int:
        """The stretch factor of this engine."""
        return self._stretch

    @override
    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    @override
    def reset(self, data: bytes = b"") -> None:
        self._hasher.reset(data)

    @override
    def compute(self) -> hashing.Digest:
        digest = self._hasher.compute()
        return hashing.Digest(
            self.digest_name,
            stretch_lib.stretch(digest.digest_value, self._stretch),
        )

    @property
    @override
    def digest_name(self) -> str:
        return f"stretchy-{self._stretch}-{self._hasher.digest_name}"

    @property
    @override
    def digest_size(self) -> int:
        return stretch_lib.stretched_size(
            self._hasher.digest_size, self._stretch
        )

    @property
    @override
    def block_size(self) -> int:
        return self._hasher.block_size
