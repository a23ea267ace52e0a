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

"""High level API for computing stretched digests.

The module can be used to just hash some data with the default configuration:

```python
stretchy_hash.hashing.hash(b"some data")
```

Or, a configuration can be set up once and then used to hash multiple inputs:

```python
hashing_config = (
    stretchy_hash.hashing.Config()
    .use_algorithm("blake2")
    .set_stretch(3)
)
digest = hashing_config.hash(b"some data")
other_digest = hashing_config.hash_file("model.bin")
```

Base algorithms are looked up in a registry owned by each configuration. Extra
algorithms can be added by passing a factory for a streaming hash engine:

```python
hashing_config = (
    stretchy_hash.hashing.Config()
    .register_algorithm("sha256-again", memory.SHA256)
    .use_algorithm("sha256-again")
)
```

The API defined here is stable and backwards compatible.
"""

from collections.abc import Callable
import logging
import os
import pathlib
import sys

from stretchy_hash._hashing import hashing
from stretchy_hash._hashing import memory
from stretchy_hash._hashing import stretch as stretch_lib
from stretchy_hash._hashing import stretchy


if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


# `TypeAlias` only exists from Python 3.10
# `TypeAlias` is deprecated in Python 3.12 in favor of `type`
from typing import TypeAlias


# Type alias to support `os.PathLike`, `str` and `bytes` objects in the API
# When Python 3.12 is the minimum supported version we can use `type`
# When Python 3.11 is the minimum supported version we can use `|`
PathLike: TypeAlias = str | bytes | os.PathLike

# Type alias for the callables building base engines
HasherFactory: TypeAlias = Callable[[], hashing.StreamingHashEngine]


logger = logging.getLogger(__name__)


Digest = hashing.Digest
UnsupportedStretchError = stretch_lib.UnsupportedStretchError


def hash(
    data: bytes, *, stretch: int = 1, hashing_algorithm: str = "sha256"
) -> hashing.Digest:
    """Computes the stretched digest of `data`.

    Args:
        data: The data to hash.
        stretch: The stretch factor, from 1 to 4.
        hashing_algorithm: The base hashing algorithm: "sha256", "blake2" or
          "blake3".

    Returns:
        The stretched digest.
    """
    return (
        Config()
        .use_algorithm(hashing_algorithm)
        .set_stretch(stretch)
        .hash(data)
    )


class Config:
    """Configuration to use when computing stretched digests.

    The configuration selects the base hashing algorithm and the stretch
    factor. By default, SHA256 is stretched with a factor of 1, doubling the
    digest size.

    The digest size grows as `2**(2**stretch - stretch)`, so for SHA256 the
    stretched digest is 64, 128, 1024 or 131072 bytes long, for a stretch
    factor of 1, 2, 3 and 4 respectively.

    When hashing files, data is read in chunks of a configurable size.
    """

    def __init__(self):
        """Initializes the default configuration for hashing."""
        self._algorithms: dict[str, HasherFactory] = {
            "sha256": memory.SHA256,
            "blake2": memory.BLAKE2,
            "blake3": memory.BLAKE3,
        }
        self._algorithm = "sha256"
        self._stretch = 1
        self._chunk_size = 1048576

    @property
    def algorithms(self) -> frozenset[str]:
        """The names of the algorithms that can be used."""
        return frozenset(self._algorithms)

    @property
    def digest_size(self) -> int:
        """The size, in bytes, of the digests produced by this configuration."""
        hasher = self._algorithms[self._algorithm]()
        return stretch_lib.stretched_size(hasher.digest_size, self._stretch)

    def register_algorithm(self, name: str, factory: HasherFactory) -> Self:
        """Makes a new base hashing algorithm available.

        Registering an existing name replaces the previous factory.

        Args:
            name: The name to use in `use_algorithm`.
            factory: A callable returning a fresh streaming hash engine on
              every call.

        Returns:
            The new hashing configuration with the extra algorithm.
        """
        self._algorithms[name] = factory
        return self

    def use_algorithm(self, name: str) -> Self:
        """Selects the base hashing algorithm.

        Args:
            name: The name of a registered algorithm.

        Returns:
            The new hashing configuration with the new base algorithm.

        Raises:
            ValueError: No algorithm is registered under `name`.
        """
        if name not in self._algorithms:
            raise ValueError(f"Unsupported hashing method {name}")
        self._algorithm = name
        return self

    def set_stretch(self, stretch: int) -> Self:
        """Sets the stretch factor.

        Args:
            stretch: The stretch factor, from 1 to 4.

        Returns:
            The new hashing configuration with the new stretch factor.

        Raises:
            UnsupportedStretchError: `stretch` is outside of the valid range.
        """
        stretch_lib.check_stretch(stretch)
        self._stretch = stretch
        return self

    def set_chunk_size(self, chunk_size: int) -> Self:
        """Sets the amount of data to read at once when hashing files.

        Args:
            chunk_size: The number of bytes to read at once. A special value of
              0 signals to attempt to read everything in a single call.

        Returns:
            The new hashing configuration with the new chunk size.

        Raises:
            ValueError: `chunk_size` is negative.
        """
        if chunk_size < 0:
            raise ValueError(
                f"Chunk size must be non-negative, got {chunk_size}."
            )
        self._chunk_size = chunk_size
        return self

    def build(self) -> stretchy.StretchyHash:
        """Builds a new, empty, stretched hash engine."""
        return stretchy.StretchyHash(
            self._algorithms[self._algorithm], self._stretch
        )

    def hash(self, data: bytes) -> hashing.Digest:
        """Computes the stretched digest of `data`."""
        hasher = self.build()
        hasher.update(data)
        return hasher.compute()

    def hash_file(self, path: PathLike) -> hashing.Digest:
        """Computes the stretched digest of the contents of a file.

        Args:
            path: The file to hash.

        Returns:
            The stretched digest of the file contents.
        """
        path = pathlib.Path(os.fsdecode(path))
        hasher = self.build()
        logger.debug("Hashing %s with %s", path, hasher.digest_name)
        with open(path, "rb") as f:
            if self._chunk_size == 0:
                hasher.update(f.read())
            else:
                while data := f.read(self._chunk_size):
                    hasher.update(data)
        return hasher.compute()
