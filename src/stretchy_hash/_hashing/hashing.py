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

"""Machinery for computing digests of a stream of bytes.

We define an abstract `HashEngine` class which can be used in type annotations
and is at the root of the hashing classes hierarchy. Stretched engines wrap
other engines, so both sides of the wrapping share the same interface.

Since there are multiple hashing methods that we support, users should always
specify the algorithm and the digest value.
"""

import abc
import dataclasses
from typing import Protocol


@dataclasses.dataclass(frozen=True)
class Digest:
    """A digest computed by a `HashEngine`."""

    algorithm: str
    digest_value: bytes

    @property
    def digest_hex(self) -> str:
        """Hexadecimal, human readable, equivalent of `digest`."""
        return self.digest_value.hex()

    @property
    def digest_size(self) -> int:
        """The size, in bytes, of the digest."""
        return len(self.digest_value)


class HashEngine(metaclass=abc.ABCMeta):
    """Generic hash engine."""

    @abc.abstractmethod
    def compute(self) -> Digest:
        """Computes the digest of data passed to the engine.

        Computing the digest must not alter the data accumulated so far:
        calling `compute()` twice in a row returns the same digest.
        """

    @property
    @abc.abstractmethod
    def digest_name(self) -> str:
        """The canonical name of the algorithm used to compute the hash.

        Subclasses MUST use the `digest_name()` method to record all parameters
        that influence the hash output. For example, a stretched engine must
        record both the stretch factor and the name of the engine it wraps.

        This method may be called at any time during the lifetime of a
        `HashEngine` instance.
        """

    @property
    @abc.abstractmethod
    def digest_size(self) -> int:
        """The size, in bytes, of the digests produced by the engine.

        This must be known without hashing any data.
        """


class Streaming(Protocol):
    """A protocol to support streaming data to `HashEngine` objects."""

    @abc.abstractmethod
    def update(self, data: bytes) -> None:
        """Appends additional bytes to the data to be hashed.

        Errors raised while hashing are propagated to the caller unchanged.
        """

    @abc.abstractmethod
    def reset(self, data: bytes = b"") -> None:
        """Resets the data to be hashed to be the argument."""

    @property
    @abc.abstractmethod
    def block_size(self) -> int:
        """The internal block size, in bytes, of the hashing algorithm."""


class StreamingHashEngine(Streaming, HashEngine):
    """A `HashEngine` that can stream data to be hashed."""

    def sum(self, prefix: bytes = b"") -> bytes:
        """Returns `prefix` followed by the digest of the data seen so far.

        Like `compute()`, this does not change the state of the engine.
        """
        return prefix + self.compute().digest_value
