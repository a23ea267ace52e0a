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

"""Stretched digests on top of existing hash algorithms.

Stretching turns a digest into a much larger one, deterministically. Every
`2**stretch` bits of the base digest are replaced by a block of
`2**(2**stretch)` bits with a single bit set, at the position given by the
value of the original bits. The result is sparse: almost all bits are zero.

Hashing can be done using the default configuration (SHA256, stretch factor
of 1):

```python
stretchy_hash.hashing.hash(b"some data")
```

Alternatively, a custom configuration can be selected:

```python
stretchy_hash.hashing.Config().use_algorithm("blake3").set_stretch(
    3
).hash_file("model.bin")
```

The stretched engines follow the same interface as the engines they wrap, so
they can be used wherever a streaming hash engine is expected:

```python
hasher = stretchy_hash.hashing.Config().set_stretch(2).build()
hasher.update(b"some ")
hasher.update(b"data")
digest = hasher.compute()
```

Note that stretching does not add any cryptographic strength, and the
stretched digest is not claimed to keep the collision resistance of the base
algorithm.
"""

from stretchy_hash import hashing


__version__ = "0.1.0"


__all__ = ["hashing"]
