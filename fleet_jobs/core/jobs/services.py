# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Domain services for computing job identities."""

import hashlib
import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, TYPE_CHECKING

from .value_objects import JobIdentity

if TYPE_CHECKING:
    from .entities import JobDescriptor

logger = logging.getLogger(__name__)


class CanonicalConfigEncoder:
    """Domain service producing the canonical bytes of a job configuration.

    Only the fields that define what a job runs take part in the encoding:
    command, image, name and version, plus env when it is non-empty. An
    empty env is left out entirely, so a job with ``env={}`` and a job with
    no env encode to the same bytes.
    """

    @staticmethod
    def config_for(
        name: str,
        version: str,
        image: Optional[str],
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Collect the hashed subset of job fields.

        Args:
            name: Job name.
            version: Job version.
            image: Container image reference.
            command: Command line to run.
            env: Environment variables; omitted when empty or None.

        Returns:
            Dictionary of the fields that contribute to the job identity.
        """
        config: Dict[str, Any] = {
            "command": list(command or ()),
            "image": image,
            "name": name,
            "version": version,
        }
        if env:
            config["env"] = dict(env)
        return config

    @staticmethod
    def encode(config: Mapping[str, Any]) -> bytes:
        """Render a configuration as canonical UTF-8 JSON.

        Creates deterministic bytes by:
        1. Sorting keys alphabetically at every nesting level
        2. JSON serializing with no whitespace
        3. Emitting non-ASCII characters as-is
        4. UTF-8 encoding

        Args:
            config: Dictionary produced by config_for.

        Returns:
            Canonical byte encoding.

        Example:
            >>> CanonicalConfigEncoder.encode({"name": "a", "image": "b"})
            b'{"image":"b","name":"a"}'
        """
        normalized = json.dumps(
            config, sort_keys=True, separators=(',', ':'), ensure_ascii=False
        )
        return normalized.encode('utf-8')


class ContentHasher:
    """Domain service computing job identities from job content.

    The identity is derived in two stages. The first hashes the canonical
    configuration; the second hashes ``name:version:<config digest>`` so
    that identical configurations under different names or versions never
    share an identity.
    """

    ALGORITHM = "sha1"

    @classmethod
    def hexdigest(cls, data: bytes) -> str:
        """Return the lowercase hex digest of data."""
        return hashlib.new(cls.ALGORITHM, data).hexdigest()

    @classmethod
    def config_digest(
        cls,
        name: str,
        version: str,
        image: Optional[str],
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Compute the first-stage digest over the canonical configuration."""
        config = CanonicalConfigEncoder.config_for(name, version, image, command, env)
        return cls.hexdigest(CanonicalConfigEncoder.encode(config))

    @classmethod
    def compute_identity(
        cls,
        name: str,
        version: str,
        image: Optional[str],
        command: Sequence[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> JobIdentity:
        """Compute the content-derived identity of a job.

        Args:
            name: Job name.
            version: Job version.
            image: Container image reference.
            command: Command line to run.
            env: Environment variables.

        Returns:
            JobIdentity with a full-length digest.

        Raises:
            MalformedIdentityError: If name or version cannot form an identity.
        """
        config_hex = cls.config_digest(name, version, image, command, env)
        identity_input = f"{name}:{version}:{config_hex}"
        identity = JobIdentity(
            name=name,
            version=version,
            hash=cls.hexdigest(identity_input.encode('utf-8')),
        )
        logger.debug("Computed identity %s (config digest %s)", identity, config_hex)
        return identity

    @classmethod
    def identity_of(cls, job: "JobDescriptor") -> JobIdentity:
        """Recompute the identity of a descriptor from its own content.

        The result is independent of the identity the descriptor carries,
        which may be an unverified client claim.
        """
        return cls.compute_identity(
            job.identity.name,
            job.identity.version,
            job.image,
            job.command,
            job.env,
        )
