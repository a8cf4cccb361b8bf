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


"""Value objects for the job descriptor domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, FrozenSet, Iterator, Optional

from .exceptions import MalformedIdentityError


@dataclass(frozen=True)
class JobIdentity:
    """Content-derived job identity ``name:version:hash``.

    Identities computed from job content always carry a full-length digest.
    A client may still submit a claim with a shorter digest; such a claim is
    representable so that it can be rejected by validation rather than by
    the parser.

    Attributes:
        name: Human-chosen job name.
        version: Human-chosen job version.
        hash: Lowercase hex digest over name, version and job configuration.

    Raises:
        MalformedIdentityError: If a component is empty, name or version
            contains the separator, or hash is not lowercase hex.
    """

    name: str
    version: str
    hash: str

    SEPARATOR: ClassVar[str] = ":"
    DIGEST_LENGTH: ClassVar[int] = 40  # SHA-1 hex digest length
    HEX_PATTERN: ClassVar[str] = r'[0-9a-f]+'

    def __post_init__(self) -> None:
        """Validate identity components."""
        for label, component in (("name", self.name), ("version", self.version)):
            if not component:
                raise MalformedIdentityError(str(component), f"{label} cannot be empty")
            if self.SEPARATOR in component:
                raise MalformedIdentityError(
                    component, f"{label} cannot contain '{self.SEPARATOR}'"
                )
        if not self.hash or not re.fullmatch(self.HEX_PATTERN, self.hash):
            raise MalformedIdentityError(
                str(self.hash), "hash must be a lowercase hexadecimal string"
            )

    @classmethod
    def parse(cls, value: str, require_full_digest: bool = True) -> "JobIdentity":
        """Parse a ``name:version:hash`` string.

        Args:
            value: Formatted identity string.
            require_full_digest: Reject digests shorter than DIGEST_LENGTH.

        Returns:
            Parsed JobIdentity.

        Raises:
            MalformedIdentityError: If value is not a valid identity string.
        """
        if not isinstance(value, str):
            raise MalformedIdentityError(repr(value), "identity must be a string")
        parts = value.split(cls.SEPARATOR)
        if len(parts) != 3:
            raise MalformedIdentityError(
                value, f"expected 3 '{cls.SEPARATOR}'-separated parts, got {len(parts)}"
            )
        name, version, digest = parts
        if not digest:
            raise MalformedIdentityError(value, "hash cannot be empty")
        identity = cls(name=name, version=version, hash=digest)
        if require_full_digest and not identity.is_fully_qualified():
            raise MalformedIdentityError(
                value,
                f"hash must be {cls.DIGEST_LENGTH} hex characters, got {len(digest)}"
            )
        return identity

    def is_fully_qualified(self) -> bool:
        """Check whether the digest has the full wire length."""
        return len(self.hash) == self.DIGEST_LENGTH

    def format(self) -> str:
        """Return the ``name:version:hash`` wire form."""
        return self.SEPARATOR.join((self.name, self.version, self.hash))

    def __str__(self) -> str:
        """Return string representation."""
        return self.format()


class PortProtocol(str, Enum):
    """Transport protocols a port mapping may declare."""

    TCP = "tcp"
    UDP = "udp"


@dataclass(frozen=True)
class PortMapping:
    """Mapping of a container port to an optional host port.

    Attributes:
        internal_port: Port inside the container.
        external_port: Port on the host, or None to let the agent choose.
        protocol: Transport protocol name.
    """

    internal_port: int
    external_port: Optional[int] = None
    protocol: str = PortProtocol.TCP.value

    def __post_init__(self) -> None:
        if isinstance(self.protocol, PortProtocol):
            object.__setattr__(self, "protocol", self.protocol.value)


@dataclass(frozen=True)
class ServiceEndpoint:
    """Service discovery endpoint a job registers under.

    Attributes:
        name: Service name.
        protocol: Service protocol, e.g. ``http``.
    """

    name: str
    protocol: str = "http"

    SEPARATOR: ClassVar[str] = "/"

    @classmethod
    def parse(cls, value: str) -> "ServiceEndpoint":
        """Parse the ``name/protocol`` wire form; protocol defaults to http.

        The protocol is the text after the last separator, so names may
        themselves contain it.
        """
        name, sep, protocol = value.rpartition(cls.SEPARATOR)
        if not sep:
            return cls(name=protocol)
        return cls(name=name, protocol=protocol)

    def __str__(self) -> str:
        """Return the ``name/protocol`` wire form."""
        return f"{self.name}{self.SEPARATOR}{self.protocol}"


@dataclass(frozen=True)
class ServicePorts:
    """Named job ports exposed under a service endpoint.

    Attributes:
        ports: Port names referring to entries of the job's port mappings.
    """

    ports: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ports", frozenset(self.ports))

    @classmethod
    def of(cls, *names: str) -> "ServicePorts":
        """Create ServicePorts from port names."""
        return cls(ports=frozenset(names))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.ports))


class CreateJobStatus(str, Enum):
    """Outcome of a job creation request.

    ID_MISMATCH is part of the protocol but the creation path reports
    identity mismatches as INVALID_JOB_DEFINITION.
    """

    OK = "OK"
    ID_MISMATCH = "ID_MISMATCH"
    JOB_ALREADY_EXISTS = "JOB_ALREADY_EXISTS"
    INVALID_JOB_DEFINITION = "INVALID_JOB_DEFINITION"

    def is_success(self) -> bool:
        """Check if the job was accepted."""
        return self is CreateJobStatus.OK
