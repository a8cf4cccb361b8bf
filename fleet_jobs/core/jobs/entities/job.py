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


"""Job descriptor value entity."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from ..value_objects import JobIdentity, PortMapping, ServiceEndpoint, ServicePorts

if TYPE_CHECKING:
    from .builder import JobBuilder

EMPTY_COMMAND: Tuple[str, ...] = ()
EMPTY_ENV: Mapping[str, str] = MappingProxyType({})
EMPTY_PORTS: Mapping[str, PortMapping] = MappingProxyType({})
EMPTY_REGISTRATION: Mapping[ServiceEndpoint, ServicePorts] = MappingProxyType({})
EMPTY_VOLUMES: Mapping[str, str] = MappingProxyType({})


def _read_only(value: Optional[Mapping[Any, Any]]) -> Mapping[Any, Any]:
    """Copy a mapping into a private dict behind a read-only view."""
    if not value:
        return MappingProxyType({})
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class JobDescriptor:
    """Immutable description of a job the scheduler can run.

    Every container argument is copied at construction into a tuple or a
    read-only mapping owned by the descriptor, so neither the caller nor a
    builder can change a descriptor after it exists. Missing optional
    fields and explicitly empty ones compare equal.

    Attributes:
        identity: Claimed or computed ``name:version:hash`` identity.
        image: Container image reference.
        command: Command line to run in the container.
        env: Environment variables.
        ports: Named port mappings.
        registration: Service endpoints mapped to the ports they expose.
        volumes: Container paths mapped to host paths (empty for anonymous).
    """

    identity: JobIdentity
    image: Optional[str] = None
    command: Sequence[str] = EMPTY_COMMAND
    env: Mapping[str, str] = field(default_factory=dict)
    ports: Mapping[str, PortMapping] = field(default_factory=dict)
    registration: Mapping[ServiceEndpoint, ServicePorts] = field(default_factory=dict)
    volumes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "command", tuple(self.command or ()))
        object.__setattr__(self, "env", _read_only(self.env))
        object.__setattr__(self, "ports", _read_only(self.ports))
        object.__setattr__(self, "registration", _read_only(self.registration))
        object.__setattr__(self, "volumes", _read_only(self.volumes))

    def __hash__(self) -> int:
        return hash((self.identity, self.image, self.command))

    @property
    def name(self) -> str:
        """Job name, as carried by the identity."""
        return self.identity.name

    @property
    def version(self) -> str:
        """Job version, as carried by the identity."""
        return self.identity.version

    @staticmethod
    def new_builder() -> "JobBuilder":
        """Return an empty builder."""
        from .builder import JobBuilder  # noqa: PLC0415

        return JobBuilder()

    def to_builder(self) -> "JobBuilder":
        """Return a builder preloaded with a copy of this job's content."""
        return (
            self.new_builder()
            .set_name(self.name)
            .set_version(self.version)
            .set_image(self.image)
            .set_command(self.command)
            .set_env(self.env)
            .set_ports(self.ports)
            .set_registration(self.registration)
            .set_volumes(self.volumes)
        )

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.identity)
