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


"""Mutable builder for job descriptors."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..exceptions import BuilderMisuseError, InvalidJobDefinitionError
from ..services import ContentHasher
from ..value_objects import PortMapping, ServiceEndpoint, ServicePorts
from .job import JobDescriptor


def mapping_of(*items: Any) -> Dict[Any, Any]:
    """Build a dict from alternating key and value arguments.

    Example:
        >>> mapping_of("FOO", "1", "BAR", "2")
        {'FOO': '1', 'BAR': '2'}

    Raises:
        BuilderMisuseError: If an odd number of arguments is given.
    """
    if len(items) % 2 != 0:
        raise BuilderMisuseError(
            f"mapping_of expects key/value pairs, got {len(items)} arguments"
        )
    return dict(zip(items[::2], items[1::2]))


class JobBuilder:
    """Single-owner staging area for a JobDescriptor.

    ``set_*`` methods replace a whole field and copy their argument;
    ``add_*`` methods merge one entry into a mapping field and leave the
    other entries alone. Read properties return tuples or read-only views.
    The builder is not safe for concurrent mutation; use clone() to hand a
    copy to another owner.
    """

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._version: Optional[str] = None
        self._image: Optional[str] = None
        self._command: List[str] = []
        self._env: Dict[str, str] = {}
        self._ports: Dict[str, PortMapping] = {}
        self._registration: Dict[ServiceEndpoint, ServicePorts] = {}
        self._volumes: Dict[str, str] = {}

    def set_name(self, name: str) -> "JobBuilder":
        self._name = name
        return self

    def set_version(self, version: str) -> "JobBuilder":
        self._version = version
        return self

    def set_image(self, image: Optional[str]) -> "JobBuilder":
        self._image = image
        return self

    def set_command(self, command: Optional[Sequence[str]]) -> "JobBuilder":
        self._command = list(command or ())
        return self

    def set_env(self, env: Optional[Mapping[str, str]]) -> "JobBuilder":
        self._env = dict(env or {})
        return self

    def set_ports(self, ports: Optional[Mapping[str, PortMapping]]) -> "JobBuilder":
        self._ports = dict(ports or {})
        return self

    def set_registration(
        self,
        registration: Optional[Mapping[ServiceEndpoint, ServicePorts]]
    ) -> "JobBuilder":
        self._registration = dict(registration or {})
        return self

    def set_volumes(self, volumes: Optional[Mapping[str, str]]) -> "JobBuilder":
        self._volumes = dict(volumes or {})
        return self

    def add_env(self, key: str, value: str) -> "JobBuilder":
        self._env[key] = value
        return self

    def add_port(self, name: str, mapping: PortMapping) -> "JobBuilder":
        self._ports[name] = mapping
        return self

    def add_registration(
        self,
        endpoint: ServiceEndpoint,
        ports: ServicePorts
    ) -> "JobBuilder":
        self._registration[endpoint] = ports
        return self

    def add_volume(self, path: str, source: str = "") -> "JobBuilder":
        """Add a volume; an empty source requests an anonymous volume."""
        self._volumes[path] = source
        return self

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def version(self) -> Optional[str]:
        return self._version

    @property
    def image(self) -> Optional[str]:
        return self._image

    @property
    def command(self) -> Tuple[str, ...]:
        return tuple(self._command)

    @property
    def env(self) -> Mapping[str, str]:
        return MappingProxyType(self._env)

    @property
    def ports(self) -> Mapping[str, PortMapping]:
        return MappingProxyType(self._ports)

    @property
    def registration(self) -> Mapping[ServiceEndpoint, ServicePorts]:
        return MappingProxyType(self._registration)

    @property
    def volumes(self) -> Mapping[str, str]:
        return MappingProxyType(self._volumes)

    def clone(self) -> "JobBuilder":
        """Return an independent builder with copies of every field.

        Port mappings, endpoints and service ports are immutable, so copying
        the containers is enough to keep the two builders apart.
        """
        cloned = JobBuilder()
        cloned._name = self._name
        cloned._version = self._version
        cloned._image = self._image
        cloned._command = list(self._command)
        cloned._env = dict(self._env)
        cloned._ports = dict(self._ports)
        cloned._registration = dict(self._registration)
        cloned._volumes = dict(self._volumes)
        return cloned

    def build(self) -> JobDescriptor:
        """Snapshot the current state into a new JobDescriptor.

        Returns:
            Immutable descriptor whose identity is computed from its content.

        Raises:
            InvalidJobDefinitionError: If name or version was not specified.
        """
        missing = []
        if not self._name:
            missing.append("Job name was not specified.")
        if not self._version:
            missing.append("Job version was not specified.")
        if missing:
            raise InvalidJobDefinitionError(missing)

        identity = ContentHasher.compute_identity(
            self._name, self._version, self._image, self._command, self._env
        )
        return JobDescriptor(
            identity=identity,
            image=self._image,
            command=self._command,
            env=self._env,
            ports=self._ports,
            registration=self._registration,
            volumes=self._volumes,
        )
