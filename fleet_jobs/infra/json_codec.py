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


"""JSON wire representation of job descriptors.

Parsing is tolerant of schema evolution: unknown top-level fields are
ignored and missing optional fields take their empty defaults.
"""

import json
import logging
from typing import Any, Dict, List, Mapping

from fleet_jobs.core.jobs.entities import JobDescriptor
from fleet_jobs.core.jobs.exceptions import InvalidJobDefinitionError
from fleet_jobs.core.jobs.value_objects import (
    JobIdentity,
    PortMapping,
    PortProtocol,
    ServiceEndpoint,
    ServicePorts,
)

logger = logging.getLogger(__name__)


class JobJsonCodec:
    """Converts JobDescriptor to and from its JSON document form."""

    @staticmethod
    def to_dict(job: JobDescriptor) -> Dict[str, Any]:
        """Convert a descriptor to a JSON-compatible dictionary.

        Args:
            job: Job descriptor.

        Returns:
            Dictionary with id, name, version, image, command, env, ports,
            registration and volumes.
        """
        return {
            "id": job.identity.format(),
            "name": job.name,
            "version": job.version,
            "image": job.image,
            "command": list(job.command),
            "env": dict(job.env),
            "ports": {
                name: {
                    "internalPort": mapping.internal_port,
                    "externalPort": mapping.external_port,
                    "protocol": mapping.protocol,
                }
                for name, mapping in job.ports.items()
            },
            "registration": {
                str(endpoint): {"ports": {port: {} for port in service_ports}}
                for endpoint, service_ports in job.registration.items()
            },
            "volumes": dict(job.volumes),
        }

    @classmethod
    def to_json(cls, job: JobDescriptor) -> str:
        """Serialize a descriptor to a JSON string with sorted keys."""
        return json.dumps(cls.to_dict(job), sort_keys=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JobDescriptor:
        """Build a descriptor from a decoded JSON document.

        The ``id`` is parsed without requiring a full-length digest, so a
        short client claim reaches validation instead of failing here.

        Args:
            data: Decoded JSON object.

        Returns:
            JobDescriptor carrying the identity claimed by the document.

        Raises:
            InvalidJobDefinitionError: If the document is structurally unusable.
            MalformedIdentityError: If ``id`` is not a valid identity string.
        """
        if not isinstance(data, Mapping):
            raise InvalidJobDefinitionError(["Job document must be a JSON object."])
        if "id" not in data:
            raise InvalidJobDefinitionError(["Job id was not specified."])

        identity = JobIdentity.parse(data["id"], require_full_digest=False)
        errors = []
        for field_name, expected in (("name", identity.name), ("version", identity.version)):
            value = data.get(field_name)
            if value is not None and value != expected:
                errors.append(
                    f"Job {field_name} {value!r} does not match id {identity}"
                )
        if errors:
            raise InvalidJobDefinitionError(errors)

        problems = cls._type_errors(data)
        if problems:
            logger.warning("Unparseable job document for %s: %s", identity, problems)
            raise InvalidJobDefinitionError(
                [f"Malformed job document: {problem}" for problem in problems]
            )

        return JobDescriptor(
            identity=identity,
            image=data.get("image"),
            command=list(data.get("command") or ()),
            env=dict(data.get("env") or {}),
            ports={
                name: cls._port_from_dict(mapping)
                for name, mapping in (data.get("ports") or {}).items()
            },
            registration={
                ServiceEndpoint.parse(endpoint): ServicePorts.of(
                    *((entry or {}).get("ports") or {})
                )
                for endpoint, entry in (data.get("registration") or {}).items()
            },
            volumes=dict(data.get("volumes") or {}),
        )

    @classmethod
    def from_json(cls, text: str) -> JobDescriptor:
        """Parse a descriptor from a JSON string.

        Raises:
            InvalidJobDefinitionError: If text is not valid JSON.
            MalformedIdentityError: If ``id`` is not a valid identity string.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidJobDefinitionError([f"Invalid JSON: {exc.msg}"]) from exc
        return cls.from_dict(data)

    @staticmethod
    def _port_from_dict(mapping: Mapping[str, Any]) -> PortMapping:
        return PortMapping(
            internal_port=mapping["internalPort"],
            external_port=mapping.get("externalPort"),
            protocol=mapping.get("protocol") or PortProtocol.TCP.value,
        )

    @staticmethod
    def _type_errors(data: Mapping[str, Any]) -> List[str]:
        """Report fields whose JSON type differs from the wire schema.

        Values are never coerced: a string command or a list env would hash
        differently from what the client meant.
        """
        problems: List[str] = []

        image = data.get("image")
        if image is not None and not isinstance(image, str):
            problems.append("image must be a string")

        command = data.get("command")
        if command is not None and not _is_list_of_str(command):
            problems.append("command must be a list of strings")

        for field_name in ("env", "volumes"):
            value = data.get(field_name)
            if value is not None and not _is_str_dict(value):
                problems.append(f"{field_name} must be an object of strings")

        ports = data.get("ports")
        if ports is not None:
            if not isinstance(ports, dict):
                problems.append("ports must be an object")
            else:
                for name, mapping in ports.items():
                    if not isinstance(mapping, dict):
                        problems.append(f"port mapping {name} must be an object")
                        continue
                    if not _is_int(mapping.get("internalPort")):
                        problems.append(f"port mapping {name} needs an integer internalPort")
                    external = mapping.get("externalPort")
                    if external is not None and not _is_int(external):
                        problems.append(f"port mapping {name} externalPort must be an integer")
                    protocol = mapping.get("protocol")
                    if protocol is not None and not isinstance(protocol, str):
                        problems.append(f"port mapping {name} protocol must be a string")

        registration = data.get("registration")
        if registration is not None:
            if not isinstance(registration, dict):
                problems.append("registration must be an object")
            else:
                for endpoint, entry in registration.items():
                    if entry is None:
                        continue
                    if not isinstance(entry, dict) or not isinstance(
                        entry.get("ports") or {}, dict
                    ):
                        problems.append(f"registration {endpoint} ports must be an object")
        return problems


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_list_of_str(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _is_str_dict(value: Any) -> bool:
    return isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(item, str) for key, item in value.items()
    )
