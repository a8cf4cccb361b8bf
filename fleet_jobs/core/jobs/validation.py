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


"""Structural and identity validation of submitted job descriptors."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Set, Tuple, Union

import yaml

from .entities import JobDescriptor
from .services import ContentHasher
from .value_objects import JobIdentity, PortProtocol, ServiceEndpoint

logger = logging.getLogger(__name__)

NAME_VERSION_PATTERN = re.compile(r'[0-9a-zA-Z_.-]+')
PORT_NAME_PATTERN = re.compile(r'[_\-\w]+', re.ASCII)
HOSTNAME_PATTERN = re.compile(
    r'(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])'
    r'(?:\.(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9]))*'
)
REPO_COMPONENT_PATTERN = re.compile(r'[a-z0-9]+(?:[._-][a-z0-9]+)*')
TAG_PATTERN = re.compile(r'[\w][\w.-]{0,127}', re.ASCII)
DIGEST_PATTERN = re.compile(
    r'[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9A-Fa-f]{32,}'
)
VOLUME_MODES = frozenset({"ro", "rw"})
MAX_PORT = 65535
REGISTRY_PORT_PATTERN = re.compile(r'[0-9]{1,5}')

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class JobValidationConfig:
    """Settings for job validation.

    Attributes:
        allowed_protocols: Port protocols a job may declare.
        validate_image: Check the image reference syntax.
        validate_registration: Check that registrations refer to known ports.
    """

    allowed_protocols: FrozenSet[str] = field(
        default_factory=lambda: frozenset(p.value for p in PortProtocol)
    )
    validate_image: bool = True
    validate_registration: bool = True

    @classmethod
    def from_env(cls) -> "JobValidationConfig":
        """Load settings from FLEET_JOBS_* environment variables."""
        defaults = cls()
        protocols = os.getenv("FLEET_JOBS_ALLOWED_PROTOCOLS")
        return cls(
            allowed_protocols=(
                frozenset(p.strip().lower() for p in protocols.split(",") if p.strip())
                if protocols is not None
                else defaults.allowed_protocols
            ),
            validate_image=_env_flag("FLEET_JOBS_VALIDATE_IMAGE", defaults.validate_image),
            validate_registration=_env_flag(
                "FLEET_JOBS_VALIDATE_REGISTRATION", defaults.validate_registration
            ),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "JobValidationConfig":
        """Load settings from the ``job_validation`` section of a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Config with missing keys left at their defaults.
        """
        with open(path, "r", encoding="utf-8") as config_file:
            document = yaml.safe_load(config_file) or {}
        section: Dict[str, Any] = document.get("job_validation") or {}
        defaults = cls()
        protocols = section.get("allowed_protocols")
        return cls(
            allowed_protocols=(
                frozenset(str(p).lower() for p in protocols)
                if protocols is not None
                else defaults.allowed_protocols
            ),
            validate_image=bool(section.get("validate_image", defaults.validate_image)),
            validate_registration=bool(
                section.get("validate_registration", defaults.validate_registration)
            ),
        )


class JobValidator:
    """Validates submitted job descriptors before they are accepted.

    validate() collects every problem it finds instead of stopping at the
    first one. An empty result means the job is acceptable.
    """

    def __init__(self, config: Optional[JobValidationConfig] = None) -> None:
        self._config = config or JobValidationConfig()

    def validate(self, job: JobDescriptor) -> Set[str]:
        """Validate a job descriptor.

        Args:
            job: Descriptor as submitted by a client.

        Returns:
            Set of human-readable validation errors.
        """
        errors: Set[str] = set()
        errors |= self._validate_identity(job)
        errors |= self._validate_name_and_version(job.identity)
        if self._config.validate_image:
            errors |= self.validate_image_reference(job.image)
        errors |= self._validate_ports(job)
        if self._config.validate_registration:
            errors |= self._validate_registration(job)
        errors |= self._validate_volumes(job)
        if errors:
            logger.debug("Job %s failed validation: %s", job.identity, sorted(errors))
        return errors

    def _validate_identity(self, job: JobDescriptor) -> Set[str]:
        errors: Set[str] = set()
        claimed = job.identity
        if not claimed.is_fully_qualified():
            errors.add(
                f"Job id hash must be {JobIdentity.DIGEST_LENGTH} characters: {claimed}"
            )
        actual = ContentHasher.identity_of(job)
        if actual != claimed:
            errors.add(f"Id hash mismatch: {claimed} != {actual}")
        return errors

    def _validate_name_and_version(self, identity: JobIdentity) -> Set[str]:
        errors: Set[str] = set()
        if not NAME_VERSION_PATTERN.fullmatch(identity.name):
            errors.add(f"Job name may only contain [0-9a-zA-Z-_.]: {identity.name}")
        if not NAME_VERSION_PATTERN.fullmatch(identity.version):
            errors.add(f"Job version may only contain [0-9a-zA-Z-_.]: {identity.version}")
        return errors

    @staticmethod
    def validate_image_reference(image: Optional[str]) -> Set[str]:
        """Validate ``[host[:port]/]path[:tag][@digest]`` image references.

        Args:
            image: Image reference.

        Returns:
            Set of validation errors, empty if the reference is valid.
        """
        if not image:
            return {"Image was not specified."}

        errors: Set[str] = set()
        rest, _, digest = image.partition("@")
        if digest and not DIGEST_PATTERN.fullmatch(digest):
            errors.add(f"Illegal digest: {digest}")

        repo, tag = rest, None
        last_colon = rest.rfind(":")
        if last_colon > rest.rfind("/"):
            repo, tag = rest[:last_colon], rest[last_colon + 1:]
        if tag is not None and not TAG_PATTERN.fullmatch(tag):
            errors.add(f"Illegal tag in image reference: {tag}")

        if not repo or repo.startswith("/") or repo.endswith("/"):
            errors.add(f"Illegal image repository: {image}")
            return errors

        components = repo.split("/")
        first = components[0]
        if len(components) > 1 and ("." in first or ":" in first or first == "localhost"):
            errors |= _validate_registry(first)
            components = components[1:]
        for component in components:
            if not REPO_COMPONENT_PATTERN.fullmatch(component):
                errors.add(f"Invalid repository name component: {component!r} in {image}")
        return errors

    def _validate_ports(self, job: JobDescriptor) -> Set[str]:
        errors: Set[str] = set()
        external: Dict[Tuple[int, str], str] = {}
        for name, mapping in sorted(job.ports.items()):
            if not PORT_NAME_PATTERN.fullmatch(name):
                errors.add(f"Invalid port mapping name: {name!r}")
            if not _is_valid_port(mapping.internal_port):
                errors.add(f"Invalid internal port for {name}: {mapping.internal_port}")
            if mapping.external_port is not None:
                if not _is_valid_port(mapping.external_port):
                    errors.add(
                        f"Invalid external port for {name}: {mapping.external_port}"
                    )
                key = (mapping.external_port, mapping.protocol)
                if key in external:
                    errors.add(
                        f"Duplicate external port {mapping.external_port}/"
                        f"{mapping.protocol} in {external[key]} and {name}"
                    )
                else:
                    external[key] = name
            if mapping.protocol not in self._config.allowed_protocols:
                errors.add(f"Unsupported protocol for {name}: {mapping.protocol}")
        return errors

    @staticmethod
    def _validate_registration(job: JobDescriptor) -> Set[str]:
        errors: Set[str] = set()
        for endpoint, service_ports in job.registration.items():
            if not endpoint.name:
                errors.add("Service registration name cannot be empty.")
            if not endpoint.protocol or ServiceEndpoint.SEPARATOR in endpoint.protocol:
                errors.add(f"Invalid service registration protocol: {endpoint.protocol!r}")
            for port_name in service_ports:
                if port_name not in job.ports:
                    errors.add(
                        f"Service registration {endpoint} refers to missing "
                        f"port mapping: {port_name}"
                    )
        return errors

    @staticmethod
    def _validate_volumes(job: JobDescriptor) -> Set[str]:
        errors: Set[str] = set()
        for path, source in job.volumes.items():
            container_path, sep, mode = path.partition(":")
            if sep and mode not in VOLUME_MODES:
                errors.add(f"Invalid volume mode {mode!r} for {container_path}")
            if not container_path.startswith("/"):
                errors.add(f"Volume path is not absolute: {container_path!r}")
            if source and not source.startswith("/"):
                errors.add(f"Volume source is not absolute: {source!r}")
        return errors


def _is_valid_port(port: Any) -> bool:
    return isinstance(port, int) and not isinstance(port, bool) and 0 <= port <= MAX_PORT


def _validate_registry(registry: str) -> Set[str]:
    host, sep, port = registry.partition(":")
    errors: Set[str] = set()
    if not HOSTNAME_PATTERN.fullmatch(host):
        errors.add(f"Invalid registry hostname: {host}")
    if sep:
        if not REGISTRY_PORT_PATTERN.fullmatch(port) or not 0 < int(port) <= MAX_PORT:
            errors.add(f"Invalid registry port: {port}")
    return errors
