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


"""Shared pytest fixtures for fleet job descriptor tests."""

from typing import Dict

import pytest

from fleet_jobs.core.jobs.entities import JobBuilder, JobDescriptor
from fleet_jobs.core.jobs.value_objects import PortMapping, ServiceEndpoint, ServicePorts

IDLE_COMMAND = ["sh", "-c", "trap 'exit 0' SIGINT SIGTERM; while :; do sleep 1; done"]


@pytest.fixture
def idle_command():
    """Command that keeps a container running until it is stopped."""
    return list(IDLE_COMMAND)


@pytest.fixture
def sample_builder() -> JobBuilder:
    """Builder for the reference ``foozbarz:17`` job without env."""
    return (
        JobDescriptor.new_builder()
        .set_name("foozbarz")
        .set_version("17")
        .set_image("foobar:4711")
        .set_command(["foo", "bar"])
    )


@pytest.fixture
def sample_job(sample_builder) -> JobDescriptor:  # noqa: W0621
    """Reference job built from sample_builder."""
    return sample_builder.build()


@pytest.fixture
def full_builder() -> JobBuilder:
    """Builder with every field populated and valid."""
    return (
        JobDescriptor.new_builder()
        .set_name("web-frontend")
        .set_version("1.2.3")
        .set_image("registry.example.com:5000/team/web:1.2.3")
        .set_command(["serve", "--port", "8080"])
        .set_env({"LOG_LEVEL": "info"})
        .set_ports({"http": PortMapping(8080, 80), "admin": PortMapping(9090)})
        .set_registration({ServiceEndpoint("web", "http"): ServicePorts.of("http")})
        .set_volumes({"/cache": "", "/etc/web:ro": "/srv/web/config"})
    )


@pytest.fixture
def full_job(full_builder) -> JobDescriptor:  # noqa: W0621
    """Fully populated valid job."""
    return full_builder.build()


@pytest.fixture
def sample_env() -> Dict[str, str]:
    """Mutable env mapping owned by the test."""
    return {"e1": "1"}
