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


"""Shared fixtures and utilities for entity tests."""

import pytest

from fleet_jobs.core.jobs.value_objects import PortMapping, ServiceEndpoint, ServicePorts


@pytest.fixture
def set_ports():
    """Ports passed to set_ports."""
    return {"set_ports": PortMapping(1234)}


@pytest.fixture
def set_registration():
    """Registration passed to set_registration."""
    return {
        ServiceEndpoint("set_service", "set_proto"): ServicePorts.of("set_ports1", "set_ports2")
    }


@pytest.fixture
def add_registration():
    """Registration entry merged with add_registration."""
    return ServiceEndpoint("add_service", "add_proto"), ServicePorts.of("add_ports1")
