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


"""Pytest fixtures for job creation integration tests."""

from typing import Dict, List, Optional

import pytest

from fleet_jobs.core.jobs.entities import JobDescriptor
from fleet_jobs.core.jobs.exceptions import JobAlreadyExistsError
from fleet_jobs.core.jobs.validation import JobValidationConfig, JobValidator
from fleet_jobs.core.jobs.value_objects import JobIdentity
from fleet_jobs.orchestrator.jobs.use_cases import CreateJobUseCase


class InMemoryJobRepository:
    """Dictionary-backed registry standing in for the coordination backend."""

    def __init__(self) -> None:
        self._jobs: Dict[JobIdentity, JobDescriptor] = {}

    def add(self, job: JobDescriptor) -> None:
        if job.identity in self._jobs:
            raise JobAlreadyExistsError(job_id=str(job.identity))
        self._jobs[job.identity] = job

    def find_by_id(self, job_id: JobIdentity) -> Optional[JobDescriptor]:
        return self._jobs.get(job_id)

    def exists(self, job_id: JobIdentity) -> bool:
        return job_id in self._jobs

    def list_ids(self) -> List[JobIdentity]:
        return list(self._jobs)


@pytest.fixture
def registry():
    """Provide an empty in-memory registry."""
    return InMemoryJobRepository()


@pytest.fixture
def create_job(registry):  # noqa: W0621
    """Provide a CreateJobUseCase configured from the environment."""
    return CreateJobUseCase(registry, validator=JobValidator(JobValidationConfig.from_env()))
