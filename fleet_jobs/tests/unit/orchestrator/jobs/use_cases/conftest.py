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


"""Shared fixtures for use case tests."""

from typing import Dict, List, Optional

import pytest

from fleet_jobs.core.jobs.entities import JobDescriptor
from fleet_jobs.core.jobs.exceptions import JobAlreadyExistsError
from fleet_jobs.core.jobs.value_objects import JobIdentity


class FakeJobRepository:
    """In-memory fake implementation of JobRepository."""
    def __init__(self) -> None:
        """Initialize the fake repository."""
        self._jobs: Dict[str, JobDescriptor] = {}

    def add(self, job: JobDescriptor) -> None:
        """Add a job to the fake repository."""
        key = str(job.identity)
        if key in self._jobs:
            raise JobAlreadyExistsError(job_id=key)
        self._jobs[key] = job

    def find_by_id(self, job_id: JobIdentity) -> Optional[JobDescriptor]:
        """Find a job by its identity."""
        return self._jobs.get(str(job_id))

    def exists(self, job_id: JobIdentity) -> bool:
        """Check if a job exists."""
        return str(job_id) in self._jobs

    def list_ids(self) -> List[JobIdentity]:
        """List stored identities."""
        return [job.identity for job in self._jobs.values()]


class RacingJobRepository(FakeJobRepository):
    """Fake whose exists() misses a job stored concurrently by another writer."""

    def exists(self, job_id: JobIdentity) -> bool:
        """Always report the job as absent."""
        return False


@pytest.fixture
def job_repo():
    """Provide fake job repository."""
    return FakeJobRepository()


@pytest.fixture
def racing_job_repo():
    """Provide fake job repository with a stale exists() check."""
    return RacingJobRepository()
