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


"""CreateJob use case implementation."""

import logging
from typing import Iterable, Optional

from fleet_jobs.core.jobs.entities import JobDescriptor
from fleet_jobs.core.jobs.exceptions import JobAlreadyExistsError
from fleet_jobs.core.jobs.repositories import JobRepository
from fleet_jobs.core.jobs.validation import JobValidator
from fleet_jobs.core.jobs.value_objects import CreateJobStatus

from ..commands import CreateJobCommand
from ..dtos import CreateJobResponse

logger = logging.getLogger(__name__)


class CreateJobUseCase:
    """Use case for accepting a submitted job into the registry.

    This use case gates job creation with the following guarantees:
    - Identity: the claimed identity must equal the one recomputed from
      the job's own content
    - Structure: name, version, image, ports, registration and volumes
      must pass validation
    - All-or-nothing: a rejected job is never stored
    - Outcomes are returned as statuses, never raised

    Attributes:
        job_repo: Job repository port.
        validator: Job validator.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        validator: Optional[JobValidator] = None,
    ) -> None:
        """Initialize use case with its dependencies.

        Args:
            job_repo: Job repository implementation.
            validator: Validator to use; defaults to the default configuration.
        """
        self._job_repo = job_repo
        self._validator = validator or JobValidator()

    def execute(self, command: CreateJobCommand) -> CreateJobResponse:
        """Execute job creation.

        Args:
            command: CreateJob command carrying the submitted job.

        Returns:
            CreateJobResponse with the creation status.
        """
        job = command.job
        errors = self._validator.validate(job)
        if errors:
            # TODO: report identity mismatches as ID_MISMATCH once the
            # validator can tell them apart from structural errors.
            logger.warning(
                "Rejected job %s (correlation_id=%s): %s",
                job.identity, command.correlation_id, sorted(errors),
            )
            return self._to_response(job, CreateJobStatus.INVALID_JOB_DEFINITION, errors)

        try:
            self._add_job(job, command.correlation_id)
        except JobAlreadyExistsError:
            logger.warning(
                "Job %s already exists (correlation_id=%s)",
                job.identity, command.correlation_id,
            )
            return self._to_response(job, CreateJobStatus.JOB_ALREADY_EXISTS)

        logger.info("Created job %s (correlation_id=%s)", job.identity, command.correlation_id)
        return self._to_response(job, CreateJobStatus.OK)

    def _add_job(self, job: JobDescriptor, correlation_id: Optional[str]) -> None:
        """Persist the job, refusing identities that are already stored."""
        if self._job_repo.exists(job.identity):
            raise JobAlreadyExistsError(
                job_id=str(job.identity),
                correlation_id=correlation_id,
            )
        self._job_repo.add(job)

    def _to_response(
        self,
        job: JobDescriptor,
        status: CreateJobStatus,
        errors: Iterable[str] = (),
    ) -> CreateJobResponse:
        """Map the outcome to a response DTO."""
        return CreateJobResponse(
            status=status,
            job_id=str(job.identity),
            errors=tuple(sorted(errors)),
        )
