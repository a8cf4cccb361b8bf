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


"""CreateJob response DTO."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from fleet_jobs.core.jobs.value_objects import CreateJobStatus


@dataclass(frozen=True)
class CreateJobResponse:
    """Response DTO for job creation.

    Immutable data transfer object returned to the transport layer.

    Attributes:
        status: Creation outcome.
        job_id: Formatted identity of the submitted job.
        errors: Validation errors, empty unless status is INVALID_JOB_DEFINITION.
    """

    status: CreateJobStatus
    job_id: str
    errors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-compatible wire form."""
        return {
            "status": self.status.value,
            "id": self.job_id,
            "errors": list(self.errors),
        }
