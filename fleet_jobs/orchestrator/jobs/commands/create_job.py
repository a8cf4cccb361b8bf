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


"""CreateJob command DTO."""

from dataclasses import dataclass
from typing import Optional

from fleet_jobs.core.jobs.entities import JobDescriptor


@dataclass(frozen=True)
class CreateJobCommand:
    """Command to create a new job.

    Immutable command object representing the intent to create a job.
    The job's identity is the client's claim; all validation is performed
    in the use case layer.

    Attributes:
        job: Submitted job descriptor.
        correlation_id: Optional request correlation identifier for tracing.
    """

    job: JobDescriptor
    correlation_id: Optional[str] = None
