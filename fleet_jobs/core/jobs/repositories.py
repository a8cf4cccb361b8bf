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


"""Repository port interfaces (Protocols) for the job registry.

These define the contracts that registry backends must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import Protocol, Optional, List

from .entities import JobDescriptor
from .value_objects import JobIdentity


class JobRepository(Protocol):
    """Repository port for accepted job descriptors."""

    def add(self, job: JobDescriptor) -> None:
        """Store a newly accepted job.

        Args:
            job: Validated job descriptor.

        Raises:
            JobAlreadyExistsError: If a job with the same identity is stored.
        """
        ...

    def find_by_id(self, job_id: JobIdentity) -> Optional[JobDescriptor]:
        """Retrieve a job by its identity.

        Args:
            job_id: Job identity.

        Returns:
            JobDescriptor if found, None otherwise.
        """
        ...

    def exists(self, job_id: JobIdentity) -> bool:
        """Check if a job exists.

        Args:
            job_id: Job identity.

        Returns:
            True if job exists, False otherwise.
        """
        ...

    def list_ids(self) -> List[JobIdentity]:
        """Return the identities of all stored jobs."""
        ...
