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


"""Domain exceptions for job descriptors."""

from typing import Iterable, Optional


class JobDomainError(Exception):
    """Base exception for all job domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class MalformedIdentityError(JobDomainError, ValueError):
    """Identity string or components do not form a valid job identity."""

    def __init__(self, value: str, reason: str, correlation_id: Optional[str] = None) -> None:
        """Initialize malformed identity error.

        Args:
            value: The offending identity string or component.
            reason: Why the value was rejected.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Malformed job identity {value!r}: {reason}",
            correlation_id=correlation_id
        )
        self.value = value
        self.reason = reason


class InvalidJobDefinitionError(JobDomainError):
    """Job descriptor failed structural validation."""

    def __init__(
        self,
        errors: Iterable[str],
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid job definition error.

        Args:
            errors: Validation problems found in the descriptor.
            correlation_id: Optional correlation ID for tracing.
        """
        self.errors = tuple(sorted(errors))
        super().__init__(
            "Invalid job definition: " + "; ".join(self.errors),
            correlation_id=correlation_id
        )


class BuilderMisuseError(JobDomainError):
    """Builder helper was called with arguments it cannot use."""


class JobAlreadyExistsError(JobDomainError):
    """Job with the given identity already exists."""

    def __init__(self, job_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize job already exists error.

        Args:
            job_id: The job identity that already exists.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Job already exists: {job_id}",
            correlation_id=correlation_id
        )
        self.job_id = job_id
