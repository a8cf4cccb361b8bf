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


"""Unit tests for the JSON job codec."""

import json

import pytest

from fleet_jobs.core.jobs.exceptions import InvalidJobDefinitionError, MalformedIdentityError
from fleet_jobs.core.jobs.value_objects import PortMapping, ServiceEndpoint, ServicePorts
from fleet_jobs.infra.json_codec import JobJsonCodec


class TestJobJsonCodecSerialization:
    """Tests for serializing descriptors."""

    def test_to_dict_fields(self, full_job):
        """All wire fields should be present."""
        data = JobJsonCodec.to_dict(full_job)
        assert data["id"] == full_job.identity.format()
        assert data["name"] == "web-frontend"
        assert data["version"] == "1.2.3"
        assert data["command"] == ["serve", "--port", "8080"]
        assert data["env"] == {"LOG_LEVEL": "info"}
        assert data["ports"]["http"] == {
            "internalPort": 8080,
            "externalPort": 80,
            "protocol": "tcp",
        }
        assert data["ports"]["admin"]["externalPort"] is None
        assert data["registration"] == {"web/http": {"ports": {"http": {}}}}
        assert data["volumes"] == {"/cache": "", "/etc/web:ro": "/srv/web/config"}

    def test_to_json_is_deterministic(self, full_builder):
        """Equal descriptors should serialize to identical text."""
        assert JobJsonCodec.to_json(full_builder.build()) == JobJsonCodec.to_json(
            full_builder.build()
        )


class TestJobJsonCodecParsing:
    """Tests for tolerant parsing."""

    def test_round_trip(self, full_job):
        """Parsing serialized output should give an equal descriptor."""
        assert JobJsonCodec.from_json(JobJsonCodec.to_json(full_job)) == full_job

    def test_unknown_field_is_ignored(self, sample_job):
        """Unknown top-level fields should not break parsing or equality."""
        fields = json.loads(JobJsonCodec.to_json(sample_job))
        fields["UNKNOWN_FIELD"] = "FOOBAR"
        assert JobJsonCodec.from_json(json.dumps(fields)) == sample_job

    def test_missing_env_defaults_to_empty(self, sample_job):
        """A document without env should parse to an equal descriptor."""
        fields = json.loads(JobJsonCodec.to_json(sample_job))
        del fields["env"]
        assert JobJsonCodec.from_json(json.dumps(fields)) == sample_job

    def test_minimal_document(self):
        """Only id is required; everything else defaults."""
        job = JobJsonCodec.from_dict({"id": "bad:job:deadbeef", "image": "busybox"})
        assert job.identity.hash == "deadbeef"
        assert job.command == ()
        assert job.ports == {}
        assert job.registration == {}
        assert job.volumes == {}

    def test_null_fields_default_to_empty(self):
        """Explicit nulls are treated like missing fields."""
        job = JobJsonCodec.from_dict({
            "id": "bad:job:deadbeef",
            "command": None,
            "env": None,
            "ports": None,
        })
        assert job.command == ()
        assert job.env == {}

    def test_ports_and_registration(self):
        """Nested port and registration documents should be decoded."""
        job = JobJsonCodec.from_dict({
            "id": "bad:job:deadbeef",
            "ports": {"dns": {"internalPort": 53, "externalPort": 5353, "protocol": "udp"},
                      "http": {"internalPort": 80}},
            "registration": {"dns/udp": {"ports": {"dns": {}}}, "web": {"ports": {}}},
        })
        assert job.ports == {"dns": PortMapping(53, 5353, "udp"), "http": PortMapping(80)}
        assert job.registration == {
            ServiceEndpoint("dns", "udp"): ServicePorts.of("dns"),
            ServiceEndpoint("web", "http"): ServicePorts.of(),
        }

    def test_missing_id(self):
        """A document without id cannot be parsed."""
        with pytest.raises(InvalidJobDefinitionError, match="Job id was not specified"):
            JobJsonCodec.from_dict({"image": "busybox"})

    def test_malformed_id(self):
        """A malformed id should raise MalformedIdentityError."""
        with pytest.raises(MalformedIdentityError):
            JobJsonCodec.from_dict({"id": "no-separators"})

    def test_name_must_match_id(self, sample_job):
        """A conflicting name field should be rejected."""
        fields = JobJsonCodec.to_dict(sample_job)
        fields["name"] = "other"
        with pytest.raises(InvalidJobDefinitionError, match="does not match id"):
            JobJsonCodec.from_dict(fields)

    def test_port_without_internal_port(self):
        """A port mapping missing internalPort is a malformed document."""
        with pytest.raises(InvalidJobDefinitionError, match="Malformed job document"):
            JobJsonCodec.from_dict({"id": "bad:job:deadbeef", "ports": {"p": {}}})

    def test_invalid_json(self):
        """Text that is not JSON should raise InvalidJobDefinitionError."""
        with pytest.raises(InvalidJobDefinitionError, match="Invalid JSON"):
            JobJsonCodec.from_json("{not json")

    def test_non_object_document(self):
        """A JSON array is not a job document."""
        with pytest.raises(InvalidJobDefinitionError, match="must be a JSON object"):
            JobJsonCodec.from_json("[]")

    def test_endpoint_name_with_slash_round_trips(self, sample_builder):
        """Endpoint names may contain the separator; only the last one splits."""
        job = (
            sample_builder.add_port("http", PortMapping(8080))
            .add_registration(ServiceEndpoint("team/web", "http"), ServicePorts.of("http"))
            .build()
        )
        data = JobJsonCodec.to_dict(job)
        assert list(data["registration"]) == ["team/web/http"]
        parsed = JobJsonCodec.from_json(JobJsonCodec.to_json(job))
        assert parsed == job
        assert ServiceEndpoint("team/web", "http") in parsed.registration


class TestJobJsonCodecFieldTypes:
    """Tests that wrongly typed fields are rejected instead of coerced."""

    @pytest.mark.parametrize(
        "field_name,value,message",
        [
            ("command", "sleep", "command must be a list of strings"),
            ("command", ["sleep", 5], "command must be a list of strings"),
            ("env", [["a", "b"]], "env must be an object of strings"),
            ("env", {"a": 1}, "env must be an object of strings"),
            ("volumes", {"/a": 1}, "volumes must be an object of strings"),
            ("volumes", ["/a"], "volumes must be an object of strings"),
            ("image", 5, "image must be a string"),
            ("ports", [], "ports must be an object"),
            ("ports", {"p": 80}, "port mapping p must be an object"),
            ("ports", {"p": {"internalPort": True}}, "port mapping p needs an integer internalPort"),
            ("ports", {"p": {"internalPort": "80"}}, "port mapping p needs an integer internalPort"),
            ("ports", {"p": {"internalPort": 80, "externalPort": "80"}},
             "port mapping p externalPort must be an integer"),
            ("ports", {"p": {"internalPort": 80, "protocol": 6}},
             "port mapping p protocol must be a string"),
            ("registration", [], "registration must be an object"),
            ("registration", {"web": []}, "registration web ports must be an object"),
            ("registration", {"web": {"ports": ["http"]}}, "registration web ports must be an object"),
        ],
    )
    def test_wrong_type_is_rejected(self, field_name, value, message):
        """A field of the wrong JSON type should raise InvalidJobDefinitionError."""
        with pytest.raises(InvalidJobDefinitionError) as exc_info:
            JobJsonCodec.from_dict({"id": "bad:job:deadbeef", field_name: value})
        assert f"Malformed job document: {message}" in exc_info.value.errors

    def test_string_command_is_not_split_into_characters(self, sample_job):
        """A string command must not turn into a tuple of characters."""
        fields = JobJsonCodec.to_dict(sample_job)
        fields["command"] = "foobar"
        with pytest.raises(InvalidJobDefinitionError, match="command must be a list of strings"):
            JobJsonCodec.from_dict(fields)

    def test_all_type_problems_are_reported(self):
        """Every wrongly typed field should be listed in one error."""
        with pytest.raises(InvalidJobDefinitionError) as exc_info:
            JobJsonCodec.from_dict({
                "id": "bad:job:deadbeef",
                "command": "sleep",
                "env": [["a", "b"]],
            })
        assert exc_info.value.errors == (
            "Malformed job document: command must be a list of strings",
            "Malformed job document: env must be an object of strings",
        )
