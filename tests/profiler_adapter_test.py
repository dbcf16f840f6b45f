# Copyright 2025 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Cloud Profiler wire adapter."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from gcp_telemetry.profiler import (
    CreateOfflineProfileRequest,
    CreateProfileRequest,
    Deployment,
    ListProfilesRequest,
    Profile,
    UpdateProfileRequest,
)
from gcp_telemetry.profiler.adapter import CloudProfilerAdapter, from_wire_profile, parse_timestamp

LOCAL_NOW = datetime(2025, 2, 3, 4, 5, 6, tzinfo=UTC)

WIRE_PROFILE = {
    'name': 'projects/test-project/profiles/p1',
    'profileType': 'CPU',
    'duration': '10s',
    'labels': {'zone': 'us-central1-a'},
    'deployment': {'projectId': 'test-project', 'target': 'checkout', 'labels': {'version': 'v2'}},
}


@pytest.fixture
def service() -> MagicMock:
    """A mocked cloudprofiler v2 discovery resource."""
    return MagicMock()


@pytest.fixture
def profiles(service: MagicMock) -> MagicMock:
    """The `projects().profiles()` collection of the mocked service."""
    return service.projects.return_value.profiles.return_value


@pytest.fixture
def adapter(service: MagicMock) -> CloudProfilerAdapter:
    """An adapter with a fixed clock."""
    return CloudProfilerAdapter(service, 'test-project', clock=lambda: LOCAL_NOW)


class TestFromWireProfile:
    """Tests for profile translation."""

    def test_full_profile(self) -> None:
        """All fields and the deployment are carried over."""
        profile = from_wire_profile(WIRE_PROFILE, clock=lambda: LOCAL_NOW)
        assert profile.name == 'projects/test-project/profiles/p1'
        assert profile.profile_type == 'CPU'
        assert profile.duration == '10s'
        assert profile.labels == {'zone': 'us-central1-a'}
        assert profile.deployment == Deployment(project_id='test-project', target='checkout', labels={'version': 'v2'})
        assert profile.profile_bytes is None

    def test_start_time_falls_back_to_local_clock(self) -> None:
        """Without a service start time the local clock is used."""
        assert from_wire_profile(WIRE_PROFILE, clock=lambda: LOCAL_NOW).start_time == LOCAL_NOW

    def test_service_start_time_wins(self) -> None:
        """A start time from the service is preferred."""
        body = {**WIRE_PROFILE, 'startTime': '2025-01-01T00:00:00.123456789Z'}
        profile = from_wire_profile(body, clock=lambda: LOCAL_NOW)
        assert profile.start_time == datetime(2025, 1, 1, 0, 0, 0, 123456, tzinfo=UTC)

    def test_parse_timestamp_rejects_garbage(self) -> None:
        """Malformed timestamps raise ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp('yesterday')


class TestCreateProfile:
    """Tests for create_profile."""

    def test_sends_deployment_and_types(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """The deployment defaults to the adapter's project."""
        profiles.create.return_value.execute.return_value = WIRE_PROFILE

        profile = adapter.create_profile(
            CreateProfileRequest(
                deployment=Deployment(target='checkout', labels={'version': 'v2'}),
                profile_type=['CPU', 'HEAP'],
                duration='60s',
            )
        )

        profiles.create.assert_called_once_with(
            parent='projects/test-project',
            body={
                'deployment': {'projectId': 'test-project', 'target': 'checkout', 'labels': {'version': 'v2'}},
                'profileType': ['CPU', 'HEAP'],
            },
        )
        assert profile.name == 'projects/test-project/profiles/p1'
        assert profile.start_time == LOCAL_NOW


class TestCreateOfflineProfile:
    """Tests for create_offline_profile."""

    def test_sends_profile_bytes(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """Profile data is passed through uninterpreted."""
        profiles.createOffline.return_value.execute.return_value = {**WIRE_PROFILE, 'profileBytes': 'H4sIAAAA'}

        profile = adapter.create_offline_profile(
            CreateOfflineProfileRequest(
                profile=Profile(
                    profile_type='HEAP',
                    duration='60s',
                    profile_bytes='H4sIAAAA',
                    deployment=Deployment(project_id='other-project', target='batch'),
                )
            )
        )

        kwargs = profiles.createOffline.call_args.kwargs
        assert kwargs['parent'] == 'projects/test-project'
        assert kwargs['body'] == {
            'profileType': 'HEAP',
            'duration': '60s',
            'profileBytes': 'H4sIAAAA',
            'deployment': {'projectId': 'other-project', 'target': 'batch'},
        }
        assert profile.profile_bytes == 'H4sIAAAA'


class TestUpdateProfile:
    """Tests for update_profile."""

    def test_forwards_update_mask(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """The mask and the new data reach the patch call."""
        profiles.patch.return_value.execute.return_value = WIRE_PROFILE

        adapter.update_profile(
            UpdateProfileRequest(
                profile=Profile(name='projects/test-project/profiles/p1', labels={'k': 'v'}),
                update_mask='labels,profile_bytes',
                profile_bytes='AAAA',
            )
        )

        profiles.patch.assert_called_once_with(
            name='projects/test-project/profiles/p1',
            updateMask='labels,profile_bytes',
            body={'name': 'projects/test-project/profiles/p1', 'labels': {'k': 'v'}, 'profileBytes': 'AAAA'},
        )

    def test_no_mask_when_empty(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """An empty mask is not sent."""
        profiles.patch.return_value.execute.return_value = WIRE_PROFILE

        adapter.update_profile(UpdateProfileRequest(profile=Profile(name='projects/test-project/profiles/p1')))

        assert 'updateMask' not in profiles.patch.call_args.kwargs


class TestListProfiles:
    """Tests for list_profiles."""

    def test_defaults_to_one_hundred(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """Page size defaults to 100 and the continuation data is returned."""
        profiles.list.return_value.execute.return_value = {
            'profiles': [WIRE_PROFILE],
            'nextPageToken': 'next',
            'skippedProfiles': 2,
        }

        response = adapter.list_profiles(ListProfilesRequest())

        profiles.list.assert_called_once_with(parent='projects/test-project', pageSize=100)
        assert len(response.profiles) == 1
        assert response.next_page_token == 'next'
        assert response.skipped_profiles == 2

    def test_page_bound_and_token(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """At most page_size profiles are returned and the cursor is sent."""
        profiles.list.return_value.execute.return_value = {'profiles': [WIRE_PROFILE] * 3}

        response = adapter.list_profiles(ListProfilesRequest(page_size=2, page_token='tok'))

        profiles.list.assert_called_once_with(parent='projects/test-project', pageSize=2, pageToken='tok')
        assert len(response.profiles) == 2
        assert response.next_page_token == ''
        assert response.skipped_profiles == 0

    def test_empty_response(self, adapter: CloudProfilerAdapter, profiles: MagicMock) -> None:
        """A response without profiles is an empty page."""
        profiles.list.return_value.execute.return_value = {}
        assert adapter.list_profiles(ListProfilesRequest()).profiles == []
