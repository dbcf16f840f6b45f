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

"""Cloud Profiler v2 wire adapter.

Cloud Profiler has no generated gRPC client in the Python SDK, so this
adapter drives the REST API through googleapiclient's discovery service.
Requests and responses are plain JSON dicts in the API's camelCase form.

Profiles read back carry the service's `startTime` when present. Older
responses omit it, and those profiles are stamped with the local UTC time
at which they were translated instead.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

import google.auth
from google.protobuf import timestamp_pb2
from googleapiclient import discovery

from ..constants import DEFAULT_PROFILES_PAGE_SIZE
from ..core.logging import get_logger
from .types import (
    CreateOfflineProfileRequest,
    CreateProfileRequest,
    Deployment,
    ListProfilesRequest,
    ListProfilesResponse,
    Profile,
    UpdateProfileRequest,
)

logger = get_logger(__name__)

CLOUD_PLATFORM_SCOPE = 'https://www.googleapis.com/auth/cloud-platform'


def _utc_now() -> datetime:
    return datetime.now(UTC)


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp as returned by Google REST APIs.

    Args:
        text: Timestamp such as '2025-01-01T00:00:00.123456789Z'.

    Returns:
        A UTC datetime, truncated to microseconds.

    Raises:
        ValueError: If `text` is not RFC 3339.
    """
    timestamp = timestamp_pb2.Timestamp()
    timestamp.FromJsonString(text)
    return timestamp.ToDatetime(tzinfo=UTC)


def to_wire_deployment(deployment: Deployment, default_project_id: str) -> dict[str, Any]:
    """Build a REST deployment, defaulting the project to the adapter's."""
    body: dict[str, Any] = {
        'projectId': deployment.project_id or default_project_id,
        'target': deployment.target,
    }
    if deployment.labels:
        body['labels'] = dict(deployment.labels)
    return body


def to_wire_profile(profile: Profile, default_project_id: str, profile_bytes: str | None = None) -> dict[str, Any]:
    """Build a REST profile body.

    Args:
        profile: The generic profile.
        default_project_id: Project used when the deployment names none.
        profile_bytes: Overrides `profile.profile_bytes` when given.

    Returns:
        The JSON body; unset fields are omitted.
    """
    body: dict[str, Any] = {}
    if profile.name:
        body['name'] = profile.name
    if profile.profile_type:
        body['profileType'] = profile.profile_type
    if profile.duration:
        body['duration'] = profile.duration
    if profile.labels:
        body['labels'] = dict(profile.labels)
    data = profile_bytes if profile_bytes is not None else profile.profile_bytes
    if data:
        body['profileBytes'] = data
    if profile.deployment is not None:
        body['deployment'] = to_wire_deployment(profile.deployment, default_project_id)
    return body


def from_wire_profile(body: Mapping[str, Any], clock: Callable[[], datetime] = _utc_now) -> Profile:
    """Convert a REST profile.

    Args:
        body: Profile JSON from the API.
        clock: Source of the fallback start time.

    Returns:
        The generic profile.
    """
    deployment = None
    if body.get('deployment') is not None:
        wire_deployment = body['deployment']
        deployment = Deployment(
            project_id=wire_deployment.get('projectId', ''),
            target=wire_deployment.get('target', ''),
            labels=wire_deployment.get('labels') or None,
        )

    start_time = body.get('startTime')
    return Profile(
        name=body.get('name', ''),
        profile_type=body.get('profileType', ''),
        duration=body.get('duration', ''),
        labels=body.get('labels') or None,
        profile_bytes=body.get('profileBytes') or None,
        deployment=deployment,
        start_time=parse_timestamp(start_time) if start_time else clock(),
    )


class CloudProfilerAdapter:
    """`ProfilerBackend` implementation over the Cloud Profiler REST API."""

    def __init__(
        self,
        service: Any,
        project_id: str,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the adapter.

        Args:
            service: A `cloudprofiler` v2 discovery resource.
            project_id: GCP project every call is scoped to.
            clock: Source of start times for profiles the API returns without one.
        """
        self._service = service
        self._project_id = project_id
        self._clock = clock

    @classmethod
    def for_project(cls, project_id: str) -> CloudProfilerAdapter:
        """Create an adapter with Application Default Credentials."""
        credentials, _ = google.auth.default(scopes=[CLOUD_PLATFORM_SCOPE])
        service = discovery.build('cloudprofiler', 'v2', credentials=credentials, cache_discovery=False)
        return cls(service, project_id)

    @property
    def project_name(self) -> str:
        """Resource name of the project, 'projects/<id>'."""
        return f'projects/{self._project_id}'

    def _profiles(self) -> Any:
        return self._service.projects().profiles()

    def create_profile(self, request: CreateProfileRequest) -> Profile:
        """Create an online profile; blocks until the service assigns one.

        Args:
            request: Deployment and offered profile types.

        Returns:
            The profile the service chose to collect.
        """
        body = {
            'deployment': to_wire_deployment(request.deployment, self._project_id),
            'profileType': list(request.profile_type),
        }
        response = self._profiles().create(parent=self.project_name, body=body).execute()
        logger.debug('Created profile', name=response.get('name'), profile_type=response.get('profileType'))
        return from_wire_profile(response, self._clock)

    def create_offline_profile(self, request: CreateOfflineProfileRequest) -> Profile:
        """Upload a profile collected offline.

        Args:
            request: The profile, including its data.

        Returns:
            The stored profile.
        """
        body = to_wire_profile(request.profile, self._project_id)
        response = self._profiles().createOffline(parent=self.project_name, body=body).execute()
        logger.debug('Created offline profile', name=response.get('name'))
        return from_wire_profile(response, self._clock)

    def update_profile(self, request: UpdateProfileRequest) -> Profile:
        """Patch the profile named by `request.profile.name`.

        Args:
            request: The profile, optional update mask and optional data.

        Returns:
            The updated profile.
        """
        body = to_wire_profile(request.profile, self._project_id, profile_bytes=request.profile_bytes or None)
        kwargs: dict[str, Any] = {'name': request.profile.name, 'body': body}
        if request.update_mask:
            kwargs['updateMask'] = request.update_mask
        response = self._profiles().patch(**kwargs).execute()
        logger.debug('Updated profile', name=request.profile.name, update_mask=request.update_mask)
        return from_wire_profile(response, self._clock)

    def list_profiles(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """Read one page of profiles.

        Args:
            request: Paging parameters.

        Returns:
            At most `page_size` profiles (100 when unset), the next token and
            the number of profiles the service skipped.
        """
        page_size = request.page_size if request.page_size > 0 else DEFAULT_PROFILES_PAGE_SIZE
        kwargs: dict[str, Any] = {'parent': self.project_name, 'pageSize': page_size}
        if request.page_token:
            kwargs['pageToken'] = request.page_token
        response = self._profiles().list(**kwargs).execute()

        profiles = [
            from_wire_profile(body, self._clock) for body in itertools.islice(response.get('profiles', []), page_size)
        ]
        next_page_token = response.get('nextPageToken', '')
        logger.debug('Listed profiles', count=len(profiles), has_more=bool(next_page_token))
        return ListProfilesResponse(
            profiles=profiles,
            next_page_token=next_page_token,
            skipped_profiles=int(response.get('skippedProfiles', 0)),
        )
