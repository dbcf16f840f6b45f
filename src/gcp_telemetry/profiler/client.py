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

"""Public Cloud Profiler client."""

from typing import Protocol

from .types import (
    CreateOfflineProfileRequest,
    CreateProfileRequest,
    ListProfilesRequest,
    ListProfilesResponse,
    Profile,
    UpdateProfileRequest,
)


class ProfilerBackend(Protocol):
    """Capability set of a Cloud Profiler implementation."""

    def create_profile(self, request: CreateProfileRequest) -> Profile:
        """Create an online profile."""
        ...

    def create_offline_profile(self, request: CreateOfflineProfileRequest) -> Profile:
        """Upload an offline profile."""
        ...

    def update_profile(self, request: UpdateProfileRequest) -> Profile:
        """Update an existing profile."""
        ...

    def list_profiles(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """Read one page of profiles."""
        ...


class ProfilerClient:
    """Cloud Profiler operations over generic models."""

    def __init__(self, backend: ProfilerBackend) -> None:
        """Initialize the client.

        Args:
            backend: Implementation every call is delegated to.
        """
        self._backend = backend

    @classmethod
    def for_project(cls, project_id: str) -> 'ProfilerClient':
        """Create a client backed by the real Cloud Profiler API."""
        from .adapter import CloudProfilerAdapter

        return cls(CloudProfilerAdapter.for_project(project_id))

    def create_profile(self, request: CreateProfileRequest) -> Profile:
        """Create a new profile in Cloud Profiler."""
        return self._backend.create_profile(request)

    def create_offline_profile(self, request: CreateOfflineProfileRequest) -> Profile:
        """Create an offline profile in Cloud Profiler."""
        return self._backend.create_offline_profile(request)

    def update_profile(self, request: UpdateProfileRequest) -> Profile:
        """Update an existing profile in Cloud Profiler."""
        return self._backend.update_profile(request)

    def list_profiles(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """List profiles in Cloud Profiler."""
        return self._backend.list_profiles(request)
