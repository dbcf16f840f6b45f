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

"""Generic Cloud Profiler models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class ProfileType(StrEnum):
    """Profile types a deployment can offer to collect."""

    CPU = 'CPU'
    HEAP = 'HEAP'
    THREADS = 'THREADS'
    CONTENTION = 'CONTENTION'
    WALL = 'WALL'


class Deployment(BaseModel):
    """The program a profile was collected from.

    Attributes:
        project_id: GCP project; the client's project is used when empty.
        target: Name of the deployment, e.g. a service name.
        labels: Deployment labels such as 'zone' or 'version'.
    """

    project_id: str = ''
    target: str
    labels: dict[str, str] | None = None


class Profile(BaseModel):
    """A single collected profile.

    Attributes:
        name: Resource name, 'projects/<p>/profiles/<id>'. Empty before creation.
        profile_type: One of `ProfileType`, or another type reported by the API.
        duration: Collection duration, e.g. '60s'.
        labels: Profile labels.
        profile_bytes: Base64 encoded gzipped pprof data, passed through as is.
        deployment: Where the profile comes from.
        start_time: Collection start; only meaningful on profiles read back.
    """

    name: str = ''
    profile_type: str = ''
    duration: str = ''
    labels: dict[str, str] | None = None
    profile_bytes: str | None = None
    deployment: Deployment | None = None
    start_time: datetime | None = None


class CreateProfileRequest(BaseModel):
    """Request an online profile slot for a deployment.

    The service picks one of `profile_type` to collect. `duration` and
    `labels` describe the caller's intent; the create call only carries the
    deployment and the offered types.
    """

    deployment: Deployment
    profile_type: list[str]
    duration: str = ''
    labels: dict[str, str] | None = None


class CreateOfflineProfileRequest(BaseModel):
    """Upload a profile collected outside the online agent flow."""

    profile: Profile


class UpdateProfileRequest(BaseModel):
    """Update the fields of an existing profile named by `profile.name`."""

    profile: Profile
    update_mask: str = ''
    profile_bytes: str = ''


class ListProfilesRequest(BaseModel):
    """Request one page of profiles."""

    page_size: int = 0
    page_token: str = ''


class ListProfilesResponse(BaseModel):
    """One page of profiles.

    Attributes:
        profiles: Profiles on this page.
        next_page_token: Token for the next page, '' on the last page.
        skipped_profiles: Number of profiles the service could not return.
    """

    profiles: list[Profile] = Field(default_factory=list)
    next_page_token: str = ''
    skipped_profiles: int = 0
