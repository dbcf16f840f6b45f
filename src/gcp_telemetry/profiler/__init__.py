# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0


"""Cloud Profiler provider: generic models, client contract and wire adapter."""

from .client import ProfilerBackend, ProfilerClient
from .types import (
    CreateOfflineProfileRequest,
    CreateProfileRequest,
    Deployment,
    ListProfilesRequest,
    ListProfilesResponse,
    Profile,
    ProfileType,
    UpdateProfileRequest,
)

__all__ = [
    'CreateOfflineProfileRequest',
    'CreateProfileRequest',
    'Deployment',
    'ListProfilesRequest',
    'ListProfilesResponse',
    'Profile',
    'ProfileType',
    'ProfilerBackend',
    'ProfilerClient',
    'UpdateProfileRequest',
]
