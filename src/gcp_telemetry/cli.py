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

"""Command line entry point: `gcp-telemetry-mcp [--version]`."""

import argparse
import asyncio
import sys

from google.auth.exceptions import DefaultCredentialsError

from . import __version__
from .config import TelemetryConfig
from .constants import PACKAGE_NAME
from .core.logging import configure_logging, get_logger
from .server import TelemetryMcpServer
from .tools import TelemetryTools, create_clients

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description='Serve Cloud Logging, Monitoring, Trace and Profiler as MCP tools over stdio.',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    parser.add_argument(
        '--project',
        metavar='PROJECT_ID',
        default=None,
        help='GCP project ID. Defaults to GOOGLE_CLOUD_PROJECT, then GCLOUD_PROJECT.',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse instead of `sys.argv`.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    config = TelemetryConfig.from_env(args.project)
    if config is None:
        print(  # noqa: T201 - CLI output
            'GOOGLE_CLOUD_PROJECT environment variable not set',
            file=sys.stderr,
        )
        return 1

    configure_logging(config.log_level)
    logger.info('Starting', project_id=config.project_id, version=__version__)

    try:
        clients = create_clients(config.project_id)
    except DefaultCredentialsError as e:
        print(f'Failed to create clients: {e}', file=sys.stderr)  # noqa: T201 - CLI output
        return 1

    try:
        server = TelemetryMcpServer(TelemetryTools(clients), name=config.server_name)
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130
    return 0


if __name__ == '__main__':
    sys.exit(main())
