"""Serve the mock API until interrupted."""

from __future__ import annotations

import argparse
import logging
import time

from mock_api.config import ServerSpeed, Settings
from mock_api.server import start_server


def parse_args() -> argparse.Namespace:
    """Parse command line overrides for the environment settings."""

    parser = argparse.ArgumentParser(
        description="Serve seeded users and roles with simulated latency and failures.",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: SERVER_PORT or 3002)")
    parser.add_argument(
        "--speed",
        choices=[speed.value for speed in ServerSpeed],
        default=None,
        help="Latency profile (default: SERVER_SPEED or fast)",
    )
    parser.add_argument("--page-size", type=int, default=None, help="Items per page")
    parser.add_argument(
        "--chance-of-server-error",
        type=float,
        default=None,
        help="Probability in [0, 1] that a request fails with a 500",
    )
    parser.add_argument(
        "--no-request-logging",
        action="store_true",
        help="Do not log one line per request",
    )
    return parser.parse_args()


def main() -> None:
    """Start the server with the requested settings and block until Ctrl+C."""

    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    overrides = {
        "port": args.port,
        "speed": args.speed,
        "page_size": args.page_size,
        "chance_of_server_error": args.chance_of_server_error,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    if args.no_request_logging:
        update["request_logging"] = False

    try:
        settings = Settings(**update)
    except ValueError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc

    handle = start_server(settings, host=args.host)
    print(
        "\n  API Endpoints:\n"
        f"  ->  {handle.url}/users\n"
        f"  ->  {handle.url}/roles\n"
        f"\n  Server Speed: {settings.speed.value}\n"
    )
    try:
        while handle.thread.is_alive():
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass
    finally:
        handle.stop()


if __name__ == "__main__":
    main()
