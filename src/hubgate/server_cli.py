"""CLI entry point for the hubgate server."""

import argparse
import os

from hubgate.config import Settings


def main(argv: list[str] | None = None) -> None:
    env_settings = Settings()
    parser = argparse.ArgumentParser(
        prog="hubgate-server",
        description="hubgate: signature-verifying ingress for GitHub webhooks",
    )
    parser.add_argument(
        "--host",
        default=env_settings.host,
        help=f"Bind host (default: HUBGATE_HOST or {env_settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=env_settings.port,
        help=f"Bind port (default: HUBGATE_PORT or {env_settings.port})",
    )
    parser.add_argument("--config", help="Path to the TOML trust configuration (default: hubgate.toml)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: colored console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    if args.local:
        os.environ["HUBGATE_LOCAL_MODE"] = "1"
    if args.config:
        os.environ["HUBGATE_CONFIG_PATH"] = args.config

    import uvicorn

    uvicorn.run("hubgate.main:create_app", factory=True, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
