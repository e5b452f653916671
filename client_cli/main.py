"""Lightweight CLI for exercising the Duphlux client."""
# Example:
# python -m client_cli.main --action authenticate --phone-number 2348012345678 \
#     --redirect-url https://example.com/callback

from __future__ import annotations

import json
import logging
import sys

from argparse import (
    ArgumentParser,
    RawDescriptionHelpFormatter,
    ArgumentDefaultsHelpFormatter,
)

from duphlux_client import ClientConfig, DuphluxClient, DuphluxError, load_config
from duphlux_client.constants import ENV_LIVE, ENV_TEST
from duphlux_client.logging_config import configure_logging


# Combine both formatters to allow newlines and showing default arguments
class RawDescriptionDefaultsHelpFormatter(
    RawDescriptionHelpFormatter,
    ArgumentDefaultsHelpFormatter,
):
    pass


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Duphlux phone number verification client.\n\n" +
                    "Initiate a verification with --action authenticate, send the user to the printed " +
                    "verification_url, then poll the outcome with --action status.\n" +
                    "Tokens are read from duphlux.yaml or DUPHLUX_LIVE_ACCESS_TOKEN / " +
                    "DUPHLUX_TEST_ACCESS_TOKEN unless --token is given.",
        formatter_class=RawDescriptionDefaultsHelpFormatter
    )

    parser.add_argument("--config", default="duphlux.yaml", help="YAML configuration file")
    parser.add_argument("--token", default=None, help="API token (overrides configured tokens)")
    parser.add_argument("--environment", choices=[ENV_LIVE, ENV_TEST], default=None, help="API environment")
    parser.add_argument("--base-url", default=None, help="Override the API base URL")
    parser.add_argument("--insecure", action="store_true", help="Disable TLS certificate verification")
    parser.add_argument(
        "--action",
        choices=["authenticate", "status", "ref"],
        help="Action to execute",
    )
    parser.add_argument("--phone-number", default=None, help="Phone number to verify (authenticate)")
    parser.add_argument(
        "--reference",
        default=None,
        help="Transaction reference; generated for authenticate when absent",
    )
    parser.add_argument("--redirect-url", default=None, help="URL the user returns to (authenticate)")
    parser.add_argument("--length", type=int, default=10, help="Reference length (ref)")
    parser.add_argument("--log-level", default=None, help="Log level, defaults to LOG_LEVEL or INFO")
    return parser


def build_client(args, transport=None) -> DuphluxClient:
    """Create a client from the parsed arguments and the loaded configuration.

    Args:
        args: Parsed CLI arguments.
        transport: Optional transport override.

    Returns:
        DuphluxClient: Configured client.
    """
    config = ClientConfig.from_mapping(load_config(args.config))
    client = DuphluxClient(
        access_token=args.token,
        environment=args.environment,
        config=config,
        transport=transport,
    )
    if args.base_url:
        client.set_base_url(args.base_url)
    if args.insecure:
        client.verify_peer = False
    return client


def _result(client: DuphluxClient) -> dict:
    return {
        "status": client.get_status(),
        "errors": client.get_error(),
        "data": client.get_data(),
        "has_error": client.has_error,
    }


def main(argv: list[str] | None = None, transport=None) -> int:
    """CLI entrypoint for interacting with the Duphlux client.

    Args:
        argv: Optional list of arguments (defaults to ``sys.argv``).
        transport: Optional transport override, used by tests.

    Returns:
        int: Process exit code (0 on success, non-zero on error).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logging.getLogger().debug("Handling action: %s", args.action)

    if args.action == "ref":
        print(DuphluxClient.generate_ref(args.length))
        return 0

    if args.action not in ("authenticate", "status"):
        # No action selected, show help
        parser.print_help()
        return 1

    try:
        client = build_client(args, transport=transport)

        if args.action == "authenticate":
            reference = args.reference or DuphluxClient.generate_ref()
            client.authenticate(
                {
                    "phone_number": args.phone_number or "",
                    "transaction_reference": reference,
                    "redirect_url": args.redirect_url or "",
                }
            )
            out = _result(client)
            out["transaction_reference"] = reference
            print(json.dumps(out, indent=2))
            return 1 if client.has_error else 0

        client.check_status(args.reference or "")
        out = _result(client)
        if not client.has_error:
            out["verified"] = client.is_verified()
            out["pending"] = client.is_pending()
            out["failed"] = client.is_failed()
        print(json.dumps(out, indent=2))
        return 1 if client.has_error else 0

    except DuphluxError as exc:
        sys.stderr.write(f"Duphlux request failed: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
