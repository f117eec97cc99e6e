"""Command-line interface for hostname lookups."""
from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

from .adapters import ApiTransport
from .api_client import CfCurlTransport, CloudControllerClient
from .config import ApiConfig, LookupConfig, load_cf_config
from .core.resolver import HostnameResolver
from .errors import ConfigError
from .models import Outcome
from .report import ReportBuilder

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the Cloud Foundry domain or route behind a hostname")
    parser.add_argument("hostname", help="Fully-qualified hostname to look up")
    parser.add_argument("--api", default=os.environ.get("CF_API"), help="Cloud Controller API URL (default: $CF_API or cf CLI target)")
    parser.add_argument("--token", default=os.environ.get("CF_TOKEN"), help="OAuth access token (default: $CF_TOKEN or cf CLI token)")
    parser.add_argument("--transport", choices=["http", "cf"], default="http", help="Call the API directly or through 'cf curl'")
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout (seconds)")
    parser.add_argument("--skip-ssl-validation", action="store_true", help="Do not verify the API's TLS certificate")
    parser.add_argument("--cf-config", type=Path, help="Path to the cf CLI config.json (default: $CF_HOME/.cf/config.json)")
    parser.add_argument("--results-per-page", type=int, default=100, help="Page size requested from the API")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--output", type=Path, help="Also write the JSON result to this path")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        transport = build_transport(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    resolver = HostnameResolver(transport, LookupConfig(results_per_page=args.results_per_page))
    try:
        result = resolver.resolve(args.hostname)
    finally:
        if isinstance(transport, CloudControllerClient):
            transport.close()

    builder = ReportBuilder()
    payload = builder.build_json(result)
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(builder.build_text(result))

    if args.output:
        _ensure_parent(args.output)
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("JSON result written to %s", args.output)

    if result.outcome is Outcome.FAILURE:
        return EXIT_FAILURE
    return EXIT_FOUND if result.found else EXIT_NOT_FOUND


def build_transport(args: argparse.Namespace) -> ApiTransport:
    if args.transport == "cf":
        return CfCurlTransport(timeout=args.timeout)

    verify = not args.skip_ssl_validation
    if args.api or args.token:
        # explicit target and token are only used as a pair
        if not (args.api and args.token):
            raise ConfigError("--api and --token (or CF_API and CF_TOKEN) must be given together")
        api_url, token = args.api, args.token
    else:
        stored = load_cf_config(args.cf_config)
        if stored is None:
            raise ConfigError("No API target configured: pass --api/--token, set CF_API/CF_TOKEN, or run 'cf login'")
        api_url, token = stored.api_url, stored.access_token
        verify = verify and stored.verify_ssl
    config = ApiConfig(api_url=api_url, access_token=token, timeout=args.timeout, verify_ssl=verify)
    logger.debug("Using API %s", config.api_url)
    return CloudControllerClient(config)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
