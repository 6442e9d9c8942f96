"""Command line client for the PassiveTotal v2 API.

Usage:
    passivetotal [-c CONFIG] [-t TIMEOUT] [-o OUTPUT] [-p] COMMAND ...

Credentials come from a TOML config file ($HOME/.passivetotal.toml by
default) or PASSIVETOTAL_USERNAME / PASSIVETOTAL_APIKEY:

    [passivetotal]
    username = "USERNAME"
    apikey = "SECRET_API_KEY"
    timeout = 60
"""

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from loguru import logger

from passivetotal import __version__
from passivetotal.client import PassiveTotal
from passivetotal.config import Settings, load_settings
from passivetotal.endpoints import Request
from passivetotal.errors import PassiveTotalError
from passivetotal.fields import SslField, WhoisField

ABOUT = "Simple CLI for the PassiveTotal v2 API."


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure loguru for interactive or machine-readable output.

    Logs always go to stderr so stdout carries only the JSON response.
    """
    logger.remove()

    if settings.debug or verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=settings.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            serialize=True,
        )


def _add_query(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument("query", metavar="QUERY", help=help_text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="passivetotal", description=ABOUT)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-c", "--config", type=Path,
        help="Choose a specific config file. Default $HOME/.passivetotal.toml.",
    )
    parser.add_argument("-t", "--timeout", type=float, help="Timeout for all requests.")
    parser.add_argument("-o", "--output", type=Path, help="File to write output to.")
    parser.add_argument("-p", "--pretty", action="store_true", help="Pretty print JSON results.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr.")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # pdns
    pdns = commands.add_parser("pdns", help="Retrieve the passive DNS results from active sources.")
    pdns.add_argument("--unique", action="store_true", help="Query for unique passive dns results.")
    _add_query(pdns, "DNS query to make.")

    # whois
    whois = commands.add_parser("whois", help="Retrieve or search WHOIS data for a given query.")
    whois_cmds = whois.add_subparsers(dest="subcommand", metavar="SUBCOMMAND", required=True)
    _add_query(whois_cmds.add_parser("data", help="Retrieve the WHOIS data for given query."),
               "Domain to query.")
    whois_search = whois_cmds.add_parser("search", help="Search WHOIS data for a keyword.")
    whois_search.add_argument(
        "--field",
        help="The field to query. [" + ", ".join(f.value for f in WhoisField) + "]",
    )
    _add_query(whois_search, "Keyword to search for.")

    # ssl
    ssl = commands.add_parser("ssl", help="Retrieve information about an SSL certificate.")
    ssl_cmds = ssl.add_subparsers(dest="subcommand", metavar="SUBCOMMAND", required=True)
    _add_query(ssl_cmds.add_parser("certificate", help="Retrieve an SSL certificate by SHA1 hash."),
               "SHA1 hash of certificate.")
    ssl_search = ssl_cmds.add_parser("search", help="Retrieve SSL certificates for a given search.")
    ssl_search.add_argument(
        "--field", help="The field to query. See the PassiveTotal API for a full list of fields.",
    )
    _add_query(ssl_search, "Keyword to search for.")
    _add_query(
        ssl_cmds.add_parser(
            "history", help="Retrieve the SSL certificate history of a given SHA1 or IP address."
        ),
        "SHA1 or IP address to retrieve certificate history for.",
    )

    # enrichment
    enrichment = commands.add_parser(
        "enrichment", help="Get additional enrichment information about a query."
    )
    enrichment_cmds = enrichment.add_subparsers(dest="subcommand", metavar="SUBCOMMAND", required=True)
    for name, help_text in (
        ("data", "Get enrichment data for a query."),
        ("malware", "Get malware data for a query."),
        ("osint", "Get osint data for a query."),
        ("subdomains", "Get subdomains data for a query."),
    ):
        _add_query(enrichment_cmds.add_parser(name, help=help_text), "Domain or IP to query.")

    # actions
    actions = commands.add_parser(
        "actions", help="Retrieve action status information for given query."
    )
    actions_cmds = actions.add_subparsers(dest="subcommand", metavar="SUBCOMMAND", required=True)
    for name, help_text, query_help in (
        ("classification", "Retrieve classification status for a given domain.",
         "Domain for which to retrieve classification status."),
        ("compromised", "Indicates whether or not a given domain has ever been compromised.",
         "Domain for which to retrieve compromised status."),
        ("ddns", "Indicates whether or not a domain's DNS records are updated via dynamic DNS.",
         "Domain for which to retrieve dynamic DNS status."),
        ("monitor", "Indicates whether or not a domain is monitored.",
         "Domain for which to check for monitoring."),
        ("sinkhole", "Indicates whether or not an IP address is a sinkhole.",
         "IP address to check for sinkhole status."),
        ("tags", "Retrieves tags for a given artifact.",
         "Artifact for which to retrieve tags."),
    ):
        _add_query(actions_cmds.add_parser(name, help=help_text), query_help)

    # account
    account = commands.add_parser("account", help="Retrieve account information.")
    account_cmds = account.add_subparsers(dest="subcommand", metavar="SUBCOMMAND", required=True)
    for name, help_text in (
        ("info", "Retrieve account details."),
        ("history", "Retrieve account request history."),
        ("monitors", "Retrieve active monitors."),
        ("organization", "Retrieve organization details."),
        ("quota", "Retrieve account quota."),
    ):
        account_cmds.add_parser(name, help=help_text)
    sources = account_cmds.add_parser("sources", help="Retrieve source configuration.")
    sources.add_argument("--source", help="Only show this source.")
    teamstream = account_cmds.add_parser("teamstream", help="Retrieve organization teamstream.")
    teamstream.add_argument("--source", help="Filter by source.")
    teamstream.add_argument("--type", dest="type_", help="Filter by activity type.")
    teamstream.add_argument("--focus", help="Filter by focus.")
    teamstream.add_argument("--datetime", help="Point in time, ISO-8601 (UTC if no offset).")

    return parser


def build_request(pt: PassiveTotal, args: argparse.Namespace) -> Request:
    """Map parsed arguments onto a request builder.

    Raises:
        FieldParseError: If ``--field`` names an unknown search field.
        ValueError: If ``--datetime`` is not valid ISO-8601.
    """
    command = args.command
    sub = getattr(args, "subcommand", None)

    if command == "pdns":
        return pt.passive_dns(args.query).unique(args.unique)

    if command == "whois":
        if sub == "data":
            return pt.whois().info(args.query)
        field = WhoisField.parse(args.field) if args.field else None
        return pt.whois().search(args.query, field)

    if command == "ssl":
        if sub == "certificate":
            return pt.ssl().certificate(args.query)
        if sub == "history":
            return pt.ssl().history(args.query)
        field = SslField.parse(args.field) if args.field else None
        return pt.ssl().search(args.query, field)

    if command == "enrichment":
        return getattr(pt.enrichment(), sub)(args.query)

    if command == "actions":
        method = "dynamic_dns" if sub == "ddns" else sub
        return getattr(pt.actions(), method)(args.query)

    if command == "account":
        account = pt.account()
        if sub == "sources":
            return account.sources().source(args.source)
        if sub == "teamstream":
            return (
                account.teamstream()
                .source(args.source)
                .type(args.type_)
                .focus(args.focus)
                .datetime(args.datetime)
            )
        return getattr(account, sub)()

    raise ValueError(f"Unknown command: {command}")


def print_response(writer: TextIO, resp: Any, pretty: bool) -> None:
    if pretty:
        json.dump(resp, writer, indent=2)
    else:
        json.dump(resp, writer)
    writer.write("\n")


def print_errors(err: BaseException) -> None:
    """Print an error and its cause chain to stderr."""
    print(f"Error: {err}", file=sys.stderr)
    cause = err.__cause__
    while cause is not None:
        print(f"  {cause}", file=sys.stderr)
        cause = cause.__cause__


def run(pt: PassiveTotal, args: argparse.Namespace) -> None:
    """Send the request described by ``args`` and write the JSON response.

    Raises:
        PassiveTotalError: If the request fails.
        OSError: If the output file cannot be written.
    """
    result = build_request(pt, args).send()
    resp = result.unwrap()

    if args.output is not None:
        with args.output.open("w", encoding="utf-8") as handle:
            print_response(handle, resp, args.pretty)
    else:
        print_response(sys.stdout, resp, args.pretty)


def main(argv: Sequence[str] | None = None, pt: PassiveTotal | None = None) -> int:
    """CLI entrypoint. Returns the process exit status.

    Args:
        argv: Arguments, defaults to sys.argv[1:].
        pt: Client to use instead of one built from configuration.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config, timeout=args.timeout)
        configure_logging(settings, verbose=args.verbose)
        if pt is None:
            pt = PassiveTotal.from_settings(settings)
        run(pt, args)
    except (PassiveTotalError, ValueError, OSError) as e:
        print_errors(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
