#!/usr/bin/env python3
"""Command line tools: generate wrapper modules and list supported services."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from adsapi.api_config import get_api_config
from adsapi.build.generator import WrapperGenerator
from adsapi.core.config import get_config
from adsapi.core.errors import AdsApiError
from adsapi.core.logging_config import setup_logging
from adsapi.extensions import default_extension_config
from adsapi.soap.transport import SoapTransport
from adsapi.soap.wsdl import describe_service

console = Console()

DEFAULT_OUTPUT = Path(__file__).parent / "generated"


def generate(args: argparse.Namespace) -> int:
    """Generate wrapper modules for the requested services."""
    api_config = get_api_config(args.api)
    version = args.version or api_config.default_version
    services = args.service or api_config.service_names(version)
    output_dir = Path(args.output) if args.output else DEFAULT_OUTPUT / api_config.key
    environment = get_config().service.environment

    if args.wsdl and len(services) != 1:
        console.print("[red]--wsdl can only be used with exactly one --service[/red]")
        return 2

    extension_config = default_extension_config(api_config)
    written = 0
    for service in services:
        wsdl_url = args.wsdl or api_config.wsdl_url(version, service, environment)
        console.print(f"[cyan]Generating {version} {service} from {wsdl_url}[/cyan]")
        transport = SoapTransport(wsdl_url)
        description = describe_service(transport.client, transport.registry, service, version)
        generator = WrapperGenerator(api_config, transport.registry, extension_config)
        path = generator.write_wrapper_module(description, output_dir)
        console.print(f"[green]✓ {path} ({len(description.methods)} methods)[/green]")
        written += 1

    console.print(f"\n[green]Generated {written} wrapper module(s) in {output_dir}[/green]")
    return 0


def list_services(args: argparse.Namespace) -> int:
    """Print the services of one API version."""
    api_config = get_api_config(args.api)
    version = args.version or api_config.default_version
    environment = get_config().service.environment

    table = Table(title=f"{api_config.api_name} {version} services")
    table.add_column("Service", style="cyan")
    table.add_column("WSDL", style="blue")

    for service in api_config.service_names(version):
        table.add_row(service, api_config.wsdl_url(version, service, environment))

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adsapi", description="AdWords/DFP SOAP API client tools")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate service wrapper modules")
    generate_parser.add_argument("--api", default="adwords", choices=["adwords", "dfp"])
    generate_parser.add_argument("--version", help="API version (default: latest supported)")
    generate_parser.add_argument(
        "--service", action="append", help="Service name; repeat for several (default: all services)"
    )
    generate_parser.add_argument("--wsdl", help="Local WSDL file to use instead of the remote one")
    generate_parser.add_argument("--output", help="Output directory (default: adsapi/generated/<api>)")
    generate_parser.set_defaults(func=generate)

    services_parser = subparsers.add_parser("services", help="List supported services")
    services_parser.add_argument("--api", default="adwords", choices=["adwords", "dfp"])
    services_parser.add_argument("--version", help="API version (default: latest supported)")
    services_parser.set_defaults(func=list_services)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return args.func(args)
    except AdsApiError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
