"""pdnsprovider CLI — run resource lifecycle operations from the command line.

Usage examples::

    pdnsprovider -c '{"server_url":"http://pdns:8081","api_key":"k"}' powerdns_zone create \\
        --state '{"config":{"name":"example.com.","kind":"Native","nameservers":["ns1.example.com."]}}'
    pdnsprovider powerdns_zone import --state '{"id":"{\\"name\\":\\"example.com.\\"}"}'
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, NoReturn, get_args

from pdnsprovider.base.exceptions import ProviderError
from pdnsprovider.base.state import ResourceData
from pdnsprovider.base.supported_resources import existing_resources, lifecycle_operations
from pdnsprovider.factory import client_factory, resource_factory


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``pdnsprovider`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="pdnsprovider",
        description="PowerDNS resource lifecycle CLI",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON provider config (e.g. \'{"server_url":"http://pdns:8081"}\')',
    )
    parser.add_argument(
        "resource_type",
        choices=list(get_args(existing_resources)),
        help="Resource type",
    )
    parser.add_argument(
        "operation",
        choices=list(get_args(lifecycle_operations)),
        help="Lifecycle operation to run",
    )
    parser.add_argument(
        "--state", "-s",
        type=str,
        default="{}",
        help='JSON resource state with "id", "config" and "prior" keys',
    )
    return parser


def _fail(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, rebuilds the resource state, runs the requested
    lifecycle operation and prints the resulting state as JSON.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config: dict[str, Any] = json.loads(ns.config)
    except json.JSONDecodeError as e:
        _fail(f"Invalid --config JSON: {e}")

    try:
        raw_state: dict[str, Any] = json.loads(ns.state)
    except json.JSONDecodeError as e:
        _fail(f"Invalid --state JSON: {e}")

    try:
        data = ResourceData.from_dict(raw_state)
    except ProviderError as e:
        _fail(f"Error: {e}")

    resource = resource_factory(ns.resource_type)

    if ns.operation == "plan":
        print(json.dumps({
            "requires_replacement": data.requires_replacement(),
            "kind_changed": data.has_change("kind"),
        }, indent=2))
        return

    if ns.operation == "create":
        missing = data.config.missing_required()
        if missing:
            _fail(f"Error: missing required fields: {', '.join(missing)}")

    try:
        client = client_factory(config)
    except ProviderError as e:
        _fail(f"Error: {e}")

    try:
        if ns.operation == "exists":
            print(json.dumps({"exists": resource.exists(data, client)}))
            return
        if ns.operation == "import":
            imported = resource.import_state(data, client)
            print(json.dumps([d.to_dict() for d in imported], indent=2))
            return
        getattr(resource, ns.operation)(data, client)
    except ProviderError as e:
        _fail(f"Operation failed: {e}")

    if ns.operation == "delete":
        data.set_id("")
    print(json.dumps(data.to_dict(), indent=2))


if __name__ == "__main__":
    main()
