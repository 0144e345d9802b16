"""
Command-line interface for the AiSEG2 client.

    aiseg2 discover
    aiseg2 shutters
    aiseg2 shutter "Garage shutter" close
    aiseg2 air
"""

import argparse
import getpass
import logging
import sys

from .client import AiSeg2
from .config import DEFAULT_HOST, DEFAULT_PASSWORD, DEFAULT_USER
from .errors import AiSeg2Error
from .logging_setup import _setup_logging, log
from .models import OperationCode


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Query and operate a Panasonic AiSEG2 gateway.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Credentials can also be provided via the AISEG2_USER / "
            "AISEG2_PASSWORD env vars.\nWithout --host the gateway is "
            "located over SSDP."
        ),
    )
    parser.add_argument(
        "--host", default=DEFAULT_HOST,
        help="Gateway IP address (default: discover over SSDP)",
    )
    parser.add_argument(
        "--user", default=DEFAULT_USER,
        help=f"Panel username (default: {DEFAULT_USER})",
    )
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="Panel password (overrides AISEG2_PASSWORD env var)",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("discover", help="Print the gateway address")
    sub.add_parser("shutters", help="List configured shutters")
    op = sub.add_parser("shutter", help="Open, close or stop a shutter")
    op.add_argument("name", help="Shutter display name")
    op.add_argument("op", choices=[c.name.lower() for c in OperationCode])
    sub.add_parser("air", help="Print room temperature and humidity")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, client: AiSeg2) -> int:
    address = args.host or client.discover()
    if args.command == "discover":
        print(address)
        return 0

    if args.command == "shutters":
        for name, device in client.get_shutter(address).items():
            print(f"{name}\t{device.node_id}\t{device.eoj}\t{device.condition}")
        return 0

    if args.command == "shutter":
        shutters = client.get_shutter(address)
        device = shutters.get(args.name)
        if device is None:
            log.error("No shutter named %r (known: %s)", args.name, ", ".join(shutters))
            return 1
        print(client.do_shutter(address, device, args.op))
        return 0

    for room in client.get_air_environment(address):
        print(f"{room.name}\t{room.temp}\t{room.humi}")
    return 0


def main(argv=None) -> None:
    args = parse_args(argv)

    _setup_logging(debug=args.debug)
    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.password and args.command != "discover":
        args.password = getpass.getpass("AiSEG2 password: ")

    client = AiSeg2(args.user, args.password)
    try:
        status = run(args, client)
    except AiSeg2Error as exc:
        log.error("%s", exc)
        log.debug("Cause: %r", exc.__cause__)
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
