import asyncio
import json
import logging
import os
import sys
from argparse import ArgumentParser

from myconstituency.config import load_config
from myconstituency.infra.assembly import AlbertaAssemblyGateway
from myconstituency.usecases.latest_alberta_votes import LatestAlbertaVotes
from myconstituency.usecases.lookup_representatives import lookup_representatives

logger = logging.getLogger(__name__)


def setup_logging():
    log_level = os.environ.get("LOG_LEVEL", "WARNING")
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    # stdout is reserved for the json result
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', '%H:%M:%S'))
    root_logger.addHandler(handler)

    # Suppress third-party noise
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)
    logging.getLogger('aiohttp').setLevel(logging.WARNING)


def main(argv=None):
    parser = ArgumentParser("mc", "mc <subcommand> [options]", "Representatives and legislative votes for Canadian postal codes")
    parser.add_argument("--env", default=None, help="environment to load from environments/<env>.yaml")
    subparsers = parser.add_subparsers(title="mc")

    add_votes_subcommand(subparsers)
    add_lookup_subcommand(subparsers)

    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help()
        return 0

    setup_logging()
    try:
        payload, status = args.func(args)
    except Exception as e:
        logger.exception("%s failed", args.command)
        payload, status = {"error": str(e) or type(e).__name__}, 500

    print(json.dumps(payload, ensure_ascii=False))
    return 0 if status < 400 else 1


def add_votes_subcommand(subs):
    parser = subs.add_parser('votes', help="Recorded votes of an Alberta MLA in the latest Votes & Proceedings")
    parser.add_argument("--name", default="", help="full name of the MLA")
    parser.add_argument("--riding", default="", help="riding, to tell apart members with the same surname")
    parser.add_argument("--debug", action="store_true", help="include diagnostics in the output")
    parser.set_defaults(func=run_votes, command="votes")


def add_lookup_subcommand(subs):
    parser = subs.add_parser('lookup', help="Representatives for a postal code")
    parser.add_argument("postal", nargs="?", default="", help="postal code, e.g. T2P 1J9")
    parser.set_defaults(func=run_lookup, command="lookup")


def run_votes(args):
    config = load_config(args.env)
    usecase = LatestAlbertaVotes(config, AlbertaAssemblyGateway(config))
    return usecase.latest_votes(args.name, args.riding, args.debug)


def run_lookup(args):
    config = load_config(args.env)
    return asyncio.run(lookup_representatives(config, args.postal))


if __name__ == "__main__":
    sys.exit(main())
