import sys

from tree_to_text.models import DEFAULT_CONFIG, DecodeError, UsageError, decode_tree
from tree_to_text.utils import configure_logging, get_parser


def main(argv=None) -> int:
    parser = get_parser()
    logger = configure_logging(parser.prog)
    _args, extra = parser.parse_known_args(argv)
    try:
        if extra:
            parser.print_usage(sys.stderr)
            raise UsageError(f"Unexpected arguments: {' '.join(extra)}")
        decode_tree(sys.stdin.buffer, sys.stdout.buffer, DEFAULT_CONFIG)
    except (UsageError, DecodeError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
