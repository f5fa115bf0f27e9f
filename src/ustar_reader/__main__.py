import argparse
import logging
import sys

from ustar_reader.exceptions import ArchiveError
from ustar_reader.extract import extract, open_archive
from ustar_reader.tar.stream import DEFAULT_BUFFER_SIZE

logger = logging.getLogger("ustar_reader")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="ustar-reader",
        description="Extract a USTAR/PAX tar archive.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("archive", help="path to the tar archive")
    parser.add_argument("-C", "--directory", default=".",
                        help="directory to extract into")
    parser.add_argument("--buffer-size", type=int, default=DEFAULT_BUFFER_SIZE,
                        help="chunk size used when copying file contents; "
                             "must be a multiple of 512")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every extracted entry")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        extract(open_archive(args.archive), args.directory, buffer_size=args.buffer_size)
    except (ArchiveError, ValueError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Extracted %s into %s", args.archive, args.directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())
