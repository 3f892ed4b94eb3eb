"""
File status check example.

This example shows how to check whether a file exists on MOIBit and how
to inspect its version history.
"""

import logging
import os
import sys

from moibit import Client, FilePath, NonOkResponseError


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    path = FilePath(sys.argv[1] if len(sys.argv) > 1 else "examples/notes/hello.txt")

    try:
        with Client(os.environ["MOIBIT_SIGNATURE"], os.environ["MOIBIT_NONCE"]) as client:
            status = client.file_status(path)
            if not status.exists():
                logger.info("%s does not exist", path)
                return

            logger.info("%s: %s bytes, replication %s", path, status.filesize, status.replication)
            for version in client.file_versions(path):
                logger.info("  v%s %s (%s)", version.version, version.hash, version.last_updated)
    except NonOkResponseError as err:
        logger.error("Service refused the request [%s]: %s", err.code, err.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
