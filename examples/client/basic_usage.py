"""
Basic usage example of the MOIBit Client.

This example authenticates with MOIBit, writes a text file, lists the
directory it was written to and reads the file back.
Set MOIBIT_SIGNATURE, MOIBIT_NONCE and MOIBIT_APP_ID before running it.
"""

import logging
import os
import sys

from moibit import Client, FilePath, keep_previous, replication_factor


def main() -> None:
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    try:
        with Client(
            signature=os.environ["MOIBIT_SIGNATURE"],
            nonce=os.environ["MOIBIT_NONCE"],
            log_level=logging.INFO,
        ) as client:
            logger.info("Authenticated as %s", client.public_key)

            target = FilePath("examples", "notes", "hello.txt")
            descriptors = client.write_file(b"hello from moibit", target, keep_previous(), replication_factor(2))
            for fd in descriptors:
                logger.info("Stored %s (hash %s)", fd.path, fd.hash)

            for fd in client.list_files(target.parent):
                logger.info("  %s %s bytes", fd.path, fd.filesize)

            logger.info("Contents: %s", client.read_file(target).decode())
    except Exception:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()
