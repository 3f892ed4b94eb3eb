"""
Threaded usage example of the MOIBit Client.

A single authenticated Client can be shared between threads: its identity is
fixed after construction and each call is one independent round trip.
"""

import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor

from moibit import Client, FilePath


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    directory = FilePath("examples", "notes")

    try:
        with Client(os.environ["MOIBIT_SIGNATURE"], os.environ["MOIBIT_NONCE"]) as client:
            files = [fd for fd in client.list_files(directory) if not fd.is_directory]

            with ThreadPoolExecutor(max_workers=4) as pool:
                contents = pool.map(lambda fd: client.read_file(fd.path), files)
                for fd, data in zip(files, contents):
                    logger.info("%s: %d bytes", fd.path, len(data))
    except Exception:
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()
