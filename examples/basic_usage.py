#!/usr/bin/env python3
"""Basic usage example"""

import sys

from leveled_logger import Logger, LoggerOptions

def main():
    # Default routing: everything to stdout
    logger = Logger("example", Logger.levels["INFO"])

    logger.severe("This is severe")
    logger.warning("disk at %d%%", 87)
    logger.info("Application started\nwith two lines")
    logger.fine("Filtered out by the INFO threshold")

    # Errors go to stderr, everything else to stdout
    levels = Logger.levels
    routed = Logger("routed", levels["FINEST"], LoggerOptions(streams={
        sys.stderr: {levels["SEVERE"], levels["WARNING"]},
        sys.stdout: {levels["INFO"], levels["FINE"], levels["FINER"], levels["FINEST"]},
    }))
    routed.severe("to stderr")
    routed.finest("to stdout")

    # Wait for deferred writes
    logger.flush()

if __name__ == "__main__":
    main()
