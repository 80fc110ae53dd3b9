#!/usr/bin/env python3
"""Basic usage example"""

import log4py
from log4py import ConfigurationBuilder, Level
from log4py.appenders import ConsoleAppender, FileAppender
from log4py.layouts import JSONLayout

def main():
    # Configure the logger tree with the builder pattern
    builder = (ConfigurationBuilder("example")
        .add_appender(ConsoleAppender("Console", colored=True))
        .add_appender(FileAppender("File", "logs/example.log", layout=JSONLayout()))
        .root(level=Level.INFO, appenders=["Console"])
        .logger("example.db", level=Level.DEBUG, appenders=["File"]))

    logger = log4py.get_logger(__name__, name="example", config_builder=builder)
    db = log4py.get_logger(__name__, name="example.db.pool")

    # Log messages
    logger.debug("This is hidden")
    logger.info("Application started")
    logger.warn("Cache is {}% full", 85)
    db.debug("Connection {} opened", 1)
    db.error("Query failed", marker="SQL")

    # Stop every context, flushing and closing appenders
    log4py.shutdown()

if __name__ == "__main__":
    main()
