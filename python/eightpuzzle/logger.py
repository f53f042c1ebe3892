import sys

from loguru import logger

PALETTE = {
    "astar": "green",
    "backtracking": "magenta",
    "worker": "blue",
    "cli": "cyan",
}

LEVEL_PER_COMPONENT = {
    "worker": "INFO",
}


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # The colour tag goes into the template so loguru converts it to ANSI.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<12}</> | "
        "<level>{message}</level>\n{exception}"
    )


def setup_logging(level="WARNING"):
    """Route the package's log records to stderr at ``level`` and above."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=formatter,
        filter=component_filter,
        colorize=True,
    )
    logger.enable("eightpuzzle")
