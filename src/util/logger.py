import sys

from loguru import logger

PALETTE = {
    "parser": "cyan",
    "bfs": "blue",
    "frontier": "magenta",
    "distance_matrix": "blue",
    "optimizer": "green",
    "pipeline": "yellow",
    "builder": "white",
}

LEVEL_PER_COMPONENT = {
    "bfs": "INFO",
}

_console_level = "INFO"


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = max(
        logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no,
        logger.level(_console_level).no,
    )
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")

    # Colour tags must stay in the template so loguru renders them.
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<15}</> | "
        "<level>{message}</level>\n"
    )


def set_console_level(level: str) -> None:
    """Change the minimum level printed to stderr (e.g. "DEBUG")."""
    global _console_level
    logger.level(level)  # raises ValueError for unknown level names
    _console_level = level


logger.remove()
logger.add(sys.stderr, format=formatter, filter=component_filter, colorize=True)
