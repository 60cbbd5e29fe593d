import logging


class ShortNameFilter(logging.Filter):
    """Adds `record.shortname`: the last two parts of the logger name."""

    def filter(self, record):
        path = record.name.split(".")
        record.shortname = "-".join(path[-2:])
        return True


def resolve_level(level: str) -> str:
    """Upper-cased level name, INFO for anything logging does not know."""
    name = (level or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


def configure_logging(level: str = "INFO") -> None:
    """Diagnostics go to stderr so stdout carries only the trade feed."""
    name = resolve_level(level)
    logging.basicConfig(
        level=name,
        format="[%(levelname)s] %(shortname)s: %(message)s",
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(ShortNameFilter())
    if name != (level or "").strip().upper():
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", level)
