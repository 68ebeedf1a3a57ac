import logging


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO

    # no-op when the root logger already has handlers
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)
