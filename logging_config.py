import logging


def setup_logging(level="INFO", logfile=None):
    """Pasang handler konsol (dan file, kalau diisi) ke root logger, cukup sekali."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    format_log = logging.Formatter("%(asctime)s %(levelname)-7s [%(name)s] %(message)s")

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(format_log)
        root.addHandler(handler)
