import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(level: str = "INFO"):
    root = logging.getLogger("cityhall")
    root.setLevel(level.upper())
    if not any(getattr(h, "_cityhall", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._cityhall = True
        root.addHandler(handler)
