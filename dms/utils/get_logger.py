import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by ``configure_logging`` at application entry; library
    use without it falls back to whatever the host application configured.
    """
    return logging.getLogger(f"dms.{name}")
