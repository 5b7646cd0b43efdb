import logging


class makeLager:
    """
    A logger class to create and manage a logging instance for geoUnits.
    """

    def __init__(self, log_level=logging.WARNING):
        """
        Initialize the logger instance with the specified logging level.

        Args:
            log_level (int): Logging level to use (default is
                             logging.WARNING).
        """
        self.logger = logging.getLogger('geoUnits')
        self.logger.setLevel(log_level)

        # Console handler, only attached once per process
        self.console_handler = logging.StreamHandler()
        self.console_handler.setLevel(log_level)

        formatter = logging.Formatter('%(levelname)s - %(message)s')
        self.console_handler.setFormatter(formatter)

        if not self.logger.handlers:
            self.logger.addHandler(self.console_handler)

    def set_level(self, level):
        """
        Set the logging level.

        Args:
            level (str or int): Logging level to use. Can be 'silent', 'debug',
                                'info', 'warning', 'error', or 'critical'.
        """
        if isinstance(level, str):
            level = level.lower()
            levels = {
                # A level higher than CRITICAL to silence logging
                'silent': logging.CRITICAL + 1,
                'debug': logging.DEBUG,
                'info': logging.INFO,
                'warning': logging.WARNING,
                'error': logging.ERROR,
                'critical': logging.CRITICAL
            }
            log_level = levels.get(level, logging.DEBUG)
        else:
            log_level = level

        self.logger.setLevel(log_level)
        self.console_handler.setLevel(log_level)

    def warn(self, msg):
        """Log a warning message."""
        self.logger.warning(msg)

    def debug(self, msg):
        """Log a debug message."""
        self.logger.debug(msg)

    def info(self, msg):
        """Log an informational message."""
        self.logger.info(msg)

    def error(self, msg):
        """Log an error message."""
        self.logger.error(msg)

    def critical(self, msg, error=RuntimeError):
        """
        Log a critical error message and raise.

        Args:
            msg (str): The message to log.
            error (type): Exception class raised after logging. The logged
                          message is used as the exception message.

        Raises:
            error: Always raised after logging the critical error message.
        """
        self.logger.critical(msg)
        raise error(msg)


logger = makeLager()
