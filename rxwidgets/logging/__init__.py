from .log_setup import configure_logging, InterceptHandler, LOG_FORMAT

__all__ = ['configure_logging', 'InterceptHandler', 'LOG_FORMAT']
