from .structured_logger import StructuredFormatter, setup_logging

__all__ = ['StructuredFormatter', 'setup_logging']
