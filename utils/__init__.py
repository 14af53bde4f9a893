"""Utility modules for RatioPulse."""
from utils.logger import setup_logging
from utils.formatters import format_usd, format_ratio, format_zscore, format_pct
from utils.http_client import HTTPClient, APIError
