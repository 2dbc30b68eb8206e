"""
Configuration management for the product code classifier.
"""

from product_codes.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
