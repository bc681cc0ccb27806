# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, retry policy, rich console tables

from . import logging

__all__ = [
    "logging",
]
