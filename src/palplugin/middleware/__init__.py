"""Middleware base class, logging middleware and the middleware pipeline."""

from palplugin.middleware.base import Middleware
from palplugin.middleware.logging import LoggingMiddleware
from palplugin.middleware.manager import MiddlewareChainError, MiddlewareManager

__all__ = [
    "Middleware",
    "MiddlewareManager",
    "MiddlewareChainError",
    "LoggingMiddleware",
]
