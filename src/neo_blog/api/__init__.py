"""HTTP transport: exception handlers and shared FastAPI dependencies."""

from .exception_handlers import ExceptionHandlerRegistry, register_exception_handlers

__all__ = ["ExceptionHandlerRegistry", "register_exception_handlers"]
