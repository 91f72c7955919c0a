from .base import (
    AppError,
    ClientError,
    CSRFError,
    DomainError,
    FormBindingError,
    InfrastructureError,
    TemplateCacheError,
    UnknownTemplateError,
)
from .http import (
    client_error,
    handle_app_error,
    not_found,
    register_error_handler,
    server_error,
)

__all__ = [
    "AppError",
    "ClientError",
    "CSRFError",
    "DomainError",
    "FormBindingError",
    "InfrastructureError",
    "TemplateCacheError",
    "UnknownTemplateError",
    "client_error",
    "handle_app_error",
    "not_found",
    "register_error_handler",
    "server_error",
]
