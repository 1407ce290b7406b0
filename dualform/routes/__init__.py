"""Flask routes for the form page and submissions."""

from .form_routes import bp as form_bp, register_error_handlers

__all__ = ['form_bp', 'register_error_handlers']
