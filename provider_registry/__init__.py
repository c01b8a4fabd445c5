"""Provider registry with admin-delegated verification workflow."""

__version__ = "0.1.0"
