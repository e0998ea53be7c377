"""Operation queue."""

from .operation_queue import OperationQueue

__all__ = ['OperationQueue']
