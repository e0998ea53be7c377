"""
Operation queue.
Thread-pool backed queue that can run a completion operation after a group of operations.
Create one and pass it to whatever needs it; there is no shared default queue.
"""

from concurrent.futures import ThreadPoolExecutor, Future
from concurrent.futures import wait as wait_all
from typing import Callable, List, Optional


class OperationQueue:
    """
    Runs callables on a thread pool.
    """

    def __init__(self, max_workers: Optional[int] = None, name: str = 'operations'):
        """
        Initialize operation queue.

        Args:
            max_workers: Worker threads, default chosen by ThreadPoolExecutor
            name: Prefix for worker thread names
        """
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        # Completions wait on self.executor's futures, one at a time.
        self.completion_executor = ThreadPoolExecutor(max_workers=1,
                                                      thread_name_prefix=f"{name}-completion")

    def add(self, operation: Callable[[], object]) -> Future:
        return self.executor.submit(operation)

    def add_operations(self,
                       operations: List[Callable[[], object]],
                       completion: Callable[[], object]) -> Future:
        """
        Queue operations and a completion that runs once all of them have finished.

        Args:
            operations: Callables to run concurrently
            completion: Callable run after every operation has finished, failed or not

        Returns:
            Future of the completion's result
        """
        futures = [self.executor.submit(op) for op in operations]

        def run_completion():
            wait_all(futures)
            return completion()

        return self.completion_executor.submit(run_completion)

    def shutdown(self, wait: bool = True):
        """Stop accepting work; with wait, return once operations and completions have run."""
        self.completion_executor.shutdown(wait=wait)
        self.executor.shutdown(wait=wait)

    def __enter__(self) -> 'OperationQueue':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
