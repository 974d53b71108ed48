"""
Bounded-concurrency dispatch of image tasks.

Every task goes to a thread pool through a counting gate of size N, so
submitting blocks while N conversions are in flight. The first failure stops
further submissions; tasks already running are allowed to finish before the
error is raised to the caller.
"""
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from loguru import logger

from letterbox.errors import ConfigError, TaskError
from letterbox.pipeline.processor import convert
from letterbox.pipeline.request import ImageTask, RunOptions, TaskOutcome
from letterbox.skip import should_skip


@dataclass
class RunStats:
    total: int = 0
    skipped: int = 0
    started: float = field(default_factory=time.monotonic)
    elapsed: float = 0.0

    @property
    def processed(self) -> int:
        return self.total - self.skipped


def format_elapsed(seconds: float) -> str:
    """Round to whole seconds: 0s, 42s, 1m5s, 1h2m3s."""
    s = int(seconds + 0.5)
    h, rem = divmod(s, 3600)
    m, s = divmod(rem, 60)
    if h:
        return f"{h}h{m}m{s}s"
    if m:
        return f"{m}m{s}s"
    return f"{s}s"


class Dispatcher:
    def __init__(self, concurrency: int, processor: Callable[[ImageTask], None] = convert):
        if concurrency < 1:
            raise ConfigError(f"concurrency must be at least 1, got {concurrency}")
        self.concurrency = concurrency
        self.processor = processor

        self._gate = threading.BoundedSemaphore(concurrency)
        self._lock = threading.Lock()
        self._failure: Optional[TaskError] = None

    def _run_task(self, task: ImageTask) -> TaskOutcome:
        logger.info(f"Cropping {task.path}")
        if not task.options.force and should_skip(task.path, task.options.output_dir):
            logger.info(f"(!) Image {task.path} was already processed")
            return TaskOutcome.SKIPPED

        self.processor(task)
        return TaskOutcome.PROCESSED

    def _on_done(self, task: ImageTask, future: Future):
        # record the failure before opening the gate so the submitter sees it
        exc = None if future.cancelled() else future.exception()
        if exc is not None:
            with self._lock:
                if self._failure is None:
                    self._failure = TaskError(task.path, exc)
                    self._failure.__cause__ = exc
        self._gate.release()

    @property
    def failed(self) -> bool:
        with self._lock:
            return self._failure is not None

    def run(self, paths: Iterable[str], options: RunOptions) -> RunStats:
        """
        Convert every path, blocking until all submitted work has finished.

        Raises:
            TaskError: the first task that failed, after in-flight tasks drain.
        """
        self._failure = None
        tasks = [ImageTask(path, options) for path in paths]
        stats = RunStats(total=len(tasks))
        logger.info(f"Processing {stats.total} images")

        futures: List[Future] = []
        with ThreadPoolExecutor(max_workers=self.concurrency, thread_name_prefix="letterbox") as executor:
            for task in tasks:
                self._gate.acquire()
                if self.failed:
                    self._gate.release()
                    break
                future = executor.submit(self._run_task, task)
                future.add_done_callback(lambda f, t=task: self._on_done(t, f))
                futures.append(future)
            # leaving the block joins every submitted task

        if self._failure is not None:
            raise self._failure

        stats.skipped = sum(1 for f in futures if f.result() is TaskOutcome.SKIPPED)
        stats.elapsed = time.monotonic() - stats.started
        logger.success(f"Processed {stats.processed} images in {format_elapsed(stats.elapsed)}")
        return stats
