
# Imports from standard library
import logging
from queue import Queue
import threading
from typing import Iterable, Iterator, Optional, Union

# Local imports
from .bases import ApplicationEntry, FileFailure, RankedPath
from .entry_parser import parse_entry, user_prefixes

_logger = logging.getLogger(__name__)


class _Marker:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f'<{self.name}>'


_STOP = _Marker('stop')
'put once per worker in the input queue when all paths are queued'

_CLOSED = _Marker('closed')
'put in the output queue once all workers are finished'


class Dispatcher:
    '''Parse desktop files with a fixed pool of worker threads.

    Paths are given to the workers through a bounded queue,
    displayable entries come back in an unbounded queue
    which is closed only once all workers are done.'''

    def __init__(self, workers: int,
                 prefixes: Optional[tuple[str, ...]] = None):
        if not isinstance(workers, int) or workers < 1:
            raise ValueError(
                f'number of workers must be a positive integer, '
                f'not {workers!r}')

        self.workers = workers
        self.prefixes = prefixes if prefixes is not None else user_prefixes()
        'personal directory trees, looked up once for the whole scan'
        self._failures_queue = Queue[FileFailure]()
        self.failures = list[FileFailure]()
        '''per file failures of the last run,
        complete once the run iterator is exhausted'''

    def _produce(self, pairs: Iterable[RankedPath],
                 in_queue: 'Queue[Union[RankedPath, _Marker]]'):
        try:
            for pair in pairs:
                in_queue.put(pair)
        except Exception:
            _logger.exception('desktop files listing failed')
        finally:
            for i in range(self.workers):
                in_queue.put(_STOP)

    def _work(self, in_queue: 'Queue[Union[RankedPath, _Marker]]',
              out_queue: 'Queue[Union[ApplicationEntry, _Marker]]'):
        while True:
            pair = in_queue.get()
            if pair is _STOP:
                break

            rank, path = pair

            try:
                entry = parse_entry(path, rank, self.prefixes)
            except OSError as e:
                _logger.warning(f'error checking file "{path}": {e}')
                self._failures_queue.put(FileFailure(path, str(e)))
                continue
            except Exception as e:
                _logger.exception(f'unexpected error checking file "{path}"')
                self._failures_queue.put(FileFailure(path, repr(e)))
                continue

            if entry is not None:
                out_queue.put(entry)

    def _close_when_done(
            self, worker_threads: list[threading.Thread],
            out_queue: 'Queue[Union[ApplicationEntry, _Marker]]'):
        for thread in worker_threads:
            thread.join()
        out_queue.put(_CLOSED)

    def run(self, pairs: Iterable[RankedPath]) -> Iterator[ApplicationEntry]:
        '''Yield parsed displayable entries in no particular order.'''
        self.failures.clear()

        in_queue = Queue[Union[RankedPath, _Marker]](maxsize=self.workers)
        out_queue = Queue[Union[ApplicationEntry, _Marker]]()

        producer = threading.Thread(
            target=self._produce, args=(pairs, in_queue),
            name='desktop-walker', daemon=True)

        worker_threads = [
            threading.Thread(
                target=self._work, args=(in_queue, out_queue),
                name=f'desktop-parser-{i}', daemon=True)
            for i in range(self.workers)]

        closer = threading.Thread(
            target=self._close_when_done, args=(worker_threads, out_queue),
            name='desktop-closer', daemon=True)

        producer.start()
        for thread in worker_threads:
            thread.start()
        closer.start()

        _logger.debug(f'dispatching desktop files to {self.workers} workers')

        while True:
            entry = out_queue.get()
            if entry is _CLOSED:
                break
            yield entry

        producer.join()
        closer.join()

        while self._failures_queue.qsize():
            self.failures.append(self._failures_queue.get())

        _logger.debug(
            f'dispatch finished, {len(self.failures)} file(s) failed')
