"""
rook.transport.threaded
~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import atexit
import logging
import queue
import sys
import threading

from rook.transport.http import HTTPTransport

DEFAULT_TIMEOUT = 10

logger = logging.getLogger('rook.errors')


class AsyncWorker(object):
    _terminator = object()

    def __init__(self, shutdown_timeout=DEFAULT_TIMEOUT):
        self._queue = queue.Queue(-1)
        self._lock = threading.Lock()
        self._thread = None
        self.options = {
            'shutdown_timeout': shutdown_timeout,
        }
        self.start()

    def is_alive(self):
        return self._thread is not None and self._thread.is_alive()

    def main_thread_terminated(self):
        size = self._queue.qsize()
        if size:
            timeout = self.options['shutdown_timeout']
            print("rook is attempting to send %s pending events" % size, file=sys.stderr)
            print("Waiting up to %s seconds" % timeout, file=sys.stderr)
        self.stop(timeout=self.options['shutdown_timeout'])

    def start(self):
        """
        Starts the task thread.
        """
        with self._lock:
            if not self._thread:
                self._thread = threading.Thread(target=self._target, name='rook.AsyncWorker')
                self._thread.daemon = True
                self._thread.start()
                atexit.register(self.main_thread_terminated)

    def stop(self, timeout=None):
        """
        Stops the task thread. Synchronous!
        """
        with self._lock:
            if self._thread:
                self._queue.put_nowait(self._terminator)
                self._thread.join(timeout=timeout)
                self._thread = None
                atexit.unregister(self.main_thread_terminated)

    def queue(self, callback, *args, **kwargs):
        self._queue.put_nowait((callback, args, kwargs))

    def _target(self):
        while True:
            record = self._queue.get()
            try:
                if record is self._terminator:
                    break
                callback, args, kwargs = record
                try:
                    callback(*args, **kwargs)
                except Exception:
                    logger.error('Failed processing job', exc_info=True)
            finally:
                self._queue.task_done()

    def flush(self):
        """Blocks until every queued job has been processed."""
        self._queue.join()


class ThreadedHTTPTransport(HTTPTransport):
    """
    Sends events from a background thread. ``send_event`` returns as soon
    as the event has been queued.
    """

    def __init__(self, shutdown_timeout=DEFAULT_TIMEOUT, **kwargs):
        super(ThreadedHTTPTransport, self).__init__(**kwargs)
        self.shutdown_timeout = shutdown_timeout
        self._worker = None
        self._worker_lock = threading.Lock()

    def get_worker(self):
        with self._worker_lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = AsyncWorker(shutdown_timeout=self.shutdown_timeout)
            return self._worker

    def send_sync(self, event):
        try:
            super(ThreadedHTTPTransport, self).send_event(event)
        except Exception as e:
            logger.error('Unable to reach Sentry log server: %s (event: %s)',
                         e, event.event_id, exc_info=True)

    def send_event(self, event):
        if self.dsn is None:
            return super(ThreadedHTTPTransport, self).send_event(event)
        self.get_worker().queue(self.send_sync, event)
        return None

    def flush(self):
        if self._worker is not None:
            self._worker.flush()

    def close(self, timeout=None):
        if self._worker is not None:
            self._worker.stop(timeout=timeout)
