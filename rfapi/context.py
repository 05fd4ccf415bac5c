import threading


class CounterState:
    """Unsigned 64-bit counter shared by every request thread."""

    def __init__(self, value=0):
        self._lock = threading.Lock()
        self._value = value

    def get(self):
        with self._lock:
            return self._value

    def set(self, value):
        with self._lock:
            self._value = value


class ApiContext:
    """State owned by one running application."""

    def __init__(self):
        # counter that can be manipulated by requests to the HTTP API
        self.counter = CounterState()
