"""A small text builder driven by the ``<<`` operator."""

import io


class StringStreamer:
    """Collects the text form of values fed to it with ``<<``."""

    def __init__(self):
        self._buffer = io.StringIO()

    def __lshift__(self, value):
        self._buffer.write(str(value))
        return self

    def __str__(self):
        return self._buffer.getvalue()