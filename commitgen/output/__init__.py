"""Terminal Output for the hook

Git shows hook output on the terminal running `git commit`. Results go to
stdout; warnings, errors and the spinner go to stderr.
"""

import os
import re
import sys
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color(stream) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(stream, 'isatty') or not stream.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode(stream) -> bool:
    try:
        '✓⚠'.encode(getattr(stream, 'encoding', None) or 'utf-8')
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color(sys.stdout)
UNICODE_ENABLED = _supports_unicode(sys.stdout)

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}", file=sys.stderr)


def print_detail(message: str) -> None:
    """Verbose-only diagnostics."""
    print(dim(f"  {message}"), file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'docs': Colors.CYAN,
    'style': Colors.DIM,
    'refactor': Colors.YELLOW,
    'test': Colors.MAGENTA,
    'chore': Colors.DIM,
    'build': Colors.CYAN,
    'ci': Colors.CYAN,
    'perf': Colors.GREEN,
    'revert': Colors.RED,
}

_PREFIX_RE = re.compile(r'^(\w+)(\([^)]*\))?:')


def colorize_commit_type(message: str) -> str:
    """Color the `type(scope):` prefix of a commit message."""
    match = _PREFIX_RE.match(message)
    if not match or not COLORS_ENABLED:
        return message
    color = COMMIT_TYPE_COLORS.get(match.group(1))
    if not color:
        return message
    prefix = match.group(0)
    return _colorize(prefix, Colors.BOLD, color) + message[len(prefix):]


class Spinner:
    """Animated stderr spinner around a service call. Use as context manager."""
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, label: str = "Generating commit message", stream=None):
        self.label = label
        self._stream = stream or sys.stderr
        self._thread = None
        self._stop_event = threading.Event()
        unicode_ok = _supports_unicode(self._stream)
        self._frames = self.FRAMES_UNICODE if unicode_ok else self.FRAMES_ASCII

    @property
    def active(self) -> bool:
        return hasattr(self._stream, 'isatty') and self._stream.isatty()

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            self._stream.write(f'\r\033[K{frame} {self.label}')
            self._stream.flush()
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        if self.active:
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        if self.active:
            self._stream.write('\r\033[K')
            self._stream.flush()


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_detail",
    "colorize_commit_type", "Spinner", "COMMIT_TYPE_COLORS",
]
