"""
Minimal logging context for SauceFinder.
Single place to control all output: screen + file, with flush.
"""
import json
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from saucefinder.__version__ import __version__

MAX_LOGGED_BODY_CHARS = 5000


class SauceFinderLogger:
    """Minimal logger: print to screen + file, always flush"""

    def __init__(self, log_file: Optional[Path] = None, debug: bool = False, banner: bool = True):
        self.log_file = log_file
        self._file_handle = None
        self._start_time = datetime.now()
        self.debug_mode = debug

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_file, 'w', buffering=1, encoding='utf-8')  # Line buffered, UTF-8

        if banner:
            self.log(f"({self._start_time.strftime('%H:%M:%S')}  Started SauceFinder {__version__})")

    def log(self, msg: str, prefix: str = ""):
        """Log to screen and file"""
        output = f"{prefix}{msg}" if prefix else msg

        print(output, flush=True)
        sys.stdout.flush()

        if self._file_handle:
            self._file_handle.write(output + "\n")
            self._file_handle.flush()
            os.fsync(self._file_handle.fileno())

    def info(self, msg: str):
        """Info message"""
        self.log(msg)

    def warning(self, msg: str):
        """Warning message"""
        self.log(msg, "[WARNING] ")

    def error(self, msg: str):
        """Error message"""
        self.log(msg, "[ERROR] ")

    def debug(self, msg: str):
        """Debug message (only shown in debug mode)"""
        if self.debug_mode:
            self.log(msg, f"[{self._timestamp()}] [DEBUG] ")

    def api_request(self, method: str, url: str, params: dict):
        """Log API request (debug mode only)"""
        if self.debug_mode:
            timestamp = self._timestamp()
            self.log(f"API Request: {method} {url}", f"[{timestamp}] ")
            if params:
                self.log(f"  Params: {json.dumps(_redact_params(params), indent=2, ensure_ascii=False)}", f"[{timestamp}] ")

    def api_response(self, status: int, body: bytes, elapsed_ms: float):
        """Log API response (debug mode only)"""
        if self.debug_mode:
            timestamp = self._timestamp()
            self.log(f"API Response ({elapsed_ms:.0f}ms): Status {status}", f"[{timestamp}] ")
            if body:
                text = body.decode("utf-8", errors="replace")
                if len(text) > MAX_LOGGED_BODY_CHARS:
                    text = text[:MAX_LOGGED_BODY_CHARS] + "\n  ... (truncated)"
                self.log(f"  Body: {text}", f"[{timestamp}] ")

    def lookup_failed(self, site: str, url: str, reason: object):
        """Log a failed secondary gallery lookup"""
        self.log(f"{site} lookup failed for {url}: {reason}", "[ERROR] ")

    def close(self):
        """Close file handle with goodbye message"""
        if self._file_handle:
            end_time = datetime.now()
            elapsed = end_time - self._start_time
            self.log(f"({end_time.strftime('%H:%M:%S')}  Ended session, elapsed {elapsed.total_seconds():.1f}s)")
            self._file_handle.close()
            self._file_handle = None

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime('%H:%M:%S.%f')[:-3]

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def _redact_params(params: dict) -> dict:
    redacted = dict(params)
    if redacted.get("api_key"):
        redacted["api_key"] = "****"
    return redacted


# Global instance (set by the CLI)
_logger: Optional[SauceFinderLogger] = None

def set_logger(logger: SauceFinderLogger):
    """Set global logger instance"""
    global _logger
    _logger = logger

def get_logger() -> SauceFinderLogger:
    """Get global logger instance"""
    global _logger
    if _logger is None:
        # Fallback: stdout-only logger
        _logger = SauceFinderLogger(banner=False)
    return _logger

# Convenience functions
def log(msg: str):
    get_logger().log(msg)

def info(msg: str):
    get_logger().info(msg)

def warning(msg: str):
    get_logger().warning(msg)

def error(msg: str):
    get_logger().error(msg)

def debug(msg: str):
    get_logger().debug(msg)
