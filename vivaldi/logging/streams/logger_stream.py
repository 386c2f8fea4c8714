from __future__ import annotations

import datetime
import io
import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    Dict,
    TypeVar,
)

import msgspec

from vivaldi.logging.config import LoggingConfig, StreamType
from vivaldi.logging.models import Entry, Log


T = TypeVar('T', bound=Entry)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Synchronous log stream.

    Entries go to stdout/stderr rendered through a template, or, when the
    stream has a logfile, are appended to it as msgspec-encoded JSON lines.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory

        self._files: Dict[str, io.TextIOBase] = {}
        self._config = LoggingConfig()
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self._closed

    def log(
        self,
        entry: T | Log[T],
        template: str | None = None,
        path: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        filename: str | None = None
        directory: str | None = None

        if path:
            logfile_path = pathlib.Path(path)
            is_logfile = len(logfile_path.suffix) > 0

            filename = logfile_path.name if is_logfile else None
            directory = str(logfile_path.parent.absolute()) if is_logfile else str(logfile_path.absolute())

        if template is None:
            template = self._default_template

        if filename is None:
            filename = self._default_logfile

        if directory is None:
            directory = self._default_log_directory

        if filename or directory:
            self._log_to_file(
                entry,
                filename=filename,
                directory=directory,
                filter=filter,
            )

        else:
            self._log(
                entry,
                template=template,
                filter=filter,
            )

    def _log(
        self,
        entry_or_log: T | Log[T],
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        entry = self._unwrap(entry_or_log)

        if self._closed or self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = DEFAULT_TEMPLATE

        log_file, line_number, function_name = self._caller_for(entry_or_log)

        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        try:
            stream.write(
                entry.to_template(
                    template,
                    context={
                        "filename": log_file,
                        "function_name": function_name,
                        "line_number": line_number,
                        "thread_id": threading.get_native_id(),
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                    },
                )
                + "\n"
            )
            stream.flush()

        except (OSError, ValueError) as err:
            self._write_error(entry, err, log_file, function_name, line_number)

    def _log_to_file(
        self,
        entry_or_log: T | Log[T],
        filename: str | None = None,
        directory: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        entry = self._unwrap(entry_or_log)

        if self._closed or self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if filename is None:
            filename = "logs.json"

        logfile_path = self._to_logfile_path(filename, directory=directory)

        log_file, line_number, function_name = self._caller_for(entry_or_log)

        if isinstance(entry_or_log, Log):
            log = entry_or_log

        else:
            log = Log(
                entry=entry,
                filename=log_file,
                function_name=function_name,
                line_number=line_number,
            )

        try:
            logfile = self._files.get(logfile_path)
            if logfile is None or logfile.closed:
                logfile = self._open_file(logfile_path)

            logfile.write(msgspec.json.encode(log).decode() + "\n")
            logfile.flush()

        except OSError as err:
            self._write_error(entry, err, log_file, function_name, line_number)

    def close(self):
        for logfile in self._files.values():
            if logfile.closed is False:
                logfile.close()

        self._files.clear()
        self._closed = True

    def _open_file(self, logfile_path: str):
        pathlib.Path(logfile_path).parent.mkdir(parents=True, exist_ok=True)

        logfile = open(logfile_path, "a")
        self._files[logfile_path] = logfile

        return logfile

    def _to_logfile_path(
        self,
        filename: str,
        directory: str | None = None,
    ):
        filename_path = pathlib.Path(filename)

        assert (
            filename_path.suffix == ".json"
        ), "Err. - file must be JSON file for logs."

        if self._config.directory:
            directory = self._config.directory

        elif directory is None:
            directory = os.path.join(os.getcwd(), "logs")

        return os.path.join(directory, filename_path)

    def _unwrap(self, entry_or_log: T | Log[T]) -> Entry:
        if isinstance(entry_or_log, Log):
            return entry_or_log.entry

        return entry_or_log

    def _caller_for(self, entry_or_log: T | Log[T]):
        if isinstance(entry_or_log, Log):
            return (
                entry_or_log.filename,
                entry_or_log.line_number,
                entry_or_log.function_name,
            )

        return self._find_caller()

    def _write_error(
        self,
        entry: Entry,
        err: Exception,
        log_file: str,
        function_name: str,
        line_number: int,
    ):
        sys.stderr.write(
            entry.to_template(
                ERROR_TEMPLATE,
                context={
                    "filename": log_file,
                    "function_name": function_name,
                    "line_number": line_number,
                    "error": str(err),
                    "thread_id": threading.get_native_id(),
                    "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                },
            )
            + "\n"
        )

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        # _find_caller <- _caller_for <- _log/_log_to_file <- log <- caller
        frame = sys._getframe(4)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
