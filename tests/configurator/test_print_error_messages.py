from __future__ import annotations

import io
import logging
import os
import sys
import threading
from pathlib import Path

import pytest

from logconf_sdk import (
    DefaultLoggingConfigurator,
    FileAppenderSpec,
    MetricRegistry,
    StandardLoggingRuntime,
    get_default_runtime,
    get_status_printer,
)
from logconf_sdk.status import PrintingStatusListener


@pytest.fixture
def runtime() -> StandardLoggingRuntime:
    return StandardLoggingRuntime.isolated()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def configurator(runtime: StandardLoggingRuntime, output: io.StringIO):
    configurator = DefaultLoggingConfigurator(runtime, output)
    yield configurator
    configurator.stop()


def _file_appender(folder: Path) -> FileAppenderSpec:
    return FileAppenderSpec(
        current_log_filename=f"{folder}{os.sep}my-log-file.log",
        archive=False,
    )


def _configure_and_get_output(configurator: DefaultLoggingConfigurator,
                              output: io.StringIO) -> str:
    configurator.configure(MetricRegistry(), "logger-test")
    return output.getvalue()


def test_default_constructor_uses_stderr() -> None:
    configurator = DefaultLoggingConfigurator()

    assert configurator.configuration_errors_stream is sys.stderr


def test_default_constructor_uses_default_runtime() -> None:
    configurator = DefaultLoggingConfigurator()

    assert configurator.runtime is get_default_runtime()


def test_explicit_runtime_leaves_default_runtime_alone(
    runtime: StandardLoggingRuntime,
) -> None:
    default = get_default_runtime()

    configurator = DefaultLoggingConfigurator(runtime, io.StringIO())

    assert configurator.runtime is runtime
    assert get_default_runtime() is default


def test_folder_without_write_permission_prints_error_message(
    tmp_path: Path,
    configurator: DefaultLoggingConfigurator,
    output: io.StringIO,
) -> None:
    folder = tmp_path / "folder-without-write-permission"
    folder.touch()
    folder.chmod(0o444)
    configurator.set_appenders([_file_appender(folder)])

    text = _configure_and_get_output(configurator, output)

    assert str(folder) in text
    assert "ERROR" in text


def test_read_only_directory_prints_error_message(
    tmp_path: Path,
    configurator: DefaultLoggingConfigurator,
    output: io.StringIO,
) -> None:
    folder = tmp_path / "read-only-folder"
    folder.mkdir()
    folder.chmod(0o555)
    try:
        if os.access(folder, os.W_OK):
            pytest.skip("permissions are not enforced for this user")
        configurator.set_appenders([_file_appender(folder)])

        text = _configure_and_get_output(configurator, output)

        assert str(folder) in text
    finally:
        folder.chmod(0o755)


def test_valid_configuration_prints_nothing(
    tmp_path: Path,
    configurator: DefaultLoggingConfigurator,
    output: io.StringIO,
) -> None:
    folder = tmp_path / "folder-with-write-permission"
    folder.mkdir()
    configurator.set_appenders([_file_appender(folder)])

    text = _configure_and_get_output(configurator, output)

    assert os.access(folder, os.W_OK)
    assert text == ""
    assert configurator.last_status
    assert (folder / "my-log-file.log").exists()


def test_errors_are_reported_in_emission_order(
    tmp_path: Path,
    configurator: DefaultLoggingConfigurator,
    output: io.StringIO,
) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.touch()
    second.touch()
    configurator.set_appenders([_file_appender(first), _file_appender(second)])

    lines = _configure_and_get_output(configurator, output).splitlines()

    assert len(lines) == 2
    assert str(first) in lines[0]
    assert str(second) in lines[1]


def test_binary_errors_stream_receives_utf8(
    tmp_path: Path,
    runtime: StandardLoggingRuntime,
) -> None:
    folder = tmp_path / "dossier-é"
    folder.touch()
    output = io.BytesIO()
    configurator = DefaultLoggingConfigurator(runtime, output)
    configurator.set_appenders([_file_appender(folder)])

    configurator.configure(MetricRegistry(), "logger-test")
    configurator.stop()

    assert str(folder) in output.getvalue().decode("utf-8")


def test_status_printer_is_restored_to_stdout(tmp_path: Path) -> None:
    folder = tmp_path / "not-a-folder"
    folder.touch()
    output = io.StringIO()
    configurator = DefaultLoggingConfigurator(get_default_runtime(), output)
    configurator.set_appenders([_file_appender(folder)])
    try:
        configurator.configure(MetricRegistry(), "logger-test-default")
    finally:
        configurator.stop()

    assert str(folder) in output.getvalue()
    assert get_status_printer().stream is sys.stdout
    assert get_default_runtime().current_status_target() is sys.stdout


def test_failed_apply_still_reports_and_restores(
    monkeypatch: pytest.MonkeyPatch,
    runtime: StandardLoggingRuntime,
    configurator: DefaultLoggingConfigurator,
    output: io.StringIO,
) -> None:
    def _boom(*args: object, **kwargs: object) -> list[logging.Handler]:
        runtime.status_manager.error("cannot use [/var/log/broken]")
        raise RuntimeError("boom")

    monkeypatch.setattr(runtime, "apply_appenders", _boom)

    with pytest.raises(RuntimeError, match="boom"):
        configurator.configure(MetricRegistry(), "logger-test")

    assert "/var/log/broken" in output.getvalue()
    assert isinstance(runtime.status_manager.receiver, PrintingStatusListener)
    assert runtime.current_status_target() is sys.stdout


def test_stop_is_idempotent(
    tmp_path: Path,
    runtime: StandardLoggingRuntime,
    configurator: DefaultLoggingConfigurator,
) -> None:
    configurator.stop()
    configurator.set_appenders([_file_appender(tmp_path)])
    configurator.configure(MetricRegistry(), "logger-test")

    configurator.stop()
    handlers_after_first = runtime.get_logger("logger-test").handlers[:]
    configurator.stop()

    assert handlers_after_first == []
    assert runtime.get_logger("logger-test").handlers == []
    assert runtime.attached_handlers() == []


def test_reconfigure_replaces_previous_appenders(
    tmp_path: Path,
    runtime: StandardLoggingRuntime,
    configurator: DefaultLoggingConfigurator,
) -> None:
    configurator.set_appenders([_file_appender(tmp_path)])

    configurator.configure(None, "logger-test")
    configurator.configure(None, "logger-test")

    assert len(runtime.get_logger("logger-test").handlers) == 1


def test_stop_logs_release_failure_and_completes(
    tmp_path: Path,
    runtime: StandardLoggingRuntime,
    configurator: DefaultLoggingConfigurator,
    caplog: pytest.LogCaptureFixture,
    capsys: pytest.CaptureFixture[str],
) -> None:
    configurator.set_appenders([_file_appender(tmp_path)])
    configurator.configure(None, "logger-test")
    handler = runtime.attached_handlers()[0]
    original_close = handler.close

    def _fail() -> None:
        raise OSError("disk gone")

    handler.close = _fail  # type: ignore[method-assign]

    with caplog.at_level(logging.WARNING):
        configurator.stop()
    original_close()

    assert "Failed to release logging appenders" in caplog.text
    assert "file-appender" in caplog.text
    assert len(caplog.records) == 1
    assert capsys.readouterr().out == ""
    assert runtime.get_logger("logger-test").handlers == []
    configurator.stop()


def test_overlapping_configure_calls_keep_their_own_streams(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    blocker = tmp_path / "blocker"
    blocker.touch()
    first_runtime = StandardLoggingRuntime(name="first")
    second_runtime = StandardLoggingRuntime(name="second")
    first_out = io.StringIO()
    second_out = io.StringIO()
    first = DefaultLoggingConfigurator(first_runtime, first_out)
    second = DefaultLoggingConfigurator(second_runtime, second_out)
    first.set_appenders([FileAppenderSpec(
        current_log_filename=f"{blocker}{os.sep}a.log", archive=False)])
    second.set_appenders([FileAppenderSpec(
        current_log_filename=f"{blocker}{os.sep}b.log", archive=False)])

    applied = threading.Event()
    resume = threading.Event()
    apply_first = first_runtime.apply_appenders

    def _held_apply(*args: object, **kwargs: object) -> list[logging.Handler]:
        handlers = apply_first(*args, **kwargs)  # type: ignore[arg-type]
        applied.set()
        resume.wait(timeout=5)
        return handlers

    monkeypatch.setattr(first_runtime, "apply_appenders", _held_apply)
    worker = threading.Thread(
        target=first.configure, args=(None, "overlap-first"))
    worker.start()
    try:
        assert applied.wait(timeout=5)
        second.configure(None, "overlap-second")
    finally:
        resume.set()
        worker.join(timeout=5)
        first.stop()
        second.stop()

    assert f"{blocker}{os.sep}a.log" in first_out.getvalue()
    assert f"{blocker}{os.sep}b.log" not in first_out.getvalue()
    assert f"{blocker}{os.sep}b.log" in second_out.getvalue()
    assert f"{blocker}{os.sep}a.log" not in second_out.getvalue()
    assert capsys.readouterr().out == ""
