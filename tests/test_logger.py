import logging

import pytest

from image_enhancer.core import EnhancerLogger, get_config, get_logger, LoggingError


def test_log_stage_message(caplog):
    logger = get_logger()
    with caplog.at_level(logging.INFO, logger=logger.name):
        logger.log_stage("Resize", "Lanczos x2")
    assert ">>> Stage: Resize - Lanczos x2" in caplog.text


def test_component_attached_to_records(caplog):
    logger = get_logger(component="Classical")
    with caplog.at_level(logging.INFO, logger=logger.name):
        logger.info("hello")
    assert caplog.records[-1].component == "Classical"


def test_error_includes_exception_details(caplog):
    logger = get_logger()
    with caplog.at_level(logging.ERROR, logger=logger.name):
        logger.error("stage failed", ValueError("bad tile"))
    assert "ValueError" in caplog.text
    assert "bad tile" in caplog.text


def test_file_handler_writes_log(tmp_path):
    log_path = tmp_path / "logs" / "{date}.log"
    (tmp_path / "settings.yaml").write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "  console:\n"
        "    enabled: false\n"
        "  file:\n"
        "    enabled: true\n"
        f"    path: \"{log_path.as_posix()}\"\n"
    )
    get_config(tmp_path)

    logger = EnhancerLogger(name="Image-Enhancer-file-test", component="ONNX")
    logger.info("written to disk")

    files = list((tmp_path / "logs").glob("*.log"))
    assert len(files) == 1
    assert "[ONNX] written to disk" in files[0].read_text()


def test_bad_log_directory_fails_loud(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    (tmp_path / "settings.yaml").write_text(
        "logging:\n"
        "  file:\n"
        "    enabled: true\n"
        f"    path: \"{(blocker / 'sub' / 'run.log').as_posix()}\"\n"
    )
    get_config(tmp_path)

    with pytest.raises(LoggingError):
        EnhancerLogger(name="Image-Enhancer-bad-dir-test")


def test_log_separator(caplog):
    logger = get_logger()
    with caplog.at_level(logging.INFO, logger=logger.name):
        logger.log_separator("=", 10)
    assert caplog.records[-1].getMessage() == "=" * 10
