"""Unit tests for session log setup."""

import pytest
from loguru import logger

from candor.contexts.drafting.logger import log_undo
from candor.contexts.workbench.logger import setup_workbench_logger
from candor.utils.logger import new_session_dir


@pytest.mark.unit
def test_new_session_dir_is_timestamped(tmp_path):
    session_dir = new_session_dir("session", root=tmp_path)
    assert session_dir.parent == tmp_path
    assert session_dir.name.startswith("session_")
    assert not session_dir.exists()


@pytest.mark.unit
def test_contexts_share_one_log_file(tmp_path):
    log_file = setup_workbench_logger(tmp_path / "run", provider_name="fake/test-model")
    log_undo(2, undone=True)
    log_undo(0, undone=False)
    logger.remove()

    assert log_file == tmp_path / "run" / "workbench.log"
    content = log_file.read_text(encoding="utf-8")
    assert "LLM provider: fake/test-model" in content
    assert "[draft] Undo: reverted to version 2" in content
    # DEBUG still reaches the file
    assert "[draft] Undo ignored" in content
