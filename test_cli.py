#!/usr/bin/env python3
"""
Tests for the command-line interface.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from sbvfix import main

BLOCK = "0:00:05.065,0:00:06.218\nגארנט!\n"


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the console handlers each CLI run installs on captured stdout."""
    yield
    logger = logging.getLogger("sbv_fixer")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_fix_command_writes_output(tmp_path, capsys):
    input_path = tmp_path / "episode.sbv"
    input_path.write_text(BLOCK, encoding='utf-8')

    assert main(['fix', str(input_path)]) == 0

    output_path = tmp_path / "episode_rtl.sbv"
    assert output_path.read_text(encoding='utf-8') == "0:00:05.065,0:00:06.218\n!גארנט\n"
    assert str(output_path) in capsys.readouterr().out


def test_fix_command_with_backup_of_existing_output(tmp_path):
    input_path = tmp_path / "episode.sbv"
    input_path.write_text(BLOCK, encoding='utf-8')
    output_path = tmp_path / "fixed.sbv"
    output_path.write_text("old", encoding='utf-8')

    assert main(['fix', str(input_path), '-o', str(output_path), '--backup']) == 0

    backups = list((tmp_path / "subtitle_backups").iterdir())
    assert len(backups) == 1
    assert backups[0].read_text(encoding='utf-8') == "old"


def test_fix_command_missing_input_fails(tmp_path):
    assert main(['fix', str(tmp_path / "missing.sbv")]) == 1


def test_fix_command_unsupported_format_fails(tmp_path):
    input_path = tmp_path / "episode.txt"
    input_path.write_text(BLOCK, encoding='utf-8')
    assert main(['fix', str(input_path)]) == 1


def test_custom_character_set(tmp_path):
    input_path = tmp_path / "episode.sbv"
    input_path.write_text("0:00:05.065,0:00:06.218\nגארנט!*", encoding='utf-8')

    assert main(['--chars', '*', 'fix', str(input_path)]) == 0
    assert (tmp_path / "episode_rtl.sbv").read_text(encoding='utf-8') == "0:00:05.065,0:00:06.218\n*גארנט!"


def test_empty_character_set_is_rejected(tmp_path):
    input_path = tmp_path / "episode.sbv"
    input_path.write_text(BLOCK, encoding='utf-8')
    assert main(['--chars', '', 'fix', str(input_path)]) == 1


def test_batch_fix_command(tmp_path, capsys):
    source = tmp_path / "in"
    (source / "nested").mkdir(parents=True)
    (source / "nested" / "episode.sbv").write_text(BLOCK, encoding='utf-8')

    assert main(['batch-fix', str(source), str(tmp_path / "out"), '--parallel', '--workers', '2']) == 0

    assert (tmp_path / "out" / "nested" / "episode.sbv").exists()
    assert "Successful: 1" in capsys.readouterr().out


def test_batch_fix_missing_directory_fails(tmp_path):
    assert main(['batch-fix', str(tmp_path / "missing"), str(tmp_path / "out")]) == 1


def test_self_test_command_passes(capsys):
    assert main(['self-test']) == 0
    assert capsys.readouterr().out.strip() == "OK"


def test_self_test_command_shows_diff_on_failure(tmp_path, capsys):
    expected_path = tmp_path / "expected.sbv"
    expected_path.write_text("0:00:05.065,0:00:06.218\nשלום", encoding='utf-8')
    input_path = tmp_path / "input.sbv"
    input_path.write_text(BLOCK, encoding='utf-8')

    code = main(['self-test', '--input', str(input_path), '--expected', str(expected_path), '--show-diff'])

    out = capsys.readouterr().out
    assert code == 1
    assert "FAIL" in out.splitlines()
    assert "----- 1 -----" in out


def test_no_command_fails():
    assert main([]) == 1


def test_version_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['--version'])
    assert exc_info.value.code == 0
    assert "RTL SBV Fixer" in capsys.readouterr().out
