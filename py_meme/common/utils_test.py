"""Tests for the utils module."""

import os

from common import utils


def test_new_temp_path_is_unique_in_rapid_succession(tmp_path, monkeypatch):
  monkeypatch.setattr(utils.tempfile, "tempdir", str(tmp_path))

  paths = [utils.new_temp_path("-out.png") for _ in range(1000)]

  assert len(set(paths)) == len(paths)
  assert len(list(tmp_path.iterdir())) == 1000


def test_new_temp_path_reserves_empty_file_with_suffix(tmp_path, monkeypatch):
  monkeypatch.setattr(utils.tempfile, "tempdir", str(tmp_path))

  path = utils.new_temp_path("-in.png")

  assert os.path.dirname(path) == str(tmp_path)
  assert path.endswith("-in.png")
  assert os.path.isfile(path)
  assert os.path.getsize(path) == 0


def test_is_local_reads_emulator_flag(monkeypatch):
  monkeypatch.delenv("IS_LOCAL", raising=False)
  monkeypatch.setenv("FUNCTIONS_EMULATOR", "true")

  assert utils.is_emulator()
  assert utils.is_local()


def test_is_local_reads_is_local_flag(monkeypatch):
  monkeypatch.delenv("FUNCTIONS_EMULATOR", raising=False)
  monkeypatch.setenv("IS_LOCAL", "1")

  assert not utils.is_emulator()
  assert utils.is_local()


def test_is_local_false_in_production(monkeypatch):
  monkeypatch.delenv("FUNCTIONS_EMULATOR", raising=False)
  monkeypatch.delenv("IS_LOCAL", raising=False)

  assert not utils.is_local()
