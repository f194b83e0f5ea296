import logging
import os
import sys

import pytest
from rich.logging import RichHandler

# Ensure tests run with src/ on sys.path so tests can import cli/core/adapters
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC not in sys.path:
	sys.path.insert(0, SRC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
	"""Isolate every test from CATR_* variables, any .env in the cwd and CLI logging."""
	for key in list(os.environ):
		if key.upper().startswith("CATR_"):
			monkeypatch.delenv(key, raising=False)
	monkeypatch.chdir(tmp_path)
	yield
	root = logging.getLogger()
	for handler in list(root.handlers):
		if isinstance(handler, RichHandler):
			root.removeHandler(handler)
	root.setLevel(logging.WARNING)


@pytest.fixture
def write_file(tmp_path):
	def _write(name, content):
		path = tmp_path / name
		if isinstance(content, bytes):
			path.write_bytes(content)
		else:
			path.write_text(content, encoding="utf-8")
		return str(path)

	return _write
