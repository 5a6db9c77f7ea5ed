"""
Pytest configuration and fixtures for dbca-wizard tests.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dbca_wizard.config.theme import DEFAULT_THEME
from dbca_wizard.steps import build_steps
from dbca_wizard.wizard import DBConfig, KeyEvent, Wizard
from dbca_wizard.wizard.events import BACKSPACE


def key(name: str) -> KeyEvent:
    """Event for a named key (``enter``) or a single printable character."""
    if len(name) == 1:
        return KeyEvent.char(name)
    return KeyEvent(name)


class WizardDriver:
    """Feeds key presses into a wizard the way the TUI would."""

    def __init__(self, wizard: Wizard):
        self.wizard = wizard

    def press(self, *names: str) -> "WizardDriver":
        for name in names:
            self.wizard.dispatch(key(name))
        return self

    def type(self, text: str) -> "WizardDriver":
        for character in text:
            self.wizard.dispatch(KeyEvent.char(character))
        return self

    def clear(self, count: int = 80) -> "WizardDriver":
        for _ in range(count):
            self.wizard.dispatch(KeyEvent(BACKSPACE))
        return self

    def replace(self, text: str) -> "WizardDriver":
        return self.clear().type(text)

    @property
    def title(self) -> str:
        step = self.wizard.current_step
        return step.title() if step is not None else ""

    @property
    def config(self) -> DBConfig:
        return self.wizard.current_config()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def wizard_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point DBCA_WIZARD_HOME at a temporary directory with no stray overrides."""
    for name in list(os.environ):
        if name.startswith("DBCA_WIZARD_"):
            monkeypatch.delenv(name)

    home = temp_dir / ".dbca-wizard"
    home.mkdir()
    monkeypatch.setenv("DBCA_WIZARD_HOME", str(home))
    return home


@pytest.fixture
def driver() -> WizardDriver:
    """A started wizard over the real steps with default configuration."""
    wizard = Wizard(build_steps(DEFAULT_THEME))
    wizard.start()
    return WizardDriver(wizard)


@pytest.fixture
def sample_answers() -> dict:
    """A complete set of answers for a typical single-instance database."""
    return {
        "operation": "create",
        "creation_mode": "typical",
        "deployment_type": "SI",
        "template_name": "General_Purpose.dbt",
        "database_type": "MULTIPURPOSE",
        "global_db_name": "sales.example.com",
        "sid": "sales",
        "create_as_container_db": True,
        "number_of_pdbs": 1,
        "pdb_name": "salespdb",
        "storage_type": "FS",
        "datafile_destination": "/u02/oradata",
        "enable_fra": True,
        "fra_destination": "/u03/fra",
        "fra_size": 20480,
        "common_password": "Welcome_123",
        "sys_password": "Welcome_123",
        "system_password": "Welcome_123",
        "pdb_admin_password": "Welcome_123",
    }
