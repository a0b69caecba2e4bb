"""Test that the project layout is correct."""

from pathlib import Path


def test_directories_exist(project_root):
    """Test that all expected directories exist."""
    assert (project_root / "core").exists()
    assert (project_root / "models").exists()
    assert (project_root / "commands").exists()
    assert (project_root / "tests").exists()


def test_init_files_exist(project_root):
    """Test that all __init__.py files exist."""
    assert (project_root / "core" / "__init__.py").exists()
    assert (project_root / "models" / "__init__.py").exists()
    assert (project_root / "commands" / "__init__.py").exists()


def test_main_script_exists(project_root):
    """Test that main entry point exists."""
    assert (project_root / "telldus_live.py").exists()


def test_commands_registered():
    """Test that every command is registered on the CLI group."""
    from telldus_live import cli
    assert set(cli.commands) == {'devices', 'dim', 'sensors', 'sensor', 'authorize'}
