"""Setup script for daynight-theme package with data_files for the example config."""

from pathlib import Path

from setuptools import setup

# This setup.py is used only for data_files
# Package metadata comes from pyproject.toml

# Install config.example.yaml to /usr/share/daynight-theme/ for reference
# Note: Path must be relative to setup.py directory
config_example = Path(__file__).parent / "config.example.yaml"
data_files = []
if config_example.exists():
    config_example_rel = config_example.relative_to(Path(__file__).parent)
    data_files.append(("share/daynight-theme", [str(config_example_rel)]))

# Minimal setup() call - metadata comes from pyproject.toml
setup(
    name="daynight-theme",  # Must match pyproject.toml
    data_files=data_files,
)
