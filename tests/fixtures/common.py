"""Common fixtures and helper functions for tests."""
import pathlib

import pytest
import yaml


@pytest.fixture(name="_base_path")
def fixture_base_path() -> pathlib.Path:
    """Get the current folder of the test"""
    return pathlib.Path(__file__).parent.parent


def yml_data_from_file(base_path, file_path) -> dict:
    """
    Load a YAML file relative to the tests folder.
    """
    file = pathlib.Path(base_path / file_path)
    with open(file, encoding="utf-8") as yml_file:
        return yaml.safe_load(yml_file)
