import pytest

import mdfmt.config.hierarchy as hierarchy


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and MDFMT_* env vars out of tests."""
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml")
    for env_key in hierarchy._ENV_MAP:
        monkeypatch.delenv(env_key, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def sample_table():
    return (
        "| Column A | Column B |\n"
        "| --- |:-:|\n"
        "| Apple | Giant Octopus |\n"
        "| Pear | Pointlessly long item |\n"
    )


@pytest.fixture
def formatted_sample_table():
    return (
        "| Column A | Column B              |\n"
        "|----------|:---------------------:|\n"
        "| Apple    | Giant Octopus         |\n"
        "| Pear     | Pointlessly long item |\n"
    )


@pytest.fixture
def sample_document(tmp_path, sample_table):
    """Write a small markdown document containing one table and return its path."""
    path = tmp_path / "doc.md"
    path.write_text("# Fruit\n\n" + sample_table + "\nThe end.\n")
    return path
