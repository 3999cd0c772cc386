"""Shared pytest fixtures for bsc-nft-deployments tests."""

from pathlib import Path
from typing import Dict

import pytest

VALID_KEY = "0x" + "ab" * 32


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run every test in an empty directory so no stray ./.env is picked up."""
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def valid_key() -> str:
    """Return a well-formed 32-byte private key."""
    return VALID_KEY


@pytest.fixture
def remote_environ(valid_key: str) -> Dict[str, str]:
    """Environment with both BSC endpoints and a signing key."""
    return {
        "BSC_TESTNET_URL": "https://data-seed-prebsc-1-s1.bnbchain.org:8545",
        "BSC_MAINNET_URL": "https://bsc-dataseed.bnbchain.org",
        "PRIVATE_KEY": valid_key,
    }


@pytest.fixture
def env_file(tmp_path: Path, valid_key: str) -> Path:
    """Create a .env file with a testnet URL and signing key."""
    path = tmp_path / "config" / ".env"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "# local settings\n"
        "BSC_TESTNET_URL=https://testnet.example.org\n"
        f'PRIVATE_KEY="{valid_key[2:]}"\n'
    )
    return path
