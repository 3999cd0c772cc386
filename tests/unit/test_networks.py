"""Unit tests for network configuration assembly and validation."""

import logging
from typing import Dict

import pytest

from bsc_nft_deployments.constants import NETWORK_CONFIG
from bsc_nft_deployments.exceptions import (
    InvalidCredentialError,
    InvalidUrlError,
    MissingEnvironmentError,
    UnknownNetworkError,
)
from bsc_nft_deployments.networks import (
    build_network,
    network_summary,
    normalize_private_key,
    redact,
    require_remote,
    validate_private_key,
    validate_url,
)
from bsc_nft_deployments.types import NetworkConfiguration


class TestNormalizePrivateKey:
    """Test the normalize_private_key function."""

    def test_keeps_existing_prefix(self):
        """Test that an already-prefixed key is not prefixed again."""
        assert normalize_private_key("0xabc123") == "0xabc123"

    def test_adds_missing_prefix(self):
        """Test that a bare hex key gains a single 0x prefix."""
        assert normalize_private_key("abc123") == "0xabc123"

    def test_uppercase_prefix_normalized(self):
        """Test that 0X is rewritten as 0x."""
        assert normalize_private_key("0XABC123") == "0xABC123"

    def test_strips_whitespace(self):
        """Test that surrounding whitespace is removed."""
        assert normalize_private_key("  0xabc123\n") == "0xabc123"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent_values_become_none(self, value):
        """Test that absent or blank values are treated as missing."""
        assert normalize_private_key(value) is None


class TestBuildNetwork:
    """Test the build_network function."""

    def test_assembles_testnet(self, remote_environ: Dict[str, str], valid_key: str):
        """Test that testnet values come from the table and environment."""
        network = build_network("bscTestnet", remote_environ)

        assert network.name == "bscTestnet"
        assert network.chain_id == 97
        assert network.url == remote_environ["BSC_TESTNET_URL"]
        assert network.accounts == (valid_key,)
        assert network.url_env == "BSC_TESTNET_URL"
        assert network.accounts_env == "PRIVATE_KEY"
        assert not network.is_local

    def test_assembles_mainnet(self, remote_environ: Dict[str, str]):
        """Test that mainnet reads its own URL variable."""
        network = build_network("bscMainnet", remote_environ)

        assert network.chain_id == 56
        assert network.url == remote_environ["BSC_MAINNET_URL"]

    def test_local_network_has_no_url_or_accounts(self, remote_environ: Dict[str, str]):
        """Test that the simulated network ignores the environment."""
        network = build_network("hardhat", remote_environ)

        assert network.chain_id == 31337
        assert network.url is None
        assert network.accounts == ()
        assert network.is_local

    def test_credential_example(self):
        """Test that PRIVATE_KEY=0xabc123 yields one key without a doubled prefix."""
        network = build_network("bscTestnet", {"PRIVATE_KEY": "0xabc123"})

        assert network.accounts == ("0xabc123",)

    def test_missing_values_are_deferred(self, caplog):
        """Test that absent URL and key do not fail at declaration time."""
        with caplog.at_level(logging.DEBUG):
            network = build_network("bscMainnet", {})

        assert network.url is None
        assert network.accounts == ()
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert "BSC_MAINNET_URL" in caplog.text
        assert "PRIVATE_KEY" in caplog.text

    def test_empty_values_treated_as_absent(self):
        """Test that empty strings never become an empty credential or URL."""
        network = build_network("bscTestnet", {"BSC_TESTNET_URL": "", "PRIVATE_KEY": "  "})

        assert network.url is None
        assert network.accounts == ()

    def test_populated_credentials_are_non_empty(self, remote_environ: Dict[str, str]):
        """Test that every populated credential is non-empty for all networks."""
        for name in NETWORK_CONFIG:
            network = build_network(name, remote_environ)
            assert all(key for key in network.accounts)

    def test_unknown_network_raises(self):
        """Test that undeclared networks are rejected."""
        with pytest.raises(UnknownNetworkError, match="polygon"):
            build_network("polygon", {})

    def test_address_url(self, remote_environ: Dict[str, str]):
        """Test that explorer links are built from the explorer base URL."""
        testnet = build_network("bscTestnet", remote_environ)
        local = build_network("hardhat", remote_environ)

        assert testnet.address_url("0x1234") == "https://testnet.bscscan.com/address/0x1234"
        assert local.address_url("0x1234") is None


class TestValidateUrl:
    """Test the validate_url function."""

    @pytest.mark.parametrize(
        "url",
        [
            "http://127.0.0.1:8545",
            "https://bsc-dataseed.bnbchain.org",
            "wss://bsc-ws-node.nariox.org:443",
        ],
    )
    def test_accepts_valid_urls(self, url: str):
        """Test that http(s) and ws(s) URLs are accepted."""
        assert validate_url("bscMainnet", url) == url

    @pytest.mark.parametrize("url", [None, "", "  "])
    def test_missing_url_raises(self, url):
        """Test that absent URLs name the variable to set."""
        with pytest.raises(MissingEnvironmentError, match=r"\$BSC_TESTNET_URL"):
            validate_url("bscTestnet", url, "BSC_TESTNET_URL")

    def test_rejects_unknown_scheme(self):
        """Test that non-RPC schemes are rejected."""
        with pytest.raises(InvalidUrlError, match="ftp"):
            validate_url("bscTestnet", "ftp://example.org")

    def test_rejects_url_without_host(self):
        """Test that a URL with no host is rejected."""
        with pytest.raises(InvalidUrlError):
            validate_url("bscTestnet", "https://")

    def test_rejects_bare_hostname(self):
        """Test that a hostname without scheme is rejected."""
        with pytest.raises(InvalidUrlError):
            validate_url("bscTestnet", "bsc-dataseed.bnbchain.org")


class TestValidatePrivateKey:
    """Test the validate_private_key function."""

    def test_accepts_32_byte_key(self, valid_key: str):
        """Test that a 64-hex-digit key is accepted."""
        assert validate_private_key("bscTestnet", valid_key) == valid_key

    @pytest.mark.parametrize(
        "key",
        ["0xabc123", "0x" + "zz" * 32, "0x0x" + "ab" * 31, "ab" * 32],
    )
    def test_rejects_malformed_keys(self, key: str):
        """Test that short, non-hex, double-prefixed and unprefixed keys are rejected."""
        with pytest.raises(InvalidCredentialError):
            validate_private_key("bscTestnet", key)

    def test_error_does_not_leak_key(self):
        """Test that the error message redacts the key."""
        secret = "0x" + "cd" * 31 + "ef12"
        with pytest.raises(InvalidCredentialError) as exc_info:
            validate_private_key("bscTestnet", secret + "00")

        assert secret not in str(exc_info.value)


class TestRequireRemote:
    """Test the require_remote function."""

    def test_local_network_passes(self):
        """Test that the simulated network needs no URL or key."""
        network = build_network("hardhat", {})
        assert require_remote(network) is network

    def test_complete_remote_network_passes(self, remote_environ: Dict[str, str]):
        """Test that a fully configured network passes."""
        network = build_network("bscTestnet", remote_environ)
        assert require_remote(network) is network

    def test_missing_url_fails(self, valid_key: str):
        """Test that a missing URL fails at time of use."""
        network = build_network("bscTestnet", {"PRIVATE_KEY": valid_key})

        with pytest.raises(MissingEnvironmentError, match="BSC_TESTNET_URL"):
            require_remote(network)

    def test_missing_key_fails(self):
        """Test that a missing key fails instead of signing with an empty credential."""
        network = build_network("bscTestnet", {"BSC_TESTNET_URL": "https://testnet.example.org"})

        with pytest.raises(MissingEnvironmentError, match="PRIVATE_KEY"):
            require_remote(network)

    def test_malformed_key_fails(self):
        """Test that a short key fails at time of use."""
        network = build_network(
            "bscTestnet",
            {"BSC_TESTNET_URL": "https://testnet.example.org", "PRIVATE_KEY": "0xabc123"},
        )

        with pytest.raises(InvalidCredentialError):
            require_remote(network)

    def test_handbuilt_record_without_env_names(self):
        """Test the message for records not built from the network table."""
        network = NetworkConfiguration(name="custom", url="https://rpc.example.org")

        with pytest.raises(MissingEnvironmentError, match="configure a key"):
            require_remote(network)


class TestRedaction:
    """Test redact and network_summary."""

    def test_redacts_prefixed_key(self, valid_key: str):
        """Test that only the last characters of a key survive."""
        assert redact(valid_key) == "0x…" + valid_key[-4:]

    def test_redacts_short_values_entirely(self):
        """Test that very short secrets are fully hidden."""
        assert redact("0xab") == "0x…"
        assert redact("ab") == "…"

    def test_unset_value(self):
        """Test that absent values are shown as unset."""
        assert redact(None) == "<unset>"
        assert redact("") == "<unset>"

    def test_summary_hides_accounts(self, remote_environ: Dict[str, str], valid_key: str):
        """Test that network summaries never contain the raw key."""
        summary = network_summary(build_network("bscTestnet", remote_environ))

        assert summary["name"] == "bscTestnet"
        assert summary["chain_id"] == 97
        assert summary["url"] == remote_environ["BSC_TESTNET_URL"]
        assert summary["accounts"] == ["0x…" + valid_key[-4:]]
        assert valid_key not in str(summary)
