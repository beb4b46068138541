"""Tests for the click commands.

The HTTP fetcher is replaced by a scripted fake, and the fake raises
KeyboardInterrupt once it runs out of prices to end the watch loop.
"""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pricewatch.cli import cli
from pricewatch.fetchers import NetworkError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_path():
    """Point the CLI at a config file that does not exist yet."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "config.toml"


@pytest.fixture
def no_sleep():
    with patch("pricewatch.monitor.time.sleep") as sleep:
        yield sleep


def _invoke(runner, config_path, args, fetcher, input=None):
    with patch("pricewatch.cli.watch.CoinGeckoFetcher", return_value=fetcher), \
            patch("pricewatch.cli.quote.CoinGeckoFetcher", return_value=fetcher):
        return runner.invoke(cli, ["--config", str(config_path)] + args, input=input)


class TestGroup:

    def test_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("watch", "quote", "config"):
            assert name in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(cli, ["trade"])

        assert result.exit_code != 0


class TestWatch:

    def test_interactive_session_alerts(self, runner, config_path, fake_fetcher, no_sleep):
        fetcher = fake_fetcher([100.0, 94.0])

        result = _invoke(runner, config_path, ["watch"], fetcher, input="doge\nBTC\n2\n5\n10\n")

        assert result.exit_code == 0
        assert "Invalid ticker. Please enter one of the following: btc, eth, ada." in result.output
        assert "Monitoring bitcoin price. Initial price: $100.00" in result.output
        assert "Current bitcoin price: $94.00" in result.output
        assert "Alert! bitcoin price changed by -6.00%. Current price: $94.00" in result.output
        assert "Stopped monitoring." in result.output
        no_sleep.assert_called_with(10.0)

    def test_options_skip_prompts(self, runner, config_path, fake_fetcher, no_sleep):
        fetcher = fake_fetcher([2000.0, 2060.0])

        result = _invoke(
            runner, config_path,
            ["watch", "-a", "eth", "-m", "absolute", "-t", "50", "-i", "15"],
            fetcher,
        )

        assert result.exit_code == 0
        assert "Alert! ethereum price changed by $60.00. Current price: $2060.00" in result.output
        assert fetcher.requested == ["ethereum"] * 3
        no_sleep.assert_called_with(15.0)

    def test_any_asset_uses_configured_interval(self, runner, config_path, fake_fetcher, no_sleep):
        config_path.write_text("[watch]\ninterval = 45\n")
        fetcher = fake_fetcher([150.0, 151.0])

        result = _invoke(
            runner, config_path,
            ["watch", "--any-asset", "-a", "solana", "-m", "percent", "-t", "3"],
            fetcher,
        )

        assert result.exit_code == 0
        assert "Monitoring solana price. Initial price: $150.00" in result.output
        assert "Current solana price" not in result.output
        assert "Alert!" not in result.output
        no_sleep.assert_called_with(45.0)

    def test_poll_errors_do_not_stop_monitoring(self, runner, config_path, fake_fetcher, no_sleep):
        fetcher = fake_fetcher([100.0, NetworkError(OSError("timed out")), 110.0])

        result = _invoke(runner, config_path, ["watch", "-a", "btc", "-m", "absolute", "-t", "5", "-i", "1"], fetcher)

        assert result.exit_code == 0
        assert "Error fetching prices: Request error: timed out" in result.output
        assert "Alert! bitcoin price changed by $10.00. Current price: $110.00" in result.output

    def test_startup_failure_exits(self, runner, config_path, fake_fetcher, no_sleep):
        fetcher = fake_fetcher([NetworkError(OSError("no route to host"))])

        result = _invoke(runner, config_path, ["watch", "-a", "btc", "-m", "percent", "-t", "5", "-i", "1"], fetcher)

        assert result.exit_code == 1
        assert "Error fetching prices: Request error: no route to host" in result.output
        assert "Monitoring" not in result.output
        no_sleep.assert_not_called()

    def test_zero_baseline_in_percent_mode_exits(self, runner, config_path, fake_fetcher, no_sleep):
        fetcher = fake_fetcher([0.0])

        result = _invoke(runner, config_path, ["watch", "-a", "btc", "-m", "percent", "-t", "5", "-i", "1"], fetcher)

        assert result.exit_code == 1
        assert "Initial bitcoin price is zero; percent change alerts are undefined" in result.output
        assert "Error fetching prices" not in result.output
        no_sleep.assert_not_called()

    def test_invalid_asset_option(self, runner, config_path, fake_fetcher):
        result = _invoke(runner, config_path, ["watch", "-a", "doge"], fake_fetcher([]))

        assert result.exit_code == 2
        assert "btc, eth, ada" in result.output

    @pytest.mark.parametrize("threshold", ["0", "-3", "abc", "inf"])
    def test_invalid_threshold_option(self, runner, config_path, fake_fetcher, threshold):
        result = _invoke(runner, config_path, ["watch", "-t", threshold], fake_fetcher([]))

        assert result.exit_code == 2

    def test_input_ends_before_prompts_done(self, runner, config_path, fake_fetcher):
        fetcher = fake_fetcher([100.0])

        result = _invoke(runner, config_path, ["watch"], fetcher, input="btc\n")

        assert result.exit_code == 1
        assert fetcher.requested == []

    def test_bad_config_file(self, runner, config_path, fake_fetcher):
        config_path.write_text("[watch]\ninterval = -1\n")

        result = _invoke(runner, config_path, ["watch"], fake_fetcher([]))

        assert result.exit_code == 1
        assert "watch.interval must be positive" in result.output


class TestQuote:

    def test_prints_price(self, runner, config_path, fake_fetcher):
        fetcher = fake_fetcher([0.4512])

        result = _invoke(runner, config_path, ["quote", "ADA"], fetcher)

        assert result.exit_code == 0
        assert "Current cardano price: $0.45" in result.output
        assert fetcher.requested == ["cardano"]

    def test_any_asset(self, runner, config_path, fake_fetcher):
        fetcher = fake_fetcher([150.0])

        result = _invoke(runner, config_path, ["quote", "--any-asset", "solana"], fetcher)

        assert result.exit_code == 0
        assert fetcher.requested == ["solana"]

    def test_fetch_error_exits(self, runner, config_path, fake_fetcher):
        fetcher = fake_fetcher([NetworkError(OSError("down"))])

        result = _invoke(runner, config_path, ["quote", "btc"], fetcher)

        assert result.exit_code == 1
        assert "Error fetching prices: Request error: down" in result.output

    def test_unknown_ticker(self, runner, config_path, fake_fetcher):
        result = _invoke(runner, config_path, ["quote", "doge"], fake_fetcher([]))

        assert result.exit_code == 2


class TestConfigCommand:

    def test_init_writes_template(self, runner, config_path):
        result = runner.invoke(cli, ["--config", str(config_path), "config", "--init"])

        assert result.exit_code == 0
        assert config_path.exists()

    def test_init_refuses_overwrite(self, runner, config_path):
        config_path.write_text("[watch]\ninterval = 5\n")

        result = runner.invoke(cli, ["--config", str(config_path), "config", "--init"])

        assert result.exit_code == 1
        assert "interval = 5" in config_path.read_text()

    def test_shows_values(self, runner, config_path):
        config_path.write_text("[watch]\ninterval = 5\n")

        result = runner.invoke(cli, ["--config", str(config_path), "config"])

        assert result.exit_code == 0
        assert "watch.interval" in result.output
