"""End-to-end tests for the click CLI, wired through the composition root."""

import sys

import pytest
from click.testing import CliRunner
from loguru import logger

from boxoffice.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    yield CliRunner()
    # The CLI points loguru at the runner's captured stderr; restore it.
    logger.remove()
    logger.add(sys.stderr)


class TestPurchaseCommand:

    def test_successful_purchase(self, runner):
        result = runner.invoke(
            cli, ["purchase", "--account", "1", "--tickets", "ADULT:2,CHILD:4,INFANT:1"]
        )
        assert result.exit_code == 0, result.output
        assert "Congratulation! Successfully booked your seat." in result.output
        assert "Tickets:  7" in result.output
        assert "Seats:    6" in result.output
        assert "Paid:     £110.00" in result.output

    def test_type_names_are_case_insensitive(self, runner):
        result = runner.invoke(cli, ["purchase", "--account", "3", "--tickets", "adult:1, infant:1"])
        assert result.exit_code == 0, result.output
        assert "Seats:    1" in result.output

    def test_rule_violation_reported(self, runner):
        result = runner.invoke(cli, ["purchase", "--account", "1", "--tickets", "CHILD:2"])
        assert result.exit_code == 1
        assert "At least one adult ticket is required" in result.output

    def test_over_cap_reported(self, runner):
        result = runner.invoke(
            cli, ["purchase", "--account", "1", "--tickets", "ADULT:11,INFANT:10,CHILD:15"]
        )
        assert result.exit_code == 1
        assert "Maximum of 25 tickets are allowed at a time!" in result.output

    def test_invalid_account_reported(self, runner):
        result = runner.invoke(cli, ["purchase", "--account", "0", "--tickets", "ADULT:1"])
        assert result.exit_code == 1
        assert "Account id must be a positive integer" in result.output

    def test_unknown_type_reported(self, runner):
        result = runner.invoke(cli, ["purchase", "--account", "1", "--tickets", "SENIOR:1"])
        assert result.exit_code == 1
        assert "type must be ADULT, CHILD, or INFANT" in result.output

    @pytest.mark.parametrize("tickets", ["ADULT", "ADULT:two"])
    def test_malformed_tickets_rejected(self, runner, tickets):
        result = runner.invoke(cli, ["purchase", "--account", "1", "--tickets", tickets])
        assert result.exit_code == 2

    def test_info_logging_shows_gateway_calls(self, runner):
        result = runner.invoke(
            cli,
            ["--log-level", "INFO", "purchase", "--account", "5", "--tickets", "ADULT:1"],
        )
        assert result.exit_code == 0, result.output
        assert "Charged £25.00 to account 5" in result.output
        assert "Reserved 1 seats for account 5" in result.output

    def test_log_level_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ["purchase", "--account", "6", "--tickets", "ADULT:2"],
            env={"BOXOFFICE_LOG_LEVEL": "INFO"},
        )
        assert result.exit_code == 0, result.output
        assert "Charged £50.00 to account 6" in result.output

    def test_default_level_hides_gateway_calls(self, runner):
        result = runner.invoke(cli, ["purchase", "--account", "6", "--tickets", "ADULT:2"])
        assert result.exit_code == 0, result.output
        assert "Charged" not in result.output


class TestPricesCommand:

    def test_lists_prices_and_cap(self, runner):
        result = runner.invoke(cli, ["prices"])
        assert result.exit_code == 0
        assert "ADULT" in result.output and "£25.00" in result.output
        assert "CHILD" in result.output and "£15.00" in result.output
        assert "INFANT" in result.output and "£0.00" in result.output
        assert "Maximum 25 tickets per purchase." in result.output
