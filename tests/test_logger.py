import logging
from datetime import datetime, timezone

from ligas_backend.core.logger import PACKAGE_LOGGER, setup_logger
from ligas_backend.services import match_service


def test_module_loggers_share_the_package_handlers():
    first = setup_logger("ligas_backend.services.match_service")
    again = setup_logger("ligas_backend.services.match_service")
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    assert first is again
    assert first.handlers == []
    assert first.propagate is True
    assert len(package_logger.handlers) == 1


def test_no_log_file_in_test_mode():
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    assert not any(isinstance(h, logging.FileHandler) for h in package_logger.handlers)


def test_scheduling_is_logged(session, make_team, caplog):
    home, away = make_team("Halcones"), make_team("Lobos")

    with caplog.at_level(logging.INFO, logger=PACKAGE_LOGGER):
        match = match_service.create_match(session, datetime(2025, 3, 1, 18, 0, tzinfo=timezone.utc), home.id, away.id)

    assert f"Scheduled match {match.id}" in caplog.text
