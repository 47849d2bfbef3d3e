import logging

from src.utils.logging import get_logger


def test_get_logger_attaches_single_handler() -> None:
    logger = get_logger('fintrack.test.single')
    get_logger('fintrack.test.single')
    tagged = [h for h in logger.handlers if getattr(h, '_fintrack', False)]
    assert len(tagged) == 1


def test_get_logger_level_from_argument_and_environment(monkeypatch) -> None:
    assert get_logger('fintrack.test.level', level='debug').level == logging.DEBUG
    monkeypatch.setenv('FINTRACK_LOG_LEVEL', 'WARNING')
    assert get_logger('fintrack.test.env').level == logging.WARNING
    monkeypatch.setenv('FINTRACK_LOG_LEVEL', 'nonsense')
    assert get_logger('fintrack.test.bad').level == logging.INFO
