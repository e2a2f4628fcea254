import logging

from liquid_metal.logging_config import setup_logging


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "liquid.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level="DEBUG", log_file=str(log_file))

    assert logger is logging.getLogger("liquid_metal")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("liquid_metal.wave_field").debug("hello from the field")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the field" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
