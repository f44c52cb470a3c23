# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging

from rich.logging import RichHandler

from snykclose.utils.logging import setup_logging


class TestSetupLogging:
    def test_console_only_by_default(self):
        logger = setup_logging()

        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_verbose_enables_debug(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / 'logs' / 'snykclose.log'
        logger = setup_logging(log_file=str(log_file))

        logging.getLogger('snykclose.scanner').info('Checking acme/api...')
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding='utf-8')
        assert '| INFO | Checking acme/api...' in content

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1
