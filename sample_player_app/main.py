#!/usr/bin/env python3
"""
Main entry point for the sample video player.
"""
import sys
import logging
import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication

from sample_player_app.config import AUTOPLAY, LOG_FILE
from sample_player_app.ui.main_window import MainWindow


# Configure logging
def setup_logging(verbose=False):
    """Set up logging configuration."""
    log_level = logging.DEBUG if verbose else logging.INFO
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(LOG_FILE)
        ]
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Sample video player')
    parser.add_argument('media', nargs='?', type=Path, help='Video file to open')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('--autoplay', action='store_true', default=AUTOPLAY,
                        help='Start playback as soon as the file is loaded')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)
    logger.info("Starting sample video player")

    app = QApplication(sys.argv[:1])
    window = MainWindow(autoplay=args.autoplay)
    if args.media:
        window.open_media(args.media)
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
