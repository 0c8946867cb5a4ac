"""Main application"""

import logging

from bce.editor import BcCurveEditor
from bce.logging_config import setup_logging
from bce.page import BcSvgPage


def main():
    """Main"""
    app_logger = setup_logging(logging.INFO)

    editor = BcCurveEditor()
    editor.add_point(300, 900)
    editor.add_point(700, 100)

    page = BcSvgPage.create_page(editor.config.max_value - editor.config.min_value, 1000.0)
    page.draw_editor(editor)
    page.save_as("main_app.svg")

    app_logger.info("file saved.")


if __name__ == "__main__":
    main()
