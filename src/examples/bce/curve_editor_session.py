"""Plays a short editing session on a curve editor and saves the result as SVG.

The session adds two points, drags one of them beyond its right neighbor
(the point stops right before it), removes another one with the secondary
button and finally hovers over the curve to show the ghost point.
"""

import logging
import os
import sys

from bce.common import PointerButton
from bce.editor import BcCurveEditor
from bce.interaction import BcInteractionController
from bce.logging_config import setup_logging
from bce.page import BcSvgPage

OUTPUT_FILE = "data/output/example/svg/bce/curve_editor_session.svg"

logger = logging.getLogger("bce.examples.curve_editor_session")


def run_session(editor: BcCurveEditor, controller: BcInteractionController) -> None:
    """Feed a fixed sequence of pointer events into the controller."""
    controller.enter()

    # add a point and drag it up
    controller.press(250.0, 400.0)
    controller.drag(260.0, 800.0)
    controller.release()

    # add a second point and drag it far to the left, it stops at its left neighbor
    controller.press(600.0, 200.0)
    controller.drag(100.0, 300.0)
    controller.release()

    # add and remove a third point
    controller.press(800.0, 900.0)
    controller.release()
    controller.press(800.0, 900.0, PointerButton.SECONDARY)

    # hover over the curve
    controller.drag(500.0, 0.0)
    for point in editor.control_points:
        logger.info("control point (%.4f, %.4f)", point.x, point.y)
    logger.info("ghost point %s", controller.ghost_point)


def main(output_file: str = OUTPUT_FILE) -> BcSvgPage:
    """Run the session and save the drawing to output_file."""
    setup_logging(logging.INFO)

    editor = BcCurveEditor()
    controller = BcInteractionController(editor)
    run_session(editor, controller)

    domain = editor.config.max_value - editor.config.min_value
    page = BcSvgPage.create_page(domain, editor.config.probe_y_max - editor.config.probe_y_min)
    page.draw_editor(editor, controller)

    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    page.save_as(output_file, include_debug_layer=True, pretty=True, indent=2)
    return page


if __name__ == "__main__":
    main(*sys.argv[1:2])
