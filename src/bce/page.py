"""SVG page rendering the curve editor state."""

from __future__ import annotations

import copy
import gzip
import io
import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import svgwrite
import svgwrite.base
import svgwrite.container
import svgwrite.elementfactory
from numpy.typing import NDArray
from svgwrite.extensions import Inkscape

from bce.consts import ACTIVE_COLOR, CURVE_COLOR, GHOST_COLOR, INACTIVE_COLOR
from bce.editor import BcCurveEditor
from bce.geom import BcBox
from bce.interaction import BcInteractionController

logger = logging.getLogger(__name__)


@dataclass
class BcSvgPage:
    """A page (canvas) described by SVG with a viewbox to draw inside.

    The viewbox has its own coordinate-system left-to-right and bottom-to-top.
    Contains groups/layers:
        - root       -- (group) just contains the y-flip and translation to bottom left
            - main   -- editable->locked=False  --  hidden->display="block"
            - debug  -- editable->locked=False  --  hidden->display="none"
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    root_group: svgwrite.container.Group
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group

    def __init__(
        self,
        canvas_width_mm: float,
        canvas_height_mm: float,
        viewbox_x_mm: float,
        viewbox_y_mm: float,
        viewbox_height_mm: float,
        viewbox_scale: float = 1.0,
    ):
        """
        Initialize the SVG page with specified canvas and viewbox dimensions.

        viewbox_scale scales millimeters to viewbox coordinates, e.g. the
        curve domain units used by the draw-methods.

        Args:
            canvas_width_mm (float): The width of the canvas (=whole page) in millimeters.
            canvas_height_mm (float): The height of the canvas (=whole page) in millimeters.
            viewbox_x_mm (float): The x-coordinate of the viewbox's origin on the canvas in millimeters.
            viewbox_y_mm (float): The y-coordinate of the viewbox's top edge on the canvas in millimeters.
            viewbox_height_mm (float): The height of the viewbox in millimeters top-to-bottom.
            viewbox_scale (float, optional): The scale factor for the viewbox. Defaults to 1.0.
        """

        # calculate viewbox coordinates, i.e. the canvas coordinates from viewbox perspective
        vb_x: float = -viewbox_x_mm * viewbox_scale
        vb_y: float = -viewbox_y_mm * viewbox_scale
        vb_width: float = viewbox_scale * canvas_width_mm
        vb_height: float = viewbox_scale * canvas_height_mm

        self.viewbox_scale: float = viewbox_scale

        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{canvas_width_mm}mm", f"{canvas_height_mm}mm"),
            viewBox=(f"{vb_x} {vb_y} {vb_width} {vb_height}"),
            profile="full",
        )

        # Define root group with transformation to flip y-axis and set origin to bottom-left
        y_translate = -viewbox_height_mm * viewbox_scale
        self.root_group = self.drawing.g(id="root", transform=f"scale(1,-1) translate(0,{y_translate})")

        self._inkscape = Inkscape(self.drawing)

        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

    def add(
        self,
        element: Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder],
        add_to_debug_layer: bool = False,
    ) -> Union[svgwrite.base.BaseElement, svgwrite.elementfactory.ElementBuilder]:
        """Add a SVG element as subelement either to main or debug layer.

        Args:
            element (svgwrite.base.BaseElement): append this SVG element
            add_to_debug_layer (bool, optional): True if element should be added to debug layer. Defaults to False.

        Returns:
            svgwrite.base.BaseElement: the added element
        """
        if add_to_debug_layer:
            return self.debug_layer.add(element)
        return self.main_layer.add(element)

    def draw_polyline(
        self,
        points: NDArray[np.float64],
        stroke: str = CURVE_COLOR,
        stroke_width: float = 2.0,
        add_to_debug_layer: bool = False,
    ) -> Optional[svgwrite.base.BaseElement]:
        """Draw the (x, y) points as open polyline. Returns None for less than two points."""
        if len(points) < 2:
            return None
        return self.add(
            self.drawing.polyline(
                points=[(float(x), float(y)) for x, y in points],
                stroke=stroke,
                stroke_width=stroke_width,
                fill="none",
            ),
            add_to_debug_layer,
        )

    def draw_dot(self, x: float, y: float, radius: float, color: str) -> svgwrite.base.BaseElement:
        """Draw a filled circle at (x, y)."""
        return self.add(self.drawing.circle(center=(float(x), float(y)), r=radius, fill=color, stroke=color))

    def draw_editor(self, editor: BcCurveEditor, controller: Optional[BcInteractionController] = None) -> None:
        """
        Draw the state of a curve editor.

        Main layer: the curve, one dot per control point (ACTIVE_COLOR while
        captured, INACTIVE_COLOR otherwise) and the ghost point if the
        controller shows one. Debug layer: the control polygon and the
        bounding box of the curve.

        Args:
            editor (BcCurveEditor): The editor to draw
            controller (BcInteractionController, optional): Gesture state for the ghost point. Defaults to None.
        """
        curve = editor.curve if editor.curve is not None else editor.evaluate()
        radius = editor.config.dot_radius

        self.draw_polyline(editor.control_points.to_array(), stroke="gray", stroke_width=1.0, add_to_debug_layer=True)
        if len(curve) > 0:
            bounds = BcBox.from_points(curve)
            self.add(
                self.drawing.rect(
                    insert=(bounds.xmin, bounds.ymin),
                    size=(bounds.width, bounds.height),
                    stroke="gray",
                    stroke_width=1.0,
                    fill="none",
                ),
                True,
            )
        self.draw_polyline(curve)

        for point in editor.control_points:
            point.handle = self.draw_dot(point.x, point.y, radius, ACTIVE_COLOR if point.active else INACTIVE_COLOR)

        if controller is not None and controller.ghost_visible and controller.ghost_point is not None:
            ghost_x, ghost_y = controller.ghost_point
            self.draw_dot(ghost_x, ghost_y, radius, GHOST_COLOR)

        logger.debug("Drew curve with %d samples and %d control points", len(curve), len(editor.control_points))

    def tostring(self, include_debug_layer: bool = False, pretty: bool = False, indent: int = 2) -> str:
        """The SVG document of the page as string."""
        drawing_for_save = self.assemble_tree(
            copy.deepcopy(self.drawing),
            copy.deepcopy(self.root_group),
            copy.deepcopy(self.main_layer),
            copy.deepcopy(self.debug_layer),
            include_debug_layer,
        )

        svg_buffer = io.StringIO()
        drawing_for_save.write(svg_buffer, pretty=pretty, indent=indent)
        return svg_buffer.getvalue()

    def save_as(
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        output_data = self.tostring(include_debug_layer, pretty, indent).encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)
        logger.info("Saved %s", filename)

    @classmethod
    def assemble_tree(
        cls,
        drawing: svgwrite.Drawing,
        root_group: svgwrite.container.Group,
        main_layer: svgwrite.container.Group,
        debug_layer: Optional[svgwrite.container.Group] = None,
        include_debug_layer: bool = False,
    ) -> svgwrite.Drawing:
        """Assemble a tree out of the given SVG elements.

        Args:
            drawing (svgwrite.Drawing): The main SVG drawing element.
            root_group (svgwrite.container.Group): The root group of the drawing.
            main_layer (svgwrite.container.Group): The main layer of the drawing.
            debug_layer (svgwrite.container.Group): The debug layer of the drawing.
            include_debug_layer (bool, optional): Include the debug layer in the tree. Defaults to False.

        Returns:
            svgwrite.Drawing: The given drawing with assembled SVG drawing elements.
        """
        drawing.add(root_group)
        if include_debug_layer and debug_layer:
            root_group.add(debug_layer)
        root_group.add(main_layer)
        return drawing

    @classmethod
    def create_page(
        cls,
        domain_width: float,
        domain_height: float,
        canvas_width_mm: float = 200.0,
        margin_mm: float = 10.0,
    ) -> BcSvgPage:
        """
        Create a page showing a curve domain of domain_width x domain_height units.

        The domain is scaled to canvas_width_mm minus the margins and placed
        with its origin at the bottom-left corner inside the margin.

        Args:
            domain_width (float): Width of the curve domain in curve units.
            domain_height (float): Height of the curve domain in curve units.
            canvas_width_mm (float, optional): Width of the page in mm. Defaults to 200.
            margin_mm (float, optional): Margin around the domain in mm. Defaults to 10.

        Returns:
            BcSvgPage: A new page
        """
        viewbox_width_mm = canvas_width_mm - 2 * margin_mm
        viewbox_scale = domain_width / viewbox_width_mm  # curve units per mm
        viewbox_height_mm = domain_height / viewbox_scale
        canvas_height_mm = viewbox_height_mm + 2 * margin_mm

        return BcSvgPage(
            canvas_width_mm,
            canvas_height_mm,
            margin_mm,
            margin_mm,
            viewbox_height_mm,
            viewbox_scale,
        )
