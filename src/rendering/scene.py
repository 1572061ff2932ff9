"""
Scene graph for vector renders.
Renderers describe a layout as a list of shape descriptors; the scene is
serialized to SVG markup only at the end.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union
import xml.etree.ElementTree as ET

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

Number = Union[int, float]


def format_number(value: Number) -> str:
    """Compact attribute formatting: 270.0 -> "270", 8.125 -> "8.13"."""
    if isinstance(value, int):
        return str(value)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _attrs(values: Dict[str, Optional[Union[str, Number]]]) -> Dict[str, str]:
    attributes = {}
    for key, value in values.items():
        if value is None:
            continue
        attributes[key] = value if isinstance(value, str) else format_number(value)
    return attributes


@dataclass(frozen=True)
class Shape:
    """Base for drawable elements."""

    css_class: Optional[str] = field(default=None, kw_only=True)
    opacity: Optional[float] = field(default=None, kw_only=True)

    def _common(self) -> Dict[str, Optional[Union[str, Number]]]:
        return {"class": self.css_class, "opacity": self.opacity}

    def to_element(self) -> ET.Element:
        raise NotImplementedError


@dataclass(frozen=True)
class Rect(Shape):
    x: Number
    y: Number
    width: Number
    height: Number
    fill: Optional[str] = None
    rx: Optional[Number] = None

    def to_element(self) -> ET.Element:
        return ET.Element("rect", _attrs({
            "x": self.x, "y": self.y, "width": self.width, "height": self.height,
            "rx": self.rx, "fill": self.fill, **self._common(),
        }))


@dataclass(frozen=True)
class Background(Shape):
    """Full-canvas fill."""

    fill: str

    def to_element(self) -> ET.Element:
        return ET.Element("rect", _attrs({
            "width": "100%", "height": "100%", "fill": self.fill, **self._common(),
        }))


@dataclass(frozen=True)
class Circle(Shape):
    cx: Number
    cy: Number
    r: Number
    fill: Optional[str] = None

    def to_element(self) -> ET.Element:
        return ET.Element("circle", _attrs({
            "cx": self.cx, "cy": self.cy, "r": self.r, "fill": self.fill, **self._common(),
        }))


@dataclass(frozen=True)
class Polygon(Shape):
    points: Tuple[Tuple[Number, Number], ...]
    fill: Optional[str] = None

    def to_element(self) -> ET.Element:
        points = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in self.points)
        return ET.Element("polygon", _attrs({"points": points, "fill": self.fill, **self._common()}))


@dataclass(frozen=True)
class Line(Shape):
    x1: Number
    y1: Number
    x2: Number
    y2: Number
    stroke: Optional[str] = None
    stroke_width: Optional[Number] = None

    def to_element(self) -> ET.Element:
        return ET.Element("line", _attrs({
            "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2,
            "stroke": self.stroke, "stroke-width": self.stroke_width, **self._common(),
        }))


@dataclass(frozen=True)
class Text(Shape):
    x: Number
    y: Number
    content: str
    anchor: str = "middle"
    font_size: Optional[Union[str, Number]] = None
    font_weight: Optional[str] = None
    font_family: Optional[str] = None
    fill: Optional[str] = None

    def to_element(self) -> ET.Element:
        element = ET.Element("text", _attrs({
            "x": self.x, "y": self.y,
            "font-family": self.font_family, "font-size": self.font_size,
            "fill": self.fill, "text-anchor": self.anchor,
            "font-weight": self.font_weight, **self._common(),
        }))
        element.text = self.content
        return element


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str
    opacity: float = 1.0


@dataclass(frozen=True)
class LinearGradient:
    """Gradient definition referenced as url(#id)."""

    id: str
    stops: Tuple[GradientStop, ...]
    x2: str = "100%"
    y2: str = "100%"

    @property
    def url(self) -> str:
        return f"url(#{self.id})"

    def to_element(self) -> ET.Element:
        element = ET.Element("linearGradient", {
            "id": self.id, "x1": "0%", "y1": "0%", "x2": self.x2, "y2": self.y2,
        })
        for stop in self.stops:
            ET.SubElement(element, "stop", {
                "offset": stop.offset,
                "style": f"stop-color:{stop.color};stop-opacity:{format_number(stop.opacity)}",
            })
        return element


class Scene:
    """Ordered collection of shapes plus definitions and CSS rules."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.definitions: List[LinearGradient] = []
        self.styles: Dict[str, str] = {}
        self.shapes: List[Shape] = []

    def define(self, gradient: LinearGradient) -> LinearGradient:
        self.definitions.append(gradient)
        return gradient

    def style(self, selector: str, rules: str):
        self.styles[selector] = rules

    def add(self, shape: Shape) -> Shape:
        self.shapes.append(shape)
        return shape

    def find(self, shape_type: type, css_class: Optional[str] = None) -> List[Shape]:
        """Shapes of a given type (and optionally CSS class), in draw order."""
        return [
            shape for shape in self.shapes
            if isinstance(shape, shape_type) and (css_class is None or shape.css_class == css_class)
        ]

    def to_element(self) -> ET.Element:
        root = ET.Element("svg", {
            "width": str(self.width),
            "height": str(self.height),
            "viewBox": f"0 0 {self.width} {self.height}",
            "xmlns": SVG_NAMESPACE,
        })
        if self.styles:
            style = ET.SubElement(root, "style")
            style.text = "\n".join(f"{selector} {{ {rules} }}" for selector, rules in self.styles.items())
        if self.definitions:
            defs = ET.SubElement(root, "defs")
            for gradient in self.definitions:
                defs.append(gradient.to_element())
        for shape in self.shapes:
            root.append(shape.to_element())
        return root

    def to_svg(self) -> str:
        """Serialize the scene to an SVG document string."""
        root = self.to_element()
        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="unicode") + "\n"
