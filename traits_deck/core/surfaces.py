from typing import Any, Dict, List, Optional


class CommandSurface:
    """Drawing surface that records canvas draw commands.

    The recorded frame is JSON-serializable; the browser replays it onto a
    2D canvas context.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.ops: List[Dict[str, Any]] = []

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def clear(self) -> None:
        self.ops = [{"op": "clear"}]

    def fill_vertical_gradient(self, top: str, bottom: str) -> None:
        self.ops.append({"op": "gradient", "stops": [top, bottom]})

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.ops.append(
            {
                "op": "circle",
                "x": round(x, 2),
                "y": round(y, 2),
                "r": round(radius, 2),
                "color": color,
            }
        )

    def frame(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height, "ops": list(self.ops)}


def surface_for(width: float, height: float) -> Optional[CommandSurface]:
    """Surface for a viewport, or None while the viewport has no area."""
    if width <= 0 or height <= 0:
        return None
    return CommandSurface(width, height)
