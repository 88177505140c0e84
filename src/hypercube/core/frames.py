"""
Frame driver: step time forward, rotate, project, and format each frame.

The engine does no I/O; everything here returns text or records and hands
them to an `echo` callable chosen by the caller.
"""

import json
import math
from typing import Any, Callable, Dict, Iterator, List, Optional

import numpy as np

from hypercube.core.config import AnimationConfig, DEFAULT_STEP, DEFAULT_T_END
from hypercube.core.enums import OutputFormat
from hypercube.core.geometry import Hypercube
from hypercube.core.logging import logger


def frame_times(step: float = DEFAULT_STEP, end: float = DEFAULT_T_END) -> Iterator[float]:
    """
    Yield t = 0, step, 2*step, ... while t < end.

    t is accumulated by repeated addition, so the sequence carries the same
    rounding as a `t += step` loop.
    """
    if not (math.isfinite(step) and step > 0):
        raise ValueError(f"step must be finite and positive, got {step}")
    if not math.isfinite(end):
        raise ValueError(f"end must be finite, got {end}")
    t = 0.0
    while t < end:
        yield t
        advanced = t + step
        if advanced == t:
            raise ValueError(f"step {step} no longer advances t at {t}")
        t = advanced


def summary_lines(cube: Hypercube) -> List[str]:
    return [
        f"Created {cube.dimensions}-dimensional hypercube",
        f"Number of vertices: {cube.num_vertices}",
        f"Number of edges: {cube.num_edges}",
    ]


def format_frame(points: np.ndarray, t: float, show: int) -> List[str]:
    """
    Render one frame as text lines.

    Args:
        points (np.ndarray): (m, 3) projected vertices.
        t (float): Frame time.
        show (int): Number of leading vertices to print.

    Returns:
        list[str]: A leading blank line, the header lines, then one line per vertex.
    """
    total = len(points)
    shown = min(show, total)
    lines = [
        "",
        f"Frame at t={t:.2f}",
        f"Showing {shown} of {total} total vertices:",
    ]
    for i in range(shown):
        x, y, z = points[i]
        lines.append(f"Vertex {i}: [{x:.2f}, {y:.2f}, {z:.2f}]")
    return lines


def _finite_or_none(value) -> Optional[float]:
    # JSON has no inf/nan; a vertex at w = -2 has no finite projection
    value = float(value)
    return value if math.isfinite(value) else None


def frame_record(points: np.ndarray, t: float, show: int) -> Dict[str, Any]:
    """JSON-serialisable counterpart of `format_frame`."""
    total = len(points)
    shown = min(show, total)
    return {
        "t": float(t),
        "total_vertices": total,
        "shown": shown,
        "vertices": [[_finite_or_none(c) for c in points[i]] for i in range(shown)],
    }


def run_animation(
    cube: Hypercube,
    config: AnimationConfig,
    echo: Callable[[str], Any] = print,
) -> int:
    """
    Run the full frame sequence for `cube`.

    For every t from `frame_times`, rotates the cube, projects it and emits
    the frame through `echo` (one call per output line). The plain format
    starts with the summary lines.

    Returns:
        int: Number of frames emitted.
    """
    fmt = OutputFormat(config.output_format)
    if fmt is OutputFormat.PLAIN:
        for line in summary_lines(cube):
            echo(line)

    frames = 0
    for t in frame_times(config.step, config.t_end):
        cube.rotate(t)
        points = cube.project_to_3d()
        if fmt is OutputFormat.JSON:
            echo(json.dumps(frame_record(points, t, config.vertices_to_show), allow_nan=False))
        else:
            for line in format_frame(points, t, config.vertices_to_show):
                echo(line)
        frames += 1

    logger.debug(f"Emitted {frames} frames for {cube!r}")
    return frames
