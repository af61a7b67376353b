"""Voronoi rendering pipeline: seeds, rasterization, markers, output."""
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from vorender.canvas import Canvas
from vorender.encoder import write_frames, write_ppm
from vorender.markers import MARKED_MODES, render_seed_markers
from vorender import rasterizer
from vorender.seeds import generate_seeds, make_rng
from vorender.types import ImageWriteError, Point, RenderConfig, RenderMode, SaveMode
from vorender.video import assemble_video

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of one pipeline run."""
    canvas: Canvas
    seeds: Tuple[Point, ...]
    written: List[Path] = field(default_factory=list)
    video_returncode: Optional[int] = None


class VoronoiPipeline:
    """Render a Voronoi diagram from random seeds and save it."""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize pipeline.

        Args:
            config: Configuration (uses defaults if None)
            rng: Random generator for seeds (default: from config.random_seed)
        """
        self.config = config or RenderConfig()
        self.rng = rng if rng is not None else make_rng(self.config.random_seed)

    def wants_markers(self, mode: Optional[RenderMode]) -> bool:
        if self.config.draw_markers is not None:
            return self.config.draw_markers
        return mode in MARKED_MODES

    def render(
        self,
        mode: Optional[RenderMode],
        seeds: Optional[Tuple[Point, ...]] = None
    ) -> Tuple[Canvas, Tuple[Point, ...]]:
        """
        Build the canvas for ``mode``.

        A ``None`` mode leaves the background untouched.
        """
        config = self.config

        canvas = Canvas(config.width, config.height)
        canvas.fill(config.background_color)

        if seeds is None:
            seeds = generate_seeds(config.seed_count, config.width, config.height, self.rng)

        if mode is None:
            logger.warning("No render mode, canvas left as background")
        else:
            rasterizer.render(canvas, mode, seeds, config.palette)

        if self.wants_markers(mode):
            render_seed_markers(canvas, seeds, config.marker_radius, config.marker_color)

        return canvas, seeds

    def save(self, canvas: Canvas, mode: Optional[SaveMode]) -> RenderResult:
        """
        Persist a canvas for ``mode``. A ``None`` mode writes nothing.

        Raises:
            ImageWriteError: If an output file cannot be written
        """
        config = self.config
        result = RenderResult(canvas=canvas, seeds=())

        if mode is SaveMode.PIXEL_MAP:
            result.written.append(write_ppm(canvas, config.output_path))
            print(f"  Saved image: {config.output_path}")

        elif mode is SaveMode.FRAME_SEQUENCE:
            try:
                config.frames_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ImageWriteError(config.frames_dir, e) from e
            result.written.extend(
                write_frames(canvas, config.frames_dir, config.frame_count, config.frame_pattern)
            )
            print(f"  Saved {len(result.written)} frames to: {config.frames_dir}")

            result.video_returncode = assemble_video(
                config.frames_dir,
                config.video_path,
                fps=config.fps,
                pattern=config.frame_pattern,
                ffmpeg=config.ffmpeg
            )
        else:
            logger.warning("No save mode, nothing written")

        return result

    def process(
        self,
        render_mode: Optional[RenderMode],
        save_mode: Optional[SaveMode]
    ) -> RenderResult:
        """
        Run the full pipeline.

        Args:
            render_mode: Rasterization algorithm, or None to skip rendering
            save_mode: Output format, or None to skip saving

        Returns:
            RenderResult with the canvas, seeds and written files
        """
        start_time = time.time()
        config = self.config

        print(f"Step 1/2: Rendering {config.width}x{config.height} "
              f"({render_mode.value if render_mode else 'none'})...")
        canvas, seeds = self.render(render_mode)
        print(f"  Seeds: {len(seeds)}")

        print(f"Step 2/2: Saving ({save_mode.value if save_mode else 'none'})...")
        result = self.save(canvas, save_mode)
        result.seeds = seeds

        elapsed = time.time() - start_time
        print(f"\nCompleted in {elapsed:.2f}s")

        return result
