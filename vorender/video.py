"""Video assembly through an external ffmpeg process."""
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from vorender.encoder import FRAME_PATTERN

logger = logging.getLogger(__name__)


def build_ffmpeg_command(
    frames_dir: Union[str, Path],
    output_path: Union[str, Path],
    fps: int = 60,
    pattern: str = FRAME_PATTERN,
    ffmpeg: str = "ffmpeg"
) -> List[str]:
    """Command line that encodes a numbered PPM sequence into an H.264 video."""
    return [
        ffmpeg, '-y',
        '-framerate', str(fps),
        '-i', str(Path(frames_dir) / pattern),
        '-c:v', 'libx264',
        '-pix_fmt', 'yuv420p',
        str(output_path),
    ]


def assemble_video(
    frames_dir: Union[str, Path],
    output_path: Union[str, Path],
    fps: int = 60,
    pattern: str = FRAME_PATTERN,
    ffmpeg: str = "ffmpeg"
) -> Optional[int]:
    """
    Run ffmpeg over a frame sequence.

    Failures are logged, never raised.

    Returns:
        ffmpeg exit code, or None if the executable could not be started
    """
    cmd = build_ffmpeg_command(frames_dir, output_path, fps, pattern, ffmpeg)
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        logger.error(f"Could not start {ffmpeg}: {e}")
        return None

    if result.returncode != 0:
        error_msg = (result.stderr or "").strip() or "Unknown error"
        logger.error(f"{ffmpeg} exited with code {result.returncode}: {error_msg[-500:]}")
    else:
        logger.info(f"Video saved to {output_path}")

    return result.returncode
