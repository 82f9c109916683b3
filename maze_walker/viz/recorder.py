import os
import logging
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)


class VideoRecorder:
    """
    Writes the window to an mp4 file.

    A walk spends most of its time waiting for a key, so frames identical to
    the previous one are dropped and the video only advances when something
    on screen changed. The last frame is held for 'hold_seconds' on stop.
    """

    def __init__(self, active=False, output_file=None, fps=30, hold_seconds=1.0):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.hold_seconds = hold_seconds
        self.writer = None
        self.frame_size = None
        self.last_frame = None
        self.frame_count = 0
        self.skipped = 0

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.output_file = os.path.join("recordings", f"walk_{ts}.mp4")

    def open_writer(self, width: int, height: int):
        folder = os.path.dirname(self.output_file)
        if folder:
            os.makedirs(folder, exist_ok=True)
        self.frame_size = (width, height)
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
        logger.info(f"Recording started: {self.output_file}")

    def to_bgr(self, surface: pygame.Surface) -> np.ndarray:
        # surfarray is (width, height, 3) RGB; OpenCV wants (height, width, 3) BGR
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        if (frame.shape[1], frame.shape[0]) != self.frame_size:
            frame = cv2.resize(frame, self.frame_size)
        return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

    def capture_frame(self, surface: pygame.Surface) -> bool:
        """Returns True if the frame was written."""
        if not self.active:
            return False

        if self.writer is None:
            self.open_writer(*surface.get_size())

        frame = self.to_bgr(surface)
        if self.last_frame is not None and np.array_equal(frame, self.last_frame):
            self.skipped += 1
            return False

        self.writer.write(frame)
        self.last_frame = frame
        self.frame_count += 1
        return True

    def stop(self):
        if self.writer is None:
            return
        if self.last_frame is not None:
            for _ in range(int(self.hold_seconds * self.fps)):
                self.writer.write(self.last_frame)
        self.writer.release()
        logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames, {self.skipped} idle frames dropped)")
        self.writer = None
