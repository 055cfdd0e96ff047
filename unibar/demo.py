"""
unibar demo - animated showcase of every bar style.

Redraws the terminal at a fixed frame rate while progress runs from 0% to
100%, then switches between the horizontal and vertical showcases.
"""

import argparse
import signal
import sys
import time
from dataclasses import replace
from itertools import cycle
from pathlib import Path

from .config import DemoConfig
from .logger import get_logger, init_logging
from .ui.components import center_box, horizontal_bar, vertical_bar, vertical_join
from .ui.terminal import clear_screen, hidden_cursor, terminal_size

logger = get_logger(__name__)

MODES = ("horizontal", "vertical")

# Rows kept free around the vertical showcase (blank line, message, prompt)
VERTICAL_RESERVED_ROWS = 3

# Gap between vertical bars
COLUMN_GAP = "  "


class DemoApp:
    """Main demo controller."""

    def __init__(self, config: DemoConfig, mode: str = "both", stream=None):
        self.config = config
        self.modes = MODES if mode == "both" else (mode,)
        self.stream = stream or sys.stdout
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self, signum=None, frame=None):
        """Signal the redraw loop to finish (also used as a signal handler)."""
        if signum is not None:
            logger.debug("Received signal %s, stopping", signum)
        self._stopped = True

    def render_horizontal(self, value: float, columns: int, lines: int) -> list[str]:
        """All horizontal bars stacked, message below, centered on screen."""
        frame = []
        for options in self.config.horizontal:
            frame.extend(horizontal_bar(value, replace(options, width=columns)))
        frame.extend(center_box(self.config.message, columns, 1))
        return center_box(frame, columns, lines)

    def render_vertical(self, value: float, columns: int, lines: int) -> list[str]:
        """All vertical bars side by side, message below, centered on screen."""
        bar_height = lines - VERTICAL_RESERVED_ROWS
        blocks = []
        for index, options in enumerate(self.config.vertical):
            if index:
                blocks.append(COLUMN_GAP)
            blocks.append(vertical_bar(value, replace(options, height=bar_height)))

        frame = [""]
        frame.extend(center_box(vertical_join(*blocks), columns, bar_height))
        frame.extend(center_box(self.config.message, columns, 1))
        return frame

    def render_frame(self, value: float, mode: str, columns: int, lines: int) -> list[str]:
        if mode == "horizontal":
            return self.render_horizontal(value, columns, lines)
        return self.render_vertical(value, columns, lines)

    def draw(self, value: float, mode: str):
        """Clear the screen and draw one frame sized to the terminal."""
        columns, lines = terminal_size()
        frame = self.render_frame(value, mode, columns, lines)
        clear_screen(self.stream)
        self.stream.write("\n".join(frame) + "\n")
        self.stream.flush()

    def progress_at(self, elapsed: float) -> float:
        if self.config.duration <= 0:
            return 1.0
        return elapsed / self.config.duration

    def run_pass(self, mode: str) -> bool:
        """
        Animate one pass from 0% to 100%.

        Returns:
            True if the pass finished, False if the demo was stopped.
        """
        logger.debug("Starting %s pass (%.1fs at %.0f fps)", mode, self.config.duration, self.config.fps)
        frame_time = 1.0 / self.config.fps
        start = time.monotonic()

        while not self._stopped:
            frame_start = time.monotonic()
            value = self.progress_at(frame_start - start)
            self.draw(value, mode)
            if value >= 1.0:
                return True

            spent = time.monotonic() - frame_start
            if spent > frame_time:
                logger.debug("Frame took %.1fms (budget %.1fms)", spent * 1000, frame_time * 1000)
            time.sleep(max(frame_time - spent, 0))

        return False

    def run(self):
        """Main loop: alternate showcases until stopped."""
        original_handlers = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                original_handlers[signum] = signal.signal(signum, self.stop)
            except (ValueError, OSError):
                # Not in the main thread or unsupported on this platform
                pass

        try:
            with hidden_cursor(self.stream):
                self.draw(0.0, self.modes[0])
                time.sleep(self.config.pause)

                for mode in cycle(self.modes):
                    if self._stopped or not self.run_pass(mode):
                        break
                    time.sleep(self.config.pause)
        finally:
            for signum, handler in original_handlers.items():
                signal.signal(signum, handler or signal.SIG_DFL)


def positive_float(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {text}")
    return value


def main(argv=None):
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="unibar demo - animated Unicode progress bars"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with demo settings and the bars to show"
    )
    parser.add_argument(
        "--duration",
        type=positive_float,
        help="Seconds for one pass from 0%% to 100%%"
    )
    parser.add_argument(
        "--fps",
        type=positive_float,
        help="Frames per second"
    )
    parser.add_argument(
        "--mode",
        choices=("both",) + MODES,
        default="both",
        help="Which showcase to animate"
    )
    parser.add_argument(
        "--once",
        type=float,
        metavar="VALUE",
        help="Print a single frame at VALUE (0..1) and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr"
    )
    args = parser.parse_args(argv)

    init_logging(verbose=args.verbose)

    config = DemoConfig.load(args.config) if args.config else DemoConfig()
    if args.duration is not None:
        config.duration = args.duration
    if args.fps is not None:
        config.fps = args.fps

    app = DemoApp(config, mode=args.mode)

    if args.once is not None:
        columns, lines = terminal_size()
        frame = app.render_frame(args.once, app.modes[0], columns, lines)
        print("\n".join(frame))
        return

    app.run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
