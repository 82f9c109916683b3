import sys
import termios
import tty

CLEAR = "\033[H\033[J"


def read_key() -> str:
    """Reads one keypress without echo or line buffering. Ctrl-C still interrupts."""
    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    return ch


def clear_screen(stream=None):
    stream = stream or sys.stdout
    stream.write(CLEAR)
    stream.flush()
