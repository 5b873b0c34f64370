# main.py
import sys
import time
from datetime import datetime
from typing import List

from .config import load_config
from .console import Console


class DemoApp:
    """Small long-running process with an operator console attached."""

    def __init__(self) -> None:
        self.started_at = time.monotonic()
        self.console = Console(config=load_config())
        self.console.register("echo", self.echo)
        self.console.register("time", self.show_time)
        self.console.register("uptime", self.uptime)

    # ------------- Commands -------------

    def echo(self, args: List[str]) -> None:
        print(" ".join(args))

    def show_time(self, args: List[str]) -> None:
        print(datetime.now().isoformat(timespec="seconds"))

    def uptime(self, args: List[str]) -> None:
        if args:
            raise ValueError("uptime takes no arguments")
        print(f"{time.monotonic() - self.started_at:.1f}s")

    # ------------- App lifecycle -------------

    def run(self) -> int:
        return self.console.run_forever()


def main() -> None:
    sys.exit(DemoApp().run())


if __name__ == "__main__":
    main()
