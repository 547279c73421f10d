"""
main.py
-------
Entry point: python -m src.main
"""

import asyncio

from src.core.runtime.game_loop import GameLoop


def main():
    asyncio.run(GameLoop().run())


if __name__ == "__main__":
    main()
