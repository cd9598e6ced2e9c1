#!/usr/bin/env python3
"""
Main script to launch Duel Pong with PyGame graphical interface
"""

import sys

from duel_pong.gui.game_app import main
from duel_pong.utils.config import load_config_from_file

if __name__ == "__main__":
    print("=== DUEL PONG ===")
    print()
    print("CONTROLS:")
    print("  Left paddle: W/S (Z/S on AZERTY)")
    print("  Right paddle: Arrow keys")
    print("  R: Restart")
    print("  ESC: Quit")
    print()

    if len(sys.argv) > 1 and not load_config_from_file(sys.argv[1]):
        print(f"Could not load configuration from {sys.argv[1]}, using defaults")

    main()
