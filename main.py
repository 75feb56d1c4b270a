#!/usr/bin/env python3
"""
ASCII Art - Convert an image to colored ASCII art in the terminal.

Quick start:
    python main.py image.jpg                # Fit to terminal width
    python main.py image.jpg -w 100         # 100 chars wide
    python main.py image.jpg --mode edge    # Edge detection

For more options: python main.py --help
"""

from ascii_art.cli import main

if __name__ == "__main__":
    exit(main())
