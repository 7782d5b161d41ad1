#!/usr/bin/env python3
"""Main entry point: ``python main.py a,b b,c,d``."""

from tsrt.cli import run

if __name__ == "__main__":
    run()
