#!/usr/bin/env python
"""
Entry point for the SOLID guide CLI.

Usage:
    python guide.py init
    python guide.py list
    python guide.py show <principle>
    python guide.py render [--output PATH]
    python guide.py validate [PATH]
    python guide.py check [MODULE ...]
"""
from solidguide.guide_cli import main

if __name__ == '__main__':
    main()
