#!/usr/bin/env python3
"""
Convenience shim to run SauceFinder from a source checkout.
Usage: python saucefinder.py [--help|--debug|--config PATH] IMAGE_URL
"""

from saucefinder.cli import main


if __name__ == "__main__":
    main()
