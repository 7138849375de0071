#!/usr/bin/env python3
"""
Allows the package to be run as a script.
Example: python -m base_conversion convert 255 --from dec --to hex
"""
from .cli import main

if __name__ == "__main__":
    main()
