#!/usr/bin/env python3
"""
vcc entry point.

Usage: python vcc.py "2+3*4" [-m eval|infix|sexpr|tree] [--allow-trailing]
       python vcc.py -f input.txt
"""

from vcc.compiler import main

if __name__ == '__main__':
    main()
