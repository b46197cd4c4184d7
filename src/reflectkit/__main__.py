#!/usr/bin/env python3
"""reflectkit CLI - list the members of a class.

Usage:
    reflectkit collections.OrderedDict              # Inherited public members
    reflectkit mypkg.Account --declared             # Members declared on the class
    reflectkit mypkg.Account --kind method          # Only methods
"""

from .cli import main

if __name__ == "__main__":
    main()
