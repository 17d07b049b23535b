"""
ptrcname - PTR-to-CNAME endpoint source

Entry point for running as a module:
    python -m ptrcname <source>
"""

from .cli import main

if __name__ == '__main__':
    main()
