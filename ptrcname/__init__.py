"""
ptrcname - PTR-to-CNAME endpoint source

Wraps a DNS endpoint source and rewrites raw-address targets into
CNAME records pointing at the hostname found by reverse lookup.
"""

__version__ = "1.0.0"
