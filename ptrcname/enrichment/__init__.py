"""
Address resolution for ptrcname
"""

from .ptr_resolver import AddressResolver, PTRResolver, SystemPTRResolver, build_resolver

__all__ = ['AddressResolver', 'PTRResolver', 'SystemPTRResolver', 'build_resolver']
