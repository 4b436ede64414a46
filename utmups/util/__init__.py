"""
Independent numeric helper functions used by the projection modules.
No module in this package depends on another part of the library.
"""
