"""
Items service: cache-first item lookups backed by an HTTP origin.
"""
