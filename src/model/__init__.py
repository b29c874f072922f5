"""Query construction layer.

This package builds filter expressions against collection resources
and renders them into canonical query tokens.
"""
