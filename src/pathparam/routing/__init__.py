"""Routing parameters — typed conversion of captured path segments.

Parameter types are plain classes registered by slug during setup; resolution
is a pure function of the captured string and the target type.
"""
